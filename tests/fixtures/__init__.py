"""
Test fixtures package for dispnet-hash tests.

Provides pinned vectors and factory functions for test objects.

Usage:
    from fixtures import make_handle, BLAKE3_TEST_TEXT

    def test_something():
        handle = make_handle()
        assert str(handle) == BLAKE3_TEST_TEXT
"""

from .common import (
    ARGON2_DEFAULT_CREDENTIAL,
    ARGON2_DEFAULT_TEXT,
    ARGON2_SALTED_CREDENTIAL,
    ARGON2_SALTED_TEXT,
    BLAKE3_TEST_HEX,
    BLAKE3_TEST_TEXT,
    CRC32C_TEST_TEXT,
    CRC32C_TEST_VALUE,
    TEST_INPUT,
    TEST_SALT,
    corrupt_length,
    make_digest,
    make_handle,
    make_password_handle,
)

__all__ = [
    "ARGON2_DEFAULT_CREDENTIAL",
    "ARGON2_DEFAULT_TEXT",
    "ARGON2_SALTED_CREDENTIAL",
    "ARGON2_SALTED_TEXT",
    "BLAKE3_TEST_HEX",
    "BLAKE3_TEST_TEXT",
    "CRC32C_TEST_TEXT",
    "CRC32C_TEST_VALUE",
    "TEST_INPUT",
    "TEST_SALT",
    "corrupt_length",
    "make_digest",
    "make_handle",
    "make_password_handle",
]
