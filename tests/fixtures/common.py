"""
Common test fixtures shared by all test modules.

Provides the pinned canonical texts for b"test" and factory functions for
Digest and DigestHandle values.
"""

from typing import Optional

from dispnet_hash.config.runtime import HashConfig
from dispnet_hash.digest.handle import DigestHandle
from dispnet_hash.schemas.digest import AlgorithmTag, Digest


# =============================================================================
# Pinned vectors for the input b"test"
# =============================================================================

TEST_INPUT = b"test"

TEST_SALT = b"12345678"

BLAKE3_TEST_HEX = "4878ca0425c739fa427f7eda20fe845f6b2e46ba5fe2a14df5b1e32f50603215"
BLAKE3_TEST_TEXT = "010032" + BLAKE3_TEST_HEX

CRC32C_TEST_VALUE = b"2258662080"
CRC32C_TEST_TEXT = "020010" + "32323538363632303830"

ARGON2_SALTED_CREDENTIAL = (
    b"$argon2i$v=19$m=4096,t=3,p=1$MTIzNDU2Nzg$"
    b"hoV5MIF8Yj9tk95lFseTbyUJn936HIDXgThU3cped1Q"
)
ARGON2_SALTED_TEXT = (
    "030084"
    "246172676f6e326924763d3139246d3d343039362c743d332c703d31244d54497a4e44"
    "55324e7a6724686f56354d494638596a39746b39356c467365546279554a6e39333648"
    "4944586754685533637065643151"
)

ARGON2_DEFAULT_CREDENTIAL = (
    b"$argon2i$v=19$m=4096,t=3,p=1$QThuVXoxUGtjMElaMHVKU1pObk1sdmRMejBUM2FsNUhqaGcy$"
    b"FMOzoFdwTFFv9z1CZHWQhKz/ciouLUBuqIJTujWM7S8"
)
ARGON2_DEFAULT_TEXT = (
    "030121"
    "246172676f6e326924763d3139246d3d343039362c743d332c703d312451546875565"
    "86f785547746a4d456c614d48564b5531704f626b3173646d524d656a42554d324673"
    "4e5568716147637924464d4f7a6f46647754464676397a31435a485751684b7a2f6369"
    "6f754c55427571494a54756a574d375338"
)


# =============================================================================
# Factories
# =============================================================================

def make_digest(
    hash_type: AlgorithmTag = AlgorithmTag.CONTENT_HASH,
    digest_value: bytes = b"\x01\x02\x03\x04",
) -> Digest:
    """Create a Digest with a length consistent with its bytes."""
    return Digest.of(hash_type, digest_value)


def make_handle(
    hash_type: AlgorithmTag = AlgorithmTag.CONTENT_HASH,
    data: bytes = TEST_INPUT,
    salt: Optional[bytes] = None,
) -> DigestHandle:
    """Hash ``data`` into a DigestHandle; salt only matters for PASSWORD_HASH."""
    config = HashConfig(salt=salt) if salt is not None else None
    return DigestHandle.from_bytes(hash_type, data, config)


def make_password_handle(
    data: bytes = TEST_INPUT,
    salt: bytes = TEST_SALT,
) -> DigestHandle:
    """Create a PASSWORD_HASH handle with a pinned salt."""
    return make_handle(AlgorithmTag.PASSWORD_HASH, data, salt)


def corrupt_length(text: str, declared: int) -> str:
    """Replace the 4-digit length field of canonical text."""
    return text[:2] + f"{declared:04d}" + text[6:]
