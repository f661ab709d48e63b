"""
Hashing Utilities
Thin wrappers over the hash primitives plus the standalone byte helpers.

This module provides:
- BLAKE3 content hashing (32-byte output)
- CRC-32C checksums
- Argon2i encoded-credential hashing and verification
- Hex encoding/decoding without prefix
- 64-bit fingerprints of byte sequences

Security/Determinism Notes:
- Always hash raw bytes exactly as given
- BLAKE3 and CRC-32C are pure functions of their input
- Argon2 output is deterministic for identical input, salt and parameters
"""
from __future__ import annotations

import re
from dataclasses import dataclass

import google_crc32c
from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError
from argon2.low_level import Type, hash_secret
from blake3 import blake3

from dispnet_hash.schemas.errors import InvalidDigestError

CONTENT_HASH_LENGTH: int = 32

FINGERPRINT_WIDTH: int = 8

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")


@dataclass(frozen=True)
class Argon2Parameters:
    """Cost parameters of the password-hash algorithm."""
    time_cost: int = 3
    memory_cost: int = 4096
    parallelism: int = 1
    hash_len: int = 32
    type: Type = Type.I
    version: int = 19


ARGON2_PARAMETERS = Argon2Parameters()


def blake3_digest(data: bytes) -> bytes:
    """
    Compute the BLAKE3 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte BLAKE3 digest

    Example:
        >>> blake3_digest(b"test").hex()
        '4878ca0425c739fa427f7eda20fe845f6b2e46ba5fe2a14df5b1e32f50603215'
    """
    return blake3(data).digest()


def crc32c_checksum(data: bytes) -> int:
    """
    Compute the CRC-32C (Castagnoli) checksum of raw bytes.

    Example:
        >>> crc32c_checksum(b"test")
        2258662080
    """
    return google_crc32c.value(data)


def argon2_hash_encoded(
    data: bytes,
    salt: bytes,
    parameters: Argon2Parameters = ARGON2_PARAMETERS,
) -> bytes:
    """
    Hash a secret with Argon2 and return the encoded credential.

    The result embeds algorithm, version, cost parameters, salt and hash,
    e.g. b"$argon2i$v=19$m=4096,t=3,p=1$MTIzNDU2Nzg$hoV5...".

    Raises:
        argon2.exceptions.HashingError: If the primitive rejects the
            parameters (for example a salt shorter than 8 bytes)
    """
    return hash_secret(
        secret=data,
        salt=salt,
        time_cost=parameters.time_cost,
        memory_cost=parameters.memory_cost,
        parallelism=parameters.parallelism,
        hash_len=parameters.hash_len,
        type=parameters.type,
        version=parameters.version,
    )


def argon2_verify_encoded(encoded: bytes, candidate: bytes) -> bool:
    """
    Check a candidate secret against an encoded Argon2 credential.

    The Argon2 variant is read from the credential itself.

    Returns:
        True on match, False on mismatch

    Raises:
        argon2.exceptions.VerificationError: If the credential cannot be
            decoded by the primitive
        argon2.exceptions.InvalidHashError: If the credential is not an
            Argon2 hash at all
    """
    try:
        return PasswordHasher().verify(encoded, candidate)
    except VerifyMismatchError:
        return False


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hexadecimal string without prefix.

    Example:
        >>> to_hex(bytes.fromhex("DEADBEEF"))
        'deadbeef'
    """
    return data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string to bytes, strictly.

    Only [0-9a-fA-F] characters in an even count are accepted; whitespace,
    prefixes and odd lengths are rejected rather than partially decoded.

    Raises:
        InvalidDigestError: If the string is not strict even-length hex
    """
    if len(hex_string) % 2 != 0 or not _HEX_PATTERN.fullmatch(hex_string):
        raise InvalidDigestError(hex_string)
    return bytes.fromhex(hex_string)


def fingerprint(data: bytes) -> int:
    """
    Project a byte sequence onto an unsigned 64-bit integer.

    Uses the last 8 bytes read little-endian; shorter input is zero-padded
    on the right first. Lossy and not collision resistant.

    Example:
        >>> fingerprint(b"a")
        97
    """
    tail = bytes(data[-FINGERPRINT_WIDTH:])
    return int.from_bytes(tail.ljust(FINGERPRINT_WIDTH, b"\x00"), "little")


__all__ = [
    "CONTENT_HASH_LENGTH",
    "FINGERPRINT_WIDTH",
    "Argon2Parameters",
    "ARGON2_PARAMETERS",
    "blake3_digest",
    "crc32c_checksum",
    "argon2_hash_encoded",
    "argon2_verify_encoded",
    "to_hex",
    "from_hex",
    "fingerprint",
]
