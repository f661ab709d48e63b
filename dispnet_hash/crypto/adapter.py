"""
Primitive Adapter
Runs one algorithm over an input buffer and returns a Digest.
"""
from __future__ import annotations

from typing import Optional

from argon2.exceptions import HashingError

from dispnet_hash.config.runtime import HashConfig
from dispnet_hash.schemas.digest import AlgorithmTag, Digest
from dispnet_hash.schemas.errors import PrimitiveFailureError

from .hashing import argon2_hash_encoded, blake3_digest, crc32c_checksum


def produce(
    algorithm: AlgorithmTag,
    data: bytes,
    config: Optional[HashConfig] = None,
) -> Digest:
    """
    Produce the digest of ``data`` with the given algorithm.

    - CONTENT_HASH: 32-byte BLAKE3 hash; salt ignored.
    - CHECKSUM: CRC-32C rendered as decimal text; the digest bytes are that
      ASCII text, not the 4-byte integer.
    - PASSWORD_HASH: Argon2 encoded credential; salt from ``config`` or
      the built-in default.

    Raises:
        PrimitiveFailureError: If the password-hash primitive rejects its
            parameters
        TypeError: If ``algorithm`` is not an AlgorithmTag
    """
    if algorithm is AlgorithmTag.CONTENT_HASH:
        return Digest.of(algorithm, blake3_digest(data))

    if algorithm is AlgorithmTag.CHECKSUM:
        return Digest.of(algorithm, str(crc32c_checksum(data)).encode("ascii"))

    if algorithm is AlgorithmTag.PASSWORD_HASH:
        salt = (config or HashConfig()).resolve_salt()
        try:
            encoded = argon2_hash_encoded(data, salt)
        except HashingError as e:
            raise PrimitiveFailureError(
                f"Password hashing failed: {e}",
                algorithm=algorithm.name,
                details={"salt_length": len(salt)},
            ) from e
        return Digest.of(algorithm, encoded)

    raise TypeError(f"Unsupported algorithm: {algorithm!r}")


__all__ = ["produce"]
