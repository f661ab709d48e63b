"""
Verifier

Checks candidate plaintexts against password-hash digests. Every failure
mode collapses to False; nothing here raises for bad input.
"""
from __future__ import annotations

import logging
from typing import Optional

from argon2.exceptions import InvalidHashError, VerificationError

from dispnet_hash.config.runtime import CodecConfig
from dispnet_hash.crypto.hashing import argon2_verify_encoded
from dispnet_hash.schemas.digest import AlgorithmTag
from dispnet_hash.schemas.errors import DecodeError

from .handle import DigestHandle

logger = logging.getLogger(__name__)


def verify(handle: DigestHandle, candidate: bytes) -> bool:
    """
    Check whether ``candidate`` reproduces a password-hash digest.

    Returns False for digests of other algorithms, for digest bytes that
    are not UTF-8, on mismatch, and when the embedded credential cannot be
    decoded by the primitive.
    """
    if handle.hash_type is not AlgorithmTag.PASSWORD_HASH:
        logger.debug(f"Cannot verify {handle.hash_type.name} digest against plaintext")
        return False

    try:
        handle.digest_value.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Password-hash digest is not valid UTF-8")
        return False

    try:
        return argon2_verify_encoded(handle.digest_value, candidate)
    except (VerificationError, InvalidHashError) as e:
        logger.debug(f"Password-hash verification failed: {e!r}")
        return False


def verify_text(
    text: str,
    candidate: bytes,
    codec_config: Optional[CodecConfig] = None,
) -> bool:
    """Decode ``text`` and verify ``candidate`` against it; False if undecodable."""
    try:
        handle = DigestHandle.from_text(text, codec_config)
    except DecodeError as e:
        logger.debug(f"Cannot verify undecodable digest text: {e.message}")
        return False
    return verify(handle, candidate)


__all__ = ["verify", "verify_text"]
