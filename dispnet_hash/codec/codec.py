"""
Codec
Canonical text encoding and decoding of Digests.

Canonical text is split by fixed offsets, with no delimiters:

    <tag: 2 digits><length: 4 digits, zero-padded><digest: lowercase hex>

e.g. "0100324878ca0425c739fa427f7eda20fe845f6b2e46ba5fe2a14df5b1e32f50603215"
is the 32-byte BLAKE3 digest of b"test".

The declared length is always checked against the decoded byte count.
The tag is checked only in strict mode; see crypto.registry.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from dispnet_hash.config.runtime import CodecConfig
from dispnet_hash.crypto.hashing import from_hex, to_hex
from dispnet_hash.crypto.registry import code_for, tag_for_code
from dispnet_hash.schemas.digest import Digest
from dispnet_hash.schemas.errors import (
    DigestTooLongError,
    InvalidDigestError,
    LengthMismatchError,
    MalformedLengthError,
)
from dispnet_hash.schemas.versioning import (
    HEADER_WIDTH,
    LENGTH_WIDTH,
    MAX_DIGEST_LENGTH,
    TAG_WIDTH,
)

logger = logging.getLogger(__name__)

_LENGTH_PATTERN = re.compile(rf"[0-9]{{{LENGTH_WIDTH}}}")


def encode(digest: Digest) -> str:
    """
    Encode a Digest as canonical text.

    Raises:
        DigestTooLongError: If the digest has more bytes than the length
            field can express
    """
    if digest.digest_length > MAX_DIGEST_LENGTH:
        raise DigestTooLongError(digest.digest_length, MAX_DIGEST_LENGTH)
    return (
        f"{code_for(digest.hash_type)}"
        f"{digest.digest_length:0{LENGTH_WIDTH}d}"
        f"{to_hex(digest.digest_value)}"
    )


def decode(text: str, config: Optional[CodecConfig] = None) -> Digest:
    """
    Decode canonical text into a Digest.

    Args:
        text: Canonical text
        config: Decoding options; lenient tag handling when omitted

    Raises:
        MalformedTagError: If strict and the tag is unknown
        InvalidDigestError: If the digest segment is not even-length hex
        MalformedLengthError: If the length field is not 4 decimal digits
        LengthMismatchError: If the declared length differs from the
            decoded byte count
    """
    config = config or CodecConfig()

    raw_tag = text[:TAG_WIDTH]
    raw_length = text[TAG_WIDTH:HEADER_WIDTH]
    raw_digest = text[HEADER_WIDTH:]

    hash_type = tag_for_code(raw_tag, strict=config.strict_tags)

    try:
        digest_value = from_hex(raw_digest)
    except InvalidDigestError:
        logger.debug(f"Invalid digest hex value: {raw_digest}")
        raise

    if not _LENGTH_PATTERN.fullmatch(raw_length):
        logger.debug(f"Digest length is not a valid length: {raw_length!r}")
        raise MalformedLengthError(raw_length)
    declared = int(raw_length)

    if declared != len(digest_value):
        logger.debug(
            f"Length mismatch for digest. Length: {declared} Digest: {len(digest_value)}"
        )
        raise LengthMismatchError(declared, len(digest_value))

    return Digest(
        hash_type=hash_type,
        digest_length=declared,
        digest_value=digest_value,
    )


__all__ = ["encode", "decode"]
