"""
Schemas

Purpose: Export the value types, error taxonomy and wire-format constants.
"""

from .versioning import (
    HEADER_WIDTH,
    LENGTH_WIDTH,
    MAX_DIGEST_LENGTH,
    TAG_WIDTH,
)

from .errors import (
    DecodeError,
    DigestTooLongError,
    DispnetError,
    DispnetException,
    ErrorCodes,
    InvalidDigestError,
    LengthMismatchError,
    MalformedLengthError,
    MalformedTagError,
    PrimitiveFailureError,
)

from .digest import (
    DEFAULT_ALGORITHM,
    AlgorithmTag,
    Digest,
)


__all__ = [
    # Versioning
    "TAG_WIDTH",
    "LENGTH_WIDTH",
    "HEADER_WIDTH",
    "MAX_DIGEST_LENGTH",
    # Errors
    "ErrorCodes",
    "DispnetError",
    "DispnetException",
    "DecodeError",
    "MalformedTagError",
    "MalformedLengthError",
    "LengthMismatchError",
    "InvalidDigestError",
    "DigestTooLongError",
    "PrimitiveFailureError",
    # Digest
    "AlgorithmTag",
    "DEFAULT_ALGORITHM",
    "Digest",
]
