"""
dispnet-hash: self-describing digests.

A digest is carried as one text string naming its algorithm, its byte
length and its bytes:

    <tag: 2 digits><length: 4 digits><digest: hex>
"""
from .config import DEFAULT_SALT, CodecConfig, HashConfig, RuntimeConfig
from .codec import decode, encode
from .crypto import fingerprint, from_hex, produce, to_hex
from .digest import DigestHandle, verify, verify_text
from .schemas import (
    AlgorithmTag,
    DecodeError,
    Digest,
    DigestTooLongError,
    DispnetException,
    InvalidDigestError,
    LengthMismatchError,
    MalformedLengthError,
    MalformedTagError,
    PrimitiveFailureError,
)

__version__ = "0.3.0"

__all__ = [
    "AlgorithmTag",
    "Digest",
    "DigestHandle",
    "HashConfig",
    "CodecConfig",
    "RuntimeConfig",
    "DEFAULT_SALT",
    "produce",
    "encode",
    "decode",
    "verify",
    "verify_text",
    "to_hex",
    "from_hex",
    "fingerprint",
    "DispnetException",
    "DecodeError",
    "MalformedTagError",
    "MalformedLengthError",
    "LengthMismatchError",
    "InvalidDigestError",
    "DigestTooLongError",
    "PrimitiveFailureError",
]
