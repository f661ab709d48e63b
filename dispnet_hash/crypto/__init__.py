"""
Core cryptographic utilities.

Primitive wrappers, the algorithm registry and the primitive adapter.
"""
from .hashing import (
    ARGON2_PARAMETERS,
    Argon2Parameters,
    argon2_hash_encoded,
    argon2_verify_encoded,
    blake3_digest,
    crc32c_checksum,
    fingerprint,
    from_hex,
    to_hex,
)
from .registry import code_for, supported_codes, tag_for_code
from .adapter import produce

__all__ = [
    "ARGON2_PARAMETERS",
    "Argon2Parameters",
    "argon2_hash_encoded",
    "argon2_verify_encoded",
    "blake3_digest",
    "crc32c_checksum",
    "fingerprint",
    "from_hex",
    "to_hex",
    "code_for",
    "supported_codes",
    "tag_for_code",
    "produce",
]
