"""
Digest Handle

The public value type: a Digest together with its memoized canonical text
and 64-bit fingerprint.
"""
from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Optional

from dispnet_hash.codec.codec import decode, encode
from dispnet_hash.config.runtime import CodecConfig, HashConfig
from dispnet_hash.crypto.adapter import produce
from dispnet_hash.crypto.hashing import fingerprint as compute_fingerprint
from dispnet_hash.schemas.digest import DEFAULT_ALGORITHM, AlgorithmTag, Digest


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class DigestHandle:
    """
    Self-describing digest.

    Equality, hashing and ordering use the canonical text only, so handles
    work as set members and dict keys.

    Example:
        >>> handle = DigestHandle.new(b"test")
        >>> str(handle)
        '0100324878ca0425c739fa427f7eda20fe845f6b2e46ba5fe2a14df5b1e32f50603215'
        >>> DigestHandle.from_text(str(handle)) == handle
        True
    """
    digest: Digest
    canonical_text: str = field(repr=False)
    fingerprint: int = field(repr=False)

    def __post_init__(self):
        # canonical_text must be the encoding of digest; use the classmethods
        if self.canonical_text != encode(self.digest):
            raise ValueError(
                f"canonical_text {self.canonical_text!r} is not the encoding of the digest"
            )
        if self.fingerprint != compute_fingerprint(self.digest.digest_value):
            raise ValueError(f"fingerprint {self.fingerprint} does not match the digest bytes")

    @classmethod
    def from_digest(cls, digest: Digest) -> "DigestHandle":
        """Wrap an existing Digest, encoding it once."""
        return cls(
            digest=digest,
            canonical_text=encode(digest),
            fingerprint=compute_fingerprint(digest.digest_value),
        )

    @classmethod
    def from_bytes(
        cls,
        algorithm: AlgorithmTag,
        data: bytes,
        config: Optional[HashConfig] = None,
    ) -> "DigestHandle":
        """Hash ``data`` with ``algorithm`` and wrap the result."""
        return cls.from_digest(produce(algorithm, data, config))

    @classmethod
    def new(cls, data: bytes) -> "DigestHandle":
        """Hash ``data`` with the default algorithm."""
        return cls.from_bytes(DEFAULT_ALGORITHM, data)

    @classmethod
    def from_text(
        cls,
        text: str,
        codec_config: Optional[CodecConfig] = None,
    ) -> "DigestHandle":
        """
        Parse canonical text.

        The stored text is re-encoded from the decoded digest, so upper-case
        hex and fallback tags come back normalized.

        Raises:
            DecodeError: If the text is not valid canonical text
        """
        return cls.from_digest(decode(text, codec_config))

    @property
    def hash_type(self) -> AlgorithmTag:
        return self.digest.hash_type

    @property
    def digest_length(self) -> int:
        return self.digest.digest_length

    @property
    def digest_value(self) -> bytes:
        return self.digest.digest_value

    def to_text(self) -> str:
        return self.canonical_text

    def verify(self, candidate: bytes) -> bool:
        """Check a plaintext against a password-hash digest."""
        from .verifier import verify

        return verify(self, candidate)

    def __str__(self) -> str:
        return self.canonical_text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigestHandle):
            return NotImplemented
        return self.canonical_text == other.canonical_text

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DigestHandle):
            return NotImplemented
        return self.canonical_text < other.canonical_text

    def __hash__(self) -> int:
        return hash(self.canonical_text)
