"""
Schemas
File: digest.py

Purpose: The algorithm enumeration and the immutable Digest value.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AlgorithmTag(str, Enum):
    """Supported digest algorithms. Wire codes live in crypto.registry."""

    CONTENT_HASH = "blake3"
    CHECKSUM = "crc32c"
    PASSWORD_HASH = "argon2"


DEFAULT_ALGORITHM: AlgorithmTag = AlgorithmTag.CONTENT_HASH


class Digest(BaseModel):
    """
    The output of one algorithm applied to one input buffer.

    digest_length always equals len(digest_value); a mismatched pair is
    rejected at construction.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    hash_type: AlgorithmTag = Field(
        ...,
        description="Algorithm that produced the digest",
    )
    digest_length: int = Field(
        ...,
        description="Number of digest bytes",
        ge=0,
    )
    digest_value: bytes = Field(
        ...,
        description="Raw digest bytes",
    )

    @model_validator(mode="after")
    def validate_length(self) -> "Digest":
        if self.digest_length != len(self.digest_value):
            raise ValueError(
                f"digest_length {self.digest_length} does not match "
                f"{len(self.digest_value)} digest bytes"
            )
        return self

    @classmethod
    def of(cls, hash_type: AlgorithmTag, digest_value: bytes) -> "Digest":
        """Build a Digest whose length is taken from the bytes themselves."""
        return cls(
            hash_type=hash_type,
            digest_length=len(digest_value),
            digest_value=digest_value,
        )
