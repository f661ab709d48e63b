"""
Schemas
File: errors.py

Purpose: Error taxonomy for the digest format.
Defines both Pydantic models for structured error reporting
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Decode Errors
    MALFORMED_TAG = "MALFORMED_TAG"
    MALFORMED_LENGTH = "MALFORMED_LENGTH"
    LENGTH_MISMATCH = "LENGTH_MISMATCH"
    INVALID_DIGEST = "INVALID_DIGEST"

    # Encode Errors
    DIGEST_TOO_LONG = "DIGEST_TOO_LONG"

    # Primitive Errors
    PRIMITIVE_FAILURE = "PRIMITIVE_FAILURE"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class DispnetError(BaseModel):
    """
    Structured error model.

    Lets callers report or serialize a failure without carrying the
    exception object around.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.LENGTH_MISMATCH],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Offending substrings or values",
    )

    def to_exception(self) -> "DispnetException":
        """Convert this error model to a raisable exception."""
        return DispnetException(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class DispnetException(Exception):
    """
    Base exception for all digest format errors.

    Carries structured error information and can be converted to a
    DispnetError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "DISPNET_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> DispnetError:
        """Convert this exception to a DispnetError model."""
        return DispnetError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class DecodeError(DispnetException, ValueError):
    """Base exception for canonical text that cannot be decoded."""


class MalformedTagError(DecodeError):
    """Raised in strict mode when the algorithm tag is not recognized."""

    def __init__(self, raw_tag: str) -> None:
        self.raw_tag = raw_tag
        super().__init__(
            message=f"Invalid hash type raw value: {raw_tag!r}",
            code=ErrorCodes.MALFORMED_TAG,
            details={"raw_tag": raw_tag},
        )


class MalformedLengthError(DecodeError):
    """Raised when the length field is not a non-negative decimal integer."""

    def __init__(self, raw_digest_length: str) -> None:
        self.raw_digest_length = raw_digest_length
        super().__init__(
            message=f"Digest length is not a valid length: {raw_digest_length!r}",
            code=ErrorCodes.MALFORMED_LENGTH,
            details={"raw_digest_length": raw_digest_length},
        )


class LengthMismatchError(DecodeError):
    """Raised when the declared length disagrees with the decoded byte count."""

    def __init__(self, declared: int, actual: int) -> None:
        self.declared = declared
        self.actual = actual
        super().__init__(
            message=f"Length mismatch for digest. Length: {declared} Digest: {actual}",
            code=ErrorCodes.LENGTH_MISMATCH,
            details={"declared": declared, "actual": actual},
        )


class InvalidDigestError(DecodeError):
    """Raised when the digest segment is not strict even-length hex."""

    def __init__(self, hex_digest: str) -> None:
        self.hex_digest = hex_digest
        super().__init__(
            message=f"Invalid digest hex value: {hex_digest!r}",
            code=ErrorCodes.INVALID_DIGEST,
            details={"hex_digest": hex_digest},
        )


class DigestTooLongError(DispnetException, ValueError):
    """Raised when a digest cannot be represented by the length field."""

    def __init__(self, length: int, max_length: int) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(
            message=f"Digest length {length} exceeds the maximum of {max_length} bytes",
            code=ErrorCodes.DIGEST_TOO_LONG,
            details={"length": length, "max_length": max_length},
        )


class PrimitiveFailureError(DispnetException):
    """Raised when an underlying hash primitive rejects its input."""

    def __init__(
        self,
        message: str,
        algorithm: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["algorithm"] = algorithm
        self.algorithm = algorithm
        super().__init__(
            message=message,
            code=ErrorCodes.PRIMITIVE_FAILURE,
            details=full_details,
        )
