"""
Digest handle and password-hash verifier.
"""
from .handle import DigestHandle
from .verifier import verify, verify_text

__all__ = [
    "DigestHandle",
    "verify",
    "verify_text",
]
