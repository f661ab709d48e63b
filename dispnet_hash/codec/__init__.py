"""
Canonical text codec.
"""
from .codec import decode, encode

__all__ = [
    "encode",
    "decode",
]
