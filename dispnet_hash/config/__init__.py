"""
Runtime Configuration Module

Provides configuration loading for hashing and decoding.
"""

from .runtime import DEFAULT_SALT, CodecConfig, HashConfig, RuntimeConfig

__all__ = [
    "DEFAULT_SALT",
    "HashConfig",
    "CodecConfig",
    "RuntimeConfig",
]
