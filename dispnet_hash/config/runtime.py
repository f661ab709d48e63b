"""
Runtime Configuration

Construction-time settings for hashing and decoding. Nothing here is
persisted; every config object is an immutable value passed per call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Optional
from pathlib import Path

from dotenv import load_dotenv


# Built-in salt of the password-hash algorithm, used whenever no explicit
# salt is configured. Changing it changes every default-salt digest.
DEFAULT_SALT: bytes = b"A8nUz1Pkc0IZ0uJSZNnMlvdLz0T3al5Hjhg2"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of true/false, yes/no, on/off, 1/0; got {raw!r}")


@dataclass(frozen=True)
class HashConfig:
    """Configuration for digest production."""
    salt: Optional[bytes] = None

    def __post_init__(self):
        salt = self.salt
        # YAML reads an unquoted numeric salt as int
        if isinstance(salt, int) and not isinstance(salt, bool):
            salt = str(salt)
        if isinstance(salt, str):
            salt = salt.encode("utf-8")
        if salt is not None and not isinstance(salt, bytes):
            raise TypeError(f"salt must be bytes or str, got {type(salt).__name__}")
        object.__setattr__(self, "salt", salt)

    def resolve_salt(self) -> bytes:
        """Explicit salt when set and non-empty, else DEFAULT_SALT."""
        if self.salt:
            return self.salt
        return DEFAULT_SALT


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for decoding canonical text."""
    # Unknown algorithm tags fall back to the default algorithm unless strict
    strict_tags: bool = False


@dataclass(frozen=True)
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    hash: HashConfig = field(default_factory=HashConfig)
    codec: CodecConfig = field(default_factory=CodecConfig)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - DISPNET_DEFAULT_SALT: salt for the password-hash algorithm
        - DISPNET_STRICT_TAGS: reject unknown algorithm tags (true/false,
          yes/no, on/off, 1/0)

        A .env file, if present, is loaded first.
        """
        load_dotenv()
        overrides: dict[str, Any] = {}

        if os.getenv("DISPNET_DEFAULT_SALT"):
            overrides.setdefault("hash", {})["salt"] = os.getenv("DISPNET_DEFAULT_SALT")

        if os.getenv("DISPNET_STRICT_TAGS"):
            overrides.setdefault("codec", {})["strict_tags"] = _parse_bool(
                "DISPNET_STRICT_TAGS", os.getenv("DISPNET_STRICT_TAGS", "")
            )

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        hash_data = dict(data.get("hash") or {})
        if hash_data.get("salt_hex") is not None:
            hash_data["salt"] = bytes.fromhex(hash_data.pop("salt_hex"))
        hash_data.pop("salt_hex", None)
        codec_data = data.get("codec") or {}

        return cls(
            hash=HashConfig(**hash_data) if hash_data else HashConfig(),
            codec=CodecConfig(**codec_data) if codec_data else CodecConfig(),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """Return a new config with environment variable overrides applied."""
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = self
        if "hash" in overrides:
            new_config = replace(new_config, hash=replace(new_config.hash, **overrides["hash"]))
        if "codec" in overrides:
            new_config = replace(new_config, codec=replace(new_config.codec, **overrides["codec"]))
        return new_config

    def to_dict(self) -> dict[str, Any]:
        """
        Convert configuration to a dictionary.

        A salt that is not valid UTF-8 is written as "salt_hex" so that
        from_dict() restores it byte for byte.
        """
        return {
            "hash": _salt_to_dict(self.hash.salt),
            "codec": {
                "strict_tags": self.codec.strict_tags,
            },
        }


def _salt_to_dict(salt: Optional[bytes]) -> dict[str, Any]:
    if salt is None:
        return {"salt": None}
    try:
        return {"salt": salt.decode("utf-8")}
    except UnicodeDecodeError:
        return {"salt_hex": salt.hex()}
