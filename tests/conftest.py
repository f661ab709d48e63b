"""
Pytest configuration and shared fixtures for dispnet-hash tests.

This conftest.py:
1. Adds project root and tests root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_common = importlib.import_module("fixtures.common")

make_handle = _common.make_handle
make_password_handle = _common.make_password_handle


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def content_handle():
    """BLAKE3 handle of b"test"."""
    return make_handle()


@pytest.fixture(scope="session")
def password_handle():
    """Argon2 handle of b"test" with the pinned salt. Session-scoped, Argon2 is slow."""
    return make_password_handle()


@pytest.fixture(autouse=True)
def _clear_dispnet_env(monkeypatch):
    """Keep environment overrides from leaking into config tests."""
    monkeypatch.delenv("DISPNET_DEFAULT_SALT", raising=False)
    monkeypatch.delenv("DISPNET_STRICT_TAGS", raising=False)
