"""
Schemas
File: versioning.py

Purpose: Centralize wire-format constants.
This file must remain tiny and have no imports from other schema files
to avoid circular dependencies.
"""

# Field widths of the canonical text. Changing either is a breaking
# wire-format change.
TAG_WIDTH: int = 2
LENGTH_WIDTH: int = 4
HEADER_WIDTH: int = TAG_WIDTH + LENGTH_WIDTH

# Largest digest byte length the length field can express
MAX_DIGEST_LENGTH: int = 10**LENGTH_WIDTH - 1
