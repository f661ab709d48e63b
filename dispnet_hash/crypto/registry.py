"""
Algorithm Registry
Maps each AlgorithmTag to its fixed-width numeric wire code and back.

Unknown codes fall back to the default algorithm unless the caller asks
for strict decoding. The fallback masks corrupted tags; it is kept because
existing encoded digests depend on it.
"""
from __future__ import annotations

import logging

from dispnet_hash.schemas.digest import DEFAULT_ALGORITHM, AlgorithmTag
from dispnet_hash.schemas.errors import MalformedTagError
from dispnet_hash.schemas.versioning import TAG_WIDTH

logger = logging.getLogger(__name__)

_TAG_CODES: dict[AlgorithmTag, int] = {
    AlgorithmTag.CONTENT_HASH: 1,
    AlgorithmTag.CHECKSUM: 2,
    AlgorithmTag.PASSWORD_HASH: 3,
}

_CODE_TAGS: dict[str, AlgorithmTag] = {
    f"{code:0{TAG_WIDTH}d}": tag for tag, code in _TAG_CODES.items()
}


def code_for(tag: AlgorithmTag) -> str:
    """
    Render the wire code of an algorithm.

    Example:
        >>> code_for(AlgorithmTag.CHECKSUM)
        '02'
    """
    return f"{_TAG_CODES[tag]:0{TAG_WIDTH}d}"


def tag_for_code(raw_tag: str, strict: bool = False) -> AlgorithmTag:
    """
    Resolve a wire code to its algorithm.

    Args:
        raw_tag: The tag field as found in canonical text
        strict: Raise instead of falling back on unknown codes

    Returns:
        The matching AlgorithmTag, or DEFAULT_ALGORITHM for unknown codes
        in lenient mode

    Raises:
        MalformedTagError: If strict and the code is not registered
    """
    tag = _CODE_TAGS.get(raw_tag)
    if tag is not None:
        return tag
    if strict:
        raise MalformedTagError(raw_tag)
    logger.warning(
        f"Invalid hash type raw value: {raw_tag!r}. "
        f"Using {DEFAULT_ALGORITHM.name} as fallback"
    )
    return DEFAULT_ALGORITHM


def supported_codes() -> list[str]:
    """All registered wire codes in ascending order."""
    return sorted(_CODE_TAGS)


__all__ = [
    "code_for",
    "tag_for_code",
    "supported_codes",
]
