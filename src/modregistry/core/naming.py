"""Canonical registry keys.

Usage:
    normalize("Block")      # "block"
    is_valid_name("blöck")  # False
"""

from __future__ import annotations

from typing import Any

from modregistry.core.errors import InvalidNameError


def _has_non_ascii(text: str) -> bool:
    return any(ord(char) > 127 for char in text)


def normalize(raw: Any) -> str:
    """Convert key material into the canonical lookup key.

    Args:
        raw: Name to normalize. Non-strings are stringified.

    Returns:
        Lower-cased ASCII string.

    Raises:
        InvalidNameError: If raw is empty/None or contains non-ASCII characters.
    """
    if not raw:
        raise InvalidNameError("Registry name must be defined")
    name = raw if isinstance(raw, str) else str(raw)
    if not name:
        raise InvalidNameError("Registry name must be defined")
    if _has_non_ascii(name):
        raise InvalidNameError(f"Registry names may only contain ASCII characters: {name!r}")
    # str.lower() on pure ASCII is locale independent
    return name.lower()


def is_valid_name(raw: Any) -> bool:
    """Check whether raw would normalize without error."""
    try:
        normalize(raw)
    except InvalidNameError:
        return False
    return True
