"""Argument guards shared by every compare/distance entry point."""

from __future__ import annotations

from typing import Any


def require_not_none(a: Any, b: Any) -> None:
    """Raise ``TypeError`` if either compared value is absent."""
    if a is None:
        raise TypeError("a must not be None")
    if b is None:
        raise TypeError("b must not be None")
