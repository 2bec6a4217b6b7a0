"""Emptiness checks for sized collections."""

from __future__ import annotations

from collections.abc import Sized

__all__ = ["is_empty", "is_not_empty"]


def is_empty(*collections: Sized | None) -> bool:
    """Return True if every collection is None or has no items."""
    return all(c is None or len(c) == 0 for c in collections)


def is_not_empty(*collections: Sized | None) -> bool:
    """Return True if at least one collection has items."""
    return not is_empty(*collections)
