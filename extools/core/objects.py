"""Null checks over any number of objects.

Pass a collection's items with ``*items`` to check its elements.
"""

from __future__ import annotations

__all__ = ["is_null", "is_any_null", "is_not_null"]


def is_null(*objects: object) -> bool:
    """Return True if every object is None (or none are given)."""
    return all(obj is None for obj in objects)


def is_any_null(*objects: object) -> bool:
    """Return True if at least one object is None."""
    return any(obj is None for obj in objects)


def is_not_null(*objects: object) -> bool:
    """Return True if no object is None (or none are given)."""
    return not is_any_null(*objects)
