"""Blank and empty string predicates.

All predicates are variadic and accept any object: non-string values are
checked through ``str()``, and ``None`` counts as both blank and empty.

Whitespace is what ``str.isspace()`` accepts, except that the non-breaking
spaces U+00A0, U+2007 and U+202F and NEL (U+0085) count as content.

Called with no values, ``is_blank`` and ``is_empty`` return True while
``is_not_blank`` and ``is_not_empty`` return False. The negated forms need
at least one value to vouch for.

    >>> is_blank(None, "", "  ")
    True
    >>> is_not_blank("a", " ")
    False
    >>> is_blank("\\u00a0")
    False
"""

from __future__ import annotations

__all__ = ["is_blank", "is_empty", "is_not_blank", "is_not_empty"]

# isspace() characters that do not count as whitespace
_NOT_WHITESPACE = frozenset("\u00a0\u2007\u202f\x85")


def _blank(value: object) -> bool:
    if value is None:
        return True
    text = value if isinstance(value, str) else str(value)
    return all(ch.isspace() and ch not in _NOT_WHITESPACE for ch in text)


def _empty(value: object) -> bool:
    if value is None:
        return True
    text = value if isinstance(value, str) else str(value)
    return text == ""


def is_blank(*values: object) -> bool:
    """Return True if every value is None, empty, or whitespace only.

    Called with no values, returns True.
    """
    return all(_blank(v) for v in values)


def is_empty(*values: object) -> bool:
    """Return True if every value is None or empty. No values -> True."""
    return all(_empty(v) for v in values)


def is_not_blank(*values: object) -> bool:
    """Return True if at least one value is given and none is blank."""
    return bool(values) and not any(_blank(v) for v in values)


def is_not_empty(*values: object) -> bool:
    """Return True if at least one value is given and none is empty."""
    return bool(values) and not any(_empty(v) for v in values)
