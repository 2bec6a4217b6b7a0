"""Minimal Result type for fallible boundaries.

Functions that can fail in expected ways return ``Ok(value)`` or
``Err(error)`` instead of raising. Callers branch with ``match`` or
``isinstance``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["Ok", "Err", "Result"]

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result = Ok[T] | Err[E]
