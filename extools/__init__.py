"""Static helpers for build tooling: predicates, classpaths, OS detection."""

from __future__ import annotations

__version__ = "0.9.0"
