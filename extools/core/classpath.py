"""Classpath string building.

Entries are joined with the platform path separator (``os.pathsep``):
``:`` on Unix, ``;`` on Windows.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from extools.core.text import is_not_blank

__all__ = ["join_classpath", "join_classpath_files"]


def join_classpath(*paths: str | None) -> str:
    """Join classpath entries, skipping None and blank ones."""
    return os.pathsep.join(p for p in paths if p is not None and is_not_blank(p))


def join_classpath_files(*collections: Iterable[str | os.PathLike[str]] | None) -> str:
    """Join the absolute paths of every file in the given collections.

    None collections are skipped; order is preserved.
    """
    entries: list[str] = []
    for files in collections:
        if files is None:
            continue
        entries.extend(str(Path(f).absolute()) for f in files)
    return os.pathsep.join(entries)
