"""Filesystem existence and creation checks.

Every function accepts a string, a path-like, or None. None, blank strings,
and paths the OS rejects (embedded NUL, permission errors) are treated as
"not there" instead of raising.
"""

from __future__ import annotations

import os
from pathlib import Path

from extools.core.text import is_blank

__all__ = ["PathInput", "exists", "not_exists", "is_directory", "can_execute", "mkdirs"]


PathInput = str | os.PathLike[str] | None


def _to_path(path: PathInput) -> Path | None:
    if path is None:
        return None
    if isinstance(path, str) and is_blank(path):
        return None
    return Path(path)


def exists(path: PathInput) -> bool:
    """Check if a file or directory exists."""
    p = _to_path(path)
    if p is None:
        return False
    try:
        return p.exists()
    except (OSError, ValueError):
        return False


def not_exists(path: PathInput) -> bool:
    """Inverse of exists()."""
    return not exists(path)


def is_directory(path: PathInput) -> bool:
    """Check if path is an existing directory."""
    p = _to_path(path)
    if p is None:
        return False
    try:
        return p.is_dir()
    except (OSError, ValueError):
        return False


def can_execute(path: PathInput) -> bool:
    """Check if path is a regular file the current user may execute."""
    p = _to_path(path)
    if p is None:
        return False
    try:
        return p.is_file() and os.access(p, os.X_OK)
    except (OSError, ValueError):
        return False


def mkdirs(path: PathInput) -> bool:
    """Create a directory and any missing parents.

    Returns:
        True if the directory exists afterwards, False if the path names an
        existing file or creation failed.
    """
    p = _to_path(path)
    if p is None:
        return False
    try:
        p.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError):
        return False
    return True
