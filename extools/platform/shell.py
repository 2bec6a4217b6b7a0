"""Windows shell-environment detection (Cygwin, MinGW/MSYS).

Both checks only apply when the OS family is Windows and are driven by
environment variables read through an injectable lookup, so tests can pass
a plain dict instead of touching ``os.environ``.

The two flags are independent: a MinGW shell usually also looks like
Cygwin (POSIX ``SHELL`` path), so both can be true at once.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Literal, Union

from extools.platform.detection import CURRENT, OsName, is_windows

__all__ = [
    "EnvLookup",
    "EnvSource",
    "ShellInfo",
    "ShellKind",
    "as_lookup",
    "detect_shell",
    "is_cygwin",
    "is_mingw",
]


EnvLookup = Callable[[str], Union[str, None]]
EnvSource = Union[EnvLookup, Mapping[str, str], None]

ShellKind = Literal["cygwin", "mingw", "native"]

# PATH fragments left by a Cygwin install
_CYGWIN_PATH_MARKERS = ("/cygdrive/", "/usr/bin")

# PATH fragments left by an MSYS2 / MinGW-w64 install (separator style matters)
_MINGW_PATH_MARKERS = ("/mingw64/", "\\mingw64\\", "/msys64/", "\\msys64\\")


def as_lookup(env: EnvSource = None) -> EnvLookup:
    """Turn a mapping, a lookup function, or None (os.environ) into a lookup."""
    if env is None:
        return os.environ.get
    if isinstance(env, Mapping):
        return env.get
    return env


def is_cygwin(os_name: OsName = CURRENT, env: EnvSource = None) -> bool:
    """Detect a Cygwin-style POSIX shell on Windows.

    Evidence (any one is enough):
    - SHELL is a POSIX path (starts with "/")
    - PATH contains "/cygdrive/" or "/usr/bin"
    - TERM is set, whatever its value

    Args:
        os_name: OS name (default: current process)
        env: Environment lookup or mapping (default: os.environ)
    """
    if not is_windows(os_name):
        return False

    getenv = as_lookup(env)
    shell = getenv("SHELL")
    path = getenv("PATH")

    if shell is not None and shell.startswith("/"):
        return True
    if path is not None and any(marker in path for marker in _CYGWIN_PATH_MARKERS):
        return True
    # Any TERM value counts, even "dumb".
    return getenv("TERM") is not None


def is_mingw(os_name: OsName = CURRENT, env: EnvSource = None) -> bool:
    """Detect a MinGW / MSYS2 shell on Windows.

    Evidence (any one is enough):
    - MSYSTEM contains "MINGW" or is exactly "MSYS" (case-sensitive;
      UCRT64 and CLANG64 do not count)
    - MINGW_PREFIX or MINGW_CHOST is set
    - PATH contains a mingw64/msys64 directory and SHELL is set

    Args:
        os_name: OS name (default: current process)
        env: Environment lookup or mapping (default: os.environ)
    """
    if not is_windows(os_name):
        return False

    getenv = as_lookup(env)
    msystem = getenv("MSYSTEM")

    if msystem is not None and ("MINGW" in msystem or msystem == "MSYS"):
        return True
    if getenv("MINGW_PREFIX") is not None or getenv("MINGW_CHOST") is not None:
        return True

    path = getenv("PATH")
    has_mingw_path = path is not None and any(m in path for m in _MINGW_PATH_MARKERS)
    return has_mingw_path and getenv("SHELL") is not None


@dataclass(frozen=True, slots=True)
class ShellInfo:
    """Windows shell flags. Both are false on other OS families."""

    windows: bool
    is_cygwin: bool
    is_mingw: bool

    @property
    def kind(self) -> ShellKind | None:
        """Dominant shell flavour on Windows, None elsewhere.

        MinGW wins over Cygwin since MinGW shells also carry Cygwin evidence.
        """
        if not self.windows:
            return None
        if self.is_mingw:
            return "mingw"
        if self.is_cygwin:
            return "cygwin"
        return "native"


def detect_shell(os_name: OsName = CURRENT, env: EnvSource = None) -> ShellInfo:
    """Evaluate both Windows shell heuristics against one environment."""
    getenv = as_lookup(env)
    return ShellInfo(
        windows=is_windows(os_name),
        is_cygwin=is_cygwin(os_name, getenv),
        is_mingw=is_mingw(os_name, getenv),
    )
