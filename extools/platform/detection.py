"""OS family detection from an operating-system name.

Each predicate takes an optional OS name. Without one it classifies the
current process, whose name is read once from ``platform.system()`` and
cached. With one (``None`` included) it classifies that string, which keeps
every rule testable with literal names.

Matching is a substring test on the lowercased name, so version suffixes
("Windows 11", "FreeBSD 13.0") are tolerated.
"""

from __future__ import annotations

import platform as _platform
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Literal, Union

if TYPE_CHECKING:
    from extools.platform.shell import EnvSource, ShellInfo

__all__ = [
    "CURRENT",
    "OsFamily",
    "OsName",
    "PlatformInfo",
    "current_os_name",
    "detect",
    "detect_family",
    "is_aix",
    "is_freebsd",
    "is_linux",
    "is_macos",
    "is_openvms",
    "is_other_os",
    "is_solaris",
    "is_windows",
    "normalize_os_name",
    "resolve_os_name",
]


class _Current(Enum):
    """Marker for "use the current process OS name"."""

    TOKEN = "current"


CURRENT = _Current.TOKEN

OsName = Union[str, None, Literal[_Current.TOKEN]]


class OsFamily(Enum):
    """Operating-system family. Exactly one applies to any OS name."""

    AIX = "aix"
    FREEBSD = "freebsd"
    LINUX = "linux"
    MACOS = "macos"
    OPENVMS = "openvms"
    SOLARIS = "solaris"
    WINDOWS = "windows"
    OTHER = "other"

    @property
    def is_windows(self) -> bool:
        return self is OsFamily.WINDOWS

    @property
    def is_unix(self) -> bool:
        return self in _UNIX_FAMILIES

    @classmethod
    def from_os_name(cls, os_name: OsName = CURRENT) -> OsFamily:
        return detect_family(os_name)


_UNIX_FAMILIES = frozenset(
    {
        OsFamily.AIX,
        OsFamily.FREEBSD,
        OsFamily.LINUX,
        OsFamily.MACOS,
        OsFamily.SOLARIS,
    }
)


# platform.system() prefixes reported by POSIX-layer Pythons running on Windows
_WINDOWS_POSIX_LAYERS = ("cygwin", "msys", "mingw")


@lru_cache(maxsize=1)
def current_os_name() -> str:
    """OS name of the current process, read once per process.

    Cygwin and MSYS2 Pythons report e.g. "CYGWIN_NT-10.0-19045"; those are
    reported as "Windows" so the shell checks can run on them.
    """
    system = _platform.system()
    if system.lower().startswith(_WINDOWS_POSIX_LAYERS):
        return "Windows"
    return system


def normalize_os_name(os_name: str | None) -> str:
    """Lowercase an OS name; None becomes the empty string."""
    return os_name.lower() if os_name is not None else ""


def resolve_os_name(os_name: OsName = CURRENT) -> str:
    """Normalized OS name, substituting the current one for CURRENT."""
    if os_name is CURRENT:
        return normalize_os_name(current_os_name())
    return normalize_os_name(os_name)


def is_aix(os_name: OsName = CURRENT) -> bool:
    return "aix" in resolve_os_name(os_name)


def is_freebsd(os_name: OsName = CURRENT) -> bool:
    return "freebsd" in resolve_os_name(os_name)


def is_linux(os_name: OsName = CURRENT) -> bool:
    """Linux or any other name mentioning "unix"."""
    name = resolve_os_name(os_name)
    return "linux" in name or "unix" in name


def is_macos(os_name: OsName = CURRENT) -> bool:
    """macOS, matched as "mac", "darwin" or "osx"."""
    name = resolve_os_name(os_name)
    return "mac" in name or "darwin" in name or "osx" in name


def is_openvms(os_name: OsName = CURRENT) -> bool:
    return "openvms" in resolve_os_name(os_name)


def is_solaris(os_name: OsName = CURRENT) -> bool:
    """Solaris, matched as "solaris" or "sunos"."""
    name = resolve_os_name(os_name)
    return "solaris" in name or "sunos" in name


def is_windows(os_name: OsName = CURRENT) -> bool:
    name = resolve_os_name(os_name)
    return "windows" in name or name.startswith("win")


def is_other_os(os_name: OsName = CURRENT) -> bool:
    """True when no named family matches (including empty or None names)."""
    return detect_family(os_name) is OsFamily.OTHER


# Evaluation order; OTHER has no rule of its own.
_DETECTORS = (
    (OsFamily.AIX, is_aix),
    (OsFamily.FREEBSD, is_freebsd),
    (OsFamily.LINUX, is_linux),
    (OsFamily.MACOS, is_macos),
    (OsFamily.OPENVMS, is_openvms),
    (OsFamily.SOLARIS, is_solaris),
    (OsFamily.WINDOWS, is_windows),
)


def detect_family(os_name: OsName = CURRENT) -> OsFamily:
    """Classify an OS name into its family."""
    name = resolve_os_name(os_name)
    for family, matches in _DETECTORS:
        if matches(name):
            return family
    return OsFamily.OTHER


@dataclass(frozen=True, slots=True)
class PlatformInfo:
    """Result of a full platform detection.

    Attributes:
        os_name: Raw OS name that was classified
        family: OS family of os_name
        shell: Windows shell flags (all false off Windows)
    """

    os_name: str
    family: OsFamily
    shell: ShellInfo

    @property
    def is_windows(self) -> bool:
        return self.family.is_windows


def detect(os_name: OsName = CURRENT, env: EnvSource = None) -> PlatformInfo:
    """Detect OS family and Windows shell environment in one pass.

    Args:
        os_name: OS name to classify (default: current process)
        env: Environment lookup or mapping (default: os.environ)
    """
    from extools.platform.shell import detect_shell

    raw = current_os_name() if os_name is CURRENT else (os_name or "")
    return PlatformInfo(
        os_name=raw,
        family=detect_family(raw),
        shell=detect_shell(raw, env),
    )
