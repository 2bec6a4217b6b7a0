"""Console output abstraction.

Commands print through ``ConsoleProtocol`` so tests can swap the rich-backed
console for ``MockConsole`` and assert on what was written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from rich.console import Console

__all__ = ["ConsoleProtocol", "MockConsole", "RichConsole", "Style"]


class Style(Enum):
    """Semantic output styles, mapped to rich markup styles."""

    DEFAULT = ""
    DIM = "dim"
    BOLD = "bold"
    SUCCESS = "green"
    WARNING = "yellow"
    ERROR = "bold red"
    HEADER = "bold cyan"


class ConsoleProtocol(Protocol):
    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def header(self, title: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class RichConsole:
    """ConsoleProtocol implementation on top of rich.

    Errors go to stderr so stdout stays clean for piping (e.g. --json).
    """

    def __init__(self, *, no_color: bool = False) -> None:
        self._out = Console(no_color=no_color, highlight=False)
        self._err = Console(stderr=True, no_color=no_color, highlight=False)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self._out.print(message, style=style.value or None, markup=False, soft_wrap=True)

    def header(self, title: str) -> None:
        self._out.print(title, style=Style.HEADER.value, markup=False, soft_wrap=True)

    def success(self, message: str) -> None:
        self._out.print(f"ok: {message}", style=Style.SUCCESS.value, markup=False, soft_wrap=True)

    def warning(self, message: str) -> None:
        self._err.print(f"warning: {message}", style=Style.WARNING.value, markup=False, soft_wrap=True)

    def error(self, message: str) -> None:
        self._err.print(f"error: {message}", style=Style.ERROR.value, markup=False, soft_wrap=True)


@dataclass
class MockConsole:
    """Recording console for tests."""

    messages: list[tuple[str, Style]] = field(default_factory=list)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.messages.append((message, style))

    def header(self, title: str) -> None:
        self.messages.append((title, Style.HEADER))

    def success(self, message: str) -> None:
        self.messages.append((message, Style.SUCCESS))

    def warning(self, message: str) -> None:
        self.messages.append((message, Style.WARNING))

    def error(self, message: str) -> None:
        self.messages.append((message, Style.ERROR))

    @property
    def text(self) -> str:
        return "\n".join(m for m, _ in self.messages)

    def has(self, fragment: str, style: Style | None = None) -> bool:
        return any(
            fragment in m and (style is None or s == style) for m, s in self.messages
        )
