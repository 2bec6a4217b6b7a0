"""Shared CLI context: console and configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from extools.core.config import Config, load_config
from extools.core.errors import ErrorCode
from extools.core.result import Err, Ok
from extools.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CliContext:
    console: ConsoleProtocol
    config: Config


def build_context(config_path: Path | None = None) -> CliContext:
    """Build the context for a command, exiting on a bad config file."""
    console = RichConsole()

    match load_config(config_path):
        case Ok(config):
            return CliContext(console=console, config=config)
        case Err(e):
            console.error(e.message)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
