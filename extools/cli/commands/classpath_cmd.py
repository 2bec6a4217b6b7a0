"""Classpath command - join entries with the platform separator."""

from __future__ import annotations

from typing import List

import typer

from extools.core.classpath import join_classpath
from extools.core.errors import ErrorCode
from extools.output.console import RichConsole


def classpath(
    entries: List[str] = typer.Argument(..., help="Classpath entries (blank ones are dropped)"),
) -> None:
    """Print ENTRIES joined into a single classpath string."""
    joined = join_classpath(*entries)
    if not joined:
        RichConsole().error("no non-blank classpath entries")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    typer.echo(joined)
