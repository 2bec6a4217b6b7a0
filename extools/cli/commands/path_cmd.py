"""check-path command - existence, directory and executable checks."""

from __future__ import annotations

from pathlib import Path

import typer

from extools.cli.context import build_context
from extools.core.errors import ErrorCode
from extools.core.files import can_execute, exists, is_directory, mkdirs
from extools.output.console import Style


def check_path(
    path: Path = typer.Argument(..., help="Path to check"),
    mkdir: bool = typer.Option(False, "--mkdir", help="Create the directory (and parents) if missing"),
) -> None:
    """Report whether PATH exists, is a directory, or is executable."""
    ctx = build_context()

    if mkdir and not exists(path):
        if not mkdirs(path):
            ctx.console.error(f"cannot create directory: {path}")
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        ctx.console.success(f"created {path}")

    if not exists(path):
        ctx.console.error(f"missing: {path}")
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    kind = "directory" if is_directory(path) else "file"
    ctx.console.print(f"{path}: {kind}")
    if can_execute(path):
        ctx.console.print("executable", Style.DIM)
