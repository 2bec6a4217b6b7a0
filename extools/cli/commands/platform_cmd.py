"""Platform command - show OS family and Windows shell flavour."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from extools.cli.context import build_context
from extools.output.console import ConsoleProtocol, Style
from extools.platform.detection import CURRENT, OsName, PlatformInfo, detect


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def _to_json(info: PlatformInfo) -> str:
    return json.dumps(
        {
            "os_name": info.os_name,
            "family": info.family.value,
            "unix": info.family.is_unix,
            "cygwin": info.shell.is_cygwin,
            "mingw": info.shell.is_mingw,
            "shell": info.shell.kind,
        },
        indent=2,
    )


def render_platform(info: PlatformInfo, console: ConsoleProtocol) -> None:
    """Print a human-readable platform summary."""
    console.header("platform")
    console.print(f"os name: {info.os_name or '(empty)'}")
    console.print(f"family:  {info.family.value}")

    if not info.is_windows:
        console.print("shell:   n/a (not windows)", Style.DIM)
        return

    console.print(f"shell:   {info.shell.kind}")
    console.print(f"cygwin:  {_yes_no(info.shell.is_cygwin)}", Style.DIM)
    console.print(f"mingw:   {_yes_no(info.shell.is_mingw)}", Style.DIM)


def platform(
    os_name: Optional[str] = typer.Option(None, "--os-name", help="Classify this OS name instead"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to extools.toml"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
) -> None:
    """Detect the OS family and, on Windows, Cygwin/MinGW shells."""
    ctx = build_context(config)

    name: OsName = CURRENT
    if os_name is not None:
        name = os_name
    elif ctx.config.os_name is not None:
        name = ctx.config.os_name

    info = detect(name, ctx.config.getenv)

    if as_json:
        typer.echo(_to_json(info))
        return

    render_platform(info, ctx.console)
