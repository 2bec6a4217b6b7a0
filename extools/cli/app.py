from __future__ import annotations

import typer

from extools import __version__
from extools.cli.commands.classpath_cmd import classpath
from extools.cli.commands.path_cmd import check_path
from extools.cli.commands.platform_cmd import platform


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(platform)
app.command()(classpath)
app.command(name="check-path")(check_path)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


def main() -> None:
    app()
