"""Typer CLI for devports - Main entry point."""

import typer

from . import __version__
from .commands import (
    container,
    hidden,
    hide,
    info,
    kill,
    list_cmd,
    open_cmd,
    restart,
    unhide,
)

app = typer.Typer(
    name="devports",
    help="Inspect and manage local development server ports",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"devports version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Inspect and manage local development server ports."""
    pass

# Register all commands
app.command(name="list")(list_cmd)
app.command()(info)
app.command()(kill)
app.command()(restart)
app.command()(container)
app.command(name="open")(open_cmd)
app.command()(hide)
app.command()(unhide)
app.command()(hidden)


def main() -> None:
    """Main entry point."""
    app()
