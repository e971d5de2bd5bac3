"""Open command - open a listening port in the browser."""

import typer

from .common import console, require_record


def open_cmd(
    port: int = typer.Argument(..., help="Listening port"),
    docs: bool = typer.Option(False, "--docs", help="Open FastAPI Swagger docs"),
    redoc: bool = typer.Option(False, "--redoc", help="Open FastAPI ReDoc"),
) -> None:
    """Open http://localhost:PORT in the default browser.

    Examples:
        devports open 5173
        devports open 8000 --docs
    """
    record = require_record(port)

    url = record.url
    if docs:
        url += "/docs"
    elif redoc:
        url += "/redoc"

    console.print(f"Opening {url}")
    typer.launch(url)
