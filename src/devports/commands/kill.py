"""Kill command - terminate the process on a port."""

import typer

from ..actions import kill_process
from .common import console, get_controller, require_record


def kill(
    port: int = typer.Argument(..., help="Listening port"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Kill the process listening on a port.

    Examples:
        devports kill 3000
        devports kill 3000 --force
    """
    record = require_record(port)

    if not force:
        confirm = typer.confirm(f"Kill process {record.pid} on port {port}?")
        if not confirm:
            console.print("[yellow]Cancelled[/yellow]")
            return

    result = kill_process(record, get_controller())
    if result.ok:
        console.print(f"[green]{result.message}[/green]")
    else:
        console.print(f"[red]Error:[/red] {result.message}")
        raise typer.Exit(1)
