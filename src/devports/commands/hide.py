"""Hide, unhide and hidden commands - manage the hidden port list."""

import typer
from rich.table import Table

from ..discovery import discover_ports
from .common import console, get_hidden_ports, success, warning


def hide(
    port: int = typer.Argument(..., help="Port to hide from the list"),
) -> None:
    """Hide a port from `devports list`.

    Examples:
        devports hide 5000
    """
    if get_hidden_ports().hide(port):
        success(f"Port {port} hidden")
    else:
        warning(f"Port {port} already hidden")


def unhide(
    port: int = typer.Argument(..., help="Port to show again"),
) -> None:
    """Show a hidden port again.

    Examples:
        devports unhide 5000
    """
    if get_hidden_ports().unhide(port):
        success(f"Port {port} unhidden")
    else:
        warning(f"Port {port} is not hidden")


def hidden() -> None:
    """Show hidden ports and whether anything listens on them."""
    ports = get_hidden_ports().load()
    if not ports:
        warning("No hidden services")
        return

    records = {record.port: record for record in discover_ports()}

    table = Table(title="Hidden Services")
    table.add_column("Port", style="yellow", justify="right")
    table.add_column("Name")
    table.add_column("Status", style="magenta")

    for port in sorted(ports):
        record = records.get(port)
        if record:
            table.add_row(f":{port}", record.display_name, "● LISTEN")
        else:
            table.add_row(f":{port}", "-", "○ free")

    console.print(table)
