"""Info command - show everything known about one port."""

import typer
from rich.markup import escape

from ..classifier import primary_kind
from ..restart import restart_kinds
from .common import console, get_hidden_ports, require_record


def info(
    port: int = typer.Argument(..., help="Listening port"),
) -> None:
    """Show details for a listening port.

    Examples:
        devports info 5173
    """
    record = require_record(port)
    hidden = port in get_hidden_ports().load()

    console.print(f"[bold]:{record.port}[/bold] {escape(record.display_name)}")
    console.print(f"  [dim]PID:[/dim]     {record.pid}")
    console.print(f"  [dim]User:[/dim]    {escape(record.user or '-')}")
    console.print(f"  [dim]Command:[/dim] {escape(record.command)}")
    if record.working_directory:
        console.print(f"  [dim]Cwd:[/dim]     {escape(record.working_directory)}")
    if record.project_path and record.project_path != record.working_directory:
        console.print(f"  [dim]Project:[/dim] {escape(record.project_path)}")
    if record.container:
        console.print(
            f"  [dim]Docker:[/dim]  {escape(record.container.name)} "
            f"({escape(record.container.image)})"
        )
    console.print(f"  [dim]Kind:[/dim]    {primary_kind(record)}")
    labels = record.flags.labels()
    if labels:
        console.print(f"  [dim]Tags:[/dim]    {', '.join(labels)}")
    console.print(f"  [dim]URL:[/dim]     {record.url}")

    kinds = restart_kinds(record)
    if kinds:
        console.print(
            f"  [dim]Restart:[/dim] {', '.join(kind.value for kind in kinds)}"
        )
    if hidden:
        console.print("  [dim]Hidden from list[/dim]")
