"""List command - show listening ports grouped by kind."""

import typer
from rich.table import Table
from rich.text import Text

from ..classifier import primary_kind
from ..discovery import PortRecord, discover_ports, split_dev_and_system
from ..naming import shorten_path
from ..titles import fetch_page_title
from .common import console, debug, get_hidden_ports

KIND_STYLES = {
    "container": "blue",
    "vite": "magenta",
    "nextjs": "green",
    "fastapi": "dark_orange",
    "flask": "green",
    "dev": "green",
    "python": "yellow",
}


def list_cmd(
    all: bool = typer.Option(False, "-a", "--all", help="Include hidden services"),
    titles: bool = typer.Option(
        False, "--titles", help="Fetch page titles from development servers"
    ),
) -> None:
    """List listening TCP ports.

    Examples:
        devports list
        devports list --all --titles
    """
    records = discover_ports()
    hidden_ports = get_hidden_ports()
    visible, hidden = hidden_ports.partition(records)
    debug(f"{len(visible)} visible, {len(hidden)} hidden")

    shown = records if all else visible
    if not shown:
        console.print("[yellow]No listening ports found[/yellow]")
    else:
        dev, system = split_dev_and_system(shown)
        if dev:
            console.print(_build_table("Development Servers", dev, titles))
        if system:
            console.print(_build_table("System & Apps", system, titles))

    if hidden and not all:
        plural = "s" if len(hidden) > 1 else ""
        console.print(
            f"[dim]{len(hidden)} service{plural} hidden (devports hidden)[/dim]"
        )


def _build_table(title: str, records: list[PortRecord], titles: bool) -> Table:
    table = Table(title=f"{title} ({len(records)})")
    table.add_column("Port", style="yellow", justify="right")
    table.add_column("Name")
    table.add_column("Location", style="dim")
    table.add_column("Tags", style="cyan")
    table.add_column("PID", style="dim", justify="right")

    for record in records:
        name = record.display_name
        # Title probe only runs for dev servers
        if titles and record.is_dev_server:
            name = fetch_page_title(record.port) or name

        if record.container:
            location = f"Container: {record.container.name}"
        elif record.project_path:
            location = shorten_path(record.project_path)
        else:
            location = "-"

        tags = record.flags.labels()
        if record.container:
            tags.insert(0, "Docker")

        style = KIND_STYLES.get(primary_kind(record))
        table.add_row(
            f":{record.port}",
            Text(name, style=style or ""),
            Text(location),
            ", ".join(tags) or "-",
            str(record.pid),
        )

    return table
