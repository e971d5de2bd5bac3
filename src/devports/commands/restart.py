"""Restart command - relaunch a dev server on a different port."""

import typer
from rich.markup import escape

from ..errors import DevportsError
from ..restart import RestartRequest, RestartWorkflow, ServiceKind, restart_kinds
from .common import console, error, get_controller, require_record


def restart(
    port: int = typer.Argument(..., help="Port the server listens on now"),
    to: str | None = typer.Option(
        None, "--to", "-t", help="New port (default: current port + 1)"
    ),
    kind: ServiceKind | None = typer.Option(
        None, "--kind", "-k", help="Server type (default: detected)"
    ),
    reload: bool = typer.Option(True, "--reload/--no-reload", help="uvicorn --reload"),
    debug: bool = typer.Option(True, "--debug/--no-debug", help="flask --debug"),
) -> None:
    """Kill a dev server and start it again on a new port.

    The server is relaunched from its working directory. The command is
    issued and not monitored; run `devports list` to see it come up.

    Examples:
        devports restart 5173
        devports restart 8000 --to 8001 --no-reload
        devports restart 5173 --kind sveltekit-preview
    """
    record = require_record(port)

    if kind is None:
        offered = restart_kinds(record)
        if not offered:
            error(f"No restart available for port {port} ({record.display_name})")
            raise typer.Exit(1)
        kind = offered[0]

    request = RestartRequest(
        kind=kind,
        port=to if to is not None else record.port + 1,
        reload=reload,
        debug=debug,
    )
    workflow = RestartWorkflow(record, get_controller())

    with console.status(f"Starting {kind.label}..."):
        try:
            result = workflow.run(request)
        except DevportsError as e:
            error(str(e))
            raise typer.Exit(1)

    if result.port is not None:
        console.print(f"[green]{kind.label} restarting on port {result.port}[/green]")
    else:
        console.print(f"[green]{kind.label} starting[/green]")
    console.print(f"[dim]{escape(result.command)}  (in {escape(str(result.cwd))})[/dim]")
