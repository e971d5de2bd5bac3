"""Container command - act on the Docker container behind a port."""

from enum import Enum

import typer

from ..actions import container_action, container_logs, container_shell
from ..errors import DevportsError
from .common import console, error, get_controller, require_record


class ContainerCommand(str, Enum):
    restart = "restart"
    stop = "stop"
    logs = "logs"
    shell = "shell"


def container(
    action: ContainerCommand = typer.Argument(..., help="restart, stop, logs or shell"),
    port: int = typer.Argument(..., help="Published host port"),
) -> None:
    """Restart, stop, follow logs of, or open a shell in a container.

    Examples:
        devports container restart 5432
        devports container logs 5432
    """
    record = require_record(port)
    controller = get_controller()

    try:
        if action is ContainerCommand.logs:
            raise typer.Exit(container_logs(record, controller))
        if action is ContainerCommand.shell:
            raise typer.Exit(container_shell(record, controller))

        with console.status(f"Running docker {action.value}..."):
            result = container_action(record, action.value, controller)
    except DevportsError as e:
        error(str(e))
        raise typer.Exit(1)

    if result.ok:
        console.print(f"[green]{result.message}[/green]")
    else:
        console.print(f"[red]Error:[/red] {result.message}")
        raise typer.Exit(1)
