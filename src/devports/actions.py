"""Imperative actions against processes and containers."""

import subprocess
from dataclasses import dataclass
from pathlib import Path

from .config import tool_env
from .console import debug
from .discovery import PortRecord
from .errors import ActionError

CONTAINER_ACTIONS = ("restart", "stop")


@dataclass
class ActionResult:
    """Outcome of a single action, ready to show the user."""

    ok: bool
    message: str


class ProcessController:
    """Issue kill, launch and docker commands."""

    def kill(self, pid: int) -> bool:
        """Forcefully terminate a process.

        Args:
            pid: Process id

        Returns:
            True if the signal was delivered, False otherwise
        """
        if pid <= 0:
            debug(f"Refusing to kill pid {pid}")
            return False
        try:
            result = subprocess.run(
                ["kill", "-9", str(pid)],
                capture_output=True,
                text=True,
                env=tool_env(),
            )
        except (subprocess.SubprocessError, FileNotFoundError, OSError) as e:
            debug(f"kill {pid} failed: {e}")
            return False
        return result.returncode == 0

    def spawn_detached(self, command: str, cwd: Path) -> None:
        """Start a shell command in its own session and forget about it.

        Args:
            command: Shell command line
            cwd: Directory to run in

        Raises:
            ActionError: If the command could not be started
        """
        try:
            subprocess.Popen(
                command,
                shell=True,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
                env=tool_env(),
            )
        except OSError as e:
            raise ActionError(f"Could not start '{command}' in {cwd}: {e}") from e

    def run_docker(self, args: list[str]) -> bool:
        """Run a docker command to completion.

        Args:
            args: Arguments after ``docker``

        Returns:
            True if docker exited successfully
        """
        try:
            result = subprocess.run(
                ["docker", *args], capture_output=True, text=True, env=tool_env()
            )
        except (subprocess.SubprocessError, FileNotFoundError, OSError) as e:
            debug(f"docker {' '.join(args)} failed: {e}")
            return False
        return result.returncode == 0

    def run_interactive(self, args: list[str]) -> int:
        """Run a command attached to the current terminal.

        Args:
            args: Command and arguments

        Returns:
            Exit code of the command

        Raises:
            ActionError: If the command could not be started
        """
        try:
            return subprocess.run(args, env=tool_env()).returncode
        except (FileNotFoundError, OSError) as e:
            raise ActionError(f"Could not run {args[0]}: {e}") from e


def kill_process(record: PortRecord, controller: ProcessController) -> ActionResult:
    """Kill the process listening on a record's port."""
    if controller.kill(record.pid):
        return ActionResult(True, f"Killed process on port {record.port}")
    return ActionResult(False, f"Failed to kill process {record.pid}")


def container_action(
    record: PortRecord, action: str, controller: ProcessController
) -> ActionResult:
    """Restart or stop the container publishing a record's port.

    Args:
        record: Port record with a container
        action: "restart" or "stop"
        controller: Process controller

    Returns:
        ActionResult

    Raises:
        ActionError: If the record has no container or the action is unknown
    """
    name = _container_name(record)
    if action not in CONTAINER_ACTIONS:
        raise ActionError(f"Unknown container action '{action}'")

    if controller.run_docker([action, name]):
        return ActionResult(True, f"Container {action} completed")
    return ActionResult(False, f"Failed to {action} container {name}")


def container_logs(record: PortRecord, controller: ProcessController) -> int:
    """Follow a container's logs in the current terminal."""
    return controller.run_interactive(["docker", "logs", "-f", _container_name(record)])


def container_shell(record: PortRecord, controller: ProcessController) -> int:
    """Open an interactive shell inside a container."""
    return controller.run_interactive(
        ["docker", "exec", "-it", _container_name(record), "sh"]
    )


def _container_name(record: PortRecord) -> str:
    if record.container is None:
        raise ActionError(f"Port {record.port} is not published by a container")
    return record.container.name
