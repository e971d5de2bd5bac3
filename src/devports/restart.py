"""Single-shot restart of a dev server on a new port.

The workflow kills the current process, launches a replacement from the
server's working directory and waits a short grace period. It does not
check that the new server comes up: CONFIRMED means the command was issued.
"""

import re
import shlex
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from .actions import ProcessController
from .console import debug
from .discovery import PortRecord
from .errors import ActionError, PortValidationError

UVICORN_APP = re.compile(r"uvicorn\s+(\S+)")
DEFAULT_ASGI_APP = "main:app"


class RestartState(Enum):
    IDLE = "idle"
    TERMINATING = "terminating"
    LAUNCHING = "launching"
    CONFIRMED = "confirmed"


class ServiceKind(str, Enum):
    """Server types with a relaunch template."""

    VITE = "vite"
    FASTAPI = "fastapi"
    NEXTJS = "nextjs"
    FLASK = "flask"
    SVELTEKIT_PREVIEW = "sveltekit-preview"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def grace_seconds(self) -> float:
        return _GRACE_SECONDS[self]

    @property
    def takes_port(self) -> bool:
        return self is not ServiceKind.SVELTEKIT_PREVIEW


_LABELS = {
    ServiceKind.VITE: "Vite",
    ServiceKind.FASTAPI: "Uvicorn",
    ServiceKind.NEXTJS: "Next.js",
    ServiceKind.FLASK: "Flask",
    ServiceKind.SVELTEKIT_PREVIEW: "SvelteKit preview",
}

_GRACE_SECONDS = {
    ServiceKind.VITE: 1.5,
    ServiceKind.FASTAPI: 1.5,
    ServiceKind.NEXTJS: 2.0,
    ServiceKind.FLASK: 1.5,
    ServiceKind.SVELTEKIT_PREVIEW: 3.0,
}


@dataclass
class RestartRequest:
    """User-confirmed parameters for a restart."""

    kind: ServiceKind
    port: Any = None  # Validated by validate_port; unused for previews
    reload: bool = True  # uvicorn --reload
    debug: bool = True  # flask --debug


@dataclass
class RestartResult:
    """What the workflow issued."""

    state: RestartState
    command: str
    cwd: Path
    port: int | None
    killed: bool  # False when the old process was already gone


def validate_port(value: Any) -> int:
    """Validate a user-supplied port number.

    Args:
        value: int or decimal string

    Returns:
        The port as an int

    Raises:
        PortValidationError: If value is not an integer in 1-65535
    """
    if isinstance(value, bool):
        raise PortValidationError(f"Invalid port number: {value!r}")
    if isinstance(value, int):
        port = value
    elif isinstance(value, str) and re.fullmatch(r"[0-9]+", value.strip()):
        port = int(value.strip())
    else:
        raise PortValidationError(f"Invalid port number: {value!r}")

    if not 1 <= port <= 65535:
        raise PortValidationError(f"Port {port} is outside 1-65535")
    return port


def restart_kinds(record: PortRecord) -> list[ServiceKind]:
    """List the restart options offered for a record.

    Restarts are only offered when the working directory is known.

    Args:
        record: Port record

    Returns:
        Offered kinds in a fixed order
    """
    if not record.working_directory:
        return []

    flags = record.flags
    offered = [
        (flags.is_vite, ServiceKind.VITE),
        (flags.is_fastapi, ServiceKind.FASTAPI),
        (flags.is_nextjs, ServiceKind.NEXTJS),
        (flags.is_flask, ServiceKind.FLASK),
        (flags.is_sveltekit, ServiceKind.SVELTEKIT_PREVIEW),
    ]
    return [kind for matched, kind in offered if matched]


def asgi_app(command: str) -> str:
    """Extract the ``module:app`` argument from a uvicorn command line."""
    match = UVICORN_APP.search(command)
    if match and not match.group(1).startswith("-"):
        return match.group(1)
    return DEFAULT_ASGI_APP


def build_launch_command(
    record: PortRecord,
    kind: ServiceKind,
    port: int | None,
    reload: bool = True,
    debug: bool = True,
) -> str:
    """Build the shell command that relaunches a server.

    Args:
        record: Record of the server being replaced
        kind: Server type
        port: Validated target port (ignored for previews)
        reload: Add uvicorn's --reload
        debug: Add flask's --debug

    Returns:
        Shell command line
    """
    if kind is ServiceKind.VITE or kind is ServiceKind.NEXTJS:
        return f"npm run dev -- --port {port}"
    if kind is ServiceKind.FASTAPI:
        command = f"uvicorn {shlex.quote(asgi_app(record.command))} --port {port}"
        return command + (" --reload" if reload else "")
    if kind is ServiceKind.FLASK:
        return f"flask run --port {port}" + (" --debug" if debug else "")
    return "npm run build && npm run preview"


class RestartWorkflow:
    """Terminate a server and relaunch it, once.

    States move IDLE -> TERMINATING -> LAUNCHING -> CONFIRMED. A bad target
    port aborts in IDLE before anything is touched. A failed kill does not
    stop the workflow, since a missing process is already not listening.
    Nothing is rolled back if the launch cannot be issued.
    """

    def __init__(
        self,
        record: PortRecord,
        controller: ProcessController,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize workflow.

        Args:
            record: Record of the server to restart
            controller: Process controller used for kill and launch
            sleep: Grace delay function
        """
        self.record = record
        self.controller = controller
        self.sleep = sleep
        self.state = RestartState.IDLE

    def run(self, request: RestartRequest) -> RestartResult:
        """Run the workflow.

        Args:
            request: Restart parameters

        Returns:
            RestartResult in CONFIRMED state

        Raises:
            PortValidationError: If the target port is invalid
            ActionError: If the workflow already ran or the launch failed
        """
        if self.state is not RestartState.IDLE:
            raise ActionError("Restart already issued for this record")

        kind = request.kind
        port = validate_port(request.port) if kind.takes_port else None
        command = build_launch_command(
            self.record, kind, port, reload=request.reload, debug=request.debug
        )
        cwd = Path(self.record.working_directory or Path.cwd())

        self.state = RestartState.TERMINATING
        killed = self.controller.kill(self.record.pid)
        if not killed:
            debug(f"pid {self.record.pid} was not killed, continuing")

        self.state = RestartState.LAUNCHING
        debug(f"Launching '{command}' in {cwd}")
        self.controller.spawn_detached(command, cwd)

        self.sleep(kind.grace_seconds)
        self.state = RestartState.CONFIRMED

        return RestartResult(
            state=self.state, command=command, cwd=cwd, port=port, killed=killed
        )
