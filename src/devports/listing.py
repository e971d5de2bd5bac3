"""Parse lsof field output into one listener per port."""

import re
from dataclasses import dataclass, replace

from .console import debug
from .system import SystemScanner

PORT_SUFFIX = re.compile(r":(\d+)$")
PID = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Listener:
    """A process listening on a TCP port, as reported by lsof."""

    pid: int
    command: str  # Short command name (lsof truncates it)
    user: str
    port: int


@dataclass(frozen=True)
class _ParseState:
    """Fields carried from a process header to its network-name lines."""

    pid: int | None = None  # None until a valid process header is seen
    command: str = ""
    user: str = ""


def parse_listing(text: str) -> list[Listener]:
    """Parse ``lsof -F pcLn`` output.

    Each line starts with a one-character field tag:
    - p: process id
    - c: command name
    - L: login user
    - n: network name, e.g. ``*:5173`` or ``[::1]:8000``

    A process's fields precede its network-name lines. Network names with no
    valid process id before them are skipped. The first listener seen for a
    port wins; later lines for the same port are dropped even
    when they belong to a different process (dual-stack bindings, forked
    workers).

    Args:
        text: Raw lsof output

    Returns:
        Listeners in the order they first appear
    """
    state = _ParseState()
    seen: set[int] = set()
    listeners: list[Listener] = []

    for line in text.splitlines():
        if not line:
            continue
        tag, value = line[0], line[1:]

        if tag == "p":
            pid = int(value) if PID.fullmatch(value) else 0
            state = replace(state, pid=pid if pid > 0 else None)
        elif tag == "c":
            state = replace(state, command=value)
        elif tag == "L":
            state = replace(state, user=value)
        elif tag == "n":
            if state.pid is None:
                continue
            match = PORT_SUFFIX.search(value)
            if not match:
                continue
            port = int(match.group(1))
            if not 1 <= port <= 65535 or port in seen:
                continue
            seen.add(port)
            listeners.append(
                Listener(pid=state.pid, command=state.command, user=state.user, port=port)
            )

    return listeners


def collect_listeners(scanner: SystemScanner) -> list[Listener]:
    """Enumerate TCP listeners, sorted by port.

    A missing or failing lsof degrades to an empty result.

    Args:
        scanner: System scanner

    Returns:
        Listeners sorted ascending by port
    """
    output = scanner.listing_output()
    if not output:
        debug("No listener output")
        return []

    listeners = parse_listing(output)
    debug(f"Parsed {len(listeners)} listening ports")
    return sorted(listeners, key=lambda listener: listener.port)
