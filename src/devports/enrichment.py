"""Best-effort process metadata for discovered listeners."""

from dataclasses import dataclass

from .console import debug
from .listing import Listener
from .system import SystemScanner


@dataclass(frozen=True)
class Enrichment:
    """Process details that may legitimately be unavailable."""

    command: str  # Full command line, or the short name as fallback
    working_directory: str | None


def enrich(listener: Listener, scanner: SystemScanner) -> Enrichment:
    """Look up a listener's full command line and working directory.

    The two lookups are independent: either may fail without affecting
    the other, and neither is retried.

    Args:
        listener: Listener to enrich
        scanner: System scanner

    Returns:
        Enrichment with fallbacks applied
    """
    command = listener.command
    full_command = (scanner.command_line(listener.pid) or "").strip()
    if full_command:
        command = full_command
    else:
        debug(f"No command line for pid {listener.pid}")

    cwd = _parse_cwd(scanner.working_directory(listener.pid) or "")
    if cwd is None:
        debug(f"No working directory for pid {listener.pid}")

    return Enrichment(command=command, working_directory=cwd)


def _parse_cwd(output: str) -> str | None:
    """Extract the cwd path from ``lsof -d cwd -Fn`` output.

    Output looks like::

        p1234
        fcwd
        n/Users/me/project

    Args:
        output: Raw lsof output

    Returns:
        Path of the cwd descriptor, or None
    """
    in_cwd = False
    for line in output.splitlines():
        if line.startswith("f"):
            in_cwd = line[1:] == "cwd"
        elif line.startswith("n") and in_cwd:
            path = line[1:].strip()
            return path or None
    return None
