"""Common utilities for CLI commands."""

import typer

from ..actions import ProcessController
from ..console import console, debug, error, success, warning
from ..discovery import PortRecord, discover_ports, find_record
from ..preferences import HiddenPorts, SQLitePreferenceStore

# Re-export console utilities
__all__ = [
    "console",
    "debug",
    "success",
    "warning",
    "error",
    "get_hidden_ports",
    "get_controller",
    "require_record",
]


def get_hidden_ports() -> HiddenPorts:
    """Get hidden port list backed by the preference database."""
    return HiddenPorts(SQLitePreferenceStore())


def get_controller() -> ProcessController:
    """Get process controller instance."""
    return ProcessController()


def require_record(port: int) -> PortRecord:
    """Discover ports and return the record for one of them.

    Exits with code 1 if nothing listens on the port.
    """
    record = find_record(discover_ports(), port)
    if record is None:
        error(f"Nothing is listening on port {port}")
        raise typer.Exit(1)
    return record
