"""Devports - listening port inspector for development machines."""

__version__ = "0.1.0"

from .actions import ActionResult, ProcessController
from .classifier import ServiceFlags, classify
from .containers import ContainerInfo, parse_container_ports
from .discovery import PortRecord, discover_ports
from .errors import ActionError, DevportsError, PortValidationError
from .listing import Listener, parse_listing
from .preferences import HiddenPorts, MemoryPreferenceStore, SQLitePreferenceStore
from .restart import (
    RestartRequest,
    RestartState,
    RestartWorkflow,
    ServiceKind,
    validate_port,
)
from .system import SystemScanner

__all__ = [
    "__version__",
    "ActionError",
    "ActionResult",
    "ContainerInfo",
    "DevportsError",
    "HiddenPorts",
    "Listener",
    "MemoryPreferenceStore",
    "PortRecord",
    "PortValidationError",
    "ProcessController",
    "RestartRequest",
    "RestartState",
    "RestartWorkflow",
    "SQLitePreferenceStore",
    "ServiceFlags",
    "ServiceKind",
    "SystemScanner",
    "classify",
    "discover_ports",
    "parse_container_ports",
    "parse_listing",
    "validate_port",
]
