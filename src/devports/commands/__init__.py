"""Command modules for devports CLI."""

from .container import container
from .hide import hidden, hide, unhide
from .info import info
from .kill import kill
from .list import list_cmd
from .open import open_cmd
from .restart import restart

__all__ = [
    "container",
    "hidden",
    "hide",
    "info",
    "kill",
    "list_cmd",
    "open_cmd",
    "restart",
    "unhide",
]
