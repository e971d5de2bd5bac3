"""Exceptions raised by devports."""


class DevportsError(Exception):
    """Base class for errors surfaced to the user."""

    pass


class PortValidationError(DevportsError):
    """Raised when a target port is not an integer in 1-65535."""

    pass


class ActionError(DevportsError):
    """Raised when a kill, launch or container command cannot be carried out."""

    pass
