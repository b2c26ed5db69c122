"""Exception hierarchy shared by the rename tracking packages."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class RenameTrackingError(Exception):
    def __init__(self, message: str, *, context: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = dict(context or {})


class RenameEventContractError(RenameTrackingError):
    """The event source handed over a rename event that breaks its contract."""


class NotARenameEventError(RenameTrackingError):
    """The dispatcher was invoked with something other than a rename event."""


class NotCalledAsEventTriggerError(RenameTrackingError):
    """The trigger entry point ran outside an event-trigger context."""


class HandlerError(RenameTrackingError):
    """Base class for downstream handler failures (recoverable by default)."""


class HandlerNotConfiguredError(HandlerError):
    pass


class HandlerResolutionError(HandlerError):
    pass


class HandlerInvocationError(HandlerError):
    pass


__all__ = [
    "RenameTrackingError",
    "RenameEventContractError",
    "NotARenameEventError",
    "NotCalledAsEventTriggerError",
    "HandlerError",
    "HandlerNotConfiguredError",
    "HandlerResolutionError",
    "HandlerInvocationError",
]
