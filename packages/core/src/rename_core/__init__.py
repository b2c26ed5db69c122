"""Public exports for the rename tracking core package."""

from .errors import (
    HandlerError,
    HandlerInvocationError,
    HandlerNotConfiguredError,
    HandlerResolutionError,
    NotARenameEventError,
    NotCalledAsEventTriggerError,
    RenameEventContractError,
    RenameTrackingError,
)
from .kinds import (
    OBJECT_KIND_TOKENS,
    QUALIFIED_NAME_KINDS,
    QUALIFIED_NAME_TOKENS,
    UNKNOWN_KIND,
    ObjectKind,
    classify,
    describe_kinds,
)
from .models import NormalizedRenameRecord, RawRenameEvent, name_list_to_string

__all__ = [
    "HandlerError",
    "HandlerInvocationError",
    "HandlerNotConfiguredError",
    "HandlerResolutionError",
    "NotARenameEventError",
    "NotCalledAsEventTriggerError",
    "RenameEventContractError",
    "RenameTrackingError",
    "OBJECT_KIND_TOKENS",
    "QUALIFIED_NAME_KINDS",
    "QUALIFIED_NAME_TOKENS",
    "UNKNOWN_KIND",
    "ObjectKind",
    "classify",
    "describe_kinds",
    "NormalizedRenameRecord",
    "RawRenameEvent",
    "name_list_to_string",
]
