"""Public exports for the rename tracker."""

from .config import FailurePolicy, TrackerConfig
from .dispatcher import normalize_and_dispatch, report_handler_failure
from .emitters import GraphQLRenameEmitter
from .handlers import DEFAULT_REGISTRY, HandlerRegistry, RenameHandler, resolve_handler
from .normalizer import normalize_rename
from .tracker import RenameTracker
from .trigger import EventTriggerContext, track_renames

__all__ = [
    "FailurePolicy",
    "TrackerConfig",
    "normalize_and_dispatch",
    "report_handler_failure",
    "GraphQLRenameEmitter",
    "DEFAULT_REGISTRY",
    "HandlerRegistry",
    "RenameHandler",
    "resolve_handler",
    "normalize_rename",
    "RenameTracker",
    "EventTriggerContext",
    "track_renames",
]
