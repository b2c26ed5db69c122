"""Event-trigger entry point: forwards rename commands from DDL events to a tracker."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from rename_core import NotCalledAsEventTriggerError, RawRenameEvent
from rename_core.utils import log_event

from .tracker import RenameTracker

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventTriggerContext:
    event: str
    tag: str
    command: Any
    logger: Optional[Any] = None


def track_renames(context: Any, tracker: RenameTracker) -> None:
    if not isinstance(context, EventTriggerContext):
        raise NotCalledAsEventTriggerError(
            "not fired by event trigger manager",
            context={"context_type": type(context).__name__},
        )
    # Event triggers cannot be filtered down to rename statements by tag.
    if not isinstance(context.command, RawRenameEvent):
        log_event(
            context.logger or LOGGER,
            "DEBUG",
            "rename_trigger_skipped",
            tag=context.tag,
            command_type=type(context.command).__name__,
        )
        return None
    tracker.track(context.command)
    return None


__all__ = ["EventTriggerContext", "track_renames"]
