from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type

from rename_core import (
    HandlerError,
    HandlerInvocationError,
    HandlerNotConfiguredError,
    HandlerResolutionError,
    NotARenameEventError,
    RawRenameEvent,
)
from rename_core.utils import log_event

from .config import FailurePolicy
from .handlers import RenameHandler, handler_label
from .normalizer import normalize_rename

LOGGER = logging.getLogger(__name__)

_FAILURE_EVENTS: Dict[Type[HandlerError], str] = {
    HandlerNotConfiguredError: "rename_handler_not_configured",
    HandlerResolutionError: "rename_handler_unresolved",
    HandlerInvocationError: "rename_handler_failed",
}


def ensure_rename_event(event: Any) -> RawRenameEvent:
    if not isinstance(event, RawRenameEvent):
        raise NotARenameEventError(
            f"expected a rename event, got {type(event).__name__}",
            context={"event_type": type(event).__name__},
        )
    return event


def report_handler_failure(
    error: HandlerError,
    *,
    policy: FailurePolicy = FailurePolicy.WARN,
    logger: Any = None,
    cause: Optional[BaseException] = None,
) -> None:
    """Log a handler failure as a warning and re-raise it only under ``FailurePolicy.RAISE``."""
    event = _FAILURE_EVENTS.get(type(error), "rename_handler_failed")
    log_event(logger or LOGGER, "WARN", event, error=error.message, policy=policy.value, **error.context)
    if policy is not FailurePolicy.RAISE:
        return
    if cause is not None:
        raise error from cause
    raise error


def normalize_and_dispatch(
    event: RawRenameEvent,
    object_type: str,
    handler: Optional[RenameHandler],
    *,
    policy: Any = FailurePolicy.WARN,
    logger: Any = None,
) -> None:
    """Normalize one rename event and hand it to ``handler`` exactly once.

    The handler receives ``(object_type, schema_name, object_name, sub_name, new_name)``
    positionally with ``None`` for fields that do not apply. Its return value is
    ignored; a missing or failing handler is reported according to ``policy``.
    """
    ensure_rename_event(event)
    policy = FailurePolicy.parse(policy)
    if handler is None:
        report_handler_failure(
            HandlerNotConfiguredError("track_renames handler is not set", context={"object_type": object_type}),
            policy=policy,
            logger=logger,
        )
        return None

    record = normalize_rename(event, object_type)
    try:
        handler(*record.as_arguments())
    except Exception as exc:
        report_handler_failure(
            HandlerInvocationError(
                f"rename handler raised {type(exc).__name__}: {exc}",
                context={"handler": handler_label(handler), "object_type": record.object_type},
            ),
            policy=policy,
            logger=logger,
            cause=exc,
        )
        return None
    log_event(logger or LOGGER, "DEBUG", "rename_dispatched", object_type=record.object_type)
    return None


__all__ = ["ensure_rename_event", "report_handler_failure", "normalize_and_dispatch"]
