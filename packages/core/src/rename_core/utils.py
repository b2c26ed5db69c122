"""Lightweight helpers shared across rename tracking modules."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

_RESERVED_RECORD_KEYS = frozenset(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {"message", "asctime"}

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def log_event(logger: Any, level: str, event: str, **fields: Any) -> None:
    """Log a structured event through a stdlib logger or an injected structured logger."""
    numeric_level = _LEVELS.get(level.upper(), logging.INFO)
    if isinstance(logger, logging.LoggerAdapter):
        message, kwargs = logger.process(event, {})
        extra = {**(kwargs.get("extra") or {}), **fields}
        kwargs["extra"] = _record_extra(extra)
        logger.logger.log(numeric_level, message, **kwargs)
        return
    if isinstance(logger, logging.Logger):
        logger.log(numeric_level, event, extra=_record_extra(fields))
        return
    method = getattr(logger, level.lower(), None)
    if callable(method):
        method(event, **fields)
        return
    log_method = getattr(logger, "log", None)
    if callable(log_method):
        log_method(level.upper(), event, **fields)


def _record_extra(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Prefix keys that would overwrite LogRecord attributes with ``field_``."""
    return {(f"field_{key}" if key in _RESERVED_RECORD_KEYS else key): value for key, value in fields.items()}


def first_value(source: Mapping[str, Any], *keys: str) -> Optional[Any]:
    for key in keys:
        if key in source and source[key] is not None:
            return source[key]
    return None


def describe_value(value: Any) -> str:
    name = getattr(value, "name", None)
    if name is not None and not isinstance(value, str):
        return f"{type(value).__name__}.{name}"
    return repr(value)


__all__ = ["log_event", "first_value", "describe_value"]
