"""Downstream handler protocol, registry and identity resolution."""

from __future__ import annotations

import importlib
import inspect
from typing import Any, Callable, Dict, List, Optional, Protocol, runtime_checkable

from rename_core import HandlerNotConfiguredError, HandlerResolutionError

HANDLER_ARITY = 5
HANDLER_SIGNATURE = "(text, text, text, text, text)"


@runtime_checkable
class RenameHandler(Protocol):
    def __call__(
        self,
        object_type: str,
        schema_name: Optional[str],
        object_name: Optional[str],
        sub_name: Optional[str],
        new_name: str,
    ) -> Any:
        ...


class HandlerRegistry:
    """Named rename handlers available to configuration by identity."""

    def __init__(self) -> None:
        self._handlers: Dict[str, RenameHandler] = {}

    def register(self, name: str, handler: Optional[RenameHandler] = None):
        """Register ``handler`` under ``name``; without a handler, act as a decorator."""
        if handler is None:

            def decorator(func: RenameHandler) -> RenameHandler:
                self._handlers[name] = func
                return func

            return decorator
        self._handlers[name] = handler
        return handler

    def get(self, name: str) -> Optional[RenameHandler]:
        return self._handlers.get(name)

    def names(self) -> List[str]:
        return sorted(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers


DEFAULT_REGISTRY = HandlerRegistry()


def resolve_handler(identity: Optional[str], registry: Optional[HandlerRegistry] = None) -> RenameHandler:
    """Bind a handler identity to a callable accepting the five rename fields.

    Registered names win over import paths. Raises ``HandlerNotConfiguredError``
    for a blank identity and ``HandlerResolutionError`` when nothing suitable exists.
    """
    name = (identity or "").strip()
    if not name:
        raise HandlerNotConfiguredError("track_renames handler is not set")
    lookup = DEFAULT_REGISTRY if registry is None else registry
    candidate = lookup.get(name)
    if candidate is None:
        candidate = _import_target(name)
    _check_signature(name, candidate)
    return candidate


def handler_label(handler: Any) -> str:
    module = getattr(handler, "__module__", None)
    qualname = getattr(handler, "__qualname__", None) or type(handler).__qualname__
    return f"{module}.{qualname}" if module else qualname


def _missing(identity: str) -> str:
    return f"function {identity}{HANDLER_SIGNATURE} does not exist"


def _import_target(identity: str) -> Callable[..., Any]:
    if ":" in identity:
        module_name, _, attr_path = identity.partition(":")
    else:
        module_name, _, attr_path = identity.rpartition(".")
    if not module_name or not attr_path:
        raise HandlerResolutionError(_missing(identity), context={"handler": identity})
    try:
        target: Any = importlib.import_module(module_name)
    except Exception as exc:  # broken handler modules count as unresolvable
        raise HandlerResolutionError(_missing(identity), context={"handler": identity}) from exc
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise HandlerResolutionError(_missing(identity), context={"handler": identity}) from exc
    return target


def _check_signature(identity: str, candidate: Any) -> None:
    if not callable(candidate):
        raise HandlerResolutionError(
            f"{identity} is not callable",
            context={"handler": identity},
        )
    try:
        signature = inspect.signature(candidate)
    except (TypeError, ValueError):
        # Some builtins expose no signature; trust them.
        return
    try:
        signature.bind(*([None] * HANDLER_ARITY))
    except TypeError as exc:
        raise HandlerResolutionError(_missing(identity), context={"handler": identity}) from exc


__all__ = [
    "HANDLER_ARITY",
    "HANDLER_SIGNATURE",
    "RenameHandler",
    "HandlerRegistry",
    "DEFAULT_REGISTRY",
    "resolve_handler",
    "handler_label",
]
