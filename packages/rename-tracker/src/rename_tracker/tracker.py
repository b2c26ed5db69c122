from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from rename_core import HandlerError, NormalizedRenameRecord, classify

from .config import TrackerConfig
from .dispatcher import ensure_rename_event, normalize_and_dispatch, report_handler_failure
from .handlers import DEFAULT_REGISTRY, HandlerRegistry, RenameHandler, resolve_handler
from .normalizer import normalize_rename


class RenameTracker:
    """Classify, normalize and dispatch rename events for one handler configuration.

    The handler identity is resolved once at construction unless
    ``config.resolve_per_event`` is set. An explicitly passed ``handler`` skips
    resolution entirely. Nothing is mutated after construction.
    """

    def __init__(
        self,
        config: Optional[TrackerConfig] = None,
        *,
        registry: Optional[HandlerRegistry] = None,
        handler: Optional[RenameHandler] = None,
        logger: Any = None,
    ) -> None:
        self.config = config or TrackerConfig()
        self._registry = DEFAULT_REGISTRY if registry is None else registry
        self._logger = logger
        self._handler: Optional[RenameHandler] = handler
        self._resolution_error: Optional[HandlerError] = None
        if handler is None and not self.config.resolve_per_event:
            self._handler, self._resolution_error = self._resolve()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **kwargs: Any) -> "RenameTracker":
        return cls(TrackerConfig.from_env(environ), **kwargs)

    def track(self, event: Any) -> None:
        ensure_rename_event(event)
        handler, error = self._current_handler()
        if error is not None:
            report_handler_failure(
                error,
                policy=self.config.failure_policy,
                logger=self._logger,
                cause=error.__cause__,
            )
            return None
        object_type = classify(event.kind, logger=self._logger)
        normalize_and_dispatch(
            event,
            object_type,
            handler,
            policy=self.config.failure_policy,
            logger=self._logger,
        )
        return None

    def normalize(self, event: Any) -> NormalizedRenameRecord:
        ensure_rename_event(event)
        return normalize_rename(event, classify(event.kind, logger=self._logger))

    # ------------------------------------------------------------------ helpers --
    def _current_handler(self) -> Tuple[Optional[RenameHandler], Optional[HandlerError]]:
        if self._handler is not None:
            return self._handler, None
        if self.config.resolve_per_event:
            return self._resolve()
        error = self._resolution_error
        if error is None:
            return None, None
        # A fresh instance per event keeps raised tracebacks independent.
        fresh = type(error)(error.message, context=error.context)
        fresh.__cause__ = error.__cause__
        return None, fresh

    def _resolve(self) -> Tuple[Optional[RenameHandler], Optional[HandlerError]]:
        try:
            return resolve_handler(self.config.handler, self._registry), None
        except HandlerError as exc:
            return None, exc


__all__ = ["RenameTracker"]
