from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Optional

ENV_HANDLER = "TRACK_RENAMES_FUNCTION"
ENV_FAILURE_POLICY = "TRACK_RENAMES_FAILURE_POLICY"
ENV_RESOLVE_PER_EVENT = "TRACK_RENAMES_RESOLVE_PER_EVENT"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


class FailurePolicy(Enum):
    """What to do when the downstream handler is missing, unresolvable or fails."""

    WARN = "warn"
    RAISE = "raise"

    @classmethod
    def parse(cls, value: Any) -> "FailurePolicy":
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.WARN
        text = str(value).strip().lower()
        if text in {"", "warn", "warning"}:
            return cls.WARN
        if text in {"raise", "strict", "error"}:
            return cls.RAISE
        raise ValueError(f"Unknown failure policy '{value}'")


@dataclass(frozen=True)
class TrackerConfig:
    """Explicit handler configuration passed to the dispatcher at call time.

    ``handler`` is the handler identity: a name registered in a
    ``HandlerRegistry`` or an importable ``package.module:function`` path.
    """

    handler: Optional[str] = None
    failure_policy: FailurePolicy = FailurePolicy.WARN
    resolve_per_event: bool = False

    @property
    def strict(self) -> bool:
        return self.failure_policy is FailurePolicy.RAISE

    @classmethod
    def from_config(cls, cfg: Optional[Mapping[str, Any]]) -> "TrackerConfig":
        cfg = cfg or {}
        handler = cfg.get("handler", cfg.get("function"))
        return cls(
            handler=_clean_identity(handler),
            failure_policy=FailurePolicy.parse(cfg.get("failure_policy", cfg.get("failurePolicy"))),
            resolve_per_event=_parse_bool(cfg.get("resolve_per_event", cfg.get("resolvePerEvent", False))),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TrackerConfig":
        env = os.environ if environ is None else environ
        return cls(
            handler=_clean_identity(env.get(ENV_HANDLER)),
            failure_policy=FailurePolicy.parse(env.get(ENV_FAILURE_POLICY)),
            resolve_per_event=_parse_bool(env.get(ENV_RESOLVE_PER_EVENT, "")),
        )

    def merge(
        self,
        *,
        handler: Optional[str] = None,
        failure_policy: Optional[Any] = None,
        resolve_per_event: Optional[bool] = None,
    ) -> "TrackerConfig":
        """Return a copy with the given non-``None`` overrides applied."""
        changes = {}
        if handler is not None:
            changes["handler"] = _clean_identity(handler)
        if failure_policy is not None:
            changes["failure_policy"] = FailurePolicy.parse(failure_policy)
        if resolve_per_event is not None:
            changes["resolve_per_event"] = bool(resolve_per_event)
        return replace(self, **changes) if changes else self


def _clean_identity(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    raise ValueError(f"Expected a boolean flag, got '{value}'")


__all__ = [
    "ENV_HANDLER",
    "ENV_FAILURE_POLICY",
    "ENV_RESOLVE_PER_EVENT",
    "FailurePolicy",
    "TrackerConfig",
]
