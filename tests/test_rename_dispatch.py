from __future__ import annotations

import logging
import os
import sys
from types import SimpleNamespace

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(PROJECT_ROOT, "packages", "core", "src"))
sys.path.insert(0, os.path.join(PROJECT_ROOT, "packages", "rename-tracker", "src"))

from rename_core import (  # noqa: E402
    HandlerInvocationError,
    HandlerNotConfiguredError,
    NotARenameEventError,
    ObjectKind,
    RawRenameEvent,
)
from rename_tracker.config import FailurePolicy  # noqa: E402
from rename_tracker.dispatcher import normalize_and_dispatch  # noqa: E402


class RecordingHandler:
    def __init__(self, result=None) -> None:
        self.calls = []
        self.result = result

    def __call__(self, object_type, schema_name, object_name, sub_name, new_name):
        self.calls.append((object_type, schema_name, object_name, sub_name, new_name))
        return self.result


class StubLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, str | None, dict]] = []

    def warn(self, message: str | None = None, **fields):
        self.events.append(("warn", message, fields))

    def debug(self, message: str | None = None, **fields):
        self.events.append(("debug", message, fields))


def _column_event() -> RawRenameEvent:
    return RawRenameEvent(
        kind=ObjectKind.COLUMN,
        schema_name="public",
        relation_name="orders",
        sub_name="id",
        new_name="order_id",
    )


def test_handler_called_once_with_positional_fields():
    handler = RecordingHandler(result="ignored")
    assert normalize_and_dispatch(_column_event(), "column", handler) is None
    assert handler.calls == [("column", "public", "orders", "id", "order_id")]


def test_absent_fields_are_passed_as_none():
    handler = RecordingHandler()
    normalize_and_dispatch(RawRenameEvent(kind=ObjectKind.DATABASE, new_name="db2"), "database", handler)
    assert handler.calls == [("database", None, None, None, "db2")]


def test_missing_handler_warns_and_skips(caplog):
    with caplog.at_level(logging.WARNING):
        normalize_and_dispatch(_column_event(), "column", None)
    assert [record.getMessage() for record in caplog.records] == ["rename_handler_not_configured"]


def test_missing_handler_raises_under_strict_policy():
    logger = StubLogger()
    with pytest.raises(HandlerNotConfiguredError):
        normalize_and_dispatch(_column_event(), "column", None, policy=FailurePolicy.RAISE, logger=logger)
    assert logger.events[0][1] == "rename_handler_not_configured"


def test_handler_failure_is_reported_not_raised():
    def broken(*_args):
        raise RuntimeError("boom")

    logger = StubLogger()
    normalize_and_dispatch(_column_event(), "column", broken, logger=logger)
    level, message, fields = logger.events[0]
    assert (level, message) == ("warn", "rename_handler_failed")
    assert "boom" in fields["error"]
    assert fields["object_type"] == "column"
    assert fields["policy"] == "warn"


def test_handler_failure_raises_under_strict_policy():
    def broken(*_args):
        raise RuntimeError("boom")

    with pytest.raises(HandlerInvocationError) as excinfo:
        normalize_and_dispatch(_column_event(), "column", broken, policy="raise", logger=StubLogger())
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_non_rename_event_is_fatal():
    handler = RecordingHandler()
    with pytest.raises(NotARenameEventError):
        normalize_and_dispatch(SimpleNamespace(kind="table", new_name="t2"), "table", handler)
    with pytest.raises(NotARenameEventError):
        normalize_and_dispatch(_column_event().__dict__, "column", handler, policy=FailurePolicy.WARN)
    assert handler.calls == []


def test_successful_dispatch_logs_debug_event():
    logger = StubLogger()
    normalize_and_dispatch(_column_event(), "column", RecordingHandler(), logger=logger)
    assert logger.events == [("debug", "rename_dispatched", {"object_type": "column"})]
