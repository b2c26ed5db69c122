from __future__ import annotations

import os
import sys
import types

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(PROJECT_ROOT, "packages", "core", "src"))
sys.path.insert(0, os.path.join(PROJECT_ROOT, "packages", "rename-tracker", "src"))

from rename_core import HandlerNotConfiguredError, HandlerResolutionError  # noqa: E402
from rename_tracker.handlers import (  # noqa: E402
    DEFAULT_REGISTRY,
    HandlerRegistry,
    RenameHandler,
    resolve_handler,
)


def log_rename(object_type, schema_name, object_name, sub_name, new_name):
    return None


def _install_module(monkeypatch, name: str, **attrs) -> types.ModuleType:
    module = types.ModuleType(name)
    for key, value in attrs.items():
        setattr(module, key, value)
    monkeypatch.setitem(sys.modules, name, module)
    return module


def test_registry_lookup_wins():
    registry = HandlerRegistry()
    registry.register("audit", log_rename)
    assert resolve_handler("audit", registry) is log_rename
    assert "audit" in registry
    assert registry.names() == ["audit"]


def test_registry_decorator_registration():
    registry = HandlerRegistry()

    @registry.register("decorated")
    def handler(object_type, schema_name, object_name, sub_name, new_name):
        return None

    assert registry.get("decorated") is handler


def test_default_registry_has_graphql_handler():
    import rename_tracker  # noqa: F401

    assert "graphql" in DEFAULT_REGISTRY


def test_resolve_colon_path(monkeypatch):
    class Hooks:
        @staticmethod
        def on_rename(object_type, schema_name, object_name, sub_name, new_name):
            return None

    _install_module(monkeypatch, "rename_hooks_fixture", Hooks=Hooks)
    assert resolve_handler("rename_hooks_fixture:Hooks.on_rename", HandlerRegistry()) is Hooks.on_rename


def test_resolve_dotted_path(monkeypatch):
    _install_module(monkeypatch, "rename_hooks_dotted", handle=log_rename)
    handler = resolve_handler("rename_hooks_dotted.handle", HandlerRegistry())
    assert handler is log_rename
    assert isinstance(handler, RenameHandler)


def test_variadic_handler_is_accepted(monkeypatch):
    def anything(*args, **kwargs):
        return None

    _install_module(monkeypatch, "rename_hooks_variadic", anything=anything)
    assert resolve_handler("rename_hooks_variadic:anything", HandlerRegistry()) is anything


@pytest.mark.parametrize("identity", [None, "", "   "])
def test_blank_identity_is_not_configured(identity):
    with pytest.raises(HandlerNotConfiguredError):
        resolve_handler(identity, HandlerRegistry())


def test_missing_module_is_unresolvable():
    with pytest.raises(HandlerResolutionError) as excinfo:
        resolve_handler("no_such_rename_module:handler", HandlerRegistry())
    assert str(excinfo.value) == (
        "function no_such_rename_module:handler(text, text, text, text, text) does not exist"
    )
    assert excinfo.value.context == {"handler": "no_such_rename_module:handler"}


def test_missing_attribute_is_unresolvable(monkeypatch):
    _install_module(monkeypatch, "rename_hooks_empty")
    with pytest.raises(HandlerResolutionError):
        resolve_handler("rename_hooks_empty:handler", HandlerRegistry())


def test_bare_name_without_module_is_unresolvable():
    with pytest.raises(HandlerResolutionError):
        resolve_handler("log_rename", HandlerRegistry())


def test_wrong_arity_is_unresolvable(monkeypatch):
    def three(object_type, object_name, new_name):
        return None

    _install_module(monkeypatch, "rename_hooks_arity", three=three)
    with pytest.raises(HandlerResolutionError):
        resolve_handler("rename_hooks_arity:three", HandlerRegistry())


def test_non_callable_is_unresolvable(monkeypatch):
    _install_module(monkeypatch, "rename_hooks_value", handler="not callable")
    with pytest.raises(HandlerResolutionError):
        resolve_handler("rename_hooks_value:handler", HandlerRegistry())
