"""Tests for recursive_routing.mount — the default mount strategy."""

from types import ModuleType

import pytest

from recursive_routing.errors import NoHandlersError
from recursive_routing.mount import collect_handlers, mount_handlers
from recursive_routing.table import RouteTable
from recursive_routing.types import RouteDescriptor


def _module(**attrs: object) -> ModuleType:
    module = ModuleType("route_under_test")
    for name, value in attrs.items():
        setattr(module, name, value)
    return module


def _descriptor(*targets: str) -> RouteDescriptor:
    return RouteDescriptor(
        relative_path="users/index.py",
        mounted_path="/users/index.py",
        base_name="index",
        absolute_path="/srv/routes/users/index.py",
        mount_targets=targets,
    )


def _get() -> str:
    return "get"


def _post() -> str:
    return "post"


def _handler() -> str:
    return "handler"


class TestCollectHandlers:
    def test_method_named_functions(self) -> None:
        handlers = collect_handlers(_module(get=_get, post=_post))

        assert handlers == {"GET": _get, "POST": _post}

    def test_bare_handler_defaults_to_get(self) -> None:
        assert collect_handlers(_module(handler=_handler)) == {"GET": _handler}

    def test_bare_handler_ignored_when_methods_exist(self) -> None:
        assert collect_handlers(_module(post=_post, handler=_handler)) == {"POST": _post}

    def test_non_callables_ignored(self) -> None:
        assert collect_handlers(_module(get="not a function", delete=None)) == {}

    def test_all_methods(self) -> None:
        names = ("get", "post", "put", "delete", "patch", "head", "options")
        handlers = collect_handlers(_module(**{n: _get for n in names}))

        assert list(handlers) == [n.upper() for n in names]


class TestMountHandlers:
    def test_registers_every_target(self) -> None:
        table = RouteTable()

        mount_handlers(table, _descriptor("/users/index", "/users/"), _module(get=_get))

        assert [(r.path, r.methods) for r in table] == [
            ("/users/index", frozenset({"GET"})),
            ("/users/", frozenset({"GET"})),
        ]
        assert table.handler_for("GET", "/users/") is _get

    def test_registers_each_method(self) -> None:
        table = RouteTable()

        mount_handlers(table, _descriptor("/users/"), _module(get=_get, post=_post))

        assert table.handler_for("GET", "/users/") is _get
        assert table.handler_for("POST", "/users/") is _post

    def test_no_handlers(self) -> None:
        with pytest.raises(NoHandlersError, match="users/index.py"):
            mount_handlers(RouteTable(), _descriptor("/users/"), _module())
