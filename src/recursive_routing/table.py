"""In-memory route table.

A minimal app object speaking the ``app.route()`` decorator protocol.
Records registrations instead of serving them, which makes it the
target for dry runs and for ``recursive-routing check``.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

Handler = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class TableRoute:
    """One recorded registration."""

    path: str
    handler: Handler
    methods: frozenset[str]


class RouteTable:
    """Records routes in registration order.

    Usage::

        table = RouteTable()
        map_routes(table, root_dir="routes")
        for route in table:
            print(route.path, sorted(route.methods))
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: list[TableRoute] = []

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a handler via decorator. Methods default to ``["GET"]``."""
        method_set = frozenset(m.upper() for m in (methods or ["GET"]))

        def decorator(func: Handler) -> Handler:
            self._routes.append(TableRoute(path, func, method_set))
            return func

        return decorator

    @property
    def routes(self) -> list[TableRoute]:
        return list(self._routes)

    @property
    def paths(self) -> list[str]:
        """Distinct registered paths, first registration first."""
        return list(dict.fromkeys(route.path for route in self._routes))

    def handler_for(self, method: str, path: str) -> Handler | None:
        """Most recent handler registered for *method* at exactly *path*."""
        method = method.upper()
        for route in reversed(self._routes):
            if route.path == path and method in route.methods:
                return route.handler
        return None

    def __iter__(self) -> Iterator[TableRoute]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)
