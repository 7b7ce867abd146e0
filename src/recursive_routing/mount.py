"""Default mount strategy.

Route modules follow the page-handler convention: module-level
functions named after HTTP methods (``get``, ``post``, ...) handle that
method.  A module with none of those may export a single ``handler``,
which is served for ``GET``.

Handlers are registered through the ``app.route(path, methods=[...])``
decorator protocol::

    @app.route("/users", methods=["GET"])
    def get(): ...
"""

from collections.abc import Callable
from types import ModuleType
from typing import Any

from recursive_routing.errors import NoHandlersError
from recursive_routing.types import RouteDescriptor

# HTTP method names recognised as handler functions, in registration order
HTTP_METHODS = ("get", "post", "put", "delete", "patch", "head", "options")


def collect_handlers(module: ModuleType) -> dict[str, Callable[..., Any]]:
    """Map upper-case HTTP methods to the handler callables in *module*."""
    found: dict[str, Callable[..., Any]] = {}
    for method_name in HTTP_METHODS:
        func = getattr(module, method_name, None)
        if func is not None and callable(func):
            found[method_name.upper()] = func

    # Bare handler only counts when no method-named function exists
    handler = getattr(module, "handler", None)
    if handler is not None and callable(handler) and not found:
        found["GET"] = handler

    return found


def mount_handlers(app: Any, descriptor: RouteDescriptor, module: ModuleType) -> None:
    """Register every handler in *module* on every mount target.

    Raises:
        NoHandlersError: If the module exports no handler.
    """
    handlers = collect_handlers(module)
    if not handlers:
        names = ", ".join([*HTTP_METHODS, "handler"])
        msg = f"{descriptor.relative_path} defines none of: {names}"
        raise NoHandlersError(msg)

    for target in descriptor.mount_targets:
        for method, func in handlers.items():
            app.route(target, methods=[method])(func)
