"""recursive_routing — mount a directory tree of route files onto a web app.

Each ``.py`` file under the routes directory becomes a route, named
after its path::

    routes/
      index.py          # /
      users/
        index.py        # /users/
        get.py          # /users/get
        my profile.py   # /users/my-profile

Basic usage::

    from recursive_routing import map_routes

    map_routes(app, root_dir="routes", base_path="/")

Route modules define functions named after HTTP methods (``get``,
``post``, ...), which are registered with ``app.route(path, methods=[...])``.
Pass ``mount_function`` to register routes some other way.
"""

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_OPTIONS",
    "ConfigurationError",
    "InvalidArgument",
    "MappingResult",
    "NoHandlersError",
    "RouteDescriptor",
    "RouteLoadError",
    "RouteTable",
    "RoutingError",
    "RoutingOptions",
    "TableRoute",
    "collect_handlers",
    "default_filter",
    "describe_route",
    "discover_routes",
    "extension_filter",
    "iter_route_files",
    "load_route_module",
    "map_routes",
    "mount_handlers",
    "resolve_options",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "DEFAULT_OPTIONS": "recursive_routing.options",
    "ConfigurationError": "recursive_routing.errors",
    "InvalidArgument": "recursive_routing.errors",
    "MappingResult": "recursive_routing.types",
    "NoHandlersError": "recursive_routing.errors",
    "RouteDescriptor": "recursive_routing.types",
    "RouteLoadError": "recursive_routing.errors",
    "RouteTable": "recursive_routing.table",
    "RoutingError": "recursive_routing.errors",
    "RoutingOptions": "recursive_routing.options",
    "TableRoute": "recursive_routing.table",
    "collect_handlers": "recursive_routing.mount",
    "default_filter": "recursive_routing.options",
    "describe_route": "recursive_routing.discovery",
    "discover_routes": "recursive_routing.discovery",
    "extension_filter": "recursive_routing.options",
    "iter_route_files": "recursive_routing.discovery",
    "load_route_module": "recursive_routing.loader",
    "map_routes": "recursive_routing.mapper",
    "mount_handlers": "recursive_routing.mount",
    "resolve_options": "recursive_routing.options",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import recursive_routing`` fast while providing a clean
    top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
