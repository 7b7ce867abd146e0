"""Mount a directory tree of route files onto an app.

Usage::

    from recursive_routing import map_routes

    result = map_routes(app, root_dir="routes", base_path="/api")
    for error in result.errors:
        ...

One synchronous pass per call: enumerate -> derive -> load -> mount.
A file that fails to load or mount is logged and skipped; the rest of
the tree is still mounted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from recursive_routing.discovery import describe_route, iter_route_files
from recursive_routing.errors import InvalidArgument, RouteLoadError
from recursive_routing.loader import load_route_module
from recursive_routing.options import RoutingOptions, resolve_options
from recursive_routing.types import MappingResult, RouteDescriptor

logger = logging.getLogger("recursive_routing")

# Receives one INFO record per descriptor when ``debug`` is set
debug_logger = logging.getLogger("recursive_routing.debug")


def enable_debug_output() -> None:
    """Make ``debug_logger`` INFO records visible.

    Lowers the logger to INFO when it would drop them, and attaches a
    stderr handler only when no handler exists anywhere up the logger
    hierarchy.  An application that configured logging keeps its own
    handlers and formatting.
    """
    if not debug_logger.isEnabledFor(logging.INFO):
        debug_logger.setLevel(logging.INFO)
    if not debug_logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        debug_logger.addHandler(handler)


def map_routes(
    app: Any,
    options: RoutingOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> MappingResult:
    """Load every route file under ``root_dir`` and mount it on *app*.

    Args:
        app: The application to mount on.  Passed untouched to
            ``options.mount_function``.
        options: A :class:`RoutingOptions`, a mapping of option names,
            or ``None`` for the defaults.
        **overrides: Individual options, applied over *options*.

    Returns:
        The descriptors that mounted and the per-file errors, in
        traversal order.

    Raises:
        InvalidArgument: If *app* is ``None``.
        ConfigurationError: If the options are invalid.
        FileNotFoundError: If ``root_dir`` does not exist.
    """
    if app is None:
        msg = "The app is None; pass the application to mount routes on."
        raise InvalidArgument(msg)

    resolved = resolve_options(options, **overrides)
    if resolved.debug:
        enable_debug_output()

    mounted: list[RouteDescriptor] = []
    errors: list[RouteLoadError] = []
    for file in iter_route_files(resolved.root_dir, resolved.filter):
        descriptor = describe_route(file, resolved)
        if resolved.debug:
            debug_logger.info("Route %s", descriptor)

        try:
            module = load_route_module(descriptor)
            resolved.mount_function(app, descriptor, module)
        # A route module calling sys.exit() fails only its own file
        except (Exception, SystemExit) as exc:
            error = RouteLoadError.from_exception(descriptor, exc)
            logger.error("%s", error, exc_info=exc)
            errors.append(error)
            continue

        mounted.append(descriptor)

    return MappingResult(mounted=tuple(mounted), errors=tuple(errors))
