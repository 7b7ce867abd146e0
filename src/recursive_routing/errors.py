"""recursive_routing exception hierarchy.

Shared across discovery, loading, mounting and the CLI so every module
raises and catches the same types.
"""

from __future__ import annotations

import traceback as _traceback
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recursive_routing.types import RouteDescriptor


class RoutingError(Exception):
    """Base for all recursive_routing errors."""


class ConfigurationError(RoutingError):
    """Raised when routing options are invalid.

    Raised while building :class:`~recursive_routing.options.RoutingOptions`,
    before any directory is read.
    """


class InvalidArgument(RoutingError, ValueError):  # noqa: N818
    """A required argument is missing, e.g. ``map_routes(None)``."""


class NoHandlersError(RoutingError):
    """A route module exports no callable the default mount can register."""


class RouteLoadError(RoutingError):
    """A single route file failed to load or mount.

    Never raised by :func:`~recursive_routing.mapper.map_routes`: it is
    logged, collected on the result, and the walk moves on to the next
    file.  The original exception is kept as ``__cause__``.

    Attributes:
        relative_path: The failing file, relative to the routes root.
        descriptor: The descriptor that was being mounted.
        traceback: Formatted traceback of the original failure.
    """

    def __init__(
        self,
        relative_path: str,
        descriptor: RouteDescriptor,
        traceback: str = "",
    ) -> None:
        super().__init__(f"Error while loading route {relative_path}")
        self.relative_path = relative_path
        self.descriptor = descriptor
        self.traceback = traceback

    @classmethod
    def from_exception(cls, descriptor: RouteDescriptor, exc: BaseException) -> RouteLoadError:
        """Wrap *exc* raised while loading or mounting *descriptor*."""
        error = cls(
            descriptor.relative_path,
            descriptor,
            "".join(_traceback.format_exception(exc)),
        )
        error.__cause__ = exc
        return error
