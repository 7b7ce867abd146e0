"""Data models for directory-tree route mapping.

Immutable frozen dataclasses built fresh for every file during a walk
and discarded once the file has been mounted.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import ModuleType
from typing import Any

from recursive_routing.errors import RouteLoadError

# Predicate over absolute file paths
FileFilter = Callable[[str], bool]

# Strategy called once per route file: (app, descriptor, loaded module)
MountFunction = Callable[[Any, "RouteDescriptor", ModuleType], None]


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """Everything derived from one route file.

    Attributes:
        relative_path: File path relative to the routes root.
        mounted_path: ``relative_path`` joined onto the base path, with
            forward slashes and spaces replaced.
        base_name: File name without its last extension.
        absolute_path: Resolved path used to load the module.
        mount_targets: One or two URL paths to register, own path first.
    """

    relative_path: str
    mounted_path: str
    base_name: str
    absolute_path: str
    mount_targets: tuple[str, ...]

    @property
    def is_index(self) -> bool:
        """True for ``index`` files, matched case-insensitively."""
        return self.base_name.lower() == "index"


@dataclass(frozen=True, slots=True)
class MappingResult:
    """Outcome of one :func:`~recursive_routing.mapper.map_routes` pass.

    Both tuples are in traversal order.
    """

    mounted: tuple[RouteDescriptor, ...] = ()
    errors: tuple[RouteLoadError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors
