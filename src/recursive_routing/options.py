"""Routing options.

RoutingOptions is a frozen dataclass: immutable after creation, with
every field defaulted.  Override what you need::

    options = RoutingOptions(root_dir="api", base_path="/api", keep_index=True)

``resolve_options`` overlays user-supplied values onto the defaults field
by field, building a fresh value for every call.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from recursive_routing.errors import ConfigurationError
from recursive_routing.mount import mount_handlers
from recursive_routing.types import FileFilter, MountFunction


def default_filter(path: str) -> bool:
    """Accept Python source files."""
    return path.endswith(".py")


def extension_filter(*extensions: str) -> FileFilter:
    """Build a filter accepting paths that end with any of *extensions*.

    Example::

        RoutingOptions(filter=extension_filter(".py", ".pyw"))
    """
    if not extensions:
        msg = "extension_filter() needs at least one extension"
        raise ConfigurationError(msg)
    suffixes = tuple(extensions)

    def accept(path: str) -> bool:
        return path.endswith(suffixes)

    return accept


@dataclass(frozen=True, slots=True)
class RoutingOptions:
    """How a routes directory is walked and mounted. Immutable after creation."""

    # Discovery
    root_dir: str | Path = "./routes"
    filter: FileFilter = default_filter

    # Path derivation
    base_path: str = "/"
    replace_spaces_with: str = "-"
    keep_extension: bool = False
    keep_index: bool = False

    # Mounting
    mount_function: MountFunction = mount_handlers

    # Log every derived descriptor at INFO level
    debug: bool = False

    def __post_init__(self) -> None:
        if not callable(self.filter):
            msg = f"filter must be callable, got {type(self.filter).__name__}"
            raise ConfigurationError(msg)
        if not callable(self.mount_function):
            msg = f"mount_function must be callable, got {type(self.mount_function).__name__}"
            raise ConfigurationError(msg)
        if not isinstance(self.base_path, str):
            msg = f"base_path must be a string, got {type(self.base_path).__name__}"
            raise ConfigurationError(msg)
        if not isinstance(self.replace_spaces_with, str):
            msg = (
                "replace_spaces_with must be a string, "
                f"got {type(self.replace_spaces_with).__name__}"
            )
            raise ConfigurationError(msg)


DEFAULT_OPTIONS = RoutingOptions()

_FIELD_NAMES = frozenset(f.name for f in fields(RoutingOptions))


def resolve_options(
    options: RoutingOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> RoutingOptions:
    """Overlay *options* and *overrides* onto the defaults.

    *options* may be a :class:`RoutingOptions`, a mapping of field names,
    or ``None``.  Keyword *overrides* win over *options*.  A ``None``
    value leaves the field at its current value.

    Raises:
        ConfigurationError: On unknown option names or invalid values.
    """
    if isinstance(options, RoutingOptions):
        base = options
        supplied: dict[str, Any] = {}
    elif options is None:
        base = DEFAULT_OPTIONS
        supplied = {}
    elif isinstance(options, Mapping):
        base = DEFAULT_OPTIONS
        supplied = dict(options)
    else:
        msg = f"options must be RoutingOptions or a mapping, got {type(options).__name__}"
        raise ConfigurationError(msg)

    supplied.update(overrides)
    unknown = sorted(set(supplied) - _FIELD_NAMES)
    if unknown:
        msg = f"Unknown routing option(s): {', '.join(unknown)}"
        raise ConfigurationError(msg)

    changes = {name: value for name, value in supplied.items() if value is not None}
    if not changes:
        return base
    return replace(base, **changes)
