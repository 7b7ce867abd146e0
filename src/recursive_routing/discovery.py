"""Filesystem route discovery.

Walks a routes directory tree depth-first and derives one
:class:`RouteDescriptor` per accepted file:

- every file maps to its own path, ``users/get.py`` -> ``/users/get``
- ``index`` files map to their directory instead, ``users/index.py`` ->
  ``/users/`` (both paths with ``keep_index``)
- spaces become ``replace_spaces_with``, ``my route.py`` -> ``/my-route``

Nothing is imported here; see :mod:`recursive_routing.loader`.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from pathlib import Path, PurePosixPath
from typing import Any

from recursive_routing.options import RoutingOptions, resolve_options
from recursive_routing.types import FileFilter, RouteDescriptor


def iter_route_files(root_dir: str | Path, file_filter: FileFilter) -> Iterator[str]:
    """Yield absolute paths of accepted files under *root_dir*, depth-first.

    Directories are always descended into; *file_filter* only sees
    regular files, by absolute path.  Symbolic links are skipped.
    Siblings are visited in name order.

    Raises:
        FileNotFoundError: If *root_dir* does not exist.
    """
    root = Path(root_dir).absolute()
    if not root.is_dir():
        msg = f"Routes directory not found: {root}"
        raise FileNotFoundError(msg)
    yield from _walk(root, file_filter)


def _walk(directory: Path, file_filter: FileFilter) -> Iterator[str]:
    for item in sorted(directory.iterdir()):
        if item.is_symlink():
            continue
        if item.is_dir():
            yield from _walk(item, file_filter)
        elif item.is_file() and file_filter(str(item)):
            yield str(item)


def describe_route(file: str, options: RoutingOptions) -> RouteDescriptor:
    """Derive the descriptor for one route *file* (an absolute path)."""
    relative = Path(file).relative_to(Path(options.root_dir).absolute())
    relative_path = str(relative)
    mounted_path = (
        os.path.normpath(os.path.join(options.base_path, relative_path))
        .replace("\\", "/")
        .replace(" ", options.replace_spaces_with)
    )
    base_name = relative.stem
    is_index = base_name.lower() == "index"

    targets: list[str] = []
    if not is_index or options.keep_index:
        if options.keep_extension:
            targets.append(mounted_path)
        else:
            targets.append(strip_extension(mounted_path))
    if is_index:
        targets.append(parent_path(mounted_path))

    return RouteDescriptor(
        relative_path=relative_path,
        mounted_path=mounted_path,
        base_name=base_name,
        absolute_path=file,
        mount_targets=tuple(targets),
    )


def strip_extension(url_path: str) -> str:
    """Drop the last extension of the final segment: ``/a/b.test.py`` -> ``/a/b.test``."""
    suffix = PurePosixPath(url_path).suffix
    return url_path[: -len(suffix)] if suffix else url_path


def parent_path(url_path: str) -> str:
    """Drop the final segment, keeping the slash: ``/users/index.py`` -> ``/users/``."""
    head, sep, _ = url_path.rpartition("/")
    return head + sep


def discover_routes(
    options: RoutingOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Iterator[RouteDescriptor]:
    """Walk ``options.root_dir`` and yield a descriptor per accepted file.

    Accepts the same arguments as :func:`resolve_options`.
    """
    resolved = resolve_options(options, **overrides)
    for file in iter_route_files(resolved.root_dir, resolved.filter):
        yield describe_route(file, resolved)
