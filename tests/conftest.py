"""Shared fixtures for recursive_routing tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

HANDLER_SOURCE = "def get():\n    return 'ok'\n"


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Create a routes directory from ``{relative_path: source}``.

    Returns the routes root.  Sources default to a module with a ``get``
    handler when given as ``None``.
    """

    def _make(files: dict[str, str | None], root: str = "routes") -> Path:
        base = tmp_path / root
        base.mkdir(parents=True, exist_ok=True)
        for relative, source in files.items():
            path = base / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(HANDLER_SOURCE if source is None else source, encoding="utf-8")
        return base

    return _make
