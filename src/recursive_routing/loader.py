"""Route module loading.

Each route file is executed as a fresh module named after its relative
path.  The module stays in ``sys.modules`` so code relying on
``sys.modules[__name__]`` (dataclasses, pickling) works inside it.
"""

from __future__ import annotations

import hashlib
import importlib.util
import re
import sys
from types import ModuleType

from recursive_routing.types import RouteDescriptor

_UNSAFE_CHARS_RE = re.compile(r"\W")


def module_name_for(descriptor: RouteDescriptor) -> str:
    """``users/my route.py`` -> ``_recursive_routing_users_my_route_py_<hash>``.

    The hash of the relative path keeps ``users/get.py`` and
    ``users_get.py`` apart.
    """
    slug = _UNSAFE_CHARS_RE.sub("_", descriptor.relative_path)
    digest = hashlib.sha1(descriptor.relative_path.encode("utf-8")).hexdigest()[:8]
    return f"_recursive_routing_{slug}_{digest}"


def load_route_module(descriptor: RouteDescriptor) -> ModuleType:
    """Execute ``descriptor.absolute_path`` and return the module.

    Raises:
        ImportError: If Python has no loader for the file.
        BaseException: Whatever the module raises while executing,
            including ``SystemExit``.
    """
    module_name = module_name_for(descriptor)
    spec = importlib.util.spec_from_file_location(module_name, descriptor.absolute_path)
    if spec is None or spec.loader is None:
        msg = f"Cannot load {descriptor.absolute_path} as a Python module"
        raise ImportError(msg, path=descriptor.absolute_path)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module
