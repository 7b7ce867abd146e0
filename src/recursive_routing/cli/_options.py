"""Build RoutingOptions from parsed CLI arguments.

Shared by ``recursive-routing routes`` and ``recursive-routing check``.
"""

import argparse
import logging
import sys

from recursive_routing.errors import ConfigurationError
from recursive_routing.options import RoutingOptions, extension_filter, resolve_options


def options_from_args(args: argparse.Namespace) -> RoutingOptions:
    """Translate CLI flags into options. Exits 1 on invalid values."""
    logging.basicConfig(
        level=logging.INFO if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return resolve_options(
            root_dir=args.root_dir,
            base_path=args.base_path,
            replace_spaces_with=args.replace_spaces_with,
            keep_extension=args.keep_extension,
            keep_index=args.keep_index,
            filter=extension_filter(*args.ext) if args.ext else None,
            debug=args.debug,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
