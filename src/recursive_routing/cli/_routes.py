"""``recursive-routing routes`` — list derived routes.

Walks the routes directory and prints every mount target with the file
it comes from.  Nothing is imported.
"""

import argparse
import sys

from recursive_routing.cli._options import options_from_args
from recursive_routing.discovery import discover_routes


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of TARGET and FILE for ``args.root_dir``."""
    options = options_from_args(args)
    try:
        descriptors = list(discover_routes(options))
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows = [
        (target, descriptor.relative_path)
        for descriptor in descriptors
        for target in descriptor.mount_targets
    ]
    if not rows:
        print("No routes found.")
        return

    max_target = max(max(len(r[0]) for r in rows), 6)  # "TARGET" header
    fmt = f"{{:<{max_target}}}  {{}}"
    print(fmt.format("TARGET", "FILE"))
    sep_len = max_target + 2 + max(len(r[1]) for r in rows)
    print("-" * min(sep_len, 80))
    for target, relative_path in rows:
        print(fmt.format(target, relative_path))
