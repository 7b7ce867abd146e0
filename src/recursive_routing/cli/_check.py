"""``recursive-routing check`` — import and mount every route file.

Mounts the tree onto an in-memory :class:`RouteTable`, prints the
registered handlers, and exits 1 when any file failed.  Failures are
reported through logging as they happen.
"""

import argparse
import sys

from recursive_routing.cli._options import options_from_args
from recursive_routing.mapper import map_routes
from recursive_routing.table import RouteTable


def run_check(args: argparse.Namespace) -> None:
    """Mount ``args.root_dir`` onto a RouteTable and report the outcome."""
    options = options_from_args(args)
    table = RouteTable()
    try:
        result = map_routes(table, options)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if len(table):
        rows: list[tuple[str, str, str]] = []
        for route in table:
            methods_str = ", ".join(sorted(route.methods))
            handler_name = getattr(route.handler, "__qualname__", repr(route.handler))
            rows.append((methods_str, route.path, handler_name))

        max_methods = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
        max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header
        fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{}}"
        print(fmt.format("METHOD", "PATH", "HANDLER"))
        sep_len = max_methods + max_path + 4 + max(len(r[2]) for r in rows)
        print("-" * min(sep_len, 80))
        for methods_str, path, handler_name in rows:
            print(fmt.format(methods_str, path, handler_name))
    else:
        print("No routes registered.")

    if result.errors:
        print(f"{len(result.errors)} route file(s) failed to load:", file=sys.stderr)
        for error in result.errors:
            print(f"  {error.relative_path}", file=sys.stderr)
        raise SystemExit(1)

    print(f"{len(result.mounted)} route file(s) mounted.")
