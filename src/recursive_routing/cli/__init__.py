"""recursive-routing CLI — inspect how a routes directory will be mounted.

Entry point registered as ``recursive-routing`` in ``pyproject.toml``::

    [project.scripts]
    recursive-routing = "recursive_routing.cli:main"
"""

import argparse
import sys


def _add_routing_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("root_dir", help="Routes directory to walk")
    parser.add_argument("--base-path", default=None, help="URL prefix (default: /)")
    parser.add_argument(
        "--replace-spaces-with",
        default=None,
        help="Replacement for spaces in paths (default: -)",
    )
    parser.add_argument(
        "--keep-extension",
        action="store_true",
        help="Keep file extensions in route paths",
    )
    parser.add_argument(
        "--keep-index",
        action="store_true",
        help="Also mount index files under their own name",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=None,
        help="Route file extension, repeatable (default: .py)",
    )
    parser.add_argument("--debug", action="store_true", help="Log every derived route")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``recursive-routing`` command."""
    parser = argparse.ArgumentParser(
        prog="recursive-routing",
        description="Mount a directory tree of route files onto a web app.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- recursive-routing routes -----------------------------------------
    routes_parser = subparsers.add_parser(
        "routes",
        help="List the routes a directory maps to, without importing it",
    )
    _add_routing_arguments(routes_parser)

    # -- recursive-routing check ------------------------------------------
    check_parser = subparsers.add_parser(
        "check",
        help="Import and mount every route file, reporting failures",
    )
    _add_routing_arguments(check_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from recursive_routing.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from recursive_routing.cli._check import run_check

        run_check(args)
