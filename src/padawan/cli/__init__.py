"""Padawan CLI: route listing and one-shot dispatch.

Entry point registered as ``padawan`` in ``pyproject.toml``::

    [project.scripts]
    padawan = "padawan.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``padawan`` command."""
    parser = argparse.ArgumentParser(
        prog="padawan",
        description="Padawan: a minimal HTTP routing core.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- padawan routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="App script or module, with optional :name (e.g. app.py, myapp:web)")

    # -- padawan call -----------------------------------------------------
    call_parser = subparsers.add_parser("call", help="Dispatch one request and print the body")
    call_parser.add_argument("app", help="App script or module, with optional :name (e.g. app.py, myapp:web)")
    call_parser.add_argument("method", help="HTTP method (e.g. GET)")
    call_parser.add_argument("path", help="Request path, optionally with a query string")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from padawan.cli._routes import run_routes

        run_routes(args)
    elif args.command == "call":
        from padawan.cli._call import run_call

        run_call(args)
