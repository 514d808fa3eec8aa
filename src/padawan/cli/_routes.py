"""``padawan routes``: list registered routes.

Prints METHOD, PATH, and handler name for every route, in priority
order (the order they are tried).
"""

import argparse

from padawan.cli._resolve import load_app_or_exit


def run_routes(args: argparse.Namespace) -> None:
    app = load_app_or_exit(args.app)

    routes = app.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for route in routes:
        methods_str = ", ".join(sorted(route.methods))
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        if route.middleware:
            handler_name = f"{handler_name} (+{len(route.middleware)} middleware)"
        rows.append((methods_str, route.path or "/", handler_name))

    max_methods = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER"))
    sep_len = max_methods + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for methods_str, path, handler_name in rows:
        print(fmt.format(methods_str, path, handler_name))
