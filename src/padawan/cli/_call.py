"""``padawan call``: dispatch a single request and print the body.

The status code goes to stderr so the body on stdout stays clean.
"""

import argparse
import sys

from padawan.cli._resolve import load_app_or_exit
from padawan.http.request import Request


def run_call(args: argparse.Namespace) -> None:
    app = load_app_or_exit(args.app)
    reply = app.run(Request.build(args.method, args.path), stream=sys.stdout)
    sys.stdout.write("\n")
    print(f"{reply.status} {reply.content_type or '-'}", file=sys.stderr)
