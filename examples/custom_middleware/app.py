"""Custom Middleware: function and class middleware with route groups.

Demonstrates:
- Function middleware (timing, logs how long each request took)
- Class middleware (token guard that short-circuits without a valid token)
- Group-scoped middleware that does not leak to routes outside the group
- Services shared with handlers through the context

Run:
    REQUEST_METHOD=GET REQUEST_URI=/api/jedi python app.py
"""

import logging
import time
from typing import Any

from padawan import App, Context
from padawan.middleware.protocol import Next

logger = logging.getLogger("examples.custom_middleware")

app = App()
app.service("roster", ["Luke", "Leia", "Rey"])
app.service("tokens", frozenset({"letmein"}))


# ---------------------------------------------------------------------------
# Function middleware: timing
# ---------------------------------------------------------------------------


def timing(ctx: Context, next: Next) -> Any:
    """Log the time spent in the rest of the chain."""
    start = time.monotonic()
    result = next(ctx)
    elapsed = time.monotonic() - start
    logger.info("%s %s took %.3fs", ctx.request.method, ctx.request.path, elapsed)
    return result


# ---------------------------------------------------------------------------
# Class middleware: token guard
# ---------------------------------------------------------------------------


class RequireToken:
    """Reject requests whose query string lacks a known ``token=``."""

    def __call__(self, ctx: Context, next: Next) -> Any:
        params = dict(
            part.split("=", 1) for part in ctx.request.query_string.split("&") if "=" in part
        )
        if params.get("token") not in ctx["tokens"]:
            ctx.response.set_status(401)
            return {"error": "unauthorized"}
        return next(ctx)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

app.use(timing)

app.get("/", lambda ctx: "public")


def api(app: App) -> None:
    app.use(RequireToken())
    app.get("/jedi", lambda ctx: ctx["roster"])
    app.get("/jedi/:index", lambda ctx: ctx["roster"][int(ctx.args["index"])])


app.group("/api", api)

app.get("/health", lambda ctx: {"ok": True})


if __name__ == "__main__":
    app.run()
