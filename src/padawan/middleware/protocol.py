"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    def my_mw(ctx: Context, next: Next) -> Any: ...

No base class required. The framework checks the shape, not the lineage.

Calling ``next(ctx)`` runs the rest of the chain and returns its value.
Not calling it short-circuits: downstream middleware and the route
handler never run, and the middleware's own return value is the result.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

if TYPE_CHECKING:
    from padawan.context import Context

# The rest of the chain, as seen from inside a middleware
Next: TypeAlias = Callable[["Context"], Any]


class Middleware(Protocol):
    """Protocol for padawan middleware.

    Accepts both functions and callable objects::

        # Function middleware
        def timing(ctx: Context, next: Next) -> Any:
            start = time.monotonic()
            result = next(ctx)
            logger.info("%s took %.3fs", ctx.request.path, time.monotonic() - start)
            return result

        # Class middleware
        class RequireToken:
            def __call__(self, ctx: Context, next: Next) -> Any:
                if "token" not in ctx:
                    return {"error": "unauthorized"}
                return next(ctx)
    """

    def __call__(self, ctx: "Context", next: Next) -> Any: ...
