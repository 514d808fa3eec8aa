"""Onion-style composition of middleware around a terminal handler."""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from padawan._internal.types import Handler
from padawan.middleware.protocol import Middleware, Next

if TYPE_CHECKING:
    from padawan.context import Context


def compose(
    middleware: Sequence[Middleware],
    terminal: Handler,
) -> Callable[["Context"], Any]:
    """Wrap *terminal* in *middleware*, first entry outermost.

    The returned callable takes the request context. Middleware are
    nested right to left, so for ``[m1, m2]`` the call order is
    ``m1 -> m2 -> terminal`` and results unwind back out through
    ``m2`` then ``m1``.
    """
    handler: Next = terminal
    for mw in reversed(middleware):
        handler = _link(mw, handler)
    return handler


def _link(mw: Middleware, next_handler: Next) -> Next:
    def step(ctx: "Context") -> Any:
        return mw(ctx, next_handler)

    return step
