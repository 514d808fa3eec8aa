"""Request dispatch: match, run the middleware chain, contain failures.

``handle_request`` is the single recovery boundary. Every request ends
in exactly one of three outcomes:

- ``Matched``: a route matched and its chain produced a value.
- ``NotFound``: no route matched; the fallback produced the value.
- ``Failed``: something raised while matching, in middleware, in the
  handler, or in the fallback; the error handler produced the value.

The value is still raw at this point. Coercion to a body happens in
``padawan.server.negotiation``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from padawan._internal.types import ErrorHandler, FallbackHandler
from padawan.context import Args, Context
from padawan.http.request import Request
from padawan.middleware.chain import compose
from padawan.routing.route import Route
from padawan.routing.router import Router
from padawan.server.errors import handle_internal_error, handle_not_found


@dataclass(frozen=True, slots=True)
class Matched:
    value: Any
    context: Context
    route: Route

    @property
    def status(self) -> int:
        return self.context.response.status


@dataclass(frozen=True, slots=True)
class NotFound:
    value: Any
    context: Context

    @property
    def status(self) -> int:
        return self.context.response.status


@dataclass(frozen=True, slots=True)
class Failed:
    value: Any
    context: Context
    error: Exception

    @property
    def status(self) -> int:
        return self.context.response.status


Outcome: TypeAlias = Matched | NotFound | Failed


def handle_request(
    request: Request,
    *,
    router: Router,
    services: Mapping[str, Any],
    fallback: FallbackHandler,
    error_handler: ErrorHandler,
) -> Outcome:
    """Process a single request through matching and the middleware chain."""
    ctx = Context(request, services=services)

    try:
        match = router.match(request.method, request.path)
        if match is None:
            return NotFound(value=handle_not_found(ctx, fallback), context=ctx)

        route = match.route
        ctx.args = Args(match.path_params)
        pipeline = compose(route.middleware, route.handler)
        return Matched(value=pipeline(ctx), context=ctx, route=route)

    except Exception as exc:
        value = handle_internal_error(exc, ctx, error_handler)
        return Failed(value=value, context=ctx, error=exc)
