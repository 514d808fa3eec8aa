"""Fallback and error handler invocation.

User handlers may take the request context as a trailing argument, or
not. The signature is inspected, so both of these work::

    app.fallback(lambda: "nothing here")
    app.fallback(lambda ctx: f"nothing at {ctx.request.path}")

    app.error(lambda exc: f"oops: {exc}")
    app.error(lambda exc, ctx: {"error": str(exc), "path": ctx.request.path})
"""

import inspect
import logging
import traceback
from collections.abc import Callable
from typing import Any

from padawan._internal.types import ErrorHandler, FallbackHandler
from padawan.config import AppConfig
from padawan.context import Context
from padawan.http.response import Response

logger = logging.getLogger("padawan.server")

# Body used when the registered error handler fails as well
LAST_RESORT_BODY = "Internal Server Error"

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def accepts_positional(handler: Callable[..., Any], count: int) -> bool:
    """True if *handler* can be called with *count* positional arguments."""
    try:
        sig = inspect.signature(handler)
    except (TypeError, ValueError):
        return False
    params = list(sig.parameters.values())
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return True
    return sum(1 for p in params if p.kind in _POSITIONAL) >= count


def call_fallback(handler: FallbackHandler, ctx: Context) -> Any:
    """Invoke a not-found handler with no arguments, or with the context."""
    if accepts_positional(handler, 1):
        return handler(ctx)
    return handler()


def call_error_handler(handler: ErrorHandler, exc: Exception, ctx: Context) -> Any:
    """Invoke an error handler with the exception, and the context if it takes one."""
    if accepts_positional(handler, 2):
        return handler(exc, ctx)
    return handler(exc)


def handle_not_found(ctx: Context, fallback: FallbackHandler) -> Any:
    """Mark the response 404 and produce the fallback's value."""
    logger.debug("404 %s %s", ctx.request.method, ctx.request.path)
    ctx.response.set_status(Response.NOT_FOUND)
    return call_fallback(fallback, ctx)


def handle_internal_error(exc: Exception, ctx: Context, error_handler: ErrorHandler) -> Any:
    """Mark the response 500 and produce the error handler's value.

    A failure inside the error handler is logged and replaced by
    ``LAST_RESORT_BODY``; it never propagates.
    """
    logger.exception("500 %s %s", ctx.request.method, ctx.request.path)
    ctx.response.set_status(Response.INTERNAL_SERVER_ERROR)
    try:
        return call_error_handler(error_handler, exc, ctx)
    except Exception:
        logger.exception("Error handler failed while handling %s", type(exc).__name__)
        return LAST_RESORT_BODY


# -- Defaults --


def default_fallback(config: AppConfig) -> FallbackHandler:
    """The not-found handler used until ``app.fallback()`` replaces it."""
    body = config.not_found_body

    def fallback() -> str:
        return body

    return fallback


def default_error_handler(config: AppConfig) -> ErrorHandler:
    """The error handler used until ``app.error()`` replaces it."""
    template = config.error_body
    debug = config.debug

    def on_error(exc: Exception) -> str:
        body = template.format(error=exc)
        if debug:
            trace = "".join(traceback.format_exception(exc))
            body = f"{body}\n\n{trace}"
        return body

    return on_error
