"""Middleware: the ``(ctx, next)`` protocol and chain composition."""

from padawan.middleware.chain import compose
from padawan.middleware.protocol import Middleware, Next

__all__ = ["Middleware", "Next", "compose"]
