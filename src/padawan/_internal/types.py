"""Shared type aliases used across padawan modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: receives the request Context, returns any coercible value
Handler: TypeAlias = Callable[..., Any]

# Fallback handler: called with no arguments (or the Context)
FallbackHandler: TypeAlias = Callable[..., Any]

# Error handler: receives the exception (and optionally the Context)
ErrorHandler: TypeAlias = Callable[..., Any]
