"""Padawan exception hierarchy.

Shared across routing, the app, and the dispatch boundary so every
module raises and catches the same types.

Request-time failures are not exceptions here: a missing route and a
failing handler are both designed outcomes of ``handle_request``
(see ``padawan.server.handler``).
"""


class PadawanError(Exception):
    """Base for all padawan-specific errors."""


class ConfigurationError(PadawanError):
    """Raised when app configuration is invalid.

    Surfaces during setup (route registration), never during dispatch.
    """


class PatternCompilationError(ConfigurationError):
    """A route path template could not be compiled."""

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Invalid route path {template!r}: {reason}")
