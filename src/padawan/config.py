"""Application configuration.

AppConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, sniff_html=False)
    """

    # Default error handler appends the traceback when True
    debug: bool = False

    # Strings that look like markup are sent as HTML, the rest as text
    sniff_html: bool = True

    # Bodies produced by the built-in fallback and error handlers.
    # ``error_body`` is formatted with ``error=<exception message>``.
    not_found_body: str = "Page Not Found."
    error_body: str = "Something bad just happened: {error}"
