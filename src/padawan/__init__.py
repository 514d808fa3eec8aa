"""Padawan: a minimal HTTP request-routing core.

Matches a request against registered routes, runs it through the
route's middleware (onion model), and turns the handler's return value
into a JSON, text, or HTML body.

Basic usage::

    from padawan import App

    app = App()

    @app.get("/greet/:name")
    def greet(ctx):
        return "Hello " + ctx.args["name"]

    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "Args",
    "Coerced",
    "ConfigurationError",
    "ContentType",
    "Context",
    "Middleware",
    "Next",
    "PadawanError",
    "PatternCompilationError",
    "Reply",
    "Request",
    "Response",
    "Route",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import padawan`` fast while providing a clean top-level API.
    """
    if name == "App":
        from padawan.app import App

        return App

    if name == "AppConfig":
        from padawan.config import AppConfig

        return AppConfig

    if name in ("Args", "Context"):
        from padawan import context as _ctx

        return getattr(_ctx, name)

    if name == "Request":
        from padawan.http.request import Request

        return Request

    if name in ("Reply", "Response"):
        from padawan.http import response as _resp

        return getattr(_resp, name)

    if name in ("Coerced", "ContentType"):
        from padawan.server import negotiation as _neg

        return getattr(_neg, name)

    if name in ("Middleware", "Next"):
        from padawan.middleware import protocol as _mw

        return getattr(_mw, name)

    if name == "Route":
        from padawan.routing.route import Route

        return Route

    if name in ("ConfigurationError", "PadawanError", "PatternCompilationError"):
        from padawan import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
