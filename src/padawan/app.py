"""Padawan application class.

Mutable during setup (routes, groups, middleware, services, handlers).
Sealed when the first request is handled.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TextIO, overload

from padawan._internal.types import ErrorHandler, FallbackHandler, Handler
from padawan.config import AppConfig
from padawan.http.request import Request
from padawan.http.response import Reply
from padawan.middleware.protocol import Middleware
from padawan.routing.route import Route
from padawan.routing.router import Router
from padawan.server.errors import default_error_handler, default_fallback
from padawan.server.handler import handle_request
from padawan.server.negotiation import coerce
from padawan.server.sender import send_reply


@dataclass(frozen=True, slots=True)
class RegistrationScope:
    """Base path and middleware applied to routes registered inside it."""

    base: str = ""
    middleware: tuple[Middleware, ...] = ()

    def nest(self, base: str) -> RegistrationScope:
        return RegistrationScope(self.base + base, self.middleware)

    def with_middleware(self, middleware: tuple[Middleware, ...]) -> RegistrationScope:
        return RegistrationScope(self.base, self.middleware + middleware)

    def resolve(self, path: str) -> str:
        """Prefix *path* with the base. A bare ``/`` maps to the base itself."""
        return self.base + ("" if path == "/" else path)


class App:
    """The padawan application.

    Usage::

        app = App()

        app.get("/greet/:name", lambda ctx: "Hello " + ctx.args["name"])

        def api(app: App) -> None:
            app.use(require_token)
            app.get("/users", list_users)

        app.group("/api", api)
        app.run()

    Thread safety:
        Registration is single-threaded. The first ``handle()`` seals
        the route table under a lock; afterwards the app only reads
        shared state, and each request gets its own context.
    """

    __slots__ = (
        "_error_handler",
        "_fallback",
        "_frozen",
        "_freeze_lock",
        "_router",
        "_scope",
        "_services",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._router = Router()
        self._services: dict[str, Any] = {}
        self._scope = RegistrationScope()
        self._fallback: FallbackHandler = default_fallback(self.config)
        self._error_handler: ErrorHandler = default_error_handler(self.config)
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Services and handlers --

    def service(self, name: str, value: Any) -> App:
        """Register a named service, reachable in handlers as ``ctx[name]``."""
        self._check_not_frozen()
        self._services[name] = value
        return self

    def fallback(self, handler: FallbackHandler) -> FallbackHandler:
        """Register the not-found handler. Also usable as a decorator."""
        self._check_not_frozen()
        self._fallback = handler
        return handler

    def error(self, handler: ErrorHandler) -> ErrorHandler:
        """Register the error handler. Also usable as a decorator."""
        self._check_not_frozen()
        self._error_handler = handler
        return handler

    # -- Middleware --

    def use(self, *middleware: Middleware) -> App:
        """Add middleware for routes registered after this call.

        Inside a ``group()`` the middleware only applies to that group.
        """
        self._check_not_frozen()
        self._scope = self._scope.with_middleware(middleware)
        return self

    # -- Route registration --

    @overload
    def map(self, method: str, path: str, handler: Handler) -> Route: ...
    @overload
    def map(self, method: str, path: str) -> Callable[[Handler], Handler]: ...

    def map(self, method: str, path: str, handler: Handler | None = None) -> Any:
        """Register a route.

        The path is prefixed with the active group base, and the route
        starts out with the active middleware. Returns the ``Route`` so
        more middleware can be chained onto it::

            app.map("PUT", "/users/:id", update_user).use(require_admin)

        Without *handler*, returns a decorator instead::

            @app.map("DELETE", "/users/:id")
            def delete_user(ctx): ...
        """
        if handler is None:

            def decorator(func: Handler) -> Handler:
                self.map(method, path, func)
                return func

            return decorator

        self._check_not_frozen()
        route = Route(method, self._scope.resolve(path), handler)
        route.add_middleware(self._scope.middleware)
        self._router.add(route)
        return route

    @overload
    def get(self, path: str, handler: Handler) -> Route: ...
    @overload
    def get(self, path: str) -> Callable[[Handler], Handler]: ...

    def get(self, path: str, handler: Handler | None = None) -> Any:
        """Register a GET route."""
        return self.map("GET", path, handler)

    @overload
    def post(self, path: str, handler: Handler) -> Route: ...
    @overload
    def post(self, path: str) -> Callable[[Handler], Handler]: ...

    def post(self, path: str, handler: Handler | None = None) -> Any:
        """Register a POST route."""
        return self.map("POST", path, handler)

    def view(self, method: str, path: str, body: str) -> Route:
        """Register a route that always returns *body*."""

        def render(ctx: Any) -> str:
            return body

        return self.map(method, path, render)

    def get_view(self, path: str, body: str) -> Route:
        """Register a GET view route."""
        return self.view("GET", path, body)

    def post_view(self, path: str, body: str) -> Route:
        """Register a POST view route."""
        return self.view("POST", path, body)

    def group(self, base: str, registrar: Callable[[App], Any]) -> None:
        """Register routes under a shared base path.

        *registrar* is called with the app. Routes, middleware, and
        nested groups it registers are scoped to *base*; the outer base
        path and middleware are restored afterwards, even if
        *registrar* raises.
        """
        with self.prefix(base):
            registrar(self)

    @contextmanager
    def prefix(self, base: str) -> Iterator[App]:
        """Context manager form of :meth:`group`::

            with app.prefix("/admin") as admin:
                admin.use(require_admin)
                admin.get("/stats", stats)
        """
        self._check_not_frozen()
        saved = self._scope
        self._scope = saved.nest(base)
        try:
            yield self
        finally:
            self._scope = saved

    @property
    def routes(self) -> list[Route]:
        """Registered routes in priority order."""
        return self._router.routes

    # -- Serving --

    def handle(self, request: Request) -> Reply:
        """Dispatch *request* and return the finished reply. Never raises."""
        self._ensure_frozen()

        outcome = handle_request(
            request,
            router=self._router,
            services=self._services,
            fallback=self._fallback,
            error_handler=self._error_handler,
        )
        coerced = coerce(outcome.value, sniff_html=self.config.sniff_html)

        response = outcome.context.response
        if coerced.content_type is not None:
            response.content_type = coerced.content_type.value
        return Reply(
            status=response.status,
            body=coerced.body,
            content_type=response.content_type,
        )

    def run(self, request: Request | None = None, *, stream: TextIO | None = None) -> Reply:
        """Handle one request and write its body to *stream*.

        With no *request*, one is read from the process environment
        (``REQUEST_METHOD``, ``REQUEST_URI``). *stream* defaults to
        standard output.
        """
        reply = self.handle(request if request is not None else Request.from_environ())
        send_reply(reply, stream)
        return reply

    # -- Internal --

    @property
    def services(self) -> MappingProxyType[str, Any]:
        return MappingProxyType(self._services)

    def _ensure_frozen(self) -> None:
        """Seal the route table exactly once, even under concurrent first requests."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._router.compile()
            self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, middleware, and services before the first request."
            )
            raise RuntimeError(msg)
