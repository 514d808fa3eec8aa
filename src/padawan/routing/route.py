"""Route records and match results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from padawan._internal.types import Handler
from padawan.routing.pattern import PathPattern, compile_pattern


class Route:
    """A registered binding of method, path pattern, handler, and middleware.

    Created during app setup. Middleware may be appended until the route
    is sealed, which happens when the app serves its first request.
    Holds no dispatch logic of its own.

    Usage::

        route = Route("GET", "/users/:id", show_user)
        route.use(require_login, audit)
    """

    __slots__ = ("_handler", "_methods", "_middleware", "_pattern", "_sealed")

    def __init__(self, method: str, path: str, handler: Handler) -> None:
        self._methods: frozenset[str] = frozenset({method.upper()})
        self._pattern: PathPattern = compile_pattern(path)
        self._handler: Handler = handler
        self._middleware: list[Any] = []
        self._sealed = False

    def __repr__(self) -> str:
        methods = ",".join(sorted(self._methods))
        return f"<Route {methods} {self.path!r}>"

    # -- Middleware --

    def add_middleware(self, middleware: Iterable[Any]) -> Route:
        """Append *middleware* after any already bound to this route."""
        if self._sealed:
            msg = f"Cannot add middleware to {self!r} after the app has started serving."
            raise RuntimeError(msg)
        self._middleware.extend(middleware)
        return self

    def use(self, *middleware: Any) -> Route:
        """Variadic form of :meth:`add_middleware`, for chaining."""
        return self.add_middleware(middleware)

    def seal(self) -> None:
        self._sealed = True

    # -- Accessors --

    @property
    def middleware(self) -> tuple[Any, ...]:
        return tuple(self._middleware)

    @property
    def pattern(self) -> PathPattern:
        return self._pattern

    @property
    def path(self) -> str:
        return self._pattern.template

    @property
    def methods(self) -> frozenset[str]:
        return self._methods

    @property
    def handler(self) -> Handler:
        return self._handler

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Return a ``RouteMatch`` if *method* and *path* both match."""
        if method.upper() not in self._methods:
            return None
        args = self._pattern.match(path)
        if args is None:
            return None
        return RouteMatch(
            route=self,
            args=args,
            path_params=dict(zip(self._pattern.param_names, args, strict=True)),
        )


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    args: tuple[str, ...]
    path_params: dict[str, str] = field(default_factory=dict)
