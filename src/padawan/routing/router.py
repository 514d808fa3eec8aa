"""Route table with first-match lookup.

Routes are tried in registration order; the first one whose method and
path pattern both match wins. Registration order is therefore the
priority rule: register specific routes before broader ones.
"""

import logging

from padawan.routing.route import Route, RouteMatch

logger = logging.getLogger("padawan.routing")


class Router:
    """Ordered route table.

    Usage::

        router = Router()
        router.add(Route("GET", "/users", list_users))
        router.add(Route("GET", "/users/:id", show_user))
        router.compile()
        match = router.match("GET", "/users/42")
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        self._routes.append(route)

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in priority order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router and seal every route's middleware."""
        for route in self._routes:
            route.seal()
        self._compiled = True
        logger.debug("Sealed %d route(s)", len(self._routes))

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Return the first route matching *method* and *path*, or ``None``."""
        for route in self._routes:
            match = route.match(method, path)
            if match is not None:
                return match
        return None
