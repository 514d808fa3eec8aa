"""Per-request context handed to handlers and middleware.

Provides:
- ``ctx.request``: the current ``Request``.
- ``ctx.response``: the mutable ``Response`` state for this request.
- ``ctx.args``: path parameters captured by the matched route.
- ``ctx["name"]``: services registered with ``app.service()``.

A new Context is built for every dispatch. Only the service store is
shared between requests, and it is read-only once the app is serving.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, overload

from padawan.http.request import Request
from padawan.http.response import Response


class Args(Mapping[str, str]):
    """Path parameters captured by the matched route.

    Keyed by placeholder name, in declaration order. Integer indexing
    reads the values positionally::

        # GET /users/:user_id/posts/:post_id  ->  /users/7/posts/42
        ctx.args["post_id"]   # "42"
        ctx.args[0]           # "7"
    """

    __slots__ = ("_params", "_values")

    def __init__(self, params: Mapping[str, str] | None = None) -> None:
        self._params = dict(params or {})
        self._values = tuple(self._params.values())

    @overload
    def __getitem__(self, key: str) -> str: ...
    @overload
    def __getitem__(self, key: int) -> str: ...

    def __getitem__(self, key: str | int) -> str:
        if isinstance(key, int):
            return self._values[key]
        return self._params[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"Args({self._params!r})"

    @property
    def positional(self) -> tuple[str, ...]:
        return self._values


class Context:
    """Everything a handler needs for one request."""

    __slots__ = ("args", "request", "response", "services")

    def __init__(
        self,
        request: Request,
        *,
        response: Response | None = None,
        services: Mapping[str, Any] | None = None,
        args: Args | None = None,
    ) -> None:
        self.request = request
        self.response = response if response is not None else Response()
        self.services: Mapping[str, Any] = MappingProxyType(dict(services or {}))
        self.args = args if args is not None else Args()

    def __getitem__(self, name: str) -> Any:
        try:
            return self.services[name]
        except KeyError:
            msg = f"No service registered under {name!r}"
            raise KeyError(msg) from None

    def __contains__(self, name: object) -> bool:
        return name in self.services

    def get(self, name: str, default: Any = None) -> Any:
        """Get a service with a default value."""
        return self.services.get(name, default)

    def __repr__(self) -> str:
        return f"<Context {self.request.method} {self.request.path} args={dict(self.args)!r}>"
