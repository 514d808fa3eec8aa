"""Tests for padawan.routing.route — Route records and RouteMatch."""

import pytest

from padawan.routing.route import Route, RouteMatch


def _handler(ctx: object) -> str:
    return "ok"


def _mw(ctx, next):
    return next(ctx)


class TestRoute:
    def test_accessors(self) -> None:
        route = Route("get", "/users/:id", _handler)
        assert route.methods == frozenset({"GET"})
        assert route.path == "/users/:id"
        assert route.pattern.param_names == ("id",)
        assert route.handler is _handler
        assert route.middleware == ()

    def test_repr(self) -> None:
        assert repr(Route("POST", "/users", _handler)) == "<Route POST '/users'>"

    def test_add_middleware_appends_in_order(self) -> None:
        def other(ctx, next):
            return next(ctx)

        route = Route("GET", "/", _handler)
        route.add_middleware([_mw])
        route.add_middleware([other])
        assert route.middleware == (_mw, other)

    def test_use_is_chainable(self) -> None:
        route = Route("GET", "/", _handler)
        assert route.use(_mw).use(_mw) is route
        assert len(route.middleware) == 2

    def test_middleware_tuple_is_a_copy(self) -> None:
        route = Route("GET", "/", _handler).use(_mw)
        snapshot = route.middleware
        route.use(_mw)
        assert len(snapshot) == 1

    def test_sealed_route_rejects_middleware(self) -> None:
        route = Route("GET", "/", _handler)
        route.seal()
        with pytest.raises(RuntimeError, match="after the app has started serving"):
            route.use(_mw)


class TestRouteMatch:
    def test_match_returns_route_match(self) -> None:
        route = Route("GET", "/users/:user_id/posts/:post_id", _handler)
        match = route.match("GET", "/users/1/posts/2")
        assert isinstance(match, RouteMatch)
        assert match.route is route
        assert match.args == ("1", "2")
        assert match.path_params == {"user_id": "1", "post_id": "2"}

    def test_method_mismatch(self) -> None:
        route = Route("POST", "/users", _handler)
        assert route.match("GET", "/users") is None

    def test_method_case_insensitive(self) -> None:
        route = Route("GET", "/users", _handler)
        assert route.match("get", "/users") is not None

    def test_path_mismatch(self) -> None:
        route = Route("GET", "/users", _handler)
        assert route.match("GET", "/posts") is None

    def test_route_match_frozen(self) -> None:
        match = Route("GET", "/", _handler).match("GET", "/")
        assert match is not None
        with pytest.raises(AttributeError):
            match.args = ("x",)  # type: ignore[misc]
