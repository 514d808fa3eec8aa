"""Tests for padawan.errors and padawan.server.errors."""

import logging

import pytest

from padawan.config import AppConfig
from padawan.context import Context
from padawan.errors import ConfigurationError, PadawanError, PatternCompilationError
from padawan.http.request import Request
from padawan.server.errors import (
    LAST_RESORT_BODY,
    accepts_positional,
    call_error_handler,
    call_fallback,
    default_error_handler,
    default_fallback,
    handle_internal_error,
    handle_not_found,
)


def _ctx(path: str = "/") -> Context:
    return Context(Request("GET", path))


class TestHierarchy:
    def test_configuration_error_is_padawan_error(self) -> None:
        assert issubclass(ConfigurationError, PadawanError)

    def test_pattern_error_is_configuration_error(self) -> None:
        assert issubclass(PatternCompilationError, ConfigurationError)

    def test_pattern_error_message(self) -> None:
        err = PatternCompilationError("/x/:", "placeholder is missing a name")
        assert str(err) == "Invalid route path '/x/:': placeholder is missing a name"
        assert err.template == "/x/:"
        assert err.reason == "placeholder is missing a name"


class TestAcceptsPositional:
    def test_counts(self) -> None:
        def zero() -> None: ...
        def one(a) -> None: ...
        def two(a, b) -> None: ...

        assert accepts_positional(zero, 0)
        assert not accepts_positional(zero, 1)
        assert accepts_positional(one, 1)
        assert not accepts_positional(one, 2)
        assert accepts_positional(two, 2)

    def test_varargs(self) -> None:
        assert accepts_positional(lambda *args: None, 5)

    def test_keyword_only_not_counted(self) -> None:
        def handler(exc, *, ctx=None) -> None: ...

        assert not accepts_positional(handler, 2)

    def test_uninspectable(self) -> None:
        assert not accepts_positional(object(), 1)  # type: ignore[arg-type]


class TestCallHandlers:
    def test_fallback_without_context(self) -> None:
        assert call_fallback(lambda: "gone", _ctx()) == "gone"

    def test_fallback_with_context(self) -> None:
        assert call_fallback(lambda ctx: ctx.request.path, _ctx("/missing")) == "/missing"

    def test_error_handler_with_exception(self) -> None:
        assert call_error_handler(lambda exc: str(exc), ValueError("bad"), _ctx()) == "bad"

    def test_error_handler_with_context(self) -> None:
        result = call_error_handler(
            lambda exc, ctx: f"{ctx.request.path}: {exc}", ValueError("bad"), _ctx("/x")
        )
        assert result == "/x: bad"


class TestHandleNotFound:
    def test_sets_404(self) -> None:
        ctx = _ctx("/missing")
        assert handle_not_found(ctx, lambda: "nope") == "nope"
        assert ctx.response.status == 404

    def test_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="padawan.server"):
            handle_not_found(_ctx("/missing"), lambda: "")
        assert "404 GET /missing" in caplog.text


class TestHandleInternalError:
    def test_sets_500(self) -> None:
        ctx = _ctx()
        value = handle_internal_error(RuntimeError("boom"), ctx, lambda exc: f"caught {exc}")
        assert value == "caught boom"
        assert ctx.response.status == 500

    def test_logs_exception(self, caplog: pytest.LogCaptureFixture) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError as exc:
            with caplog.at_level(logging.ERROR, logger="padawan.server"):
                handle_internal_error(exc, _ctx("/boom"), lambda e: "")
        assert "500 GET /boom" in caplog.text

    def test_failing_error_handler_contained(self) -> None:
        def broken(exc: Exception) -> str:
            raise KeyError("again")

        ctx = _ctx()
        assert handle_internal_error(RuntimeError("boom"), ctx, broken) == LAST_RESORT_BODY
        assert ctx.response.status == 500


class TestDefaults:
    def test_default_fallback(self) -> None:
        assert default_fallback(AppConfig())() == "Page Not Found."

    def test_custom_not_found_body(self) -> None:
        assert default_fallback(AppConfig(not_found_body="404"))() == "404"

    def test_default_error_handler(self) -> None:
        handler = default_error_handler(AppConfig())
        assert handler(RuntimeError("boom")) == "Something bad just happened: boom"

    def test_debug_includes_traceback(self) -> None:
        handler = default_error_handler(AppConfig(debug=True))
        try:
            raise RuntimeError("boom")
        except RuntimeError as exc:
            body = handler(exc)
        assert body.startswith("Something bad just happened: boom")
        assert "Traceback" in body
        assert "RuntimeError: boom" in body
