"""Tests for the custom_middleware example."""

from padawan.testing import TestClient


class TestCustomMiddleware:
    def test_public_route(self, example_app) -> None:
        reply = TestClient(example_app).get("/")
        assert reply.body == "public"

    def test_guard_short_circuits(self, example_app) -> None:
        reply = TestClient(example_app).get("/api/jedi")
        assert reply.status == 401
        assert reply.body == '{"error":"unauthorized"}'

    def test_guard_allows_token(self, example_app) -> None:
        reply = TestClient(example_app).get("/api/jedi?token=letmein")
        assert reply.status == 200
        assert reply.body == '["Luke","Leia","Rey"]'

    def test_path_param(self, example_app) -> None:
        reply = TestClient(example_app).get("/api/jedi/1?token=letmein")
        assert reply.body == "Leia"

    def test_bad_index_is_500(self, example_app) -> None:
        reply = TestClient(example_app).get("/api/jedi/9?token=letmein")
        assert reply.status == 500

    def test_group_middleware_does_not_leak(self, example_app) -> None:
        reply = TestClient(example_app).get("/health")
        assert reply.status == 200
        assert reply.body == '{"ok":true}'
