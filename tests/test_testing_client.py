"""Tests for padawan.testing — the synchronous TestClient."""

from padawan.app import App
from padawan.http.response import Reply
from padawan.testing import TestClient


def _app() -> App:
    app = App()
    app.get("/items", lambda ctx: "list")
    app.post("/items", lambda ctx: "create")
    app.map("PATCH", "/items/:id", lambda ctx: "patch " + ctx.args["id"])
    return app


class TestTestClient:
    def test_not_collected_by_pytest(self) -> None:
        assert TestClient.__test__ is False

    def test_get(self) -> None:
        reply = TestClient(_app()).get("/items")
        assert isinstance(reply, Reply)
        assert reply.body == "list"

    def test_post(self) -> None:
        assert TestClient(_app()).post("/items").body == "create"

    def test_request_any_method(self) -> None:
        assert TestClient(_app()).request("patch", "/items/3").body == "patch 3"

    def test_percent_decoded_path(self) -> None:
        app = App()
        app.get("/greet/:name", lambda ctx: ctx.args["name"])
        assert TestClient(app).get("/greet/Obi%20Wan").body == "Obi Wan"

    def test_does_not_write_stdout(self, capsys) -> None:
        TestClient(_app()).get("/items")
        assert capsys.readouterr().out == ""
