"""Per-request response state.

Handlers and middleware reach it as ``ctx.response`` to change the
status code. The serialization helpers set the content type alongside
the body they return. Coercion shares the JSON encoder and the
content-type constants defined here.
"""

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"


def _encode_default(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    return str(value)


def dump_json(value: Any) -> str:
    """Serialize *value* as compact JSON.

    Any ``Mapping`` becomes an object, not only ``dict``. Other unknown
    types fall back to ``str``.
    """
    return json_module.dumps(
        value, separators=(",", ":"), ensure_ascii=False, default=_encode_default
    )


class Response:
    """Mutable response state for a single dispatch.

    A fresh instance is created per request, so nothing set here can
    leak into another request.
    """

    __slots__ = ("content_type", "status")

    OK = HTTPStatus.OK
    NOT_FOUND = HTTPStatus.NOT_FOUND
    INTERNAL_SERVER_ERROR = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, status: int = HTTPStatus.OK) -> None:
        self.status: int = int(status)
        self.content_type: str | None = None

    def __repr__(self) -> str:
        return f"<Response {self.status} {self.content_type!r}>"

    def set_status(self, status: int) -> None:
        self.status = int(status)

    def json(self, value: Any) -> str:
        """Return *value* as JSON and mark the response as JSON."""
        self.content_type = JSON_CONTENT_TYPE
        return dump_json(value)

    def text(self, value: Any) -> str:
        """Return *value* as plain text and mark the response as text."""
        self.content_type = TEXT_CONTENT_TYPE
        return "" if value is None else str(value)

    def html(self, value: str) -> str:
        """Return *value* unchanged and mark the response as HTML."""
        self.content_type = HTML_CONTENT_TYPE
        return value


@dataclass(frozen=True, slots=True)
class Reply:
    """The finished result of one dispatch: status, body, and content type."""

    status: int
    body: str
    content_type: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 400
