"""Immutable HTTP request.

Only what routing needs: the method and a normalized path. The query
string is kept verbatim for handlers that want it.

The path is percent-decoded before routing, so an encoded slash
(``%2F``) acts as a segment separator and cannot appear inside a
path parameter.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit


def normalize_path(raw: str) -> str:
    """Strip the query string and fragment, decode, ensure a leading slash."""
    path = unquote(urlsplit(raw).path)
    if not path.startswith("/"):
        path = "/" + path
    return path


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Build one directly (tests, embedding) or from a CGI-style
    environment with :meth:`from_environ`.
    """

    method: str = "GET"
    path: str = "/"
    query_string: str = ""

    @classmethod
    def build(cls, method: str, target: str) -> Request:
        """Create a request from a method and a raw request target."""
        return cls(
            method=method.upper(),
            path=normalize_path(target),
            query_string=urlsplit(target).query,
        )

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> Request:
        """Create a request from CGI/WSGI-style variables.

        Reads ``REQUEST_METHOD`` and ``REQUEST_URI``, falling back to
        ``PATH_INFO`` + ``QUERY_STRING``. Defaults to ``GET /``.
        """
        env = os.environ if environ is None else environ
        method = env.get("REQUEST_METHOD") or "GET"
        target = env.get("REQUEST_URI")
        if not target:
            target = env.get("PATH_INFO") or "/"
            query = env.get("QUERY_STRING")
            if query:
                target = f"{target}?{query}"
        return cls.build(method, target)
