"""Response coercion: maps handler return values to a body and content type.

``coerce`` inspects the value a handler (or fallback, or error handler)
returned and produces a ``Coerced`` body by dispatching over a closed
set of shapes.

The HTML check is a heuristic, not a parser: any string containing
something shaped like an opening or closing tag (``<p>``, ``</div>``)
is sent as HTML. Strings such as ``"a <b and c> d"`` are therefore
treated as markup too.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from padawan.http.response import (
    HTML_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    TEXT_CONTENT_TYPE,
    dump_json,
)

logger = logging.getLogger("padawan.negotiation")

# Something resembling an open or close tag, lowercase tag names only
MARKUP_PATTERN = re.compile(r"</?[a-z][\s\S]*>")


class ContentType(StrEnum):
    JSON = JSON_CONTENT_TYPE
    TEXT = TEXT_CONTENT_TYPE
    HTML = HTML_CONTENT_TYPE


@dataclass(frozen=True, slots=True)
class Coerced:
    """A serialized response body.

    ``content_type`` is ``None`` only when coercion had to fall back to
    the raw value. Handlers may return a ``Coerced`` directly to bypass
    inference.
    """

    body: str
    content_type: ContentType | None = None


def looks_like_markup(text: str) -> bool:
    """Best-effort check for an HTML-ish tag in *text*."""
    return MARKUP_PATTERN.search(text) is not None


def coerce(value: Any, *, sniff_html: bool = True) -> Coerced:
    """Convert a handler's return value to a ``Coerced`` body.

    Dispatch order:

    1. ``Coerced``                -> pass through
    2. ``Mapping`` / ``list`` / ``tuple`` -> compact JSON
    3. ``None``                   -> empty text
    4. ``bytes``                  -> decoded as UTF-8, then as ``str``
    5. ``str`` (or any scalar)    -> HTML if it looks like markup, else text

    Never raises. If stringifying or sniffing fails, the raw value is
    returned with no content type.
    """
    match value:
        case Coerced():
            return value
        case Mapping() | list() | tuple():
            return _coerce_json(value)
        case None:
            return Coerced("", ContentType.TEXT)
        case bytes():
            return _coerce_text(value.decode("utf-8", errors="replace"), sniff_html)
        case _:
            return _coerce_text(value, sniff_html)


def _coerce_json(value: Any) -> Coerced:
    # Encoding can also fail with RecursionError or from a user __str__
    try:
        return Coerced(dump_json(value), ContentType.JSON)
    except Exception:
        logger.debug(
            "Could not serialize %s as JSON, sending it raw",
            type(value).__name__,
            exc_info=True,
        )
        return Coerced(object.__repr__(value))


def _coerce_text(value: Any, sniff_html: bool) -> Coerced:
    try:
        text = value if isinstance(value, str) else str(value)
        if sniff_html and looks_like_markup(text):
            return Coerced(text, ContentType.HTML)
        return Coerced(text, ContentType.TEXT)
    except Exception:
        logger.debug("Could not coerce %s, sending it raw", type(value).__name__, exc_info=True)
        raw = value if isinstance(value, str) else object.__repr__(value)
        return Coerced(raw)
