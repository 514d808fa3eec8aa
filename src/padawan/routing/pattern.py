"""Path template compilation.

A template is a slash-delimited path whose segments are either literal
text or a placeholder introduced by a colon::

    "/users"                    -> no captures
    "/greet/:name"              -> one capture ("name")
    "/users/:user_id/posts/:id" -> two captures, in that order

Each placeholder captures one or more characters other than ``/``.
Literal segments are escaped, so ``/v1.0`` only matches a literal dot.
"""

import re
from dataclasses import dataclass

from padawan.errors import PatternCompilationError

PLACEHOLDER_MARKER = ":"
SEGMENT_PATTERN = r"([^/]+)"

# Bracketed styles from other frameworks, rejected with a hint
_FOREIGN_PLACEHOLDERS = (("{", "}"), ("<", ">"))


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A compiled route path.

    ``regex`` is anchored at both ends and has exactly one group per
    entry in ``param_names``. Values are positional; the names are kept
    so the dispatcher can expose captures by name.
    """

    template: str
    regex: re.Pattern[str]
    param_names: tuple[str, ...]

    def match(self, path: str) -> tuple[str, ...] | None:
        """Return the captured values for *path*, or ``None``."""
        m = self.regex.fullmatch(path)
        if m is None:
            return None
        return m.groups()


def _placeholder_name(template: str, segment: str) -> str | None:
    """Return the placeholder name for *segment*, or ``None`` if literal."""
    for opener, closer in _FOREIGN_PLACEHOLDERS:
        if len(segment) > 2 and segment.startswith(opener) and segment.endswith(closer):
            inner = segment[1:-1]
            msg = f"use ':{inner}' instead of '{segment}' for path parameters"
            raise PatternCompilationError(template, msg)

    if not segment.startswith(PLACEHOLDER_MARKER):
        return None

    name = segment[len(PLACEHOLDER_MARKER):]
    if not name:
        raise PatternCompilationError(template, "placeholder is missing a name")
    if not name.isidentifier():
        msg = f"placeholder name {name!r} is not a valid identifier"
        raise PatternCompilationError(template, msg)
    return name


def compile_pattern(template: str) -> PathPattern:
    """Compile a path template into a :class:`PathPattern`.

    The empty template and ``"/"`` both compile to the root pattern.
    Empty segments (``//``) are ignored. A single trailing slash on the
    request path is tolerated.

    Raises ``PatternCompilationError`` if the template does not start
    with ``/``, or a placeholder is unnamed, malformed, or duplicated.
    """
    if template and not template.startswith("/"):
        raise PatternCompilationError(template, "path must start with '/'")

    parts: list[str] = []
    names: list[str] = []
    for segment in template.split("/"):
        if not segment:
            continue
        name = _placeholder_name(template, segment)
        if name is None:
            parts.append(re.escape(segment))
            continue
        if name in names:
            msg = f"placeholder {name!r} is declared more than once"
            raise PatternCompilationError(template, msg)
        names.append(name)
        parts.append(SEGMENT_PATTERN)

    source = "/" + "/".join(parts) + ("/?" if parts else "?")
    return PathPattern(
        template=template,
        regex=re.compile(source),
        param_names=tuple(names),
    )


def match_pattern(pattern: PathPattern, path: str) -> tuple[str, ...] | None:
    """Match *path* against *pattern*.

    Returns the captured values in declaration order, or ``None`` when
    the path does not match in full.
    """
    return pattern.match(path)
