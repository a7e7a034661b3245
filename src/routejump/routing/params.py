"""Route template compilation.

Turns a Laravel route template such as ``posts/{post}/comments/{id?}``
into a regular expression. A pure translation step with no I/O, so it
can be tested on its own.
"""

import re

from routejump.errors import TemplateError

# Regex for a required parameter, by where it sits in the template
PARAM_PATTERNS: dict[str, str] = {
    "path": r"[^/]+",
    # Host labels must not swallow the "." between labels
    "host": r"[^/.]+",
}

_PLACEHOLDER = re.compile(r"\{([^{}]*)\}")


def _param_pattern(start: int, host_end: int) -> str:
    if start < host_end:
        return PARAM_PATTERNS["host"]
    return PARAM_PATTERNS["path"]


def _check_literal(template: str, literal: str) -> None:
    if "{" in literal or "}" in literal:
        raise TemplateError(template, "unbalanced brace")


def compile_template(template: str, *, host: bool = False) -> re.Pattern[str]:
    """Compile a route template into a pattern for ``fullmatch``.

    ``{name}`` becomes one-or-more non-slash characters. ``{name?}``
    becomes an optional group that also swallows the ``/`` before it, so
    ``posts/{id?}`` matches both ``posts`` and ``posts/5``. Literal text
    is escaped.

    With *host*, placeholders before the first ``/`` are host labels and
    do not match ``.``.

    Raises ``TemplateError`` for empty placeholders or stray braces.
    """
    host_end = template.find("/") if host else 0
    if host and host_end == -1:
        host_end = len(template)

    parts: list[str] = []
    pos = 0
    for match in _PLACEHOLDER.finditer(template):
        literal = template[pos : match.start()]
        _check_literal(template, literal)

        name = match.group(1).strip()
        optional = name.endswith("?")
        if not name.rstrip("?"):
            raise TemplateError(template, "empty parameter name")

        segment = _param_pattern(match.start(), host_end)
        if optional and literal.endswith("/"):
            parts.append(re.escape(literal[:-1]))
            parts.append(f"(?:/{segment})?")
        elif optional:
            parts.append(re.escape(literal))
            parts.append(f"(?:{segment})?")
        else:
            parts.append(re.escape(literal))
            parts.append(segment)
        pos = match.end()

    tail = template[pos:]
    _check_literal(template, tail)
    parts.append(re.escape(tail))

    try:
        return re.compile("".join(parts))
    except re.error as exc:
        raise TemplateError(template, str(exc)) from exc
