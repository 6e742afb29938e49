"""Header and footer line parsing.

Parsing never fails: malformed headers produce partial ``HeaderParts``
and are reported by the rules instead.
"""
from __future__ import annotations

import re

from gommit.models import HeaderParts

SEPARATOR = ": "

# Conventional header with the built-in type list. Independent of the
# configurable allowed types checked by type-enum.
HEADER_RE = re.compile(
    r"^(feat|fix|build|chore|ci|docs|style|refactor|perf|test)(\([a-z0-9-]+\))?!?: .+$"
)

# Generic trailer: TOKEN: value
FOOTER_RE = re.compile(r"^([A-Z\-]+)(\s+)?:(\s+)?(.+)$")

# Marker trailer, value may be empty.
BREAKING_CHANGE_RE = re.compile(r"^BREAKING[\s-]CHANGE:(\s|$)")

_TYPE_END_RE = re.compile(r"[(!:]")


def parse_header(header: str) -> HeaderParts:
    """Split a header line into type, scope, breaking marker and description."""
    prefix, sep, description = header.partition(SEPARATOR)

    # Without a separator everything before "(" is the type, with no scope.
    if not sep:
        return HeaderParts(
            type=prefix.split("(", 1)[0],
            breaking=prefix.endswith("!"),
        )

    type_token = _TYPE_END_RE.split(prefix, maxsplit=1)[0]

    scope = None
    open_idx = prefix.find("(")
    if open_idx != -1:
        close_idx = prefix.find(")", open_idx + 1)
        if close_idx != -1:
            scope = prefix[open_idx + 1:close_idx]

    return HeaderParts(
        type=type_token,
        scope=scope,
        breaking=prefix.endswith("!"),
        description=description,
        has_separator=True,
    )


def is_breaking_change_line(line: str) -> bool:
    return BREAKING_CHANGE_RE.match(line) is not None


def is_footer_line(line: str) -> bool:
    """True for generic ``TOKEN: value`` trailers, excluding the breaking-change marker."""
    return FOOTER_RE.match(line) is not None and not is_breaking_change_line(line)


def footer_value(line: str) -> str:
    _, _, value = line.partition(":")
    return value.strip()


def contains_breaking_change(lines: list[str]) -> bool:
    return any(is_breaking_change_line(line) for line in lines)
