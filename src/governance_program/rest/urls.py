"""
governance_program.rest.urls

Ordered-placeholder URL templates.

Responsibilities:
- Substitute `{0}..{n}` placeholders with URL-escaped parameters, in order.
- Refuse templates whose placeholder count does not match the parameters.
"""

from __future__ import annotations

import string
from typing import Any
from urllib.parse import quote

_formatter = string.Formatter()


def placeholder_count(template: str) -> int:
    indexes: set[int] = set()
    for _, field_name, _, _ in _formatter.parse(template):
        if field_name is None:
            continue
        if not field_name.isdigit():
            raise ValueError(f"URL template {template!r} has a non-positional placeholder {{{field_name}}}")
        indexes.add(int(field_name))
    if indexes and indexes != set(range(len(indexes))):
        raise ValueError(f"URL template {template!r} skips placeholder positions: {sorted(indexes)}")
    return len(indexes)


def format_url(template: str, *params: Any) -> str:
    expected = placeholder_count(template)
    if expected != len(params):
        raise ValueError(
            f"URL template {template!r} has {expected} placeholders but {len(params)} parameters were supplied"
        )
    return template.format(*(_escape(p) for p in params))


def _escape(value: Any) -> str:
    if value is None:
        raise ValueError("URL parameters must not be None")
    if isinstance(value, bool):
        return "true" if value else "false"
    return quote(str(value), safe="")


# --- Module Notes -----------------------------------------------------------
# Path escaping lives only here; managers never concatenate user input into URLs.
