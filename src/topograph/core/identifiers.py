"""Identifier sanitization and text escaping for DOT output."""

from __future__ import annotations

import string

_ID_FIRST = frozenset(string.ascii_letters)
_ID_REST = frozenset(string.ascii_letters + string.digits + "_-")

# Reserved words of the DOT language, matched case-insensitively
DOT_KEYWORDS = frozenset({"node", "edge", "graph", "digraph", "subgraph", "strict"})

# Characters with meaning inside quoted DOT strings and record labels
_MARKUP_ESCAPES = str.maketrans({
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "{": "\\{",
    "}": "\\}",
    "<": "\\<",
    ">": "\\>",
    "|": "\\|",
})

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
})


def sanitize_identifier(raw: str) -> str:
    """
    Convert an identifier into a legal DOT node identifier.

    Dashes become underscores; everything else is left alone. The original
    identifier is still what labels and tooltips display.
    """
    return raw.replace("-", "_")


def dot_identifier(raw: str) -> str:
    """Sanitized node identifier, quoted when it would read as a DOT keyword."""
    sanitized = sanitize_identifier(raw)
    if sanitized.lower() in DOT_KEYWORDS:
        return f'"{sanitized}"'
    return sanitized


def is_valid_identifier(raw: str) -> bool:
    """Check that an identifier starts with a letter and holds only [A-Za-z0-9_-]."""
    if not raw or raw[0] not in _ID_FIRST:
        return False
    return all(char in _ID_REST for char in raw[1:])


def escape_for_markup(text: str) -> str:
    """Escape text for a quoted DOT attribute such as a tooltip.

    Each character is substituted at most once, in a single pass.
    """
    return text.translate(_MARKUP_ESCAPES)


def escape_html(text: str) -> str:
    """Escape text placed inside an HTML-like table label."""
    return text.translate(_HTML_ESCAPES)
