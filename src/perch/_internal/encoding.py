"""Text encoders for the two embedding contexts a tag helper writes into.

``html_encode`` produces HTML attribute text. ``javascript_string_encode``
produces text safe inside a double- or single-quoted JavaScript string
literal that itself sits in an HTML ``<script>`` element.
"""

import html

# Characters written as a short backslash escape
_SHORT_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Characters written as \uXXXX so they never close a tag or start an entity
_UNICODE_ESCAPED = frozenset("'<>&")


def html_encode(value: str) -> str:
    """Encode *value* for use inside a double-quoted HTML attribute."""
    return html.escape(value, quote=True)


def javascript_string_encode(value: str) -> str:
    """Encode *value* for use inside a JavaScript string literal.

    Parsing the result as a JavaScript string yields *value* unchanged.
    """
    if not value:
        return ""
    parts: list[str] = []
    for ch in value:
        short = _SHORT_ESCAPES.get(ch)
        if short is not None:
            parts.append(short)
        elif ch in _UNICODE_ESCAPED or ord(ch) < 0x20:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(ch)
    return "".join(parts)
