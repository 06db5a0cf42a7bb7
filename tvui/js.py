"""Helpers for embedding Python values safely inside JavaScript source."""

from __future__ import annotations

import json
import re

# Characters that JSON allows raw but that are escaped so the literal can be
# embedded anywhere in a page script (including inside HTML) without surprises.
_EXTRA_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_EXTRA_PATTERN = re.compile("[<>&\u2028\u2029]")
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def safe_string(s: str) -> str:
    """Return ``s`` as a double-quoted, fully escaped JavaScript string literal.

    Quotes, backslashes, backticks inside the literal, template markers and
    control characters cannot break out of the produced literal.
    """
    cleaned = _LONE_SURROGATE.sub("\ufffd", s)
    literal = json.dumps(cleaned, ensure_ascii=False)
    return _EXTRA_PATTERN.sub(lambda m: _EXTRA_ESCAPES[m.group(0)], literal)