"""HTML and regular expression escaping."""

from __future__ import annotations

import re
from typing import Any

from .utils import coerce_to_string

__all__ = ["escape_html", "escape_reg_exp", "unescape_html"]


_HTML_ESCAPES = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
    "'": "&#x27;",
    "`": "&#x60;",
}
_HTML_UNESCAPES = {
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&quot;": '"',
    "&#x27;": "'",
    "&#39;": "'",
    "&#x60;": "`",
    "&#96;": "`",
}

_HTML_SPECIAL_CHARACTERS = re.compile(r"[<>&\"'`]")
_HTML_ENTITIES = re.compile("|".join(re.escape(entity) for entity in _HTML_UNESCAPES), re.IGNORECASE)
_REG_EXP_SPECIAL_CHARACTERS = re.compile(r"[-\[\]/{}()*+?.\\^$|]")


def escape_html(subject: Any = None) -> str:
    """Escape ``< > & " ' `` and backticks as HTML entities.

    >>> escape_html('<p>"Fish & chips"</p>')
    '&lt;p&gt;&quot;Fish &amp; chips&quot;&lt;/p&gt;'
    """

    return _HTML_SPECIAL_CHARACTERS.sub(lambda match: _HTML_ESCAPES[match.group(0)], coerce_to_string(subject))


def unescape_html(subject: Any = None) -> str:
    return _HTML_ENTITIES.sub(lambda match: _HTML_UNESCAPES[match.group(0).lower()], coerce_to_string(subject))


def escape_reg_exp(subject: Any = None) -> str:
    """Backslash-escape the regular expression metacharacters in ``subject``."""

    return _REG_EXP_SPECIAL_CHARACTERS.sub(lambda match: "\\" + match.group(0), coerce_to_string(subject))
