"""Extract characters and substrings."""

from __future__ import annotations

import re
from typing import Any

from .split import graphemes
from .utils import clip, coerce_to_int, coerce_to_string

__all__ = [
    "char_at",
    "code_point_at",
    "first",
    "grapheme_at",
    "last",
    "prune",
    "slice",
    "substr",
    "substring",
    "truncate",
]


_WORD = re.compile(r"\w+")


def char_at(subject: Any = None, position: int = 0) -> str:
    """Return the character at ``position`` or ``""`` when out of range."""

    text = coerce_to_string(subject)
    index = coerce_to_int(position)
    if 0 <= index < len(text):
        return text[index]
    return ""


def code_point_at(subject: Any = None, position: int = 0) -> int | None:
    character = char_at(subject, position)
    return ord(character) if character else None


def grapheme_at(subject: Any = None, position: int = 0) -> str:
    clusters = graphemes(subject)
    index = coerce_to_int(position)
    if 0 <= index < len(clusters):
        return clusters[index]
    return ""


def first(subject: Any = None, length: int = 1) -> str:
    text = coerce_to_string(subject)
    return text[: clip(coerce_to_int(length, 1), 0)]


def last(subject: Any = None, length: int = 1) -> str:
    text = coerce_to_string(subject)
    count = clip(coerce_to_int(length, 1), 0)
    if count == 0:
        return ""
    return text[-count:]


def slice(subject: Any = None, start: int = 0, end: int | None = None) -> str:
    """Extract ``subject[start:end]``; negative indexes count from the end."""

    return coerce_to_string(subject)[start:end]


def substr(subject: Any = None, start: int = 0, length: int | None = None) -> str:
    """Extract ``length`` characters beginning at ``start``."""

    text = coerce_to_string(subject)
    begin = coerce_to_int(start)
    if begin < 0:
        begin = max(len(text) + begin, 0)
    if length is None:
        return text[begin:]
    return text[begin : begin + clip(coerce_to_int(length), 0)]


def substring(subject: Any = None, start: int = 0, end: int | None = None) -> str:
    """Extract the characters between ``start`` and ``end``.

    Negative indexes are treated as ``0`` and the bounds are swapped when
    ``start`` is greater than ``end``.
    """

    text = coerce_to_string(subject)
    begin = clip(coerce_to_int(start), 0, len(text))
    finish = len(text) if end is None else clip(coerce_to_int(end), 0, len(text))
    if begin > finish:
        begin, finish = finish, begin
    return text[begin:finish]


def truncate(subject: Any = None, length: int | None = None, end: str = "...") -> str:
    """Cut ``subject`` to ``length`` characters, ``end`` included.

    >>> truncate("Little Red Riding Hood", 9)
    'Little...'
    """

    text = coerce_to_string(subject)
    limit = len(text) if length is None else clip(coerce_to_int(length), 0)
    marker = coerce_to_string(end, "...")
    if limit >= len(text):
        return text
    return text[: max(limit - len(marker), 0)] + marker


def prune(subject: Any = None, length: int | None = None, end: str = "...") -> str:
    """Truncate ``subject`` on a word boundary so the result fits ``length``."""

    text = coerce_to_string(subject)
    limit = len(text) if length is None else clip(coerce_to_int(length), 0)
    marker = coerce_to_string(end, "...")
    if limit >= len(text):
        return text

    kept = 0
    for match in _WORD.finditer(text):
        if match.end() <= limit - len(marker):
            kept = match.end()
    return text[:kept] + marker
