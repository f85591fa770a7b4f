"""Locate substrings and patterns."""

from __future__ import annotations

import re
from typing import Any

from .utils import coerce_to_int, coerce_to_string

__all__ = ["index_of", "last_index_of", "search"]


def index_of(subject: Any = None, search_string: Any = "", from_index: int = 0) -> int:
    """Return the first index of ``search_string`` at or after ``from_index``, or ``-1``."""

    text = coerce_to_string(subject)
    start = max(coerce_to_int(from_index), 0)
    return text.find(coerce_to_string(search_string), start)


def last_index_of(subject: Any = None, search_string: Any = "", from_index: int | None = None) -> int:
    """Return the last index of ``search_string`` starting at or before ``from_index``."""

    text = coerce_to_string(subject)
    needle = coerce_to_string(search_string)
    if from_index is None:
        return text.rfind(needle)
    start = max(coerce_to_int(from_index), 0)
    return text.rfind(needle, 0, start + len(needle))


def search(subject: Any = None, pattern: str | re.Pattern[str] = "", from_index: int = 0) -> int:
    """Return the index of the first match of ``pattern`` at or after ``from_index``."""

    text = coerce_to_string(subject)
    start = coerce_to_int(from_index)
    if start < 0 or start > len(text):
        return -1
    compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(coerce_to_string(pattern))
    match = compiled.search(text, start)
    return match.start() if match else -1
