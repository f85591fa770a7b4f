"""Counting helpers."""

from __future__ import annotations

import re
from typing import Any, Callable

from .split import graphemes, words
from .utils import coerce_to_string

__all__ = ["count", "count_graphemes", "count_substrings", "count_where", "count_words"]


def count(subject: Any = None) -> int:
    """Return the number of code points in ``subject``."""

    return len(coerce_to_string(subject))


def count_graphemes(subject: Any = None) -> int:
    return len(graphemes(subject))


def count_substrings(subject: Any = None, substring: Any = None) -> int:
    """Count non-overlapping occurrences of ``substring``; empty needles count ``0``."""

    needle = coerce_to_string(substring)
    if not needle:
        return 0
    return coerce_to_string(subject).count(needle)


def count_where(subject: Any = None, predicate: Callable[[str, int, str], Any] | None = None) -> int:
    """Count characters for which ``predicate(character, index, subject)`` is truthy.

    Bind any extra context with a closure, :func:`functools.partial` or a
    bound method before passing ``predicate``.
    """

    if predicate is None:
        return 0
    if not callable(predicate):
        raise TypeError("predicate must be callable")

    text = coerce_to_string(subject)
    return sum(1 for index, character in enumerate(text) if predicate(character, index, text))


def count_words(subject: Any = None, pattern: str | re.Pattern[str] | None = None, flags: int = 0) -> int:
    return len(words(subject, pattern, flags))
