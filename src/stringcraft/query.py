"""Predicates over strings."""

from __future__ import annotations

import math
import re
from typing import Any

from .utils import coerce_to_int, coerce_to_string

__all__ = [
    "ends_with",
    "includes",
    "is_alpha",
    "is_alpha_digit",
    "is_blank",
    "is_digit",
    "is_empty",
    "is_lower_case",
    "is_numeric",
    "is_string",
    "is_upper_case",
    "matches",
    "starts_with",
]


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_empty(subject: Any = None) -> bool:
    return coerce_to_string(subject) == ""


def is_blank(subject: Any = None) -> bool:
    return coerce_to_string(subject).strip() == ""


def is_alpha(subject: Any = None) -> bool:
    return coerce_to_string(subject).isalpha()


def is_alpha_digit(subject: Any = None) -> bool:
    return coerce_to_string(subject).isalnum()


def is_digit(subject: Any = None) -> bool:
    return coerce_to_string(subject).isdecimal()


def is_lower_case(subject: Any = None) -> bool:
    """Whether ``subject`` consists only of lower case letters."""

    text = coerce_to_string(subject)
    return text.isalpha() and text == text.lower()


def is_upper_case(subject: Any = None) -> bool:
    text = coerce_to_string(subject)
    return text.isalpha() and text == text.upper()


def is_numeric(subject: Any = None) -> bool:
    """Whether ``subject`` represents a finite number, e.g. ``"-1.5e3"``."""

    if isinstance(subject, bool):
        return False
    if isinstance(subject, (int, float)):
        return math.isfinite(subject)

    text = coerce_to_string(subject).strip()
    if not text:
        return False
    try:
        return math.isfinite(float(text))
    except ValueError:
        return False


def matches(subject: Any = None, pattern: str | re.Pattern[str] | None = None, flags: int = 0) -> bool:
    if pattern is None:
        return False
    compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(coerce_to_string(pattern), flags)
    return compiled.search(coerce_to_string(subject)) is not None


def includes(subject: Any = None, search: Any = "", position: int = 0) -> bool:
    text = coerce_to_string(subject)
    return coerce_to_string(search) in text[max(coerce_to_int(position), 0) :]


def starts_with(subject: Any = None, start: Any = "", position: int = 0) -> bool:
    text = coerce_to_string(subject)
    return text.startswith(coerce_to_string(start), max(coerce_to_int(position), 0))


def ends_with(subject: Any = None, end: Any = "", position: int | None = None) -> bool:
    """Whether ``subject`` ends with ``end``, considering only the first ``position`` characters."""

    text = coerce_to_string(subject)
    if position is not None:
        text = text[: max(coerce_to_int(position), 0)]
    return text.endswith(coerce_to_string(end))
