"""Case conversion utilities."""

from __future__ import annotations

from typing import Any

from .split import words
from .utils import coerce_to_string

__all__ = [
    "camel_case",
    "capitalize",
    "decapitalize",
    "kebab_case",
    "lower_case",
    "snake_case",
    "swap_case",
    "title_case",
    "upper_case",
]


def _capitalize_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def camel_case(subject: Any = None) -> str:
    """Return ``subject`` in camelCase.

    >>> camel_case("XMLHttpRequest")
    'xmlHttpRequest'
    """

    parts = words(subject)
    if not parts:
        return ""
    head, *tail = parts
    return head.lower() + "".join(_capitalize_word(word) for word in tail)


def kebab_case(subject: Any = None) -> str:
    return "-".join(word.lower() for word in words(subject))


def snake_case(subject: Any = None) -> str:
    return "_".join(word.lower() for word in words(subject))


def title_case(subject: Any = None, no_split: str = "") -> str:
    """Capitalize every word of ``subject`` in place.

    Letters that directly follow a character listed in ``no_split`` keep their
    case, so ``title_case("jean-luc", "-")`` gives ``"Jean-luc"``.
    """

    text = coerce_to_string(subject)
    result: list[str] = []
    previous = ""
    for character in text:
        if character.isalpha():
            starts_word = not previous.isalpha() and not (previous and previous in no_split)
            character = character.upper() if starts_word else character.lower()
        result.append(character)
        previous = character
    return "".join(result)


def capitalize(subject: Any = None, rest_to_lower: bool = False) -> str:
    text = coerce_to_string(subject)
    rest = text[1:].lower() if rest_to_lower else text[1:]
    return text[:1].upper() + rest


def decapitalize(subject: Any = None) -> str:
    text = coerce_to_string(subject)
    return text[:1].lower() + text[1:]


def lower_case(subject: Any = None) -> str:
    return coerce_to_string(subject).lower()


def upper_case(subject: Any = None) -> str:
    return coerce_to_string(subject).upper()


def swap_case(subject: Any = None) -> str:
    return coerce_to_string(subject).swapcase()
