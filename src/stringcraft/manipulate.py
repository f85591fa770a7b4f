"""Padding, trimming and other in-place manipulations of strings."""

from __future__ import annotations

import re
import unicodedata
from typing import Any, Callable, Iterable

from .split import graphemes, words
from .utils import clip, coerce_to_int, coerce_to_string

__all__ = [
    "build_padding",
    "insert",
    "latinise",
    "pad",
    "pad_left",
    "pad_right",
    "repeat",
    "replace",
    "replace_all",
    "reverse",
    "reverse_grapheme",
    "slugify",
    "splice",
    "trim",
    "trim_left",
    "trim_right",
    "word_wrap",
]


Replacement = str | Callable[[re.Match[str]], str]


def build_padding(pattern: str, length: int) -> str:
    """Repeat ``pattern`` and cut the result to exactly ``length`` characters."""

    if not pattern or length <= 0:
        return ""
    repeats = length // len(pattern) + 1
    return (pattern * repeats)[:length]


def _padding_request(subject: Any, length: Any, pad_with: Any) -> tuple[str, int, str]:
    text = coerce_to_string(subject)
    target = clip(coerce_to_int(length), 0)
    return text, target, coerce_to_string(pad_with, " ")


def pad_left(subject: Any = None, length: Any = 0, pad_with: Any = " ") -> str:
    """Pad ``subject`` on the left until it is ``length`` characters long.

    >>> pad_left("dog", 5)
    '  dog'
    >>> pad_left("cat", 6, "-=")
    '-=-cat'
    """

    text, target, pattern = _padding_request(subject, length, pad_with)
    if target <= len(text):
        return text
    return build_padding(pattern, target - len(text)) + text


def pad_right(subject: Any = None, length: Any = 0, pad_with: Any = " ") -> str:
    """Pad ``subject`` on the right until it is ``length`` characters long."""

    text, target, pattern = _padding_request(subject, length, pad_with)
    if target <= len(text):
        return text
    return text + build_padding(pattern, target - len(text))


def pad(subject: Any = None, length: Any = 0, pad_with: Any = " ") -> str:
    """Pad both sides of ``subject``; an odd remainder goes to the right."""

    text, target, pattern = _padding_request(subject, length, pad_with)
    if target <= len(text):
        return text
    missing = target - len(text)
    left = missing // 2
    return build_padding(pattern, left) + text + build_padding(pattern, missing - left)


def repeat(subject: Any = None, times: Any = 1) -> str:
    return coerce_to_string(subject) * clip(coerce_to_int(times, 1), 0)


def insert(subject: Any = None, to_insert: Any = "", position: int | None = None) -> str:
    """Insert ``to_insert`` into ``subject`` at ``position``.

    The subject is returned untouched when ``position`` falls outside of it.
    """

    text = coerce_to_string(subject)
    addition = coerce_to_string(to_insert)
    index = len(text) if position is None else coerce_to_int(position)
    if index < 0 or index > len(text) or not addition:
        return text
    return text[:index] + addition + text[index:]


def splice(subject: Any = None, start: int = 0, delete_count: int | None = None, to_add: Any = "") -> str:
    """Remove ``delete_count`` characters at ``start`` and insert ``to_add``.

    A negative ``start`` counts from the end of the string.
    """

    text = coerce_to_string(subject)
    length = len(text)
    begin = coerce_to_int(start)
    if begin < 0:
        begin = max(length + begin, 0)
    begin = min(begin, length)

    removed = length - begin if delete_count is None else clip(coerce_to_int(delete_count), 0, length - begin)
    return text[:begin] + coerce_to_string(to_add) + text[begin + removed :]


def replace(subject: Any = None, pattern: str | re.Pattern[str] = "", replacement: Replacement = "") -> str:
    """Replace the first occurrence of ``pattern``.

    ``pattern`` may be a plain string or a compiled regular expression, in
    which case ``replacement`` may also be a callable receiving the match.
    """

    text = coerce_to_string(subject)
    if isinstance(pattern, re.Pattern):
        return pattern.sub(replacement, text, count=1)
    return text.replace(coerce_to_string(pattern), coerce_to_string(replacement), 1)


def replace_all(subject: Any = None, pattern: str | re.Pattern[str] = "", replacement: Replacement = "") -> str:
    text = coerce_to_string(subject)
    if isinstance(pattern, re.Pattern):
        return pattern.sub(replacement, text)
    needle = coerce_to_string(pattern)
    if not needle:
        return text
    return text.replace(needle, coerce_to_string(replacement))


def reverse(subject: Any = None) -> str:
    return coerce_to_string(subject)[::-1]


def reverse_grapheme(subject: Any = None) -> str:
    """Reverse ``subject`` keeping combining sequences attached to their base."""

    return "".join(reversed(graphemes(subject)))


def latinise(subject: Any = None) -> str:
    """Remove diacritics by decomposing characters and dropping combining marks."""

    text = unicodedata.normalize("NFKD", coerce_to_string(subject))
    return "".join(character for character in text if not unicodedata.combining(character))


def slugify(value: Any = None, *, separator: str = "-", allow_unicode: bool = False) -> str:
    """Create a URL friendly slug from ``value``.

    Parameters
    ----------
    value:
        The text to normalise. When an iterable of strings is provided the values
        are joined with spaces before slugification.
    separator:
        The string used to join individual words.
    allow_unicode:
        When ``True`` unicode letters are preserved. Otherwise the result is
        restricted to ASCII.
    """

    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        value = " ".join(str(part) for part in value)

    text = coerce_to_string(value)
    if allow_unicode:
        text = unicodedata.normalize("NFKC", text)
    else:
        text = latinise(text).encode("ascii", "ignore").decode("ascii")

    return separator.join(word.lower() for word in words(text))


def trim(subject: Any = None, whitespace: Any = None) -> str:
    """Strip ``whitespace`` characters (default: any whitespace) from both ends."""

    text = coerce_to_string(subject)
    if whitespace is None:
        return text.strip()
    return text.strip(coerce_to_string(whitespace))


def trim_left(subject: Any = None, whitespace: Any = None) -> str:
    text = coerce_to_string(subject)
    if whitespace is None:
        return text.lstrip()
    return text.lstrip(coerce_to_string(whitespace))


def trim_right(subject: Any = None, whitespace: Any = None) -> str:
    text = coerce_to_string(subject)
    if whitespace is None:
        return text.rstrip()
    return text.rstrip(coerce_to_string(whitespace))


def word_wrap(
    subject: Any = None,
    width: Any = 75,
    new_line: Any = "\n",
    indent: Any = "",
    cut: bool = False,
) -> str:
    """Wrap ``subject`` so that lines hold at most ``width`` characters.

    Lines break at spaces and every line is prefixed with ``indent``. A word
    longer than ``width`` stays whole unless ``cut`` is set, in which case it
    is split at ``width``. A non-positive ``width`` returns just ``indent``.

    >>> word_wrap("Hello World", 4)
    'Hello\\nWorld'
    """

    text = coerce_to_string(subject)
    limit = coerce_to_int(width, 75)
    separator = coerce_to_string(new_line, "\n")
    prefix = coerce_to_string(indent)
    if not text or limit <= 0:
        return prefix

    pieces: list[str] = []
    offset = 0
    while len(text) - offset > limit:
        if text[offset] == " ":
            offset += 1
            continue

        space = text.rfind(" ", offset, offset + limit + 1)
        if space >= offset:
            pieces.append(prefix + text[offset:space] + separator)
            offset = space + 1
        elif cut:
            pieces.append(prefix + text[offset : offset + limit] + separator)
            offset += limit
        else:
            space = text.find(" ", offset + limit)
            if space < 0:
                pieces.append(prefix + text[offset:])
                offset = len(text)
            else:
                pieces.append(prefix + text[offset:space] + separator)
                offset = space + 1

    if offset < len(text):
        pieces.append(prefix + text[offset:])
    return "".join(pieces)
