"""Split strings into characters, code points, graphemes and words."""

from __future__ import annotations

import re
import unicodedata
from typing import Any, Iterator

from .utils import coerce_to_string

__all__ = ["chars", "code_points", "graphemes", "iter_graphemes", "split", "words"]


_ALPHANUMERIC_RUN = re.compile(r"[^\W_]+")
_ZERO_WIDTH_JOINER = "\u200d"
_EXTENDING_CATEGORIES = frozenset({"Mn", "Mc", "Me"})


def chars(subject: Any = None) -> list[str]:
    """Return the code points of ``subject`` as one-character strings."""

    return list(coerce_to_string(subject))


def code_points(subject: Any = None) -> list[int]:
    return [ord(character) for character in coerce_to_string(subject)]


def _extends_cluster(character: str) -> bool:
    if unicodedata.category(character) in _EXTENDING_CATEGORIES:
        return True
    code = ord(character)
    # variation selectors and emoji skin tone modifiers
    return 0xFE00 <= code <= 0xFE0F or 0x1F3FB <= code <= 0x1F3FF


def iter_graphemes(subject: Any = None) -> Iterator[str]:
    """Yield user-perceived characters of ``subject`` one at a time.

    A cluster is a base code point followed by combining marks, variation
    selectors, skin tone modifiers and zero width joiner sequences. ``"\\r\\n"``
    is kept together. Each call walks the text with its own local state.
    """

    cluster = ""
    joined = False
    for character in coerce_to_string(subject):
        if cluster and (
            joined
            or character == _ZERO_WIDTH_JOINER
            or _extends_cluster(character)
            or (cluster == "\r" and character == "\n")
        ):
            cluster += character
        else:
            if cluster:
                yield cluster
            cluster = character
        joined = character == _ZERO_WIDTH_JOINER

    if cluster:
        yield cluster


def graphemes(subject: Any = None) -> list[str]:
    return list(iter_graphemes(subject))


def split(subject: Any = None, separator: str | re.Pattern[str] | None = None, limit: int | None = None) -> list[str]:
    """Split ``subject`` by ``separator``.

    ``separator`` may be a plain string or a compiled regular expression. When
    it is ``None`` the whole subject is returned as a single item, and an empty
    separator splits into characters. ``limit`` caps the number of items.
    """

    text = coerce_to_string(subject)
    if separator is None:
        parts = [text]
    elif isinstance(separator, re.Pattern):
        parts = separator.split(text)
    elif separator == "":
        parts = list(text)
    else:
        parts = text.split(separator)

    if limit is not None:
        parts = parts[: max(limit, 0)]
    return parts


def _split_alphanumeric_run(run: str) -> list[str]:
    parts: list[str] = []
    start = 0
    for position in range(1, len(run)):
        previous, current = run[position - 1], run[position]
        following = run[position + 1] if position + 1 < len(run) else ""
        if (
            previous.isdigit() != current.isdigit()
            or (previous.islower() and current.isupper())
            or (previous.isupper() and current.isupper() and following.islower())
        ):
            parts.append(run[start:position])
            start = position
    parts.append(run[start:])
    return parts


def words(subject: Any = None, pattern: str | re.Pattern[str] | None = None, flags: int = 0) -> list[str]:
    """Split ``subject`` into words.

    Without ``pattern`` words are runs of letters and digits, further split on
    digit/letter changes and on case humps, so ``"XMLHttpRequest"`` yields
    ``["XML", "Http", "Request"]``. A custom ``pattern`` returns every match.
    """

    text = coerce_to_string(subject)
    if pattern is not None:
        compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, flags)
        return [match.group(0) for match in compiled.finditer(text)]

    result: list[str] = []
    for match in _ALPHANUMERIC_RUN.finditer(text):
        result.extend(_split_alphanumeric_run(match.group(0)))
    return result
