"""Remove HTML and PHP tags from strings."""

from __future__ import annotations

import re
from enum import Enum, auto
from typing import Any, Iterable

from .utils import coerce_to_string

__all__ = ["strip_tags"]


_TAG_LIST = re.compile(r"<([A-Za-z0-9]+)>")


class _State(Enum):
    OUTPUT = auto()
    HTML = auto()
    EXCLAMATION = auto()
    COMMENT = auto()


def _has_substring_at(text: str, substring: str, index: int, look_behind: bool = True) -> bool:
    """Whether ``substring`` ends (or, without ``look_behind``, starts) at ``index``."""

    start = index - len(substring) + 1 if look_behind else index
    if start < 0:
        return False
    return text[start : start + len(substring)].lower() == substring


def _parse_tag_list(tags: str) -> list[str]:
    return [match.group(1).lower() for match in _TAG_LIST.finditer(tags)]


def _parse_tag_name(tag_content: str) -> str:
    """Extract the lower case name from tag text such as ``'<a href="#">'`` or ``'</b>'``."""

    name: list[str] = []
    started = False
    for character in tag_content.lower():
        if character == "<":
            continue
        if character == ">":
            break
        if character.isspace():
            if started:
                break
            continue
        started = True
        if character != "/":
            name.append(character)
    return "".join(name)


def _allowed_tags(allowable_tags: str | Iterable[str] | None) -> list[str]:
    if allowable_tags is None or isinstance(allowable_tags, str):
        return _parse_tag_list(coerce_to_string(allowable_tags))
    return [coerce_to_string(tag).lower() for tag in allowable_tags]


def strip_tags(
    subject: Any = None,
    allowable_tags: str | Iterable[str] | None = None,
    replacement: Any = "",
) -> str:
    """Remove tags and comments from ``subject``.

    Parameters
    ----------
    subject:
        The text to clean. Quoted attribute values may contain ``<`` and ``>``.
    allowable_tags:
        Tags to keep, either as a string like ``"<a><b>"`` or as names such as
        ``["a", "b"]``.
    replacement:
        Text inserted in place of every removed tag.

    >>> strip_tags('<span class="italic"><b>Hello</b> world!</span>', "<b>")
    '<b>Hello</b> world!'
    """

    text = coerce_to_string(subject)
    if not text:
        return ""

    tags = _allowed_tags(allowable_tags)
    fill = coerce_to_string(replacement)

    state = _State.OUTPUT
    depth = 0
    quote: str | None = None
    output: list[str] = []
    tag_content = ""

    for index, character in enumerate(text):
        advance = False
        if character == "<":
            if quote:
                pass
            elif _has_substring_at(text, "< ", index, look_behind=False):
                advance = True
            elif state is _State.OUTPUT:
                advance = True
                state = _State.HTML
            elif state is _State.HTML:
                depth += 1
            else:
                advance = True
        elif character == "!":
            if state is _State.HTML and _has_substring_at(text, "<!", index):
                state = _State.EXCLAMATION
            else:
                advance = True
        elif character == "-":
            if state is _State.EXCLAMATION and _has_substring_at(text, "!--", index):
                state = _State.COMMENT
            else:
                advance = True
        elif character in ("'", '"'):
            if state is _State.HTML:
                if quote == character:
                    quote = None
                elif not quote:
                    quote = character
            advance = True
        elif character in ("e", "E"):
            if state is _State.EXCLAMATION and _has_substring_at(text, "doctype", index):
                state = _State.HTML
            else:
                advance = True
        elif character == ">":
            if depth > 0:
                depth -= 1
            elif quote:
                pass
            elif state is _State.HTML:
                quote = None
                state = _State.OUTPUT
                if tags:
                    tag_content += ">"
                    output.append(tag_content if _parse_tag_name(tag_content) in tags else fill)
                    tag_content = ""
                else:
                    output.append(fill)
            elif state is _State.EXCLAMATION or (
                state is _State.COMMENT and _has_substring_at(text, "-->", index)
            ):
                quote = None
                state = _State.OUTPUT
                tag_content = ""
            else:
                advance = True
        else:
            advance = True

        if not advance:
            continue
        if state is _State.OUTPUT:
            output.append(character)
        elif state is _State.HTML and tags:
            tag_content += character

    return "".join(output)
