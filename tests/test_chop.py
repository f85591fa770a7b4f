from __future__ import annotations

import pytest

from stringcraft.chop import (
    char_at,
    code_point_at,
    first,
    grapheme_at,
    last,
    prune,
    slice,
    substr,
    substring,
    truncate,
)


@pytest.mark.parametrize(
    "subject, position, expected",
    [
        ("helicopter", 0, "h"),
        ("helicopter", 1, "e"),
        ("helicopter", 10, ""),
        ("helicopter", -1, ""),
        (None, 0, ""),
    ],
)
def test_char_at(subject, position, expected):
    assert char_at(subject, position) == expected


def test_code_point_at():
    assert code_point_at("rain", 1) == 97
    assert code_point_at("\U0001F600", 0) == 0x1F600
    assert code_point_at("", 0) is None


def test_grapheme_at_keeps_combining_marks():
    assert grapheme_at("cafe\u0301", 3) == "e\u0301"
    assert grapheme_at("cafe\u0301", 4) == ""


def test_first_and_last():
    assert first("vehicle") == "v"
    assert first("vehicle", 2) == "ve"
    assert first("vehicle", 0) == ""
    assert first("car", 10) == "car"
    assert last("vehicle") == "e"
    assert last("vehicle", 2) == "le"
    assert last("vehicle", 0) == ""


@pytest.mark.parametrize(
    "call, expected",
    [
        (lambda: slice("miami", 1), "iami"),
        (lambda: slice("florida", -4, -1), "rid"),
        (lambda: substr("infinite loop", 9), "loop"),
        (lambda: substr("dreams", 2, 2), "ea"),
        (lambda: substr("dreams", -3), "ams"),
        (lambda: substring("beach", 1), "each"),
        (lambda: substring("ocean", 1, 3), "ce"),
        (lambda: substring("ocean", 3, 1), "ce"),
        (lambda: substring("ocean", -2, 2), "oc"),
    ],
)
def test_extraction(call, expected):
    assert call() == expected


@pytest.mark.parametrize(
    "subject, length, end, expected",
    [
        ("Once upon a time there lived in a land", 7, "...", "Once..."),
        ("Good day, Little Red Riding Hood", 14, " (...)", "Good day (...)"),
        ("Once upon", 10, "...", "Once upon"),
        ("Once upon", 2, "...", "..."),
        ("Alexander", 4, "", "Alex"),
    ],
)
def test_truncate(subject, length, end, expected):
    assert truncate(subject, length, end) == expected


@pytest.mark.parametrize(
    "subject, length, end, expected",
    [
        ("Once upon a time there lived in a land", 7, "...", "Once..."),
        ("Good day, Little Red Riding Hood", 16, " (more)", "Good day (more)"),
        ("Once upon", 10, "...", "Once upon"),
    ],
)
def test_prune_cuts_on_word_boundaries(subject, length, end, expected):
    assert prune(subject, length, end) == expected
