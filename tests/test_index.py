from __future__ import annotations

import re

import pytest

from stringcraft.index import index_of, last_index_of, search


@pytest.mark.parametrize(
    "subject, needle, from_index, expected",
    [
        ("morning", "n", 0, 3),
        ("morning", "n", 4, 5),
        ("evening", "o", 0, -1),
        ("abc", "", 0, 0),
        ("abc", "a", -5, 0),
    ],
)
def test_index_of(subject, needle, from_index, expected):
    assert index_of(subject, needle, from_index) == expected


@pytest.mark.parametrize(
    "subject, needle, from_index, expected",
    [
        ("morning", "n", None, 5),
        ("morning", "n", 4, 3),
        ("evening", "e", 1, 0),
        ("evening", "ing", 2, -1),
        ("evening", "x", None, -1),
    ],
)
def test_last_index_of(subject, needle, from_index, expected):
    assert last_index_of(subject, needle, from_index) == expected


@pytest.mark.parametrize(
    "subject, pattern, from_index, expected",
    [
        ("morning", "rn", 0, 2),
        ("evening", r"\d", 0, -1),
        ("morning", re.compile("n"), 4, 5),
        ("abc", "a", 10, -1),
        ("abc", "a", -1, -1),
        ("abc", "", 3, 3),
    ],
)
def test_search(subject, pattern, from_index, expected):
    assert search(subject, pattern, from_index) == expected
