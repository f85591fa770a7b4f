from __future__ import annotations

import re

import pytest

from stringcraft.manipulate import (
    build_padding,
    insert,
    latinise,
    pad,
    pad_left,
    pad_right,
    repeat,
    replace,
    replace_all,
    reverse,
    reverse_grapheme,
    slugify,
    splice,
    trim,
    trim_left,
    trim_right,
    word_wrap,
)


def test_build_padding():
    assert build_padding("-=", 5) == "-=-=-"
    assert build_padding("", 3) == ""
    assert build_padding("x", 0) == ""


@pytest.mark.parametrize(
    "function, subject, length, pad_with, expected",
    [
        (pad_left, "dog", 5, " ", "  dog"),
        (pad_left, "bird", 6, "#", "##bird"),
        (pad_left, "cat", 6, "-=", "-=-cat"),
        (pad_left, "long", 2, " ", "long"),
        (pad_right, "dog", 5, " ", "dog  "),
        (pad_right, "cat", 6, "-=", "cat-=-"),
        (pad, "dog", 5, " ", " dog "),
        (pad, "bird", 7, "-", "-bird--"),
        (pad, "cat", 6, "-=", "-cat-="),
        (pad, None, 3, "*", "***"),
    ],
)
def test_padding(function, subject, length, pad_with, expected):
    assert function(subject, length, pad_with) == expected


def test_repeat():
    assert repeat("w", 3) == "www"
    assert repeat("world") == "world"
    assert repeat("x", 0) == ""
    assert repeat("x", -2) == ""


def test_insert():
    assert insert("ct", "a", 1) == "cat"
    assert insert("sunny", " day") == "sunny day"
    assert insert("abc", "x", 10) == "abc"
    assert insert("abc", "x", -1) == "abc"


@pytest.mark.parametrize(
    "args, expected",
    [
        (("new year", 0, 4), "year"),
        (("new year", 0, 3, "happy"), "happy year"),
        (("new year", -4, 4, "day"), "new day"),
        (("abc", 1), "a"),
        (("abc", 10, 1, "d"), "abcd"),
    ],
)
def test_splice(args, expected):
    assert splice(*args) == expected


def test_replace_first_occurrence():
    assert replace("swan", "wa", "u") == "sun"
    assert replace("a-b-c", "-", "+") == "a+b-c"
    assert replace("domestic duck", re.compile("domestic"), "wild") == "wild duck"
    assert replace("hello", re.compile("l"), lambda match: match.group(0).upper()) == "heLlo"


def test_replace_all():
    assert replace_all("a-b-c", "-", "+") == "a+b+c"
    assert replace_all("r2d2", re.compile(r"\d"), "x") == "rxdx"
    assert replace_all("abc", "", "x") == "abc"


def test_reverse():
    assert reverse("winter") == "retniw"
    assert reverse_grapheme("cafe\u0301") == "e\u0301fac"


def test_latinise():
    assert latinise("cafe\u0301") == "cafe"
    assert latinise("Ünïcödé") == "Unicode"
    assert latinise("ﬁle") == "file"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("My Project", "my-project"),
        ("   My    Project  ", "my-project"),
        ("Project! @ 2025", "project-2025"),
        ("Café ☕", "cafe"),
        (("alpha", "beta"), "alpha-beta"),
    ],
)
def test_slugify_basic(value, expected):
    assert slugify(value) == expected


def test_slugify_options():
    assert slugify("Hello World", separator="_") == "hello_world"
    assert slugify("Café Über", allow_unicode=True) == "café-über"


@pytest.mark.parametrize(
    "function, subject, characters, expected",
    [
        (trim, "  Mother nature  ", None, "Mother nature"),
        (trim, "--Earth--", "-", "Earth"),
        (trim_left, "  a ", None, "a "),
        (trim_left, "**a*", "*", "a*"),
        (trim_right, "  a ", None, "  a"),
        (trim_right, "*a**", "*", "*a"),
        (trim, None, None, ""),
    ],
)
def test_trim(function, subject, characters, expected):
    assert function(subject, characters) == expected


THEATRICALITY = (
    "Theatricality and deception are powerful agents to the uninitiated... but we are initiated, "
    "aren't we Bruce? Members of the League of Shadows!"
)
BABIES = "I hear babies crying, I watch them grow"


@pytest.mark.parametrize(
    "subject, expected",
    [
        ("", ""),
        (None, ""),
        ("Yes. The fire rises. ", "Yes. The fire rises. "),
        (
            THEATRICALITY,
            "Theatricality and deception are powerful agents to the uninitiated... but\n"
            "we are initiated, aren't we Bruce? Members of the League of Shadows!",
        ),
        (
            "Theatricality-and-deception-are-powerful-agents-to-the-uninitiated...-but-we-are-initiated",
            "Theatricality-and-deception-are-powerful-agents-to-the-uninitiated...-but-we-are-initiated",
        ),
    ],
)
def test_word_wrap_default_width(subject, expected):
    assert word_wrap(subject) == expected


@pytest.mark.parametrize(
    "subject, width, expected",
    [
        ("Hello", 4, "Hello"),
        ("  Hello  ", 4, "Hello\n "),
        ("Hello World", 4, "Hello\nWorld"),
        ("Yes. The fire rises.", 4, "Yes.\nThe\nfire\nrises."),
        ("And I think to myself what a wonderful world.", 10, "And I\nthink to\nmyself\nwhat a\nwonderful\nworld."),
        ("Hello", 0, ""),
        ("Hello", -5, ""),
    ],
)
def test_word_wrap_width(subject, width, expected):
    assert word_wrap(subject, width) == expected


@pytest.mark.parametrize(
    "subject, width, indent, expected",
    [
        ("Hello", 4, "***", "***Hello"),
        ("Hello World", 4, "  ", "  Hello\n  World"),
        ("Yes. The fire rises.", 4, "**", "**Yes.\n**The\n**fire\n**rises."),
        ("", 4, "000", "000"),
        ("Hello", 0, "000", "000"),
    ],
)
def test_word_wrap_indent(subject, width, indent, expected):
    assert word_wrap(subject, width, indent=indent) == expected


def test_word_wrap_new_line():
    assert word_wrap("What A Wonderful World", 10, "+", "  ") == "  What A+  Wonderful+  World"
    assert word_wrap(BABIES, 5, new_line="<br/>", indent="-") == (
        "-I<br/>-hear<br/>-babies<br/>-crying,<br/>-I<br/>-watch<br/>-them<br/>-grow"
    )


def test_word_wrap_cut_long_words():
    assert word_wrap("Hello", 4, cut=True) == "Hell\no"
    assert word_wrap(BABIES, 5, cut=True) == "I\nhear\nbabie\ns\ncryin\ng, I\nwatch\nthem\ngrow"
