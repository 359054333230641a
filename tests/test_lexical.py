# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the literal, name and quoting predicates."""

from __future__ import annotations

import pytest

from optkit.lexical import (
    is_abbreviation_char,
    is_integer,
    is_logical,
    is_name,
    is_name_char,
    is_real,
    to_logical,
    unquote,
)


@pytest.mark.parametrize("text", ["0", "42", "+7", "-13", "007", "5   "])
def test_is_integer_accepts(text: str) -> None:
    assert is_integer(text)


@pytest.mark.parametrize("text", ["", "+", "-", "+-1", "1.0", "1e3", " 1", "12a", "1 2", "٣"])
def test_is_integer_rejects(text: str) -> None:
    assert not is_integer(text)


@pytest.mark.parametrize(
    "text",
    ["1", "-1", "1.", ".5", "-.5", "+0.34", "1E10", "1e-3", "2.5e+07", "1.e5", "3.14  "],
)
def test_is_real_accepts(text: str) -> None:
    assert is_real(text)


@pytest.mark.parametrize(
    "text",
    ["", ".", "+.", "-", "e5", ".e5", "1e", "1e+", "1.2.3", "--1", "1ee5", "1e5.0", "0x10", "inf", "nan"],
)
def test_is_real_rejects(text: str) -> None:
    assert not is_real(text)


def test_integers_are_reals() -> None:
    for text in ("0", "-12", "+900"):
        assert is_integer(text) and is_real(text)


def test_is_logical_is_case_insensitive() -> None:
    for text in ("T", "f", "True", "FALSE", ".true.", ".False.", "t  "):
        assert is_logical(text)
    for text in ("yes", "1", "", ".T.", "truee"):
        assert not is_logical(text)


def test_to_logical_converts_literals() -> None:
    assert to_logical("t") is True
    assert to_logical(".TRUE.") is True
    assert to_logical("false") is False

    with pytest.raises(ValueError):
        to_logical("yes")


def test_name_characters_exclude_quotes_and_separators() -> None:
    for char in ("a", "Z", "0", "-", "_", ".", "%", "&", "~", ":"):
        assert is_name_char(char)
    for char in (" ", "!", '"', "#", "$", "'", "=", "`", "\t", "é", ""):
        assert not is_name_char(char)


def test_is_name() -> None:
    assert is_name("count")
    assert is_name("log-level.2")
    assert not is_name("")
    assert not is_name("a=b")
    assert not is_name("two words")


def test_abbreviation_characters_exclude_numeric_leads() -> None:
    assert is_abbreviation_char("v")
    assert is_abbreviation_char("?")
    for char in ("1", ".", "+", "-", "=", "ab"):
        assert not is_abbreviation_char(char)


def test_unquote_strips_matching_quotes() -> None:
    assert unquote('"hello world"') == "hello world"
    assert unquote("'a b'") == "a b"
    assert unquote('" padded "') == " padded "
    assert unquote('""') == ""
    assert unquote("plain value   ") == "plain value"
    assert unquote("") == ""
    assert unquote("x") == "x"
    assert unquote(' "kept"') == ' "kept"'


def test_unquote_rejects_lone_and_unterminated_quotes() -> None:
    with pytest.raises(ValueError, match="lone quote"):
        unquote("'")
    with pytest.raises(ValueError, match="unterminated"):
        unquote("\"abc'")
