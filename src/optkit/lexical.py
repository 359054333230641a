# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lexical predicates for option literals, names and abbreviations.

Every predicate ignores trailing blanks. These functions are the single source
of truth for literal acceptance: numeric conversion is attempted only after the
matching predicate accepts a string.
"""

from __future__ import annotations

import re
from typing import Final

_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_REAL_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+|[0-9]*\.[0-9]+|[0-9]+\.[0-9]*)(?:[Ee][+-]?[0-9]+)?",
)

TRUE_LITERALS: Final[frozenset[str]] = frozenset({"T", "TRUE", ".TRUE."})
FALSE_LITERALS: Final[frozenset[str]] = frozenset({"F", "FALSE", ".FALSE."})

QUOTE_CHARS: Final[str] = "\"'"
NUMERIC_LEAD_CHARS: Final[str] = "-0123456789."
_ABBREVIATION_EXCLUDED: Final[str] = "0123456789.+-"

# Printable ASCII minus blank, '!', '"', '#', '$', "'", '=' and '`'.
_NAME_CODE_RANGES: Final[tuple[tuple[int, int], ...]] = ((37, 38), (40, 60), (62, 95), (97, 126))


def _trim(text: str) -> str:
    return text.rstrip(" ")


def is_logical(text: str) -> bool:
    """Return ``True`` when ``text`` is a logical literal.

    Accepted spellings are ``T``, ``F``, ``TRUE``, ``FALSE``, ``.TRUE.`` and
    ``.FALSE.`` in any letter case.
    """

    literal = _trim(text).upper()
    return literal in TRUE_LITERALS or literal in FALSE_LITERALS


def to_logical(text: str) -> bool:
    """Convert an accepted logical literal into a boolean.

    Args:
        text: Literal previously accepted by :func:`is_logical`.

    Returns:
        bool: ``True`` for the true spellings, ``False`` for the false ones.

    Raises:
        ValueError: If ``text`` is not a logical literal.
    """

    literal = _trim(text).upper()
    if literal in TRUE_LITERALS:
        return True
    if literal in FALSE_LITERALS:
        return False
    raise ValueError(f"{text!r} is not a logical literal")


def is_integer(text: str) -> bool:
    """Return ``True`` when ``text`` is an optionally signed run of decimal digits."""

    return _INTEGER_RE.fullmatch(_trim(text)) is not None


def is_real(text: str) -> bool:
    """Return ``True`` when ``text`` is a real literal.

    The accepted forms are ``[+-]? (D+ | D* '.' D+ | D+ '.' D*) ([Ee] [+-]? D+)?``:
    an optional sign, a mantissa holding at least one digit and an optional
    exponent.
    """

    return _REAL_RE.fullmatch(_trim(text)) is not None


def is_name_char(char: str) -> bool:
    """Return ``True`` when ``char`` may appear in an option name."""

    if len(char) != 1:
        return False
    code = ord(char)
    return any(low <= code <= high for low, high in _NAME_CODE_RANGES)


def is_name(text: str) -> bool:
    """Return ``True`` when ``text`` is non-empty and made only of name characters."""

    return bool(text) and all(is_name_char(char) for char in text)


def is_abbreviation_char(char: str) -> bool:
    """Return ``True`` when ``char`` may be used as a one-letter abbreviation.

    Digits, ``.``, ``+`` and ``-`` are excluded so that negative numbers remain
    recognisable as positional arguments.
    """

    return is_name_char(char) and char not in _ABBREVIATION_EXCLUDED


def is_quote(char: str) -> bool:
    """Return ``True`` for the single and double quote characters."""

    return len(char) == 1 and char in QUOTE_CHARS


def unquote(text: str) -> str:
    """Strip one matching pair of surrounding quotes from ``text``.

    Trailing blanks are ignored. Leading blanks are kept and prevent unquoting.

    Args:
        text: Raw value taken from a ``--name=value`` token.

    Returns:
        str: ``text`` without its enclosing quotes, or ``text`` itself when it
        does not start with a quote.

    Raises:
        ValueError: If ``text`` is a lone quote or an unterminated quoted value.
    """

    value = _trim(text)
    if not value:
        return ""
    if not is_quote(value[0]):
        return value
    if len(value) == 1:
        raise ValueError(f"lone quote character {value!r}")
    if value[-1] != value[0]:
        raise ValueError(f"unterminated quoted value {value!r}")
    return value[1:-1]


__all__ = [
    "NUMERIC_LEAD_CHARS",
    "is_abbreviation_char",
    "is_integer",
    "is_logical",
    "is_name",
    "is_name_char",
    "is_quote",
    "is_real",
    "to_logical",
    "unquote",
]
