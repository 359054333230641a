# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Single-pass command-line parser for POSIX-style short and long options.

The accepted command line has the form ``<program> <term1> ... <termN>`` where
each term is one of:

* ``-abc``: a cluster of flag abbreviations;
* ``-abo VALUE``: a cluster ending in a value option, consuming the next term;
* ``--flag`` or ``--flag=LOGICAL``;
* ``--name VALUE`` or ``--name=VALUE`` (the value may be quoted);
* ``--``: every later term is a positional argument;
* a numeric literal such as ``-10``, ``-.5`` or ``+1E3``;
* a term not starting with ``-``, or ``-`` itself.

Anything else starting with a dash is rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from .errors import CommandLineError, MissingValueError, OptionsError, UnknownOptionError
from .lexical import NUMERIC_LEAD_CHARS, is_abbreviation_char, is_name_char, is_real, unquote
from .models import ParseOutcome

if TYPE_CHECKING:  # pragma: no cover - types only
    from .registry import OptionRegistry

LOGGER = logging.getLogger(__name__)

END_OF_OPTIONS: Final[str] = "--"
TRUE_LITERAL: Final[str] = "true"


class TokenKind(str, Enum):
    """Classification of a raw command-line term."""

    END_OF_OPTIONS = "end-of-options"
    SHORT_CLUSTER = "short-cluster"
    LONG_OPTION = "long-option"
    NUMERIC = "numeric"
    POSITIONAL = "positional"
    INVALID = "invalid"


def classify_token(token: str) -> TokenKind:
    """Return the :class:`TokenKind` of ``token``, ignoring trailing blanks."""

    text = token.rstrip(" ")
    if text == END_OF_OPTIONS:
        return TokenKind.END_OF_OPTIONS
    if len(text) > 1 and text[0] == "-" and is_abbreviation_char(text[1]):
        return TokenKind.SHORT_CLUSTER
    if len(text) > 2 and text.startswith("--") and is_name_char(text[2]):
        return TokenKind.LONG_OPTION
    if len(text) > 1 and text[0] == "-" and text[1] in NUMERIC_LEAD_CHARS:
        return TokenKind.NUMERIC
    if not text.startswith("-") or text == "-":
        return TokenKind.POSITIONAL
    return TokenKind.INVALID


@dataclass(frozen=True, slots=True)
class LongOption:
    """Pieces of a ``--name`` or ``--name=value`` term.

    Attributes:
        name: Option name following the dashes.
        value: Unquoted value after ``=``, or ``None`` when there is no ``=``.
    """

    name: str
    value: str | None = None


def parse_long_option(token: str) -> LongOption:
    """Split a long option term into its name and optional value.

    The name is the longest run of name characters after ``--``. Everything
    after the following ``=`` is the value, with one pair of matching quotes
    removed.

    Args:
        token: Term starting with ``--`` and a name character.

    Returns:
        LongOption: Parsed name and value.

    Raises:
        CommandLineError: If the term is not a well-formed long option.
    """

    text = token.rstrip(" ")
    if len(text) < 3 or not text.startswith("--") or not is_name_char(text[2]):
        raise CommandLineError(f'invalid option string "{text}"', token=token)
    end = 2
    while end < len(text) and is_name_char(text[end]):
        end += 1
    name = text[2:end]
    if end == len(text):
        return LongOption(name=name)
    if text[end] != "=":
        raise CommandLineError(f'invalid option string "{text}"', token=token)
    try:
        value = unquote(text[end + 1 :])
    except ValueError as exc:
        raise CommandLineError(f'invalid option string "{text}"', token=token) from exc
    return LongOption(name=name, value=value)


class CommandLineParser:
    """Walk raw command-line terms and record them in an :class:`OptionRegistry`."""

    def __init__(self, registry: OptionRegistry) -> None:
        self._registry = registry

    def parse(self, args: Sequence[str]) -> None:
        """Process ``args`` left to right with one term of lookahead.

        The registry keeps everything accepted before a failing term.

        Args:
            args: Raw terms, excluding the program name.

        Raises:
            CommandLineError: If a term is malformed, names an unknown option,
                lacks its value or carries an invalid value.
        """

        tokens = list(args)
        position = 0
        while position < len(tokens):
            token = tokens[position]
            position += 1
            kind = classify_token(token)
            LOGGER.debug("term %r classified as %s", token, kind.value)
            match kind:
                case TokenKind.END_OF_OPTIONS:
                    for rest in tokens[position:]:
                        self._registry.store_arg(rest)
                    return
                case TokenKind.SHORT_CLUSTER:
                    position = self._parse_short_cluster(token, tokens, position)
                case TokenKind.LONG_OPTION:
                    position = self._parse_long_option(token, tokens, position)
                case TokenKind.NUMERIC:
                    if not is_real(token):
                        raise CommandLineError(
                            f'expected a numeric argument: "{token.rstrip()}"',
                            token=token,
                        )
                    self._registry.store_arg(token)
                case TokenKind.POSITIONAL:
                    self._registry.store_arg(token)
                case TokenKind.INVALID:
                    raise CommandLineError(f'invalid argument: "{token.rstrip()}"', token=token)

    def _parse_short_cluster(self, token: str, tokens: list[str], position: int) -> int:
        """Assign every abbreviation in ``token`` and return the next position."""

        cluster = token.rstrip(" ")[1:]
        for offset, abbreviation in enumerate(cluster):
            option = self._registry.find_option(abbreviation=abbreviation)
            if option is None:
                raise UnknownOptionError(f"-{abbreviation}")
            if option.is_flag:
                self._registry.set_value(option, TRUE_LITERAL)
                continue
            # A value option must close the cluster; its value is the next term.
            if offset != len(cluster) - 1 or position >= len(tokens):
                raise MissingValueError(f"-{abbreviation}")
            self._registry.set_value(option, tokens[position])
            position += 1
        return position

    def _parse_long_option(self, token: str, tokens: list[str], position: int) -> int:
        """Assign the option named by ``token`` and return the next position."""

        parsed = parse_long_option(token)
        option = self._registry.find_option(name=parsed.name)
        if option is None:
            raise UnknownOptionError(f"--{parsed.name}")
        value = parsed.value
        if value is None:
            if option.is_flag:
                value = TRUE_LITERAL
            elif position < len(tokens):
                value = tokens[position]
                position += 1
            else:
                raise MissingValueError(f"--{parsed.name}")
        self._registry.set_value(option, value)
        return position


def process_command_line(registry: OptionRegistry, args: Sequence[str]) -> ParseOutcome:
    """Parse ``args`` into ``registry`` and report the result as an outcome.

    Args:
        registry: Registry holding the option definitions.
        args: Raw terms, excluding the program name.

    Returns:
        ParseOutcome: Success, or the user error that rejected the command line.
    """

    try:
        CommandLineParser(registry).parse(args)
    except OptionsError as exc:
        LOGGER.debug("command line rejected: %s", exc.message)
        return ParseOutcome.failure(exc)
    return ParseOutcome.success()


def check_required_options(registry: OptionRegistry) -> ParseOutcome:
    """Report the first required option of ``registry`` that was not supplied."""

    try:
        registry.check_required_options()
    except OptionsError as exc:
        return ParseOutcome.failure(exc)
    return ParseOutcome.success()


__all__ = [
    "CommandLineParser",
    "LongOption",
    "TokenKind",
    "check_required_options",
    "classify_token",
    "parse_long_option",
    "process_command_line",
]
