# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for command-line classification and parsing."""

from __future__ import annotations

import pytest

from optkit import (
    CommandLineError,
    DuplicateOptionError,
    MissingValueError,
    OptionRangeError,
    OptionRegistry,
    OptionValueError,
    UnknownOptionError,
    check_required_options,
    process_command_line,
)
from optkit.parser import LongOption, TokenKind, classify_token, parse_long_option


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("--", TokenKind.END_OF_OPTIONS),
        ("-- ", TokenKind.END_OF_OPTIONS),
        ("-v", TokenKind.SHORT_CLUSTER),
        ("-abc", TokenKind.SHORT_CLUSTER),
        ("--count", TokenKind.LONG_OPTION),
        ("--count=5", TokenKind.LONG_OPTION),
        ("-3.5", TokenKind.NUMERIC),
        ("-.5", TokenKind.NUMERIC),
        ("--=x", TokenKind.NUMERIC),
        ("hello", TokenKind.POSITIONAL),
        ("", TokenKind.POSITIONAL),
        ("-", TokenKind.POSITIONAL),
        ("+5", TokenKind.POSITIONAL),
        ("-+", TokenKind.INVALID),
        ("-=", TokenKind.INVALID),
    ],
)
def test_classify_token(token: str, expected: TokenKind) -> None:
    assert classify_token(token) is expected


def test_parse_long_option() -> None:
    assert parse_long_option("--count") == LongOption(name="count")
    assert parse_long_option("--count=5") == LongOption(name="count", value="5")
    assert parse_long_option("--name=") == LongOption(name="name", value="")
    assert parse_long_option('--name="a b"') == LongOption(name="name", value="a b")
    assert parse_long_option("--name=a=b") == LongOption(name="name", value="a=b")
    assert parse_long_option("--count=5   ") == LongOption(name="count", value="5")

    for token in ("--count#5", "--name='", "--name=\"open", "-x"):
        with pytest.raises(CommandLineError, match="invalid option string"):
            parse_long_option(token)


def test_mixed_command_line(registry: OptionRegistry) -> None:
    registry.process_command_line(["-v", "--count=5", "hello"])

    assert registry.get_flag("verbose") is True
    assert registry.get_integer("count") == 5
    assert registry.get_num_args() == 1
    assert registry.get_arg(1) == "hello"
    assert registry.get_string("name") == "x"


def test_out_of_range_value_names_option_and_bounds(registry: OptionRegistry) -> None:
    outcome = process_command_line(registry, ["--count=20"])

    assert not outcome.ok
    assert isinstance(outcome.error, OptionRangeError)
    assert outcome.exit_code == 1
    assert outcome.message is not None
    for fragment in ('"count"', "20", "min: 0", "max: 10"):
        assert fragment in outcome.message
    assert registry.get_integer("count") == 1


def test_double_dash_stops_option_processing(registry: OptionRegistry) -> None:
    registry.process_command_line(["--", "-v", "--count=5"])

    assert not any(option.found for option in registry.options)
    assert registry.args == ("-v", "--count=5")


def test_tokens_after_double_dash_are_verbatim(registry: OptionRegistry) -> None:
    registry.process_command_line(["--", "  spaced  ", "--"])

    assert registry.args == ("  spaced  ", "--")


def test_negative_numbers_are_positional() -> None:
    reg = OptionRegistry()
    reg.process_command_line(["-3.5", "-10", "-.5", "-1E-3", "-"])

    assert reg.args == ("-3.5", "-10", "-.5", "-1E-3", "-")


def test_malformed_numbers_are_rejected() -> None:
    reg = OptionRegistry()
    with pytest.raises(CommandLineError, match="expected a numeric argument"):
        reg.process_command_line(["-5x"])


def test_unknown_abbreviation_is_user_error() -> None:
    reg = OptionRegistry()
    outcome = process_command_line(reg, ["-x"])

    assert isinstance(outcome.error, UnknownOptionError)
    assert outcome.message == 'unknown option: "-x"'


def test_unknown_long_option_is_user_error(registry: OptionRegistry) -> None:
    with pytest.raises(UnknownOptionError, match='"--colour"'):
        registry.process_command_line(["--colour=red"])


def test_invalid_dash_terms_are_user_errors() -> None:
    reg = OptionRegistry()
    with pytest.raises(CommandLineError, match="invalid argument"):
        reg.process_command_line(["-+"])


def test_quoted_long_values(registry: OptionRegistry) -> None:
    registry.process_command_line(['--name="hello world"'])
    assert registry.get_string("name") == "hello world"


def test_single_quoted_value_keeps_inner_blanks(registry: OptionRegistry) -> None:
    registry.process_command_line(["--name=' inner '"])
    assert registry.get_string("name") == " inner "


def test_lone_quote_is_user_error(registry: OptionRegistry) -> None:
    outcome = process_command_line(registry, ["--name='"])

    assert not outcome
    assert isinstance(outcome.error, CommandLineError)
    assert registry.get_string("name") == "x"


def test_long_option_consumes_next_term(registry: OptionRegistry) -> None:
    registry.process_command_line(["--count", "4", "--name", "-v"])

    assert registry.get_integer("count") == 4
    assert registry.get_string("name") == "-v"
    assert registry.get_flag("verbose") is False


def test_missing_long_value(registry: OptionRegistry) -> None:
    with pytest.raises(MissingValueError, match='"--count" requires an argument'):
        registry.process_command_line(["--count"])


def test_flag_accepts_explicit_logical_value(registry: OptionRegistry) -> None:
    registry.process_command_line(["--verbose=F"])

    assert registry.option_found("verbose")
    assert registry.get_flag("verbose") is False


def test_flag_rejects_non_logical_value(registry: OptionRegistry) -> None:
    with pytest.raises(OptionValueError, match="not a valid logical"):
        registry.process_command_line(["--verbose=maybe"])


def test_short_cluster_sets_flags() -> None:
    reg = OptionRegistry()
    reg.define_flag("all", abbreviation="a")
    reg.define_flag("brief", abbreviation="b")
    reg.define_flag("colour", abbreviation="c")

    reg.process_command_line(["-ac"])

    assert reg.get_flag("all") is True
    assert reg.get_flag("brief") is False
    assert reg.get_flag("colour") is True


def test_repeated_flag_in_cluster_fails(registry: OptionRegistry) -> None:
    outcome = process_command_line(registry, ["-vv"])

    assert isinstance(outcome.error, DuplicateOptionError)
    assert outcome.message == 'tried to set option "verbose" twice.'
    assert registry.get_flag("verbose") is True


def test_value_option_closes_cluster_and_takes_next_term(registry: OptionRegistry) -> None:
    registry.process_command_line(["-vc", "3", "rest"])

    assert registry.get_flag("verbose") is True
    assert registry.get_integer("count") == 3
    assert registry.args == ("rest",)


def test_value_option_inside_cluster_is_rejected(registry: OptionRegistry) -> None:
    with pytest.raises(MissingValueError, match='"-c"'):
        registry.process_command_line(["-cv", "3"])


def test_value_option_without_next_term(registry: OptionRegistry) -> None:
    outcome = process_command_line(registry, ["-c"])

    assert isinstance(outcome.error, MissingValueError)


def test_short_value_may_look_like_an_option() -> None:
    reg = OptionRegistry()
    reg.define_integer("offset", 0, abbreviation="o")

    reg.process_command_line(["-o", "-5"])

    assert reg.get_integer("offset") == -5


def test_setting_an_option_twice_fails(registry: OptionRegistry) -> None:
    with pytest.raises(DuplicateOptionError):
        registry.process_command_line(["--count=5", "-c", "5"])


def test_failed_parse_keeps_earlier_values(registry: OptionRegistry) -> None:
    outcome = process_command_line(registry, ["-v", "first", "--bogus", "second"])

    assert not outcome.ok
    assert registry.get_flag("verbose") is True
    assert registry.args == ("first",)
    with pytest.raises(UnknownOptionError):
        outcome.raise_for_error()


def test_successful_outcome() -> None:
    reg = OptionRegistry()
    outcome = process_command_line(reg, [])

    assert outcome.ok
    assert outcome.exit_code == 0
    assert outcome.message is None
    outcome.raise_for_error()


def test_check_required_options_outcome() -> None:
    reg = OptionRegistry()
    reg.define_string("input", "", required=True)

    missing = check_required_options(reg)
    assert not missing
    assert missing.exit_code == 2

    process_command_line(reg, ["--input=data.txt"])
    assert check_required_options(reg).ok
