# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render option help, option values and positional arguments."""

from __future__ import annotations

from typing import Final

from rich.console import Console

from .logging import get_console_manager
from .models import IntegerValue, LogicalValue, Option, RealValue, StringValue
from .registry import OptionRef, OptionRegistry
from .text import format_block

OPTIONS_HEADER: Final[str] = "Options: "
VALUES_HEADER: Final[str] = "Option values: "
ARGS_HEADER: Final[str] = "Arguments: "

REAL_FIELD_WIDTH: Final[int] = 17
REAL_DECIMALS: Final[int] = 9
REAL_EXPONENT_DIGITS: Final[int] = 3


def format_synopsis(option: Option) -> str:
    """Return the usage synopsis of ``option``.

    Value options render as ``--name=NAME`` or ``-a NAME, --name=NAME``; flags
    as ``--name`` or ``-a, --name``.
    """

    if option.is_flag:
        if option.abbreviation is None:
            return f"--{option.name}"
        return f"-{option.abbreviation}, --{option.name}"
    placeholder = option.name.upper()
    if option.abbreviation is None:
        return f"--{option.name}={placeholder}"
    return f"-{option.abbreviation} {placeholder}, --{option.name}={placeholder}"


def format_real(value: float) -> str:
    """Return ``value`` in scientific notation with a three-digit exponent.

    >>> format_real(1.5)
    ' 1.500000000E+000'
    """

    mantissa, exponent = f"{value:.{REAL_DECIMALS}E}".split("E")
    sign = "-" if exponent.startswith("-") else "+"
    digits = exponent.lstrip("+-").rjust(REAL_EXPONENT_DIGITS, "0")
    return f"{mantissa}E{sign}{digits}".rjust(REAL_FIELD_WIDTH)


def format_value(option: Option) -> str:
    """Return the value of ``option`` formatted for the value dump."""

    match option.payload:
        case IntegerValue(value=value):
            return str(value)
        case RealValue(value=value):
            return format_real(value)
        case LogicalValue(value=value):
            return "T" if value else "F"
        case StringValue(value=value):
            return value.rstrip(" ")
    raise TypeError(f"unsupported payload {option.payload!r}")


def format_option(registry: OptionRegistry, ref: OptionRef) -> str:
    """Return the help block of a single option."""

    option = registry.option(ref)
    return format_block(format_synopsis(option), option.description, registry.settings)


def format_options(registry: OptionRegistry) -> str:
    """Return the help text of every option in definition order."""

    blocks = [format_option(registry, option.name) for option in registry.options]
    return OPTIONS_HEADER + "\n" + "".join(blocks)


def format_option_values(registry: OptionRegistry) -> str:
    """Return ``name: value`` lines for every option.

    Values start at the description column so they line up.
    """

    column = registry.settings.description_column - 1
    lines = [VALUES_HEADER]
    for option in registry.options:
        lines.append(f"{option.name}: ".ljust(column) + format_value(option))
    return "\n".join(lines) + "\n"


def format_args(registry: OptionRegistry) -> str:
    """Return the captured positional arguments, one per line."""

    lines = [ARGS_HEADER, *(arg.rstrip(" ") for arg in registry.args)]
    return "\n".join(lines) + "\n"


def _emit(text: str, console: Console | None) -> None:
    target = console if console is not None else get_console_manager().get(color=False, emoji=False)
    target.out(text, end="", highlight=False)


def print_options(registry: OptionRegistry, console: Console | None = None) -> None:
    """Write the help text of every option to ``console``.

    Args:
        registry: Registry holding the option definitions.
        console: Destination; defaults to the shared stdout console.
    """

    _emit(format_options(registry), console)


def print_option(registry: OptionRegistry, ref: OptionRef, console: Console | None = None) -> None:
    """Write the help block of the option referenced by ``ref`` to ``console``."""

    _emit(format_option(registry, ref), console)


def print_option_values(registry: OptionRegistry, console: Console | None = None) -> None:
    """Write the current value of every option to ``console``."""

    _emit(format_option_values(registry), console)


def print_args(registry: OptionRegistry, console: Console | None = None) -> None:
    """Write the captured positional arguments to ``console``."""

    _emit(format_args(registry), console)


__all__ = [
    "format_args",
    "format_option",
    "format_option_values",
    "format_options",
    "format_real",
    "format_synopsis",
    "format_value",
    "print_args",
    "print_option",
    "print_option_values",
    "print_options",
]
