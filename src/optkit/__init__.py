# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed command-line option registry, parser and help reporter."""

from __future__ import annotations

from .errors import (
    ArgumentIndexError,
    CommandLineError,
    DuplicateOptionError,
    MissingRequiredOptionError,
    MissingValueError,
    OptionConversionError,
    OptionRangeError,
    OptionsError,
    OptionValueError,
    ProgrammerError,
    UnknownOptionError,
)
from .lexical import is_integer, is_logical, is_real
from .models import Option, OptionHandle, OptionKind, ParseOutcome
from .parser import CommandLineParser, check_required_options, process_command_line
from .registry import OptionRegistry
from .reporting import print_args, print_option, print_option_values, print_options
from .settings import OptionsSettings

__version__ = "0.5.0"

__all__ = [
    "ArgumentIndexError",
    "CommandLineError",
    "CommandLineParser",
    "DuplicateOptionError",
    "MissingRequiredOptionError",
    "MissingValueError",
    "Option",
    "OptionConversionError",
    "OptionHandle",
    "OptionKind",
    "OptionRangeError",
    "OptionRegistry",
    "OptionValueError",
    "OptionsError",
    "OptionsSettings",
    "ParseOutcome",
    "ProgrammerError",
    "UnknownOptionError",
    "__version__",
    "check_required_options",
    "is_integer",
    "is_logical",
    "is_real",
    "print_args",
    "print_option",
    "print_option_values",
    "print_options",
    "process_command_line",
]
