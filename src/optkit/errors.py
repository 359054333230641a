# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy separating declaration defects from bad user input."""

from __future__ import annotations

from typing import NoReturn

from .logging import fail


class ProgrammerError(SystemExit):
    """Raised when option declarations or queries are used incorrectly.

    The class derives from :class:`SystemExit` so an uncaught instance ends the
    process and generic ``except Exception`` handlers cannot swallow it.
    """

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Description of the defect in the host program.
            exit_code: Process exit status used when the error terminates.
        """

        super().__init__(exit_code)
        self.message = message

    def __str__(self) -> str:
        return self.message


def fatal(message: str) -> NoReturn:
    """Report ``message`` on the diagnostic stream and raise :class:`ProgrammerError`.

    Args:
        message: Description of the defect in the host program.

    Raises:
        ProgrammerError: Always.
    """

    fail(f"Error: {message}", use_emoji=False)
    raise ProgrammerError(message)


class OptionsError(RuntimeError):
    """Base class for recoverable errors caused by command-line input."""

    exit_code: int = 1

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        """Initialise the error with a message and optional exit code override.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class CommandLineError(OptionsError):
    """Raised when the argument vector is malformed."""

    def __init__(self, message: str, *, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class UnknownOptionError(CommandLineError):
    """Raised when a short or long option does not match any definition."""

    def __init__(self, option: str) -> None:
        super().__init__(f'unknown option: "{option}"', token=option)
        self.option = option


class MissingValueError(CommandLineError):
    """Raised when a value option is not followed by its value."""

    def __init__(self, option: str) -> None:
        super().__init__(f'option "{option}" requires an argument.', token=option)
        self.option = option


class DuplicateOptionError(CommandLineError):
    """Raised when an option receives a second value during one parse."""

    def __init__(self, name: str) -> None:
        super().__init__(f'tried to set option "{name}" twice.')
        self.name = name


class OptionValueError(CommandLineError):
    """Raised when a literal is rejected by the grammar of its option kind."""

    def __init__(self, name: str, value: str, message: str) -> None:
        super().__init__(message, token=value)
        self.name = name
        self.value = value


class OptionConversionError(OptionValueError):
    """Raised when a grammatically valid literal cannot be represented."""


class OptionRangeError(OptionValueError):
    """Raised when a numeric value lies outside the declared bounds."""

    def __init__(self, name: str, value: str, minimum: object, maximum: object) -> None:
        super().__init__(
            name,
            value,
            f'value for option "{name}" out of range. Value: {value}, min: {minimum}, max: {maximum}',
        )
        self.minimum = minimum
        self.maximum = maximum


class MissingRequiredOptionError(OptionsError):
    """Raised when a required option was not supplied."""

    exit_code = 2

    def __init__(self, name: str) -> None:
        super().__init__(f'missing required parameter: "--{name}"')
        self.name = name


class ArgumentIndexError(OptionsError, IndexError):
    """Raised when a positional argument index is outside ``1..count``."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"argument index {index} out of range (have {count} arguments)")
        self.index = index
        self.count = count


__all__ = [
    "ArgumentIndexError",
    "CommandLineError",
    "DuplicateOptionError",
    "MissingRequiredOptionError",
    "MissingValueError",
    "OptionConversionError",
    "OptionRangeError",
    "OptionValueError",
    "OptionsError",
    "ProgrammerError",
    "UnknownOptionError",
    "fatal",
]
