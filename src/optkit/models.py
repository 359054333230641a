# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Records describing registered options and parse results."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .errors import OptionsError, fatal

INTEGER_MAX: Final[int] = 2**63 - 1
INTEGER_MIN: Final[int] = -INTEGER_MAX
REAL_MAX: Final[float] = sys.float_info.max
REAL_MIN: Final[float] = -REAL_MAX


class OptionKind(str, Enum):
    """Enumerate the value kinds an option may hold."""

    INTEGER = "integer"
    REAL = "real"
    LOGICAL = "logical"
    FLAG = "flag"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class IntegerValue:
    """Integer payload with inclusive bounds."""

    value: int
    minimum: int = INTEGER_MIN
    maximum: int = INTEGER_MAX


@dataclass(frozen=True, slots=True)
class RealValue:
    """Floating point payload with inclusive bounds."""

    value: float
    minimum: float = REAL_MIN
    maximum: float = REAL_MAX


@dataclass(frozen=True, slots=True)
class LogicalValue:
    """Boolean payload shared by logical options and flags."""

    value: bool


@dataclass(frozen=True, slots=True)
class StringValue:
    """Free text payload."""

    value: str


Payload = IntegerValue | RealValue | LogicalValue | StringValue

PAYLOAD_TYPES: Final[dict[OptionKind, type[Payload]]] = {
    OptionKind.INTEGER: IntegerValue,
    OptionKind.REAL: RealValue,
    OptionKind.LOGICAL: LogicalValue,
    OptionKind.FLAG: LogicalValue,
    OptionKind.STRING: StringValue,
}


@dataclass(frozen=True, slots=True)
class Option:
    """One registered option or flag.

    Attributes:
        name: Long option name used as ``--name``.
        kind: Value kind determining the payload and the accepted grammar.
        payload: Current value, plus bounds for numeric kinds.
        abbreviation: Optional single-character short form used as ``-a``.
        description: Help text; embedded newlines are hard line breaks.
        required: Whether :meth:`OptionRegistry.check_required_options` insists on it.
        found: Whether a value was supplied on the command line.
        raw_value: Literal most recently accepted, kept for diagnostics.
    """

    name: str
    kind: OptionKind
    payload: Payload
    abbreviation: str | None = None
    description: str = ""
    required: bool = False
    found: bool = False
    raw_value: str | None = None

    def __post_init__(self) -> None:
        expected = PAYLOAD_TYPES[self.kind]
        if type(self.payload) is not expected:
            fatal(
                f'payload {type(self.payload).__name__} does not match kind "{self.kind.value}" '
                f'of option "{self.name}"',
            )

    @property
    def value(self) -> int | float | bool | str:
        """Return the current value of the option."""

        return self.payload.value

    @property
    def is_flag(self) -> bool:
        """Return ``True`` when the option is a flag."""

        return self.kind is OptionKind.FLAG


@dataclass(frozen=True, slots=True)
class OptionHandle:
    """Index-based reference to an option returned by ``define_*`` calls."""

    index: int
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Result of a command-line processing step.

    Attributes:
        error: User error that rejected the input, or ``None`` on success.
    """

    error: OptionsError | None = None

    @classmethod
    def success(cls) -> ParseOutcome:
        """Return an outcome describing a successful step."""

        return cls()

    @classmethod
    def failure(cls, error: OptionsError) -> ParseOutcome:
        """Return an outcome wrapping ``error``."""

        return cls(error=error)

    @property
    def ok(self) -> bool:
        """Return ``True`` when the step succeeded."""

        return self.error is None

    @property
    def message(self) -> str | None:
        """Return the human-readable failure message, if any."""

        return None if self.error is None else self.error.message

    @property
    def exit_code(self) -> int:
        """Return ``0`` on success, otherwise the error's exit status."""

        return 0 if self.error is None else self.error.exit_code

    def raise_for_error(self) -> None:
        """Re-raise the captured error when the step failed.

        Raises:
            OptionsError: The error captured by :meth:`failure`.
        """

        if self.error is not None:
            raise self.error

    def __bool__(self) -> bool:
        return self.ok


__all__ = [
    "INTEGER_MAX",
    "INTEGER_MIN",
    "IntegerValue",
    "LogicalValue",
    "Option",
    "OptionHandle",
    "OptionKind",
    "PAYLOAD_TYPES",
    "ParseOutcome",
    "Payload",
    "REAL_MAX",
    "REAL_MIN",
    "RealValue",
    "StringValue",
]
