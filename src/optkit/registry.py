# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bounded, insertion-ordered registry of typed options and positional arguments."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence
from dataclasses import replace

from .errors import (
    ArgumentIndexError,
    DuplicateOptionError,
    MissingRequiredOptionError,
    OptionConversionError,
    OptionRangeError,
    OptionValueError,
    fatal,
)
from .lexical import is_abbreviation_char, is_integer, is_logical, is_name, is_real, to_logical
from .models import (
    INTEGER_MAX,
    INTEGER_MIN,
    REAL_MAX,
    REAL_MIN,
    IntegerValue,
    LogicalValue,
    Option,
    OptionHandle,
    OptionKind,
    Payload,
    RealValue,
    StringValue,
)
from .parser import CommandLineParser
from .settings import DEFAULT_SETTINGS, OptionsSettings

LOGGER = logging.getLogger(__name__)

OptionRef = str | OptionHandle


class OptionRegistry:
    """Own the options and positional arguments of one program.

    Every option is defined with a default, so ``get_*`` always returns a
    well-defined value whether or not the command line supplied one. Invalid
    declarations and queries are programmer errors reported through
    :func:`optkit.errors.fatal`.
    """

    def __init__(self, settings: OptionsSettings | None = None) -> None:
        """Create an empty registry.

        Args:
            settings: Capacity and layout limits; defaults to :data:`DEFAULT_SETTINGS`.
        """

        self.settings = settings if settings is not None else DEFAULT_SETTINGS
        self._options: list[Option] = []
        self._args: list[str] = []

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(tuple(self._options))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str | OptionHandle) and self.find_option(name=str(name)) is not None

    @property
    def options(self) -> tuple[Option, ...]:
        """Return the defined options in definition order."""

        return tuple(self._options)

    @property
    def args(self) -> tuple[str, ...]:
        """Return the captured positional arguments in command-line order."""

        return tuple(self._args)

    # -- definition -------------------------------------------------------

    def define_integer(
        self,
        name: str,
        default: int,
        minimum: int | None = None,
        maximum: int | None = None,
        *,
        abbreviation: str | None = None,
        required: bool = False,
        description: str = "",
    ) -> OptionHandle:
        """Define an integer option.

        Args:
            name: Long option name.
            default: Value returned until the command line supplies one.
            minimum: Smallest accepted value; defaults to the full integer range.
            maximum: Largest accepted value; defaults to the full integer range.
            abbreviation: Optional one-character short form.
            required: Whether the option must appear on the command line.
            description: Help text shown by the reporters.

        Returns:
            OptionHandle: Handle usable wherever the option name is accepted.
        """

        for label, candidate in (("default", default), ("minimum", minimum), ("maximum", maximum)):
            if candidate is not None and (isinstance(candidate, bool) or not isinstance(candidate, int)):
                fatal(f'{label} for integer option "{name}" must be an int, got {candidate!r}')
        low = INTEGER_MIN if minimum is None else minimum
        high = INTEGER_MAX if maximum is None else maximum
        if low > high:
            fatal(f'minimum {low} exceeds maximum {high} for option "{name}"')
        payload = IntegerValue(value=default, minimum=low, maximum=high)
        return self._add(name, OptionKind.INTEGER, payload, abbreviation, required, description)

    def define_real(
        self,
        name: str,
        default: float,
        minimum: float | None = None,
        maximum: float | None = None,
        *,
        abbreviation: str | None = None,
        required: bool = False,
        description: str = "",
    ) -> OptionHandle:
        """Define a real (floating point) option.

        Args:
            name: Long option name.
            default: Value returned until the command line supplies one.
            minimum: Smallest accepted value; defaults to the largest negative float.
            maximum: Largest accepted value; defaults to the largest float.
            abbreviation: Optional one-character short form.
            required: Whether the option must appear on the command line.
            description: Help text shown by the reporters.

        Returns:
            OptionHandle: Handle usable wherever the option name is accepted.
        """

        for label, candidate in (("default", default), ("minimum", minimum), ("maximum", maximum)):
            if candidate is not None and (isinstance(candidate, bool) or not isinstance(candidate, int | float)):
                fatal(f'{label} for real option "{name}" must be a number, got {candidate!r}')
        low = REAL_MIN if minimum is None else float(minimum)
        high = REAL_MAX if maximum is None else float(maximum)
        if low > high:
            fatal(f'minimum {low} exceeds maximum {high} for option "{name}"')
        payload = RealValue(value=float(default), minimum=low, maximum=high)
        return self._add(name, OptionKind.REAL, payload, abbreviation, required, description)

    def define_logical(
        self,
        name: str,
        default: bool,
        *,
        abbreviation: str | None = None,
        required: bool = False,
        description: str = "",
    ) -> OptionHandle:
        """Define a logical option taking one of the logical literals as its value."""

        if not isinstance(default, bool):
            fatal(f'default for logical option "{name}" must be a bool, got {default!r}')
        payload = LogicalValue(value=default)
        return self._add(name, OptionKind.LOGICAL, payload, abbreviation, required, description)

    def define_string(
        self,
        name: str,
        default: str,
        *,
        abbreviation: str | None = None,
        required: bool = False,
        description: str = "",
    ) -> OptionHandle:
        """Define a free-text option."""

        if not isinstance(default, str):
            fatal(f'default for string option "{name}" must be a str, got {default!r}')
        payload = StringValue(value=default)
        return self._add(name, OptionKind.STRING, payload, abbreviation, required, description)

    def define_flag(
        self,
        name: str,
        *,
        abbreviation: str | None = None,
        description: str = "",
    ) -> OptionHandle:
        """Define a flag: ``False`` by default and ``True`` once present."""

        payload = LogicalValue(value=False)
        return self._add(name, OptionKind.FLAG, payload, abbreviation, False, description)

    def _add(
        self,
        name: str,
        kind: OptionKind,
        payload: Payload,
        abbreviation: str | None,
        required: bool,
        description: str,
    ) -> OptionHandle:
        """Validate the generic fields of a new option and append it.

        Args:
            name: Long option name.
            kind: Value kind of the option.
            payload: Default payload matching ``kind``.
            abbreviation: Optional one-character short form.
            required: Whether the option must appear on the command line.
            description: Help text.

        Returns:
            OptionHandle: Handle referencing the appended option.
        """

        if not name:
            fatal("empty name for option.")
        if not is_name(name):
            fatal(f"invalid option name: {name}")
        if len(name) > self.settings.max_value_length:
            fatal(f"option name {name} longer than {self.settings.max_value_length} characters.")
        if abbreviation is not None and not (len(abbreviation) == 1 and is_abbreviation_char(abbreviation)):
            fatal(f"invalid option abbreviation: '{abbreviation}'")
        if len(description) > self.settings.max_description_length:
            fatal(
                f'description of option "{name}" longer than '
                f"{self.settings.max_description_length} characters.",
            )
        for existing in self._options:
            if existing.name == name:
                fatal(f'duplicate definition of option "--{name}"')
            if abbreviation is not None and existing.abbreviation == abbreviation:
                fatal(f'duplicate definition of option "-{abbreviation}"')
        if len(self._options) >= self.settings.max_options:
            fatal(f"need to increase max_options (currently {self.settings.max_options}).")

        option = Option(
            name=name,
            kind=kind,
            payload=payload,
            abbreviation=abbreviation,
            description=description,
            required=required,
        )
        self._options.append(option)
        LOGGER.debug("defined %s option %s", kind.value, name)
        return OptionHandle(index=len(self._options) - 1, name=name)

    # -- lookup -----------------------------------------------------------

    def find_option(self, *, name: str | None = None, abbreviation: str | None = None) -> Option | None:
        """Return the option matching ``name`` or ``abbreviation``, if any.

        Exactly one of the two keywords must be given.

        Args:
            name: Long option name to look up.
            abbreviation: Short form to look up.

        Returns:
            Option | None: Matching option or ``None`` when nothing matches.
        """

        if (name is None) == (abbreviation is None):
            fatal("find_option() must be called with exactly one of name or abbreviation.")
        for option in self._options:
            if name is not None and option.name == name:
                return option
            if abbreviation is not None and option.abbreviation == abbreviation:
                return option
        return None

    def _index_of(self, ref: OptionRef, kind: OptionKind | None = None) -> int:
        """Return the index of ``ref``, terminating when it is unknown or of another kind."""

        if isinstance(ref, OptionHandle):
            index = ref.index
            if not (0 <= index < len(self._options) and self._options[index].name == ref.name):
                fatal(f"stale option handle: {ref.name}")
        else:
            index = next((pos for pos, option in enumerate(self._options) if option.name == ref), -1)
            if index < 0:
                fatal(f"option doesn't exist: {ref}")
        option = self._options[index]
        if kind is not None and option.kind is not kind:
            fatal(f'option "{option.name}" is a {option.kind.value} option, not {kind.value}')
        return index

    def option(self, ref: OptionRef) -> Option:
        """Return the read-only record of the option referenced by ``ref``."""

        return self._options[self._index_of(ref)]

    # -- typed getters ----------------------------------------------------

    def get_integer(self, ref: OptionRef) -> int:
        """Return the value of an integer option."""

        return self._options[self._index_of(ref, OptionKind.INTEGER)].payload.value

    def get_real(self, ref: OptionRef) -> float:
        """Return the value of a real option."""

        return self._options[self._index_of(ref, OptionKind.REAL)].payload.value

    def get_logical(self, ref: OptionRef) -> bool:
        """Return the value of a logical option."""

        return self._options[self._index_of(ref, OptionKind.LOGICAL)].payload.value

    def get_flag(self, ref: OptionRef) -> bool:
        """Return whether a flag was given."""

        return self._options[self._index_of(ref, OptionKind.FLAG)].payload.value

    def get_string(self, ref: OptionRef, max_length: int | None = None) -> str:
        """Return the value of a string option.

        Args:
            ref: Option name or handle.
            max_length: Capacity of the caller's storage; exceeding it is a
                programmer error.

        Returns:
            str: Default or supplied value.
        """

        value = self._options[self._index_of(ref, OptionKind.STRING)].payload.value
        if max_length is not None and len(value.rstrip(" ")) > max_length:
            fatal(
                f'value of option "{ref}" is longer than {max_length} characters; '
                "supply more storage when fetching it.",
            )
        return value

    def option_found(self, ref: OptionRef) -> bool:
        """Return ``True`` when the command line supplied a value for ``ref``."""

        return self._options[self._index_of(ref)].found

    def check_required_options(self) -> None:
        """Ensure every required option was supplied.

        Raises:
            MissingRequiredOptionError: Naming the first missing option in
                definition order.
        """

        for option in self._options:
            if option.required and not option.found:
                raise MissingRequiredOptionError(option.name)

    # -- value assignment -------------------------------------------------

    def set_value(self, ref: OptionRef | Option, literal: str) -> Option:
        """Validate ``literal`` against the option's grammar and store it.

        The stored value is left unchanged when validation fails.

        Args:
            ref: Option name, handle or record to update.
            literal: Raw text supplied on the command line.

        Returns:
            Option: Updated option record.

        Raises:
            DuplicateOptionError: If the option was already set during this parse.
            OptionValueError: If ``literal`` is rejected or out of range.
        """

        index = self._index_of(ref.name if isinstance(ref, Option) else ref)
        option = self._options[index]
        if option.found:
            raise DuplicateOptionError(option.name)
        payload = self._convert(option, literal)
        updated = replace(option, payload=payload, found=True, raw_value=literal)
        self._options[index] = updated
        LOGGER.debug("set option %s=%r", option.name, payload.value)
        return updated

    def _convert(self, option: Option, literal: str) -> Payload:
        """Return a new payload for ``option`` built from ``literal``."""

        payload = option.payload
        match payload:
            case IntegerValue():
                return _convert_integer(option.name, payload, literal)
            case RealValue():
                return _convert_real(option.name, payload, literal)
            case LogicalValue():
                if not is_logical(literal):
                    raise OptionValueError(
                        option.name,
                        literal,
                        f"parameter {literal.rstrip()} is not a valid logical value.",
                    )
                return LogicalValue(value=to_logical(literal))
            case StringValue():
                if len(literal.rstrip(" ")) > self.settings.max_value_length:
                    raise OptionValueError(
                        option.name,
                        literal,
                        f'value for option "{option.name}" longer than '
                        f"{self.settings.max_value_length} characters.",
                    )
                return StringValue(value=literal)
        fatal(f'invalid payload for option "{option.name}"')

    # -- positional arguments ---------------------------------------------

    @property
    def num_args(self) -> int:
        """Return the number of captured positional arguments."""

        return len(self._args)

    def get_num_args(self) -> int:
        """Return the number of captured positional arguments."""

        return self.num_args

    def get_arg(self, index: int) -> str:
        """Return the positional argument at the 1-based ``index``.

        Raises:
            ArgumentIndexError: If ``index`` is outside ``1..get_num_args()``.
        """

        if index < 1 or index > len(self._args):
            raise ArgumentIndexError(index, len(self._args))
        return self._args[index - 1]

    def store_arg(self, token: str) -> None:
        """Append ``token`` to the positional arguments."""

        if len(self._args) >= self.settings.max_args:
            fatal(f"need to increase max_args (currently {self.settings.max_args}).")
        self._args.append(token)

    # -- parsing ----------------------------------------------------------

    def process_command_line(self, args: Sequence[str]) -> None:
        """Parse ``args`` into this registry.

        Args:
            args: Raw argument tokens, excluding the program name.

        Raises:
            CommandLineError: If the command line is malformed.
        """

        CommandLineParser(self).parse(args)


def _convert_integer(name: str, payload: IntegerValue, literal: str) -> IntegerValue:
    text = literal.rstrip(" ")
    if not is_integer(literal):
        raise OptionValueError(name, literal, f"parameter {text} is not a valid integer.")
    value = int(text)
    if not INTEGER_MIN <= value <= INTEGER_MAX:
        raise OptionConversionError(
            name,
            literal,
            f"couldn't convert {text} to an integer (may be too large).",
        )
    if not payload.minimum <= value <= payload.maximum:
        raise OptionRangeError(name, text, payload.minimum, payload.maximum)
    return replace(payload, value=value)


def _convert_real(name: str, payload: RealValue, literal: str) -> RealValue:
    text = literal.rstrip(" ")
    if not is_real(literal):
        raise OptionValueError(name, literal, f"parameter {text} is not a valid real number.")
    value = float(text)
    if math.isinf(value):
        raise OptionConversionError(name, literal, f"couldn't convert {text} to a real number.")
    if not payload.minimum <= value <= payload.maximum:
        raise OptionRangeError(name, text, payload.minimum, payload.maximum)
    return replace(payload, value=value)


__all__ = ["OptionRef", "OptionRegistry"]
