# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Capacity and layout settings shared by the registry and the reporters."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_MAX_OPTIONS: Final[int] = 16
DEFAULT_MAX_ARGS: Final[int] = 16
DEFAULT_NAME_COLUMN: Final[int] = 3
DEFAULT_DESCRIPTION_COLUMN: Final[int] = 30
DEFAULT_MAX_COLUMN: Final[int] = 90
DEFAULT_MAX_VALUE_LENGTH: Final[int] = 256
DEFAULT_MAX_DESCRIPTION_LENGTH: Final[int] = 2048


class OptionsSettings(BaseModel):
    """Immutable limits applied to a single :class:`~optkit.registry.OptionRegistry`.

    Attributes:
        max_options: Maximum number of options that may be defined.
        max_args: Maximum number of positional arguments that may be captured.
        name_column: 1-based column where option synopses start in help output.
        description_column: 1-based column where description text starts.
        max_column: Last 1-based column used by description text.
        max_value_length: Longest accepted option name or string value.
        max_description_length: Longest accepted option description.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_options: int = Field(default=DEFAULT_MAX_OPTIONS, ge=1)
    max_args: int = Field(default=DEFAULT_MAX_ARGS, ge=0)
    name_column: int = Field(default=DEFAULT_NAME_COLUMN, ge=1)
    description_column: int = Field(default=DEFAULT_DESCRIPTION_COLUMN, ge=2)
    max_column: int = Field(default=DEFAULT_MAX_COLUMN, ge=3)
    max_value_length: int = Field(default=DEFAULT_MAX_VALUE_LENGTH, ge=1)
    max_description_length: int = Field(default=DEFAULT_MAX_DESCRIPTION_LENGTH, ge=0)

    @model_validator(mode="after")
    def _check_columns(self) -> OptionsSettings:
        """Ensure the synopsis and description columns leave room to wrap text."""

        if self.name_column >= self.description_column:
            raise ValueError("name_column must be smaller than description_column")
        # Hyphenation needs at least two columns per line.
        if self.max_column - self.description_column < 1:
            raise ValueError("max_column must leave at least two description columns")
        return self

    @property
    def description_width(self) -> int:
        """Return the number of columns available to description text."""

        return self.max_column - self.description_column + 1


DEFAULT_SETTINGS: Final[OptionsSettings] = OptionsSettings()


__all__ = ["DEFAULT_SETTINGS", "OptionsSettings"]
