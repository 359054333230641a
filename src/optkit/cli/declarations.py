# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pydantic models describing option declaration files for the ``run`` command."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..models import OptionKind
from ..registry import OptionRegistry
from ..settings import OptionsSettings


class OptionDeclaration(BaseModel):
    """One option entry of a declaration file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    kind: OptionKind
    default: bool | int | float | str | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    abbreviation: str | None = None
    required: bool = False
    description: str = ""

    @model_validator(mode="after")
    def _check_kind_fields(self) -> OptionDeclaration:
        """Reject fields that make no sense for the declared kind."""

        numeric = self.kind in {OptionKind.INTEGER, OptionKind.REAL}
        if not numeric and (self.minimum is not None or self.maximum is not None):
            raise ValueError(f"minimum/maximum are only valid for numeric options, not {self.kind.value}")
        if self.kind is OptionKind.FLAG:
            if self.default is not None or self.required:
                raise ValueError("flags take neither a default nor required")
            return self
        if self.default is None:
            raise ValueError(f"{self.kind.value} option {self.name!r} needs a default")
        return self

    def define(self, registry: OptionRegistry) -> None:
        """Define this option on ``registry``."""

        common = {"abbreviation": self.abbreviation, "description": self.description}
        match self.kind:
            case OptionKind.INTEGER:
                registry.define_integer(
                    self.name, self.default, self.minimum, self.maximum, required=self.required, **common
                )
            case OptionKind.REAL:
                registry.define_real(
                    self.name, self.default, self.minimum, self.maximum, required=self.required, **common
                )
            case OptionKind.LOGICAL:
                registry.define_logical(self.name, self.default, required=self.required, **common)
            case OptionKind.STRING:
                registry.define_string(self.name, self.default, required=self.required, **common)
            case OptionKind.FLAG:
                registry.define_flag(self.name, **common)


class DeclarationFile(BaseModel):
    """Top-level document: optional settings plus ordered option declarations."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    settings: OptionsSettings = Field(default_factory=OptionsSettings)
    options: list[OptionDeclaration] = Field(default_factory=list)

    def build_registry(self) -> OptionRegistry:
        """Return a registry holding every declared option in file order."""

        registry = OptionRegistry(self.settings)
        for declaration in self.options:
            declaration.define(registry)
        return registry


def load_declarations(path: Path) -> DeclarationFile:
    """Read and validate the JSON declaration file at ``path``.

    Args:
        path: Location of the declaration file.

    Returns:
        DeclarationFile: Validated document.

    Raises:
        ValueError: If the file cannot be read or fails validation.
    """

    try:
        payload = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"cannot read {path}: {exc.strerror}") from exc
    try:
        return DeclarationFile.model_validate_json(payload)
    except ValidationError as exc:
        raise ValueError(f"invalid declaration file {path}:\n{exc}") from exc


__all__ = ["DeclarationFile", "OptionDeclaration", "load_declarations"]
