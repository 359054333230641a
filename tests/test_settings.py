# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for registry capacity and layout settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from optkit.settings import DEFAULT_SETTINGS, OptionsSettings


def test_defaults_match_documented_layout() -> None:
    assert DEFAULT_SETTINGS.max_options == 16
    assert DEFAULT_SETTINGS.max_args == 16
    assert (DEFAULT_SETTINGS.name_column, DEFAULT_SETTINGS.description_column) == (3, 30)
    assert DEFAULT_SETTINGS.max_column == 90
    assert DEFAULT_SETTINGS.description_width == 61


def test_settings_are_frozen() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_SETTINGS.max_options = 3  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_options": 0},
        {"name_column": 30, "description_column": 30},
        {"description_column": 90, "max_column": 90},
        {"unknown": 1},
    ],
)
def test_invalid_settings_are_rejected(overrides: dict[str, int]) -> None:
    with pytest.raises(ValidationError):
        OptionsSettings(**overrides)
