# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from optkit import OptionRegistry


@pytest.fixture
def registry() -> OptionRegistry:
    """Return a registry with the count/verbose/name options used across tests."""

    reg = OptionRegistry()
    reg.define_integer("count", 1, 0, 10, abbreviation="c", description="Number of items.")
    reg.define_flag("verbose", abbreviation="v", description="Print more output.")
    reg.define_string("name", "x", description="Name to greet.")
    return reg


@pytest.fixture
def buffer_console() -> tuple[Console, io.StringIO]:
    """Return a plain Rich console writing into an in-memory buffer."""

    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None, soft_wrap=True, highlight=False)
    return console, buffer
