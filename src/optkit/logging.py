# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Literal

from rich.console import Console
from rich.rule import Rule
from rich.text import Text

StreamName = Literal["stdout", "stderr"]


def detect_tty(stream: StreamName = "stdout") -> bool:
    """Return ``True`` when the selected stream appears to be backed by a terminal.

    Args:
        stream: Name of the standard stream to inspect.

    Returns:
        bool: ``True`` when the stream reports TTY support, ``False`` otherwise.
    """

    handle = sys.stderr if stream == "stderr" else sys.stdout
    try:
        return handle.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Provision Rich :class:`Console` instances keyed by presentation flags."""

    def __init__(self) -> None:
        self._cache: dict[tuple[bool, bool, StreamName, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool, stream: StreamName = "stdout") -> Console:
        """Return a Rich console configured for ``color`` and ``emoji`` preferences.

        Args:
            color: ``True`` when ANSI colour output should be enabled.
            emoji: ``True`` when Rich should render emoji glyphs.
            stream: Standard stream the console writes to.

        Returns:
            Console: Cached or newly constructed console matching the preferences.
        """

        tty = detect_tty(stream)
        key = (color, emoji, stream, tty)
        if key not in self._cache:
            self._cache[key] = Console(
                stderr=stream == "stderr",
                color_system="auto" if color and tty else None,
                force_terminal=tty,
                no_color=not (color and tty),
                emoji=emoji,
                highlight=False,
                soft_wrap=True,
            )
        return self._cache[key]


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`."""

    return RichConsoleManager()


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
    stream: StreamName = "stdout",
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print.
        style: Rich style name applied when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        stream: Standard stream receiving the message.
    """

    color_enabled = detect_tty(stream) if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji, stream=stream)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def section(title: str, *, use_color: bool) -> None:
    """Render a section header to delineate console output blocks."""

    console = get_console_manager().get(color=use_color, emoji=True)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message on the diagnostic stream."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(
        f"{prefix}{msg}",
        style="red",
        use_emoji=use_emoji,
        use_color=use_color,
        stream="stderr",
    )


__all__ = [
    "RichConsoleManager",
    "detect_tty",
    "emoji",
    "fail",
    "get_console_manager",
    "ok",
    "section",
]
