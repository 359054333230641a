# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fixed-column text layout used by the help reporter."""

from __future__ import annotations

from .settings import DEFAULT_SETTINGS, OptionsSettings


def wrap_paragraph(paragraph: str, width: int) -> list[str]:
    """Greedily wrap a single line of text into lines of at most ``width`` characters.

    Lines break at the last blank that fits. A word longer than the remaining
    line is hyphenated: its last fitting character is replaced by ``-`` and
    carried to the next line.

    Args:
        paragraph: Text without embedded newlines.
        width: Maximum line length; must be at least two.

    Returns:
        list[str]: Wrapped lines; a blank paragraph yields one empty line.
    """

    if width < 2:
        raise ValueError("width must be at least 2")
    lines: list[str] = []
    line = ""
    last_blank = -1
    index = 0
    while index < len(paragraph):
        char = paragraph[index]
        if char == " ":
            last_blank = len(line)
        if len(line) < width:
            line += char
            index += 1
            continue
        if last_blank >= 0:
            # Resume right after the blank; the characters following it are re-read.
            index -= len(line) - last_blank - 1
            line = line[:last_blank]
        else:
            index -= 1
            line = line[:-1] + "-"
        lines.append(line.rstrip(" "))
        line = ""
        last_blank = -1
    lines.append(line.rstrip(" "))
    return lines


def wrap_text(text: str, width: int) -> list[str]:
    """Wrap ``text`` honouring embedded newlines as hard breaks.

    Trailing blanks of ``text`` are ignored.
    """

    lines: list[str] = []
    for paragraph in text.rstrip(" ").split("\n"):
        lines.extend(wrap_paragraph(paragraph, width))
    return lines


def format_block(synopsis: str, description: str, settings: OptionsSettings = DEFAULT_SETTINGS) -> str:
    """Lay out an option synopsis and its description.

    The synopsis starts at ``settings.name_column``. Description lines start at
    ``settings.description_column`` and never pass ``settings.max_column``.
    When the synopsis reaches the description column, the description begins
    on the following line::

        --<name>-------------------<description...>
        ---------------------------<description cont...>

    Args:
        synopsis: Option synopsis such as ``-c COUNT, --count=COUNT``.
        description: Description text, possibly containing newlines.
        settings: Column layout.

    Returns:
        str: Newline-terminated block.
    """

    head = " " * (settings.name_column - 1) + synopsis
    indent = " " * (settings.description_column - 1)
    body = wrap_text(description, settings.description_width) if description.strip(" ") else []
    lines: list[str] = []
    if body and len(head) < settings.description_column - 1:
        lines.append(head.ljust(settings.description_column - 1) + body.pop(0))
    else:
        lines.append(head)
    lines.extend(f"{indent}{line}" if line else "" for line in body)
    return "\n".join(line.rstrip(" ") for line in lines) + "\n"


__all__ = ["format_block", "wrap_paragraph", "wrap_text"]
