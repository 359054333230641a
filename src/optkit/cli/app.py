# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Developer CLI for trying option declarations and literals from a shell."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table
from rich.text import Text

from ..lexical import is_abbreviation_char, is_integer, is_logical, is_name, is_real
from ..logging import fail, get_console_manager, ok, section
from ..parser import check_required_options, process_command_line
from ..reporting import print_args, print_option_values, print_options
from .declarations import load_declarations

app = typer.Typer(
    name="optkit",
    help="Inspect command-line option declarations and literals.",
    no_args_is_help=True,
    add_completion=False,
)

TOKENS_ARGUMENT = Annotated[list[str], typer.Argument(help="Literals to classify.")]
DECLARATIONS_ARGUMENT = Annotated[
    Path,
    typer.Argument(metavar="DECLARATIONS", help="JSON file declaring the options."),
]
ARGS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(metavar="[-- ARGS...]", help="Command line to parse, after '--'."),
]
SHOW_HELP_OPTION = Annotated[
    bool,
    typer.Option("--show-help", help="Print the option help before parsing."),
]
NO_COLOR_OPTION = Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")]


def _mark(value: bool) -> str:
    return "yes" if value else "-"


@app.command()
def classify(tokens: TOKENS_ARGUMENT, no_color: NO_COLOR_OPTION = False) -> None:
    """Report which literal grammars each token satisfies."""

    table = Table(title="Literal classification")
    for column in ("token", "integer", "real", "logical", "name", "abbreviation"):
        table.add_column(column)
    for token in tokens:
        table.add_row(
            Text(token),
            _mark(is_integer(token)),
            _mark(is_real(token)),
            _mark(is_logical(token)),
            _mark(is_name(token)),
            _mark(len(token) == 1 and is_abbreviation_char(token)),
        )
    get_console_manager().get(color=not no_color, emoji=False).print(table)


@app.command()
def run(
    declarations: DECLARATIONS_ARGUMENT,
    args: ARGS_ARGUMENT = None,
    show_help: SHOW_HELP_OPTION = False,
    no_color: NO_COLOR_OPTION = False,
) -> None:
    """Parse a command line against declared options and print the result."""

    try:
        document = load_declarations(declarations)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="DECLARATIONS") from exc

    registry = document.build_registry()
    use_color = not no_color
    if show_help:
        print_options(registry)

    for outcome in (process_command_line(registry, args or []), check_required_options(registry)):
        if not outcome:
            fail(f"Error: {outcome.message}", use_emoji=False, use_color=use_color)
            raise typer.Exit(code=outcome.exit_code)

    section("Parsed command line", use_color=use_color)
    print_option_values(registry)
    print_args(registry)
    ok(f"{len(registry)} options, {registry.num_args} arguments", use_emoji=False, use_color=use_color)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
