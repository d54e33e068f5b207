"""
infixcalc CLI.

Commands:
- eval: evaluate expressions in one session
- render: print the canonical parenthesized form of an expression
- repl: interactive session
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from infixcalc._version import get_version
from infixcalc.core.config import CalcConfig, configure_logging, load_config
from infixcalc.core.errors import CalcError
from infixcalc.core.expression_lang.parser import parse_expr
from infixcalc.core.expression_lang.printer import format_number, render
from infixcalc.core.session import Session


console = Console()

app = typer.Typer(
    help="infixcalc - evaluate infix arithmetic with variables",
    no_args_is_help=True,
)

REPL_QUIT = {":quit", ":q"}


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"infixcalc {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file (default: ./infixcalc.toml)"),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version",
        ),
    ] = None,
) -> None:
    """infixcalc CLI main callback for global options."""
    try:
        calc_config = load_config(config)
        configure_logging(calc_config.logging)
    except CalcError as e:
        _print_error(e)
        raise typer.Exit(code=1) from e
    ctx.obj = calc_config


def _print_error(error: CalcError) -> None:
    console.print(f"[red]Error:[/red] {escape(str(error))}")


def _parse_assignments(values: list[str]) -> dict[str, float]:
    """Parse ``--set name=value`` options."""
    variables: dict[str, float] = {}
    for item in values:
        name, sep, raw = item.partition("=")
        name = name.strip()
        if not sep or not name:
            raise typer.BadParameter(f"Expected name=value, got {item!r}", param_hint="--set")
        try:
            variables[name] = float(raw)
        except ValueError as e:
            raise typer.BadParameter(
                f"Value for {name!r} is not a number: {raw!r}", param_hint="--set"
            ) from e
    return variables


def _new_session(config: CalcConfig, extra: dict[str, float] | None = None) -> Session:
    return Session({**config.variables, **(extra or {})})


# =============================================================================
# Commands
# =============================================================================


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    expressions: Annotated[list[str], typer.Argument(help="Expressions, evaluated in order")],
    set_values: Annotated[
        list[str] | None,
        typer.Option("--set", "-s", help="Predefine a variable: name=value"),
    ] = None,
    show_tree: Annotated[
        bool | None,
        typer.Option("--show-tree/--no-show-tree", help="Print the canonical form too"),
    ] = None,
) -> None:
    """Evaluate expressions in a single session."""
    config: CalcConfig = ctx.obj
    session = _new_session(config, _parse_assignments(set_values or []))
    if show_tree is None:
        show_tree = config.calculator.show_tree

    for source in expressions:
        try:
            result = session.run(source)
        except CalcError as e:
            _print_error(e)
            raise typer.Exit(code=1) from e
        value = format_number(result.value)
        if show_tree:
            console.print(f"{escape(result.rendered)} = {value}")
        else:
            console.print(value)


@app.command(name="render")
def render_command(
    expression: Annotated[str, typer.Argument(help="Expression to render")],
) -> None:
    """Print the canonical fully-parenthesized form without evaluating."""
    try:
        console.print(escape(render(parse_expr(expression))))
    except CalcError as e:
        _print_error(e)
        raise typer.Exit(code=1) from e


@app.command(name="repl")
def repl_command(ctx: typer.Context) -> None:
    """Start an interactive session.

    :vars lists variables, :clear empties them, :quit or EOF exits.
    """
    config: CalcConfig = ctx.obj
    session = _new_session(config)

    while True:
        try:
            line = console.input(escape(config.calculator.prompt)).strip()
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if not line:
            continue
        if line in REPL_QUIT:
            break
        if line == ":vars":
            _print_variables(session)
            continue
        if line == ":clear":
            session.clear()
            continue

        try:
            result = session.run(line)
        except CalcError as e:
            # Report and keep the session going
            _print_error(e)
            continue

        value = format_number(result.value)
        if config.calculator.show_tree:
            console.print(f"{escape(result.rendered)} = {value}")
        else:
            console.print(value)


def _print_variables(session: Session) -> None:
    variables = session.variables()
    if not variables:
        console.print("[dim]No variables defined[/dim]")
        return
    table = Table(title="Variables")
    table.add_column("Name", style="cyan")
    table.add_column("Value", justify="right")
    for name, value in variables.items():
        table.add_row(name, format_number(value))
    console.print(table)


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
