"""
arithexpr CLI - Entry point.

Commands:
- eval: Evaluate an expression and print the result
- tokens: Show the token sequence for an expression
- ast: Show the expression tree for an expression
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from arithexpr.cli.utils import (
    configure_logging,
    console,
    load_settings,
    render_tokens,
    render_tree,
    report_error,
    version_callback,
)
from arithexpr.core.errors import ArithError
from arithexpr.core.expression_lang import parse_expr, tokenize
from arithexpr.core.pipeline import calculate

app = typer.Typer(
    help="Evaluate arithmetic expressions (+ - * / and parentheses).",
    no_args_is_help=True,
)

ExpressionArg = Annotated[str, typer.Argument(help="Expression to evaluate, e.g. '(2 + 3) * 4'")]
ConfigOpt = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to arithexpr.toml (default: ./arithexpr.toml)"),
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", help="Log pipeline steps to stderr")]


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """arithexpr CLI main callback for global options."""
    pass


@app.command("eval")
def eval_command(
    expression: ExpressionArg,
    show_tokens: Annotated[bool, typer.Option("--tokens", help="Print the token table")] = False,
    show_ast: Annotated[bool, typer.Option("--ast", help="Print the expression tree")] = False,
    strict_division: Annotated[
        bool,
        typer.Option(
            "--strict-division",
            help="Treat division by zero as an error instead of returning inf/nan",
        ),
    ] = False,
    strict_trailing: Annotated[
        bool,
        typer.Option(
            "--strict-trailing",
            help="Reject tokens left over after a complete expression",
        ),
    ] = False,
    config: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Evaluate an expression and print the result."""
    settings = load_settings(config)
    configure_logging(logging.DEBUG if verbose else settings.logging.level_number)

    # Flags can only switch on what the config file leaves off
    if strict_division:
        settings.evaluator.strict_division = True
    if strict_trailing:
        settings.parser.allow_trailing_tokens = False
    show_tokens = show_tokens or settings.output.show_tokens
    show_ast = show_ast or settings.output.show_ast

    try:
        result = calculate(expression, settings=settings)
    except ArithError as e:
        report_error(e)
        raise typer.Exit(code=1)

    if show_tokens:
        console.print(render_tokens(result.tokens))
    if show_ast:
        console.print(render_tree(result.expr))
        console.print(f"AST: {result.expr}", markup=False, highlight=False, soft_wrap=True)

    typer.echo(str(result.value))


@app.command("tokens")
def tokens_command(
    expression: ExpressionArg,
    config: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Show the token sequence for an expression."""
    settings = load_settings(config)
    configure_logging(logging.DEBUG if verbose else settings.logging.level_number)

    try:
        tokens = tokenize(expression)
    except ArithError as e:
        e.attach_source(expression)
        report_error(e)
        raise typer.Exit(code=1)

    if not tokens:
        console.print("[dim]No tokens.[/dim]")
        return
    console.print(render_tokens(tokens))


@app.command("ast")
def ast_command(
    expression: ExpressionArg,
    config: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Show the expression tree for an expression."""
    settings = load_settings(config)
    configure_logging(logging.DEBUG if verbose else settings.logging.level_number)

    try:
        expr = parse_expr(
            expression,
            allow_trailing=settings.parser.allow_trailing_tokens,
            max_depth=settings.parser.max_depth,
        )
    except ArithError as e:
        report_error(e)
        raise typer.Exit(code=1)

    console.print(render_tree(expr))
    console.print(f"AST: {expr}", markup=False, highlight=False, soft_wrap=True)


def main() -> None:
    app(standalone_mode=True)
