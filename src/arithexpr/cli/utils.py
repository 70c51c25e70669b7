"""
arithexpr CLI utilities.

Shared helpers for the command modules: version display, logging setup,
configuration loading, and rich rendering of tokens and trees.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from arithexpr._version import get_version
from arithexpr.core.errors import ArithError
from arithexpr.core.ir import BinaryOp, Expr, Token
from arithexpr.core.manifest import ArithManifest, find_manifest, load_manifest

console = Console()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"arithexpr {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(level: int) -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def load_settings(config: Path | None) -> ArithManifest:
    """Load arithexpr.toml from ``config`` or the working directory.

    Exits with code 1 if an explicit path is missing or the file is invalid.
    """
    if config is not None and not config.is_file():
        typer.echo(f"Config file not found: {config}", err=True)
        raise typer.Exit(code=1)

    path = config or find_manifest()
    if path is None:
        return ArithManifest()

    try:
        return load_manifest(path)
    except ArithError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def report_error(error: ArithError) -> None:
    """Print an expression error to stderr."""
    typer.echo(f"{type(error).__name__}: {error}", err=True)


def render_tokens(tokens: list[Token] | tuple[Token, ...]) -> Table:
    table = Table(title="Tokens")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    table.add_column("Position", justify="right")
    table.add_column("Value", justify="right")

    for index, tok in enumerate(tokens):
        table.add_row(
            str(index),
            tok.kind.name,
            tok.text,
            str(tok.pos),
            repr(tok.value) if tok.value is not None else "",
        )
    return table


def _label(node: Expr) -> str:
    if isinstance(node, BinaryOp):
        return f"[bold cyan]{node.op.name}[/bold cyan] {node.op.value}"
    return f"[green]{node}[/green]"


def render_tree(expr: Expr) -> Tree:
    """Build a rich Tree for an expression, left child listed first."""
    root = Tree(_label(expr))
    stack: list[tuple[Expr, Tree]] = [(expr, root)]
    while stack:
        node, branch = stack.pop()
        if not isinstance(node, BinaryOp):
            continue
        left_branch = branch.add(_label(node.left))
        right_branch = branch.add(_label(node.right))
        stack.append((node.right, right_branch))
        stack.append((node.left, left_branch))
    return root
