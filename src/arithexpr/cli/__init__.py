"""
arithexpr CLI package.

- main.py: Typer application and the eval/tokens/ast commands
- utils.py: Shared utilities (version, logging, config, rich rendering)
"""

from arithexpr.cli.main import app, main
from arithexpr.cli.utils import version_callback

__all__ = [
    "app",
    "main",
    "version_callback",
]
