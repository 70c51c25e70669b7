"""
arithexpr - arithmetic expression evaluator.

Lexes, parses, and evaluates expressions over + - * /, decimal literals,
and parentheses.
"""

from __future__ import annotations

# Re-export commonly used types for convenience
from ._version import get_version
from .core import ir
from .core.errors import (
    ArithError,
    DivisionByZeroError,
    LexError,
    MalformedNumberError,
    ParseError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnmatchedParenError,
)
from .core.expression_lang import evaluate, parse, parse_expr, tokenize
from .core.ir import BinaryOp, Expr, Number, Operator, Token, TokenKind
from .core.pipeline import Calculation, calculate

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "ArithError",
    "DivisionByZeroError",
    "LexError",
    "MalformedNumberError",
    "ParseError",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "UnmatchedParenError",
    "BinaryOp",
    "Expr",
    "Number",
    "Operator",
    "Token",
    "TokenKind",
    "Calculation",
    "calculate",
    "evaluate",
    "parse",
    "parse_expr",
    "tokenize",
]
