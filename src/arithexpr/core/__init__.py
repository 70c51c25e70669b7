"""Core arithexpr functionality: IR, tokenizer, parser, evaluator, configuration."""

from . import ir
from .errors import (
    ArithError,
    ConfigError,
    DivisionByZeroError,
    ErrorContext,
    LexError,
    MalformedNumberError,
    NestingTooDeepError,
    ParseError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnmatchedParenError,
)
from .expression_lang import ExpressionEvalError, evaluate, parse, parse_expr, tokenize
from .manifest import ArithManifest, find_manifest, load_manifest
from .pipeline import Calculation, calculate, check_division

__all__ = [
    "ir",
    # Errors
    "ArithError",
    "ConfigError",
    "DivisionByZeroError",
    "ErrorContext",
    "ExpressionEvalError",
    "LexError",
    "MalformedNumberError",
    "NestingTooDeepError",
    "ParseError",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "UnmatchedParenError",
    # Pipeline
    "Calculation",
    "calculate",
    "check_division",
    "evaluate",
    "parse",
    "parse_expr",
    "tokenize",
    # Configuration
    "ArithManifest",
    "find_manifest",
    "load_manifest",
]
