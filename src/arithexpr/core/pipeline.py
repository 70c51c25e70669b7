"""
Compose tokenize → parse → evaluate for a single expression string.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from arithexpr.core.errors import ArithError
from arithexpr.core.expression_lang.evaluator import evaluate
from arithexpr.core.expression_lang.parser import parse
from arithexpr.core.expression_lang.tokenizer import tokenize
from arithexpr.core.ir.expressions import Expr
from arithexpr.core.ir.tokens import Token
from arithexpr.core.manifest import ArithManifest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Calculation:
    """Everything produced while evaluating one expression."""

    source: str
    tokens: tuple[Token, ...]
    expr: Expr
    value: float


def calculate(source: str, *, settings: ArithManifest | None = None) -> Calculation:
    """Evaluate an expression string.

    Args:
        source: Expression text, e.g. "(2 + 3) * 4".
        settings: Parser and evaluator options; defaults when omitted.

    Returns:
        The tokens, tree, and value.

    Raises:
        LexError: Unrecognised character or malformed number.
        ParseError: Malformed expression.
        DivisionByZeroError: A divisor is zero and strict division is on.
    """
    settings = settings or ArithManifest()
    try:
        tokens = tokenize(source)
        expr = parse(
            tokens,
            allow_trailing=settings.parser.allow_trailing_tokens,
            max_depth=settings.parser.max_depth,
        )
        value = evaluate(expr, strict_division=settings.evaluator.strict_division)
    except ArithError as e:
        e.attach_source(source)
        logger.debug("Evaluation of %r failed: %s", source, e.message)
        raise

    logger.debug("%s = %r", source, value)
    return Calculation(source=source, tokens=tuple(tokens), expr=expr, value=value)


def check_division(expr: Expr) -> None:
    """Raise DivisionByZeroError if any divisor in the tree evaluates to zero.

    Divisions are checked in the order evaluate() would perform them, in one
    pass over the tree.
    """
    evaluate(expr, strict_division=True)
