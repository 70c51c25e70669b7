"""
arithexpr expression language.

Tokenizer, parser, and evaluator for arithmetic over + - * / and
parentheses.

Usage:
    from arithexpr.core.expression_lang import evaluate, parse, tokenize

    tokens = tokenize("2 + 3 * 4")
    expr = parse(tokens)
    result = evaluate(expr)
    # result == 14.0
"""

from arithexpr.core.expression_lang.evaluator import ExpressionEvalError, evaluate
from arithexpr.core.expression_lang.parser import DEFAULT_MAX_DEPTH, parse, parse_expr
from arithexpr.core.expression_lang.tokenizer import tokenize

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ExpressionEvalError",
    "evaluate",
    "parse",
    "parse_expr",
    "tokenize",
]
