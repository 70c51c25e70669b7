"""
Recursive descent parser for arithmetic expressions.

Grammar (precedence low to high):
    expression  → term (("+"|"-") term)*
    term        → factor (("*"|"/") factor)*
    factor      → NUMBER | "(" expression ")"

Both binary levels fold to the left, so "a - b - c" parses as "(a - b) - c".
"""

from __future__ import annotations

import logging

from arithexpr.core.errors import (
    ArithError,
    NestingTooDeepError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnmatchedParenError,
)
from arithexpr.core.expression_lang.tokenizer import tokenize
from arithexpr.core.ir.expressions import BinaryOp, Expr, Number, Operator, tree_depth
from arithexpr.core.ir.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

# Each nesting level costs three Python frames (expression, term, factor)
DEFAULT_MAX_DEPTH = 200

_ADDITIVE: dict[TokenKind, Operator] = {
    TokenKind.PLUS: Operator.ADD,
    TokenKind.MINUS: Operator.SUB,
}

_MULTIPLICATIVE: dict[TokenKind, Operator] = {
    TokenKind.STAR: Operator.MUL,
    TokenKind.SLASH: Operator.DIV,
}


class _Parser:
    """Recursive descent parser over a token list."""

    def __init__(self, tokens: list[Token], max_depth: int) -> None:
        self.tokens = tokens
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth

    @property
    def current(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    @property
    def end_offset(self) -> int:
        """Character offset just past the last token."""
        if not self.tokens:
            return 0
        last = self.tokens[-1]
        return last.pos + len(last.text)

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    # -- Grammar rules --

    def parse_expression(self) -> Expr:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        while self.current is not None and self.current.kind in _ADDITIVE:
            op = _ADDITIVE[self.advance().kind]
            right = self.parse_term()
            left = BinaryOp(op=op, left=left, right=right)
        return left

    def parse_term(self) -> Expr:
        """factor (('*' | '/') factor)*"""
        left = self.parse_factor()
        while self.current is not None and self.current.kind in _MULTIPLICATIVE:
            op = _MULTIPLICATIVE[self.advance().kind]
            right = self.parse_factor()
            left = BinaryOp(op=op, left=left, right=right)
        return left

    def parse_factor(self) -> Expr:
        """NUMBER | '(' expression ')'"""
        tok = self.current
        if tok is None:
            raise UnexpectedEndOfInputError(self.end_offset)

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            assert tok.value is not None
            return Number(value=tok.value)

        if tok.kind == TokenKind.LPAREN:
            if self.depth >= self.max_depth:
                raise NestingTooDeepError(self.max_depth, tok.pos)
            self.advance()
            self.depth += 1
            expr = self.parse_expression()
            closing = self.current
            if closing is None or closing.kind != TokenKind.RPAREN:
                raise UnmatchedParenError(closing, tok.pos)
            self.advance()
            self.depth -= 1
            return expr

        raise UnexpectedTokenError(tok)


def parse(
    tokens: list[Token],
    *,
    allow_trailing: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Expr:
    """Parse a token list into an expression tree.

    Parsing stops after one complete expression. Leftover tokens are
    ignored (with a warning) unless ``allow_trailing`` is False, in which
    case the first of them is reported.

    Args:
        tokens: Output of tokenize().
        allow_trailing: Accept tokens after a complete expression.
        max_depth: Maximum parenthesis nesting.

    Returns:
        Root of the expression tree.

    Raises:
        UnexpectedTokenError: A factor started with an operator or ')'.
        UnexpectedEndOfInputError: Tokens ran out mid-expression.
        UnmatchedParenError: A '(' was never closed.
        NestingTooDeepError: Nesting exceeded ``max_depth``.
    """
    parser = _Parser(tokens, max_depth)
    expr = parser.parse_expression()

    trailing = parser.current
    if trailing is not None:
        if not allow_trailing:
            raise UnexpectedTokenError(
                trailing,
                f"Unexpected token after expression: {trailing.text!r} at position {trailing.pos}",
            )
        logger.warning(
            "Ignoring %d token(s) after expression, starting at position %d",
            len(tokens) - parser.pos,
            trailing.pos,
        )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Parsed %d tokens into tree of depth %d", parser.pos, tree_depth(expr))
    return expr


def parse_expr(
    source: str,
    *,
    allow_trailing: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Expr:
    """Tokenize and parse an expression string.

    Args:
        source: Expression string (e.g., "2 + 3 * 4")
        allow_trailing: See parse().
        max_depth: See parse().

    Returns:
        Parsed expression tree.

    Raises:
        LexError: If tokenization fails.
        ParseError: If the expression is invalid.
    """
    try:
        return parse(tokenize(source), allow_trailing=allow_trailing, max_depth=max_depth)
    except ArithError as e:
        e.attach_source(source)
        raise
