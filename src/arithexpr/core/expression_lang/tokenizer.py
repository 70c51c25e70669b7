"""
Tokenizer for arithmetic expressions.

Converts an expression string into a sequence of typed tokens.
"""

from __future__ import annotations

import logging

from arithexpr.core.errors import LexError, MalformedNumberError
from arithexpr.core.ir.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\r"
_NUMBER_CHARS = "0123456789."

_SINGLE_MAP: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    No end-of-input token is appended; the parser treats the end of the
    list as end of input.

    Raises:
        LexError: On a character that starts no token.
        MalformedNumberError: On a literal with more than one '.' or a lone '.'.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c in _WHITESPACE:
            i += 1
            continue

        if c in _SINGLE_MAP:
            tokens.append(Token(_SINGLE_MAP[c], c, i))
            i += 1
            continue

        # Numbers may start with a digit or a leading '.'
        if c in _NUMBER_CHARS:
            i, tok = _read_number(source, i)
            tokens.append(tok)
            continue

        raise LexError(c, i)

    logger.debug("Tokenized %d characters into %d tokens", n, len(tokens))
    return tokens


def _read_number(source: str, start: int) -> tuple[int, Token]:
    """Read a numeric literal of digits with at most one decimal point."""
    i = start
    n = len(source)
    dot_at: int | None = None

    while i < n and source[i] in _NUMBER_CHARS:
        if source[i] == ".":
            if dot_at is not None:
                # Consume the rest of the run so the message shows the whole literal
                end = i
                while end < n and source[end] in _NUMBER_CHARS:
                    end += 1
                raise MalformedNumberError(source[start:end], ".", i)
            dot_at = i
        i += 1

    text = source[start:i]
    if text == ".":
        raise MalformedNumberError(text, ".", start)
    return i, Token(TokenKind.NUMBER, text, start, float(text))
