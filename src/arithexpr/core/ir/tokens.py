"""
Token types produced by the arithexpr lexer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """
    A single token from the lexer.

    Attributes:
        kind: Token type
        text: Source text of the token
        pos: 0-based character offset in the source
        value: Parsed value, set only for NUMBER tokens
    """

    kind: TokenKind
    text: str
    pos: int
    value: float | None = None

    def __str__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"Number({self.value!r})"
        return self.kind.name.title().replace("paren", "Paren")
