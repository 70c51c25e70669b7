"""
Error types for arithexpr lexing, parsing, and evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arithexpr.core.ir.tokens import Token


class ArithError(Exception):
    """Base exception for all arithexpr errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        return self._format_message()

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message

    @property
    def position(self) -> int | None:
        return None

    def attach_source(self, source: str) -> None:
        """Attach the source text so the message can point at the error."""
        if self.context is None and self.position is not None:
            self.context = ErrorContext(source=source, position=self.position)


class LexError(ArithError):
    """
    Raised when a character matches none of the token patterns.

    Attributes:
        char: The offending character
        position: 0-based character offset in the source
    """

    def __init__(self, char: str, position: int, message: str | None = None):
        self.char = char
        self._position = position
        super().__init__(message or f"Unexpected character {char!r} at position {position}")

    @property
    def position(self) -> int:
        return self._position


class MalformedNumberError(LexError):
    """
    Raised when a numeric literal cannot be read.

    Examples:
    - More than one decimal point: 1.2.3
    - A lone decimal point: .
    """

    def __init__(self, literal: str, char: str, position: int):
        self.literal = literal
        super().__init__(
            char,
            position,
            f"Malformed number {literal!r}: unexpected {char!r} at position {position}",
        )


class ParseError(ArithError):
    """
    Raised when the token sequence does not form an expression.

    Examples:
    - A factor that is neither a number nor '('
    - Tokens exhausted mid-production
    - '(' without a matching ')'
    """

    def __init__(self, message: str, position: int | None = None):
        self._position = position
        super().__init__(message)

    @property
    def position(self) -> int | None:
        return self._position


class UnexpectedTokenError(ParseError):
    """A production's required token class is absent."""

    def __init__(self, found: Token, message: str | None = None):
        self.found = found
        super().__init__(
            message or f"Unexpected token {found.text!r} at position {found.pos}",
            found.pos,
        )


class UnexpectedEndOfInputError(ParseError):
    """Tokens ran out in the middle of a production."""

    def __init__(self, position: int | None = None):
        super().__init__("Unexpected end of input", position)


class UnmatchedParenError(ParseError):
    """
    A '(' was not followed, after its inner expression, by ')'.

    Attributes:
        found: The token seen instead of ')', or None at end of input
        position: Offset of the opening '('
    """

    def __init__(self, found: Token | None, position: int):
        self.found = found
        if found is None:
            detail = "reached end of input"
        else:
            detail = f"found {found.text!r} at position {found.pos}"
        super().__init__(f"Unmatched '(' at position {position}: {detail}", position)


class NestingTooDeepError(ParseError):
    """Parenthesis nesting exceeded the parser's depth limit."""

    def __init__(self, depth: int, position: int):
        self.depth = depth
        super().__init__(
            f"Parentheses nested deeper than {depth} levels at position {position}",
            position,
        )


class DivisionByZeroError(ArithError):
    """
    Raised by strict-division evaluation when a divisor is zero.

    Plain evaluate() never raises this; it follows IEEE semantics.
    """

    def __init__(self, divisor: str):
        self.divisor = divisor
        super().__init__(f"Division by zero: divisor {divisor} evaluates to 0")


class ConfigError(ArithError):
    """Raised when arithexpr.toml holds a value of the wrong type."""

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        source: The full expression text
        position: 0-based character offset of the error
    """

    source: str
    position: int

    @property
    def column(self) -> int:
        """1-indexed column."""
        return self.position + 1

    def format(self) -> str:
        """
        Format the source with a marker under the error column.

        Returns:
            Formatted string like:
                "column 3\n  2 & 3\n    ^"
        """
        prefix = "  "
        line = self.source.translate(_BLANKS)
        marker = " " * (len(prefix) + self.position) + "^"
        return f"column {self.column}\n{prefix}{line}\n{marker}"


# Whitespace that would break caret alignment on a single display line
_BLANKS = str.maketrans({"\t": " ", "\r": " ", "\n": " "})
