"""Tests for calculate() and the strict-division guard."""

from __future__ import annotations

import math
import random

import pytest

from arithexpr import calculate
from arithexpr.core.errors import (
    ArithError,
    DivisionByZeroError,
    LexError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from arithexpr.core.expression_lang import parse_expr
from arithexpr.core.ir.tokens import TokenKind
from arithexpr.core.manifest import ArithManifest, EvaluatorConfig, ParserConfig
from arithexpr.core.pipeline import check_division


@pytest.fixture
def strict() -> ArithManifest:
    return ArithManifest(evaluator=EvaluatorConfig(strict_division=True))


class TestCalculate:
    """calculate() composes tokenize, parse, and evaluate."""

    def test_result_parts(self) -> None:
        result = calculate("2 + 3 * 4")
        assert result.value == 14.0
        assert result.source == "2 + 3 * 4"
        assert [t.kind for t in result.tokens] == [
            TokenKind.NUMBER,
            TokenKind.PLUS,
            TokenKind.NUMBER,
            TokenKind.STAR,
            TokenKind.NUMBER,
        ]
        assert str(result.expr) == "(2.0 + (3.0 * 4.0))"

    def test_ieee_division_by_default(self) -> None:
        assert calculate("1 / 0").value == math.inf

    def test_idempotent(self) -> None:
        assert calculate("(2 + 3) * 4") == calculate("(2 + 3) * 4")

    def test_idempotent_long_chain(self) -> None:
        source = " * ".join(["1"] * 3000)
        assert calculate(source) == calculate(source)
        assert calculate(source).value == 1.0

    def test_lex_error_has_context(self) -> None:
        with pytest.raises(LexError) as exc_info:
            calculate("2 & 3")
        context = exc_info.value.context
        assert context is not None
        assert context.position == 2
        assert "  2 & 3\n    ^" in str(exc_info.value)

    def test_end_of_input_has_context(self) -> None:
        with pytest.raises(UnexpectedEndOfInputError) as exc_info:
            calculate("2 + ")
        assert exc_info.value.context is not None
        assert exc_info.value.context.column == 4

    def test_trailing_tokens_setting(self) -> None:
        settings = ArithManifest(parser=ParserConfig(allow_trailing_tokens=False))
        assert calculate("1 + 2", settings=settings).value == 3.0
        with pytest.raises(UnexpectedTokenError):
            calculate("1 + 2)", settings=settings)


class TestStrictDivision:
    """Strict division rejects zero divisors before evaluating."""

    def test_literal_zero(self, strict: ArithManifest) -> None:
        with pytest.raises(DivisionByZeroError, match="divisor 0.0"):
            calculate("1 / 0", settings=strict)

    def test_zero_subexpression(self, strict: ArithManifest) -> None:
        with pytest.raises(DivisionByZeroError) as exc_info:
            calculate("1 / (2 - 2)", settings=strict)
        assert exc_info.value.divisor == "(2.0 - 2.0)"

    def test_nonzero_divisor_allowed(self, strict: ArithManifest) -> None:
        assert calculate("4 / 2", settings=strict).value == 2.0

    def test_long_zero_divisor(self, strict: ArithManifest) -> None:
        source = "1 / (" + " - ".join(["0"] * 3000) + ")"
        with pytest.raises(DivisionByZeroError) as exc_info:
            calculate(source, settings=strict)
        assert exc_info.value.divisor.endswith(" - 0.0)")
        assert exc_info.value.divisor.count("(") == 2999

    def test_first_division_in_evaluation_order_reported(self) -> None:
        with pytest.raises(DivisionByZeroError) as exc_info:
            check_division(parse_expr("(1 / (3 - 3)) + (1 / 0)"))
        assert exc_info.value.divisor == "(3.0 - 3.0)"

    def test_inner_division_reported_before_outer(self) -> None:
        # The outer divisor (1 / (1 - 1)) is inf, not zero
        with pytest.raises(DivisionByZeroError) as exc_info:
            check_division(parse_expr("2 / (1 / (1 - 1))"))
        assert exc_info.value.divisor == "(1.0 - 1.0)"

    def test_no_division(self) -> None:
        check_division(parse_expr("1 + 2 * 3"))


class TestArbitraryInput:
    """Any string over the expression alphabet yields a float or an ArithError."""

    ALPHABET = "0123456789. +-*/()"

    def test_random_strings(self) -> None:
        rng = random.Random(1234)
        outcomes: set[str] = set()
        for _ in range(2000):
            source = "".join(rng.choice(self.ALPHABET) for _ in range(rng.randint(0, 24)))
            try:
                value = calculate(source).value
            except ArithError as e:
                outcomes.add(type(e).__name__)
            else:
                assert isinstance(value, float)
                outcomes.add("value")
        assert "value" in outcomes
        assert "UnexpectedTokenError" in outcomes
