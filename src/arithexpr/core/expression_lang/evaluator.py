"""
Expression evaluator for arithexpr.

Folds an expression tree into a single float. Pure evaluation, no I/O,
no side effects, and no use of Python's eval().

Division follows IEEE-754 double semantics: a zero divisor yields
+inf, -inf or nan instead of raising. With strict_division=True the fold
stops at the first zero divisor with DivisionByZeroError instead.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from operator import add, mul, sub

from arithexpr.core.errors import ArithError, DivisionByZeroError
from arithexpr.core.ir.expressions import BinaryOp, Expr, Number, Operator


class ExpressionEvalError(ArithError):
    """Error during expression evaluation."""


def _divide(left: float, right: float) -> float:
    """IEEE-754 division; Python raises ZeroDivisionError where IEEE does not."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        # Sign of zero matters: 1 / -0.0 is -inf
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


_APPLY: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: add,
    Operator.SUB: sub,
    Operator.MUL: mul,
    Operator.DIV: _divide,
}


def evaluate(expr: Expr, *, strict_division: bool = False) -> float:
    """Evaluate an expression tree.

    Post-order walk: both children of a BinaryOp are evaluated, left
    first, before its operator is applied. The walk keeps its own stack so
    tree height is not bounded by the interpreter's recursion limit.

    Args:
        expr: Parsed expression tree.
        strict_division: Raise on a zero divisor rather than returning
            an IEEE infinity or nan. Divisors are checked in evaluation
            order, so the first zero met is the one reported.

    Returns:
        The computed value.

    Raises:
        DivisionByZeroError: A divisor is zero and strict_division is set.
        ExpressionEvalError: If the tree holds something other than
            Number or BinaryOp nodes.
    """
    # Work items are (node, children_done); results collect finished values
    work: list[tuple[Expr, bool]] = [(expr, False)]
    results: list[float] = []

    while work:
        node, children_done = work.pop()

        if isinstance(node, Number):
            results.append(float(node.value))
            continue

        if isinstance(node, BinaryOp):
            if children_done:
                right = results.pop()
                left = results.pop()
                if strict_division and node.op == Operator.DIV and right == 0.0:
                    raise DivisionByZeroError(divisor=str(node.right))
                results.append(_apply(node.op, left, right))
            else:
                work.append((node, True))
                work.append((node.right, False))
                work.append((node.left, False))
            continue

        raise ExpressionEvalError(f"Unknown expression type: {type(node).__name__}")

    return results.pop()


def _apply(op: Operator, left: float, right: float) -> float:
    fn = _APPLY.get(op)
    if fn is None:
        raise ExpressionEvalError(f"Unknown binary op: {op}")
    return fn(left, right)
