"""
Expression tree types for arithexpr.

The tree is a closed union of two frozen node types:
- Number: a numeric leaf
- BinaryOp: an operator applied to exactly two owned subtrees

Trees are built bottom-up by the parser and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return repr(self.value)


class BinaryOp(BaseModel):
    """Binary operation: left op right.

    Chains such as 1 + 1 + ... + 1 build left-deep trees of any height, so
    str(), repr(), == and hash() walk the tree with an explicit stack.
    """

    op: Operator
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return _join(self, lambda n: repr(n.value), lambda n: ("(", f" {n.op.value} ", ")"))

    def __repr__(self) -> str:
        return _join(
            self, repr, lambda n: (f"BinaryOp(op={n.op!r}, left=", ", right=", ")")
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryOp):
            return NotImplemented
        pairs: list[tuple[Expr, Expr]] = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if isinstance(a, BinaryOp) and isinstance(b, BinaryOp):
                if a.op != b.op:
                    return False
                pairs.append((a.right, b.right))
                pairs.append((a.left, b.left))
            elif isinstance(a, BinaryOp) or isinstance(b, BinaryOp):
                return False
            elif a != b:
                return False
        return True

    def __hash__(self) -> int:
        return hash(tuple(n.op if isinstance(n, BinaryOp) else n.value for n in walk(self)))


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Number | BinaryOp

# Rebuild models for recursive forward references
BinaryOp.model_rebuild()


def walk(expr: Expr) -> Iterator[Expr]:
    """Yield every node in pre-order (node, left subtree, right subtree)."""
    stack: list[Expr] = [expr]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, BinaryOp):
            stack.append(node.right)
            stack.append(node.left)


def _join(
    expr: Expr,
    leaf: Callable[[Number], str],
    parts: Callable[[BinaryOp], tuple[str, str, str]],
) -> str:
    """Render a tree as text; parts() gives the text before, between and after the children."""
    out: list[str] = []
    stack: list[Expr | str] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, BinaryOp):
            before, between, after = parts(item)
            stack.extend((after, item.right, between, item.left, before))
        else:
            out.append(leaf(item))
    return "".join(out)


def tree_depth(expr: Expr) -> int:
    """Height of the tree; a lone Number has depth 1."""
    depth = 0
    stack: list[tuple[Expr, int]] = [(expr, 1)]
    while stack:
        node, level = stack.pop()
        depth = max(depth, level)
        if isinstance(node, BinaryOp):
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
    return depth
