"""
Intermediate representation for arithexpr: tokens and expression trees.
"""

from .expressions import BinaryOp, Expr, Number, Operator, tree_depth, walk
from .tokens import Token, TokenKind

__all__ = [
    "BinaryOp",
    "Expr",
    "Number",
    "Operator",
    "Token",
    "TokenKind",
    "tree_depth",
    "walk",
]
