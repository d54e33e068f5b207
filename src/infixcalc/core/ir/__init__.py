"""
infixcalc Intermediate Representation (IR) types.

The expression AST lives in ``expressions``; everything is re-exported here.
"""

from .expressions import (
    ASTNode,
    Assignment,
    BinaryOp,
    BinaryOperation,
    Number,
    Variable,
)

__all__ = [
    "ASTNode",
    "Assignment",
    "BinaryOp",
    "BinaryOperation",
    "Number",
    "Variable",
]
