"""
Expression AST for infixcalc.

A closed set of immutable node types:
- Number: a numeric literal
- Variable: a reference to a value in the variable store
- BinaryOperation: left op right, for + - * /
- Assignment: name = expression

Every node carries a literal ``kind`` tag. Evaluator and printer dispatch
on that tag, and ``ASTNode`` is a pydantic discriminated union over it.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
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

    kind: Literal["number"] = "number"
    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)


class Variable(BaseModel):
    """A reference to a named value in the variable store."""

    kind: Literal["variable"] = "variable"
    name: str = Field(description="Variable name")

    model_config = ConfigDict(frozen=True)


class BinaryOperation(BaseModel):
    """Binary operation: left op right."""

    kind: Literal["binary"] = "binary"
    op: BinaryOp
    left: ASTNode
    right: ASTNode

    model_config = ConfigDict(frozen=True)


class Assignment(BaseModel):
    """
    Assignment: variable_name = expression.

    Evaluates to the assigned value, so ``a = b = 1`` nests as
    Assignment(a, Assignment(b, Number(1))).
    """

    kind: Literal["assignment"] = "assignment"
    variable_name: str = Field(description="Name written to the variable store")
    expression: ASTNode = Field(description="Right-hand side")

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

ASTNode = Annotated[
    Number | Variable | BinaryOperation | Assignment,
    Field(discriminator="kind"),
]

# Rebuild models for recursive forward references
BinaryOperation.model_rebuild()
Assignment.model_rebuild()
