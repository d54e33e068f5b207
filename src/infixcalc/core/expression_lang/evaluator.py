"""
Expression evaluator for the infixcalc expression language.

Walks an AST and reduces it to a float. The only side effect is writing
assigned values into the caller's variable store. Does NOT use Python's
eval().

The walk keeps its own work stack instead of recursing, so tree depth is
not bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

import logging

from infixcalc.core.errors import (
    DivisionByZero,
    InvalidNode,
    InvalidOperator,
    UnknownIdentifier,
)
from infixcalc.core.ir.expressions import ASTNode, BinaryOp

logger = logging.getLogger(__name__)


def evaluate(node: ASTNode, store: dict[str, float]) -> float:
    """Evaluate an expression against a variable store.

    Operands are evaluated left then right, so assignments inside an
    expression take effect in reading order.

    Args:
        node: Parsed expression AST.
        store: Variable name -> value. Updated in place by assignments.

    Returns:
        The computed value.

    Raises:
        UnknownIdentifier: A variable is read that the store does not hold.
        DivisionByZero: The right operand of '/' is exactly zero.
        InvalidOperator: A binary node carries an unsupported operator.
        InvalidNode: The node is not one of the AST node types.
    """
    values: list[float] = []
    # (node, children_done): a node is revisited once its operands are on `values`
    pending: list[tuple[ASTNode, bool]] = [(node, False)]

    while pending:
        current, children_done = pending.pop()
        match getattr(current, "kind", None):
            case "number":
                values.append(current.value)
            case "variable":
                if current.name not in store:
                    raise UnknownIdentifier(current.name)
                values.append(store[current.name])
            case "binary":
                if children_done:
                    right = values.pop()
                    left = values.pop()
                    values.append(_apply(current.op, left, right))
                else:
                    # Left is pushed last so it is evaluated first
                    pending.append((current, True))
                    pending.append((current.right, False))
                    pending.append((current.left, False))
            case "assignment":
                if children_done:
                    store[current.variable_name] = values[-1]
                    logger.debug("Assigned %s = %r", current.variable_name, values[-1])
                else:
                    pending.append((current, True))
                    pending.append((current.expression, False))
            case _:
                raise InvalidNode(current)

    return values.pop()


def _apply(op: BinaryOp, left: float, right: float) -> float:
    match op:
        case "+":
            return left + right
        case "-":
            return left - right
        case "*":
            return left * right
        case "/":
            if right == 0.0:
                raise DivisionByZero()
            return left / right
        case _:
            raise InvalidOperator(op)
