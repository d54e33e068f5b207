"""
Canonical printer for the infixcalc expression language.

Renders an AST back to source text with every binary operation and
assignment wrapped in parentheses. Rendering never evaluates anything,
and its output tokenizes and parses back to the same tree.
"""

from __future__ import annotations

import math

from infixcalc.core.errors import InvalidNode
from infixcalc.core.ir.expressions import ASTNode


class _Fragment(str):
    """Literal output text queued between nodes on the render stack."""


def render(node: ASTNode) -> str:
    """Render an expression as a fully parenthesized string.

    Uses an explicit stack, so deeply nested or long left-folded trees
    render without hitting the recursion limit.

    Raises:
        InvalidNode: The node is not one of the AST node types.
    """
    parts: list[str] = []
    pending: list[ASTNode | _Fragment] = [node]

    while pending:
        item = pending.pop()
        if isinstance(item, _Fragment):
            parts.append(item)
            continue
        match getattr(item, "kind", None):
            case "number":
                parts.append(format_number(item.value))
            case "variable":
                parts.append(item.name)
            case "binary":
                pending.extend(
                    [_Fragment(")"), item.right, _Fragment(f" {item.op} "), item.left, _Fragment("(")]
                )
            case "assignment":
                pending.extend(
                    [_Fragment(")"), item.expression, _Fragment(f"({item.variable_name} = ")]
                )
            case _:
                raise InvalidNode(item)

    return "".join(parts)


def format_number(value: float) -> str:
    """Integral values drop the fraction (3.0 -> "3"); others use repr()."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
