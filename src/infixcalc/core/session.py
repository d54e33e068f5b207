"""
Calculator session: owns the variable store across parse/evaluate cycles.

One session per interactive user or script. Sessions are not thread-safe;
share one across threads only behind a lock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from infixcalc.core.expression_lang.evaluator import evaluate
from infixcalc.core.expression_lang.parser import parse_expr
from infixcalc.core.expression_lang.printer import render
from infixcalc.core.ir.expressions import ASTNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionResult:
    """Outcome of running one line."""

    expression: ASTNode
    value: float
    rendered: str


class Session:
    """A variable store plus the parse/evaluate/render cycle over it."""

    def __init__(self, variables: dict[str, float] | None = None) -> None:
        self.store: dict[str, float] = dict(variables or {})

    def parse(self, source: str) -> ASTNode:
        return parse_expr(source, self.store)

    def run(self, source: str) -> SessionResult:
        """Parse, evaluate, and render one expression.

        Errors propagate unchanged. Assignments completed before an
        evaluation error stay in the store.
        """
        expression = self.parse(source)
        value = evaluate(expression, self.store)
        rendered = render(expression)
        logger.debug("%s => %r", rendered, value)
        return SessionResult(expression=expression, value=value, rendered=rendered)

    def clear(self) -> None:
        self.store.clear()

    def variables(self) -> dict[str, float]:
        """Sorted copy of the store."""
        return dict(sorted(self.store.items()))
