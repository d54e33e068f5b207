"""
infixcalc - infix arithmetic with variables.

Parses expressions such as ``x = 2 * (y + 1)`` into a typed AST, evaluates
them against a variable store, and renders them back in canonical
fully-parenthesized form.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    CalcError,
    DivisionByZero,
    InvalidNode,
    InvalidOperator,
    NestingTooDeep,
    TokenizeError,
    UnexpectedToken,
    UnknownIdentifier,
)
from .core.expression_lang import evaluate, make_parser, parse_expr, render, tokenize
from .core.session import Session

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "CalcError",
    "DivisionByZero",
    "InvalidNode",
    "InvalidOperator",
    "NestingTooDeep",
    "TokenizeError",
    "UnexpectedToken",
    "UnknownIdentifier",
    "Session",
    "evaluate",
    "make_parser",
    "parse_expr",
    "render",
    "tokenize",
]
