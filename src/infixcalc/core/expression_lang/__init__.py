"""
infixcalc expression language.

Tokenizer, parser, evaluator, and printer for infix arithmetic with
variables and assignment.

Usage:
    from infixcalc.core.expression_lang import evaluate, parse_expr, render

    store: dict[str, float] = {}
    expr = parse_expr("x = 2 * (3 + 4)")
    evaluate(expr, store)   # 14.0, store == {"x": 14.0}
    render(expr)            # "(x = (2 * (3 + 4)))"
"""

from infixcalc.core.expression_lang.evaluator import evaluate
from infixcalc.core.expression_lang.parser import Parser, make_parser, parse_expr
from infixcalc.core.expression_lang.printer import render
from infixcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize

__all__ = [
    "Parser",
    "Token",
    "TokenKind",
    "evaluate",
    "make_parser",
    "parse_expr",
    "render",
    "tokenize",
]
