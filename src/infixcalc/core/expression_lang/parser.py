"""
Recursive descent parser for the infixcalc expression language.

Grammar (precedence low to high):
    expression  → term (("+" | "-") term)*
    term        → factor (("*" | "/") factor)*
    factor      → primary
    primary     → NUMBER
                | IDENTIFIER ("=" expression)?
                | "(" expression ")"

Binary operators fold left-associatively. Assignment lives in ``primary``,
so its right-hand side is a full expression and ``a = b = 1`` chains to the
right.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from infixcalc.core.errors import NestingTooDeep, UnexpectedToken
from infixcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from infixcalc.core.ir.expressions import (
    ASTNode,
    Assignment,
    BinaryOp,
    BinaryOperation,
    Number,
    Variable,
)

logger = logging.getLogger(__name__)

END_TEXT = "END"

_ADDITIVE = {"+": BinaryOp.ADD, "-": BinaryOp.SUB}
_MULTIPLICATIVE = {"*": BinaryOp.MUL, "/": BinaryOp.DIV}


def _end_sentinel(tokens: Sequence[Token]) -> Token:
    """Build the END token placed just past the last real token."""
    if not tokens:
        return Token(TokenKind.OPERATOR, END_TEXT, 1, 1)
    last = tokens[-1]
    return Token(TokenKind.OPERATOR, END_TEXT, last.line, last.column + len(last.text))


class Parser:
    """Recursive descent parser over a token sequence.

    The cursor only moves forward. Once it passes the last real token every
    read returns the END sentinel (kind OPERATOR, text "END").
    """

    def __init__(self, tokens: Sequence[Token], store: dict[str, float]) -> None:
        self.tokens = list(tokens)
        self.store = store
        self.pos = 0
        self._end = _end_sentinel(self.tokens)

    @property
    def current(self) -> Token:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self._end

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def advance(self) -> Token:
        tok = self.current
        if self.pos < len(self.tokens):
            self.pos += 1
        return tok

    def expect(self, kind: TokenKind) -> Token:
        tok = self.current
        if self.at_end or tok.kind != kind:
            raise UnexpectedToken(tok.text, tok.line, tok.column)
        return self.advance()

    def _match_operator(self, table: dict[str, BinaryOp]) -> BinaryOp | None:
        tok = self.current
        if not self.at_end and tok.kind == TokenKind.OPERATOR and tok.text in table:
            self.advance()
            return table[tok.text]
        return None

    # -- Grammar rules --

    def parse(self) -> ASTNode:
        """Parse one expression starting at the cursor.

        Raises:
            UnexpectedToken: If the tokens do not form an expression.
            NestingTooDeep: If nesting exceeds the interpreter recursion limit.
        """
        try:
            expr = self.parse_expression()
        except RecursionError:
            tok = self.current
            raise NestingTooDeep(tok.text, tok.line, tok.column) from None
        logger.debug("Parsed expression ending at token %d of %d", self.pos, len(self.tokens))
        return expr

    def parse_expression(self) -> ASTNode:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        while (op := self._match_operator(_ADDITIVE)) is not None:
            right = self.parse_term()
            left = BinaryOperation(op=op, left=left, right=right)
        return left

    def parse_term(self) -> ASTNode:
        """factor (('*' | '/') factor)*"""
        left = self.parse_factor()
        while (op := self._match_operator(_MULTIPLICATIVE)) is not None:
            right = self.parse_factor()
            left = BinaryOperation(op=op, left=left, right=right)
        return left

    def parse_factor(self) -> ASTNode:
        """primary"""
        return self.parse_primary()

    def parse_primary(self) -> ASTNode:
        """NUMBER | IDENTIFIER ('=' expression)? | '(' expression ')'"""
        tok = self.current

        if self.at_end:
            raise UnexpectedToken(tok.text, tok.line, tok.column)

        if tok.kind == TokenKind.NUMBER:
            value = float(tok.text)
            # Overflowing literals such as 1e400 have no finite rendering
            if not math.isfinite(value):
                raise UnexpectedToken(tok.text, tok.line, tok.column)
            self.advance()
            return Number(value=value)

        if tok.kind == TokenKind.IDENTIFIER:
            self.advance()
            if not self.at_end and self.current.kind == TokenKind.ASSIGNMENT:
                self.advance()
                value = self.parse_expression()
                return Assignment(variable_name=tok.text, expression=value)
            return Variable(name=tok.text)

        if tok.kind == TokenKind.LEFT_PAREN:
            self.advance()
            expr = self.parse_expression()
            self.expect(TokenKind.RIGHT_PAREN)
            return expr

        raise UnexpectedToken(tok.text, tok.line, tok.column)


def make_parser(tokens: Sequence[Token], store: dict[str, float]) -> Parser:
    """Create a parser bound to ``tokens`` and a caller-owned variable store."""
    return Parser(tokens, store)


def parse_expr(source: str, store: dict[str, float] | None = None) -> ASTNode:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "x = 2 * (y + 1)")
        store: Variable store to bind the parser to (a fresh one if omitted)

    Returns:
        Parsed expression AST.

    Raises:
        UnexpectedToken: If the expression is invalid or tokens are left over.
        TokenizeError: If tokenization fails.
    """
    parser = make_parser(tokenize(source), store if store is not None else {})
    expr = parser.parse()

    # Ensure all tokens consumed
    if not parser.at_end:
        tok = parser.current
        raise UnexpectedToken(tok.text, tok.line, tok.column)

    return expr
