"""
Tokenizer for the infixcalc expression language.

Converts an expression string into a sequence of typed tokens with
1-indexed line/column positions. No end-of-input token is emitted; the
parser synthesizes its own END sentinel.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum, auto

from infixcalc.core.errors import TokenizeError


class TokenKind(StrEnum):
    """Token types for the expression language."""

    NUMBER = auto()
    IDENTIFIER = auto()
    OPERATOR = auto()
    ASSIGNMENT = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()


@dataclass(frozen=True)
class Token:
    """
    A single token from the expression tokenizer.

    Attributes:
        kind: Type of token
        text: Raw lexeme
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    kind: TokenKind
    text: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, {self.line}:{self.column})"


# Number pattern: 12, 12., 12.5, .5, with an optional exponent
_NUMBER_RE = re.compile(r"([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
# Identifier: letter or underscore followed by alphanumerics/underscores
_IDENT_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")

_SINGLE_MAP: dict[str, TokenKind] = {
    "+": TokenKind.OPERATOR,
    "-": TokenKind.OPERATOR,
    "*": TokenKind.OPERATOR,
    "/": TokenKind.OPERATOR,
    "=": TokenKind.ASSIGNMENT,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Raises:
        TokenizeError: On a character that starts no token.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)
    line = 1
    line_start = 0

    while i < n:
        c = source[i]
        column = i - line_start + 1

        if c == "\n":
            i += 1
            line += 1
            line_start = i
            continue

        # Skip whitespace
        if c in " \t\r":
            i += 1
            continue

        if m := _NUMBER_RE.match(source, i):
            tokens.append(Token(TokenKind.NUMBER, m.group(0), line, column))
            i = m.end()
            continue

        if m := _IDENT_RE.match(source, i):
            tokens.append(Token(TokenKind.IDENTIFIER, m.group(0), line, column))
            i = m.end()
            continue

        if c in _SINGLE_MAP:
            tokens.append(Token(_SINGLE_MAP[c], c, line, column))
            i += 1
            continue

        line_end = source.find("\n", line_start)
        snippet = source[line_start : line_end if line_end != -1 else n]
        raise TokenizeError(c, line, column, snippet=snippet)

    return tokens
