"""
Error types for infixcalc tokenizing, parsing, evaluation, and configuration.
"""

from dataclasses import dataclass
from typing import Any, Optional


class CalcError(Exception):
    """Base exception for all infixcalc errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return self.context.format(self.message)
        return self.message


class TokenizeError(CalcError):
    """
    Raised when source text contains a character no token starts with.

    Examples:
    - `2 % 3`
    - `price$`
    """

    def __init__(self, char: str, line: int, column: int, snippet: str | None = None):
        self.char = char
        self.line = line
        self.column = column
        context = ErrorContext(line=line, column=column, snippet=snippet)
        super().__init__(f"Unexpected character {char!r}", context)


class CalcParseError(CalcError):
    """Raised when a token stream does not match the expression grammar."""

    pass


class UnexpectedToken(CalcParseError):
    """
    Raised when the parser meets a token it cannot use.

    Examples:
    - A closing parenthesis with no opening one
    - A missing closing parenthesis (reported at END)
    - An operator where a number, name, or '(' is expected
    """

    def __init__(self, text: str, line: int, column: int, message: str | None = None):
        self.text = text
        self.line = line
        self.column = column
        context = ErrorContext(line=line, column=column)
        super().__init__(message or f"Unexpected token {text!r}", context)


class NestingTooDeep(UnexpectedToken):
    """Raised when parentheses or assignments nest deeper than the parser can follow."""

    def __init__(self, text: str, line: int, column: int):
        super().__init__(text, line, column, f"Expression nested too deeply at {text!r}")


class EvaluationError(CalcError):
    """Raised when an expression tree cannot be reduced to a value."""

    pass


class UnknownIdentifier(EvaluationError):
    """Raised when a variable is read before it was ever assigned."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown identifier {name!r}")


class DivisionByZero(EvaluationError):
    """Raised when the right operand of '/' is exactly zero."""

    def __init__(self) -> None:
        super().__init__("Division by zero")


class InvalidOperator(EvaluationError):
    """Raised for a binary operator outside '+', '-', '*', '/'."""

    def __init__(self, op: Any):
        self.op = op
        super().__init__(f"Invalid operator {op!r}")


class InvalidNode(EvaluationError):
    """Raised by the evaluator or printer for an unrecognized node."""

    def __init__(self, node: Any):
        self.node = node
        super().__init__(f"Invalid node type: {type(node).__name__}")


class ConfigError(CalcError):
    """
    Raised when a configuration file cannot be used.

    Examples:
    - Malformed TOML
    - Non-numeric value in the [variables] table
    """

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line containing the error
    """

    line: int
    column: int
    snippet: str | None = None

    def format(self, message: str) -> str:
        """
        Format a message with this location as a human-readable string.

        Returns:
            Formatted string like "1:5: message", followed by the snippet
            and a marker when a snippet is present
        """
        location = f"{self.line}:{self.column}: {message}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the snippet line with an error marker under the column."""
        if not self.snippet:
            return ""
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^"
        return f"{prefix}{self.snippet}\n{marker}"
