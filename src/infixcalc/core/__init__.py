"""Core infixcalc functionality: AST, tokenizer, parser, evaluator, printer, sessions."""

from . import ir
from .config import CalcConfig, load_config
from .errors import (
    CalcError,
    CalcParseError,
    ConfigError,
    DivisionByZero,
    ErrorContext,
    EvaluationError,
    InvalidNode,
    InvalidOperator,
    NestingTooDeep,
    TokenizeError,
    UnexpectedToken,
    UnknownIdentifier,
)
from .session import Session, SessionResult

__all__ = [
    "ir",
    "CalcConfig",
    "load_config",
    "CalcError",
    "CalcParseError",
    "ConfigError",
    "DivisionByZero",
    "ErrorContext",
    "EvaluationError",
    "InvalidNode",
    "InvalidOperator",
    "NestingTooDeep",
    "TokenizeError",
    "UnexpectedToken",
    "UnknownIdentifier",
    "Session",
    "SessionResult",
]
