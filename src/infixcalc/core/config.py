"""
Configuration for the infixcalc driver.

Read from ``infixcalc.toml``:

    [calculator]
    show_tree = false
    prompt = "calc> "

    [logging]
    level = "WARNING"

    [variables]
    pi = 3.141592653589793

``INFIXCALC_LOG_LEVEL`` overrides the logging level.
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "infixcalc.toml"
LOG_LEVEL_ENV = "INFIXCALC_LOG_LEVEL"


@dataclass
class CalculatorConfig:
    """Driver behaviour."""

    show_tree: bool = False  # Print the canonical rendering with each result
    prompt: str = "calc> "


@dataclass
class LoggingConfig:
    """Logging setup."""

    level: str = "WARNING"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class CalcConfig:
    calculator: CalculatorConfig = field(default_factory=CalculatorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    variables: dict[str, float] = field(default_factory=dict)  # Seeded into each session


def load_config(path: Path | None = None) -> CalcConfig:
    """
    Load configuration from a TOML file.

    Args:
        path: Config file. When omitted, ``infixcalc.toml`` in the current
            directory is used if it exists, otherwise defaults apply.

    Returns:
        CalcConfig with environment overrides applied

    Raises:
        ConfigError: If the file is missing (explicit path), malformed, or
            holds a non-numeric variable
    """
    if path is None:
        default = Path.cwd() / CONFIG_FILENAME
        data = _read_toml(default) if default.exists() else {}
    else:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        data = _read_toml(path)

    calculator_data = data.get("calculator", {})
    logging_data = data.get("logging", {})

    calculator = CalculatorConfig(
        show_tree=bool(calculator_data.get("show_tree", False)),
        prompt=str(calculator_data.get("prompt", "calc> ")),
    )
    logging_config = LoggingConfig(
        level=str(logging_data.get("level", "WARNING")).upper(),
        format=logging_data.get("format", LoggingConfig.format),
    )

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        logging_config.level = env_level.upper()

    return CalcConfig(
        calculator=calculator,
        logging=logging_config,
        variables=_parse_variables(data.get("variables", {})),
    )


def configure_logging(config: LoggingConfig) -> None:
    """Apply the logging section to the root logger."""
    level = logging.getLevelName(config.level)
    if not isinstance(level, int):
        raise ConfigError(f"Unknown logging level: {config.level}")
    logging.basicConfig(level=level, format=config.format)


def _read_toml(path: Path) -> dict:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _parse_variables(raw: dict) -> dict[str, float]:
    variables: dict[str, float] = {}
    for name, value in raw.items():
        # bool is an int subclass, reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"Variable {name!r} must be a number, got {value!r}")
        variables[name] = float(value)
    logger.debug("Loaded %d configured variables", len(variables))
    return variables
