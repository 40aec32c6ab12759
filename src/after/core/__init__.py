"""Core parsing, units and configuration for after."""

from .exceptions import (
    AfterError,
    ConfigError,
    ConfigNotFoundError,
    DurationError,
    DurationOverflowError,
    DurationSyntaxError,
    MomentSyntaxError,
    UnsupportedUnitError,
)
from .parser import ParsedExpression, Parser, parse_duration, parse_expression, since, since_now
from .units import DAY, UNITS, WEEK

__all__ = [
    # Exceptions
    "AfterError",
    "ConfigError",
    "ConfigNotFoundError",
    "DurationError",
    "DurationOverflowError",
    "DurationSyntaxError",
    "MomentSyntaxError",
    "UnsupportedUnitError",
    # Parsing
    "ParsedExpression",
    "Parser",
    "parse_duration",
    "parse_expression",
    "since",
    "since_now",
    # Units
    "DAY",
    "WEEK",
    "UNITS",
]
