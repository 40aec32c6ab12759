"""after: parse relative durations like "10s" or "-2w" and apply them to a moment."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("after-parser")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

from after.core.config import AfterConfig, find_config_file, load_config
from after.core.exceptions import (
    AfterError,
    ConfigError,
    ConfigNotFoundError,
    DurationError,
    DurationOverflowError,
    DurationSyntaxError,
    MomentSyntaxError,
    UnsupportedUnitError,
)
from after.core.parser import (
    ParsedExpression,
    Parser,
    parse_duration,
    parse_expression,
    parse_moment,
    since,
    since_now,
)
from after.core.units import DAY, UNITS, WEEK

__all__ = [
    # Version
    "__version__",
    # Parsing
    "Parser",
    "ParsedExpression",
    "parse_duration",
    "parse_expression",
    "parse_moment",
    "since",
    "since_now",
    # Units
    "DAY",
    "WEEK",
    "UNITS",
    # Config
    "load_config",
    "find_config_file",
    "AfterConfig",
    # Exceptions
    "AfterError",
    "DurationError",
    "DurationSyntaxError",
    "DurationOverflowError",
    "UnsupportedUnitError",
    "MomentSyntaxError",
    "ConfigError",
    "ConfigNotFoundError",
]
