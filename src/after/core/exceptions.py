"""Custom exceptions for after."""


class AfterError(Exception):
    """Base exception for after."""


class DurationError(AfterError, ValueError):
    """A duration expression could not be turned into a timedelta."""


class DurationSyntaxError(DurationError):
    """Input does not match the duration grammar."""

    def __init__(self, text: str) -> None:
        super().__init__(f"The provided string '{text}' is not a valid duration indicator")
        self.text = text


class DurationOverflowError(DurationError, OverflowError):
    """Duration magnitude cannot be represented.

    Raised when the numeral is too long to convert, when the resulting
    duration falls outside the ``timedelta`` range, or when adding the
    duration to a moment leaves the ``datetime`` range.
    """

    def __init__(self, numeral: str, reason: str = "out of range") -> None:
        super().__init__(f"The duration '{numeral}' is {reason}")
        self.numeral = numeral


class UnsupportedUnitError(DurationError):
    """Matched unit token has no entry in the unit table."""

    def __init__(self, unit: str) -> None:
        super().__init__(f"The duration unit '{unit}' is not supported")
        self.unit = unit


class MomentSyntaxError(AfterError, ValueError):
    """Reference moment is neither ISO-8601 nor ``now``."""


class ConfigError(AfterError):
    """Error in configuration."""


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""
