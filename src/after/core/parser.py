"""Relative duration parsing.

Turns expressions such as ``"10s"``, ``"+1 minute"`` or ``"-2w"`` into a
:class:`~datetime.timedelta` and applies them to a point in time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Callable

from after.core.exceptions import (
    DurationOverflowError,
    DurationSyntaxError,
    MomentSyntaxError,
    UnsupportedUnitError,
)
from after.core.units import SPELLINGS, UNIT_MAP, unit_pattern

# Built at import time and never mutated afterwards.
DURATION_RE = re.compile(rf"(?P<sign>[+-])?(?P<magnitude>[1-9][0-9]*) ?(?P<unit>{unit_pattern()})")

Clock = Callable[[tzinfo | None], datetime]


@dataclass(frozen=True)
class ParsedExpression:
    """Fields extracted from a duration expression."""

    text: str
    sign: int
    magnitude: int
    unit: str

    @property
    def canonical_unit(self) -> str:
        return SPELLINGS[self.unit]

    @property
    def multiplier(self) -> int:
        """Magnitude with the sign folded in."""
        return self.sign * self.magnitude

    @property
    def duration(self) -> timedelta:
        per_unit = UNIT_MAP.get(self.unit)
        if per_unit is None:
            raise UnsupportedUnitError(self.unit)
        try:
            return per_unit * self.multiplier
        except OverflowError:
            raise DurationOverflowError(str(self.magnitude)) from None


def parse_expression(text: str) -> ParsedExpression:
    """Match *text* against the duration grammar and extract its fields.

    Raises:
        TypeError: If *text* is not a string.
        DurationSyntaxError: If *text* does not match the grammar.
        DurationOverflowError: If the magnitude numeral cannot be converted.
    """
    if not isinstance(text, str):
        raise TypeError(f"duration must be a str, not {type(text).__name__}")

    match = DURATION_RE.fullmatch(text)
    if match is None:
        raise DurationSyntaxError(text)

    numeral = match.group("magnitude")
    try:
        magnitude = int(numeral)
    except ValueError:
        # Exceeds the interpreter's int string conversion limit
        raise DurationOverflowError(numeral, "too long") from None

    return ParsedExpression(
        text=text,
        sign=-1 if match.group("sign") == "-" else 1,
        magnitude=magnitude,
        unit=match.group("unit"),
    )


def parse_moment(value: str) -> datetime:
    """Parse a reference moment.

    Accepted formats:

    * ``"now"`` – the current local time.
    * **Absolute** – any string accepted by :func:`datetime.fromisoformat`,
      e.g. ``"2026-02-23T18:00:00"`` or ``"2026-02-23 18:00"``.

    Raises:
        MomentSyntaxError: If *value* cannot be parsed.
    """
    stripped = value.strip()
    if stripped == "now":
        return datetime.now()

    try:
        return datetime.fromisoformat(stripped)
    except ValueError:
        pass

    raise MomentSyntaxError(
        f"Invalid moment: {value!r}. Use 'now' or an ISO timestamp (e.g. 2026-02-23T18:00:00)."
    )


class Parser:
    """Duration parser service.

    Holds no per-call state; instances are safe to share between threads.

    Args:
        clock: Callable returning the current time for a given tzinfo.
            Defaults to :meth:`datetime.now`.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or datetime.now

    def duration(self, text: str) -> timedelta:
        """Return the signed duration represented by *text*.

        The input must contain a time unit and a multiplier, optionally
        signed (``+`` if omitted), with at most one space between them.

        The accepted time units are:

        * ``ms``, ``millisecond`` or ``milliseconds``
        * ``s``, ``second`` or ``seconds``
        * ``m``, ``minute`` or ``minutes``
        * ``h``, ``hour`` or ``hours``
        * ``d``, ``day`` or ``days``
        * ``w``, ``week`` or ``weeks``

        Examples:
            >>> Parser().duration("10s")
            datetime.timedelta(seconds=10)
            >>> Parser().duration("-1 day")
            datetime.timedelta(days=-1)

        Raises:
            DurationSyntaxError: If *text* is not a valid expression.
            DurationOverflowError: If the magnitude is out of range.
            UnsupportedUnitError: If the unit has no table entry.
        """
        return parse_expression(text).duration

    def since(self, moment: datetime, text: str) -> datetime:
        """Return *moment* plus (or minus) the duration in *text*.

        Parse errors propagate unchanged; *moment* is never modified.
        """
        expression = parse_expression(text)
        delta = expression.duration
        try:
            return moment + delta
        except OverflowError:
            reason = f"beyond the supported date range from {moment.isoformat()}"
            raise DurationOverflowError(str(expression.magnitude), reason) from None

    def since_now(self, text: str, tz: tzinfo | None = None) -> datetime:
        """Return the current time plus (or minus) the duration in *text*.

        The clock is read once. With *tz* ``None`` the result is naive local time.
        """
        return self.since(self._clock(tz), text)


_default_parser = Parser()


def parse_duration(text: str) -> timedelta:
    """Parse *text* into a :class:`timedelta`. See :meth:`Parser.duration`."""
    return _default_parser.duration(text)


def since(moment: datetime, text: str) -> datetime:
    """Add the duration in *text* to *moment*."""
    return _default_parser.since(moment, text)


def since_now(text: str, tz: tzinfo | None = None) -> datetime:
    """Add the duration in *text* to the current time."""
    return _default_parser.since_now(text, tz)
