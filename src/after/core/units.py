"""Duration units and their accepted spellings."""

import re
from datetime import timedelta

DAY = timedelta(hours=24)
WEEK = DAY * 7

# Canonical unit -> duration of one unit
UNITS: dict[str, timedelta] = {
    "millisecond": timedelta(milliseconds=1),
    "second": timedelta(seconds=1),
    "minute": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "day": DAY,
    "week": WEEK,
}

# Surface token -> canonical unit
SPELLINGS: dict[str, str] = {
    "ms": "millisecond",
    "millisecond": "millisecond",
    "milliseconds": "millisecond",
    "s": "second",
    "second": "second",
    "seconds": "second",
    "m": "minute",
    "minute": "minute",
    "minutes": "minute",
    "h": "hour",
    "hour": "hour",
    "hours": "hour",
    "d": "day",
    "day": "day",
    "days": "day",
    "w": "week",
    "week": "week",
    "weeks": "week",
}

UNIT_MAP: dict[str, timedelta] = {token: UNITS[unit] for token, unit in SPELLINGS.items()}


def spellings_for(unit: str) -> list[str]:
    """Return the accepted tokens for a canonical unit, shortest first."""
    if unit not in UNITS:
        raise KeyError(unit)
    return sorted((t for t, u in SPELLINGS.items() if u == unit), key=len)


def unit_pattern() -> str:
    """Regex alternation matching exactly the tokens in :data:`UNIT_MAP`.

    Longer tokens come first so ``ms`` is never read as ``m`` + garbage.
    """
    tokens = sorted(UNIT_MAP, key=lambda t: (-len(t), t))
    return "|".join(re.escape(t) for t in tokens)
