"""
UTC datetime and duration utilities.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

import re
import time
from datetime import UTC, datetime, timedelta

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$", re.IGNORECASE)
_DURATION_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def epoch_millis() -> int:
    """Return the current Unix time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def parse_duration(value: str) -> timedelta:
    """
    Parse a compact duration such as "15m", "1d" or "7d" into a timedelta.

    Supported suffixes: s, m, h, d, w. Bare digits are seconds, so
    "3600" and "1h" are equivalent.

    Args:
        value: Duration string from configuration

    Returns:
        Positive timedelta

    Raises:
        ValueError: If the string is not a positive duration
    """
    match = _DURATION_RE.match(value or "")
    if match is None:
        raise ValueError(f"Invalid duration: {value!r} (expected e.g. '15m', '1d', '3600')")
    amount = int(match.group(1))
    if amount <= 0:
        raise ValueError(f"Duration must be positive, got: {value!r}")
    unit = _DURATION_UNITS[match.group(2).lower()]
    return timedelta(**{unit: amount})
