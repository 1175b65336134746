from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Optional, Union

# fromisoformat() before 3.11 only takes 3 or 6 fraction digits
_FRACTION = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")


def utcnow() -> datetime:
    """Return a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Naive datetimes are taken to be UTC already."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _six_digit_fraction(match: re.Match) -> str:
    return f"{match.group(1)}.{match.group(2)[:6].ljust(6, '0')}"


def parse_timestamp(value: Optional[Union[str, float]]) -> Optional[datetime]:
    """
    ISO-8601 text (with or without a trailing Z) or epoch milliseconds to UTC.
    Returns None when the value cannot be read as a point in time.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    s = value.strip().replace("Z", "+00:00")
    if not s:
        return None
    s = _FRACTION.sub(_six_digit_fraction, s, count=1)
    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        return None
    return as_utc(dt)
