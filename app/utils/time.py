"""
Display timezone utilities.

Converts UTC datetime strings into a fixed-offset display form
(``YYYY-MM-DDTHH:mm:ss``) for date range filters. Conversion is display-only:
stored and queried values stay in UTC.

Zones are modelled as constant minute offsets, so there is no DST handling.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)


class TimezoneType(str, Enum):
    """Timezones selectable for display"""
    UTC = "UTC"
    IST = "IST"


# Minutes ahead of UTC
TIMEZONE_OFFSETS: Dict[TimezoneType, int] = {
    TimezoneType.UTC: 0,
    TimezoneType.IST: 5 * 60 + 30,
}

# Open range boundaries, never parsed as dates
NEGATIVE_INFINITY = "-∞"
POSITIVE_INFINITY = "∞"
SENTINEL_VALUES = frozenset({"", NEGATIVE_INFINITY, POSITIVE_INFINITY})

TimezoneLike = Union[TimezoneType, str]


def resolve_timezone(tz: TimezoneLike) -> TimezoneType:
    """
    Resolve an enum member or identifier string ("ist", "IST") to a TimezoneType.

    Raises ValueError for identifiers without an offset entry.
    """
    if isinstance(tz, TimezoneType):
        return tz
    try:
        return TimezoneType(str(tz).strip().upper())
    except ValueError:
        raise ValueError(f"Unsupported display timezone: {tz!r}") from None


def is_sentinel(value: Optional[str]) -> bool:
    return not value or value in SENTINEL_VALUES


def parse_utc_datetime(value: str) -> datetime:
    """
    Parse a datetime string into a timezone-aware value.

    - "Z" or "+hh:mm" present: parsed as an already zoned instant
    - "T" separator without zone info: assumed UTC
    - anything else: parsed as is, naive results assumed UTC

    Raises ValueError if the text is not a valid ISO 8601 date/time.
    """
    text = value.strip()

    if "Z" in text or "+" in text:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    elif "T" in text:
        parsed = datetime.fromisoformat(text + "+00:00")
    else:
        parsed = datetime.fromisoformat(text)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_display_datetime(dt: datetime) -> str:
    """Render calendar fields as YYYY-MM-DDTHH:mm:ss (sub-second dropped)."""
    return (
        f"{dt.year}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )


def convert_utc_to_timezone(value: str, tz: TimezoneLike = TimezoneType.UTC) -> str:
    """
    Convert a UTC datetime string to the given display timezone.

    Sentinels ("", "-∞", "∞") and UTC targets are returned unchanged.
    Unparseable input is returned unchanged as well; this never raises.

    >>> convert_utc_to_timezone("2024-01-01T00:00:00", "IST")
    '2024-01-01T05:30:00'
    """
    if is_sentinel(value):
        return value

    try:
        zone = resolve_timezone(tz)
    except ValueError:
        logger.warning("Unknown display timezone %r, rendering without offset", tz)
        zone = None

    if zone is TimezoneType.UTC:
        return value

    offset_minutes = TIMEZONE_OFFSETS[zone] if zone is not None else 0

    try:
        instant = parse_utc_datetime(value).astimezone(timezone.utc)
        shifted = instant + timedelta(minutes=offset_minutes)
    except (ValueError, OverflowError, TypeError, AttributeError) as exc:
        logger.debug("Keeping original datetime %r for display: %s", value, exc)
        return value

    return format_display_datetime(shifted)


def to_ist_display(value: str) -> str:
    """Convert a UTC datetime string to IST (UTC+5:30) for display."""
    return convert_utc_to_timezone(value, TimezoneType.IST)


def format_time_range(
    start: str,
    end: str,
    tz: Optional[TimezoneLike] = None,
    column_placeholder: str = "col",
) -> str:
    """
    Build the filter label for a time range, e.g.
    "2024-01-01T05:30:00 ≤ col < ∞".

    Falls back to the configured DISPLAY_TIMEZONE when tz is not given.
    """
    if tz is None:
        from app.config import settings

        tz = settings.DISPLAY_TIMEZONE

    return (
        f"{convert_utc_to_timezone(start, tz)}"
        f" ≤ {column_placeholder} < "
        f"{convert_utc_to_timezone(end, tz)}"
    )
