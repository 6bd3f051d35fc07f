#!/usr/bin/env python3
"""
UNIX timestamp <-> ISO 8601 conversions and "duration from now".

Timestamps are read like JavaScript's parseInt(text, 10): surrounding
whitespace is ignored, an optional sign is allowed and parsing stops at the
first non-digit. ISO 8601 output is always UTC with millisecond precision,
e.g. 2023-11-14T22:13:20.000Z.

Dates are read with python-dateutil; those without a UTC offset are taken
as UTC.
"""
import re
from datetime import datetime, timedelta, timezone

from dateutil import parser as dateutil_parser
from dateutil.parser import isoparse

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

# (unit, seconds), largest first
_UNITS = [
    ("day",    86400),
    ("hour",   3600),
    ("minute", 60),
    ("second", 1),
]


def parse_leading_int(text: str):
    """Parse the leading base-10 integer of text, or None if there is none."""
    m = _LEADING_INT.match(text)
    return int(m.group(1)) if m else None


def parse_date(text: str) -> datetime:
    """
    Parse a date into an aware UTC datetime.
    ISO 8601 is tried first, then the looser forms dateutil understands
    (RFC 2822 / HTTP dates, "14 Nov 2023 22:13", ...).
    Raises ValueError (or OverflowError) when nothing fits.
    """
    text = text.strip()
    if not text:
        raise ValueError("empty date")
    try:
        dt = isoparse(text)
    except ValueError:
        dt = dateutil_parser.parse(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_iso8601(dt: datetime) -> str:
    """Format an aware datetime as YYYY-MM-DDTHH:MM:SS.sssZ."""
    dt = dt.astimezone(timezone.utc)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        f".{dt.microsecond // 1000:03d}Z"
    )


def from_unix_ms(ms: int) -> datetime:
    return EPOCH + timedelta(milliseconds=ms)


def to_unix_ms(dt: datetime) -> int:
    return (dt - EPOCH) // timedelta(milliseconds=1)


def _format_seconds(ms: int) -> str:
    # 1700000000000 -> "1700000000", 1700000000123 -> "1700000000.123"
    sign = "-" if ms < 0 else ""
    whole, frac = divmod(abs(ms), 1000)
    if not frac:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{frac:03d}".rstrip("0")


# ─── Transforms ───────────────────────────────────────────────────────────────

def unix_sec_to_iso(text: str):
    """Convert a UNIX timestamp in seconds to ISO 8601."""
    seconds = parse_leading_int(text)
    if seconds is None:
        return None
    return to_iso8601(from_unix_ms(seconds * 1000))


def iso_to_unix_sec(text: str):
    """Convert an ISO 8601 date to a UNIX timestamp in seconds."""
    try:
        dt = parse_date(text)
    except (ValueError, OverflowError):
        return None
    return _format_seconds(to_unix_ms(dt))


def unix_ms_to_iso(text: str):
    """Convert a UNIX timestamp in milliseconds to ISO 8601."""
    ms = parse_leading_int(text)
    if ms is None:
        return None
    return to_iso8601(from_unix_ms(ms))


def iso_to_unix_ms(text: str):
    """Convert an ISO 8601 date to a UNIX timestamp in milliseconds."""
    try:
        dt = parse_date(text)
    except (ValueError, OverflowError):
        return None
    return str(to_unix_ms(dt))


def get_time_difference(now_ms: int, then_ms: int) -> str:
    """
    Humanize the gap between two instants given in UNIX milliseconds.

        get_time_difference(0, 90_061_000)   -> "in 1 day 1 hour 1 minute 1 second"
        get_time_difference(7_200_000, 0)    -> "2 hours ago"
        get_time_difference(5, 5)            -> "now"

    Sub-second remainders are dropped.
    """
    diff = then_ms - now_ms
    remaining = abs(diff) // 1000
    parts = []
    for unit, size in _UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count} {unit}{'' if count == 1 else 's'}")

    if not parts:
        return "now"
    span = " ".join(parts)
    return f"in {span}" if diff > 0 else f"{span} ago"


def duration_from_now(text: str) -> str:
    """Describe how long ago (or how far ahead) a date is from now."""
    then = parse_date(text)
    now = datetime.now(timezone.utc)
    return get_time_difference(to_unix_ms(now), to_unix_ms(then))
