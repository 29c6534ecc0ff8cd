"""Elapsed-time rendering and ISO 8601 parsing."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

# e.g. 2020-09-04T19:17:51Z, 2020-09-04T19:17:51.250+02:00, 2020-09-04T19:17:51-0300
_ISO8601_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?"
    r"(Z|[+-]\d{2}(?::?\d{2})?)",
    re.ASCII,
)


def format_elapsed_time(elapsed: timedelta | None) -> str:
    """Render a duration as a stopwatch reading.

    Examples:
        None / 0s   -> "00:00"
        5 min       -> "05:00"
        5 hr        -> "5:00:00"
        5 days      -> "120:00:00"
        -5 min      -> "00:-300"

    Negative durations are never split into minutes or hours, so the whole
    signed second count lands in the seconds field.
    """
    seconds = 0
    if elapsed is not None:
        seconds = elapsed.days * 86400 + elapsed.seconds

    hours = 0
    minutes = 0
    if seconds >= 3600:
        hours = seconds // 3600
        seconds -= hours * 3600
    if seconds >= 60:
        minutes = seconds // 60
        seconds -= minutes * 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def parse_iso8601(text: str | None) -> datetime | None:
    """Parse an ISO 8601 instant like ``2020-09-04T19:17:51Z``.

    Returns:
        A UTC datetime, or None when *text* is None, empty or malformed.
    """
    if not text:
        return None

    match = _ISO8601_RE.fullmatch(text)
    if match is None:
        logger.warning("Failed to parse date: %r", text)
        return None

    year, month, day, hour, minute, second, fraction, offset = match.groups()
    microsecond = int((fraction or "0").ljust(6, "0")[:6])

    try:
        if offset == "Z":
            tz = timezone.utc
        else:
            sign = -1 if offset[0] == "-" else 1
            digits = offset[1:].replace(":", "")
            delta = timedelta(hours=int(digits[:2]), minutes=int(digits[2:] or 0))
            tz = timezone(sign * delta)
        parsed = datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), microsecond,
            tzinfo=tz,
        )
    except ValueError as e:
        logger.warning("Failed to parse date: %r (%s)", text, e)
        return None
    return parsed.astimezone(timezone.utc)
