"""Locale- and timezone-aware date/time labels for chat UIs."""

from .core.clock import FixedClock, FixedZone, SystemClock, SystemZone
from .core.locale import Locale, get_locale
from .formatter import DateFormatter, format_elapsed_time, parse_iso8601

__all__ = [
    "DateFormatter",
    "FixedClock",
    "FixedZone",
    "Locale",
    "SystemClock",
    "SystemZone",
    "format_elapsed_time",
    "get_locale",
    "parse_iso8601",
]
