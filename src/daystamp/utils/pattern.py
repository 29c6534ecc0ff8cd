"""Render SimpleDateFormat-style patterns with locale tables.

Supported letters::

    y  year        (yy -> two digits, otherwise zero-padded to run length)
    M  month       (M/MM numeric, MMM short name, MMMM+ full name)
    d  day of month
    E  weekday     (E..EEE short name, EEEE+ full name)
    H  hour 0-23
    h  hour 1-12
    m  minute
    s  second
    a  AM/PM marker
    z  zone label  (GMT-03:00, EST, ...)

Text inside single quotes is copied verbatim; ``''`` is a literal quote.
Any other ASCII letter is rejected.
"""

from __future__ import annotations

from datetime import datetime, timezone

from ..core.errors import PatternError
from ..core.locale import Locale

_FIELDS = frozenset("yMdEHhmsaz")


def zone_label(moment: datetime) -> str:
    """Short zone name for *moment*.

    Fixed offsets render as ``GMT±hh:mm`` (``UTC`` at zero offset); named
    zones render as their abbreviation ("EST", "CET"). Zones whose
    abbreviation is only a number ("-03" for America/Sao_Paulo) use the
    offset form too.
    """
    offset = moment.utcoffset()
    name = moment.tzname()
    if isinstance(moment.tzinfo, timezone) or not name or not name[0].isalpha():
        if not offset:
            return "UTC"
        total = int(offset.total_seconds()) // 60
        sign = "-" if total < 0 else "+"
        hours, minutes = divmod(abs(total), 60)
        return f"GMT{sign}{hours:02d}:{minutes:02d}"
    return name


def _tokenize(pattern: str) -> list[tuple[str, str]]:
    """Split a pattern into ("field", run) and ("text", literal) tokens."""
    tokens: list[tuple[str, str]] = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                tokens.append(("text", "'"))
                i += 2
                continue
            end = pattern.find("'", i + 1)
            while end != -1 and end + 1 < n and pattern[end + 1] == "'":
                end = pattern.find("'", end + 2)
            if end == -1:
                raise PatternError(f"Unterminated quote in pattern {pattern!r}")
            tokens.append(("text", pattern[i + 1:end].replace("''", "'")))
            i = end + 1
        elif ch.isascii() and ch.isalpha():
            if ch not in _FIELDS:
                raise PatternError(f"Unsupported pattern letter {ch!r} in {pattern!r}")
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            tokens.append(("field", pattern[i:j]))
            i = j
        else:
            tokens.append(("text", ch))
            i += 1
    return tokens


def _field(run: str, moment: datetime, locale: Locale, lowercase_am_pm: bool) -> str:
    letter, width = run[0], len(run)

    if letter == "y":
        if width == 2:
            return f"{moment.year % 100:02d}"
        return f"{moment.year:0{width}d}"
    if letter == "M":
        if width >= 4:
            return locale.months_full[moment.month - 1]
        if width == 3:
            return locale.months_short[moment.month - 1]
        return f"{moment.month:0{width}d}"
    if letter == "E":
        if width >= 4:
            return locale.weekdays_full[moment.weekday()]
        return locale.weekdays_short[moment.weekday()]
    if letter == "a":
        marker = locale.am_pm[0 if moment.hour < 12 else 1]
        return marker.lower() if lowercase_am_pm else marker
    if letter == "z":
        return zone_label(moment)

    if letter == "d":
        value = moment.day
    elif letter == "H":
        value = moment.hour
    elif letter == "h":
        value = moment.hour % 12 or 12
    elif letter == "m":
        value = moment.minute
    else:
        value = moment.second
    return f"{value:0{width}d}"


def render_pattern(
    pattern: str,
    moment: datetime,
    locale: Locale,
    *,
    lowercase_am_pm: bool = False,
) -> str:
    """Render *moment* (already in the display zone) using *pattern*.

    Args:
        pattern: e.g. ``"EEE, MMM d, yyyy"``.
        moment: Timezone-aware datetime localised to the display zone.
        locale: Supplies month/day names and AM/PM markers.
        lowercase_am_pm: Render the marker as ``am``/``pm``.

    Raises:
        PatternError: On unsupported letters or an unterminated quote.
    """
    parts = []
    for kind, value in _tokenize(pattern):
        if kind == "text":
            parts.append(value)
        else:
            parts.append(_field(value, moment, locale, lowercase_am_pm))
    return "".join(parts)
