"""Human-friendly date/time strings for chat and scheduling screens.

Every method is a pure function of the injected clock, the injected
default zone, the locale passed in, and the target instant.

"within" below means ``now - when <= span``. Future instants have a
negative distance, so one-sided checks treat them as recent; the
``_abs`` variants compare the absolute distance instead.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .core.clock import Clock, SystemClock, SystemZone, ZoneProvider
from .core.locale import Locale
from .utils.pattern import render_pattern
from .utils.timestamp import format_elapsed_time, parse_iso8601


# Local hour at which "Today at ..." becomes "Tonight at ..."
TONIGHT_START_HOUR = 19
# Messages closer together than this share one extended-relative timestamp
MAX_RELATIVE_TIMESTAMP = timedelta(minutes=3)
HALF_A_YEAR_IN_DAYS = 182

_MINUTE = timedelta(minutes=1)
_HOUR = timedelta(hours=1)
_DAY = timedelta(days=1)

__all__ = [
    "DateFormatter",
    "HALF_A_YEAR_IN_DAYS",
    "MAX_RELATIVE_TIMESTAMP",
    "TONIGHT_START_HOUR",
    "format_elapsed_time",
    "parse_iso8601",
]


def _as_instant(when: datetime) -> datetime:
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when


class DateFormatter:
    """Formats instants for display relative to the injected "now".

    Args:
        clock: Source of the current instant (default: system clock).
        zones: Source of the display timezone (default: system zone).
        use_24_hour: Render times as ``HH:mm`` instead of ``hh:mm a``.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        zones: ZoneProvider | None = None,
        use_24_hour: bool = False,
    ):
        self.clock = clock or SystemClock()
        self.zones = zones or SystemZone()
        self.use_24_hour = use_24_hour

    # --- helpers ---

    def _now(self) -> datetime:
        return _as_instant(self.clock.now())

    def _local(self, when: datetime) -> datetime:
        return _as_instant(when).astimezone(self.zones.zone())

    def _since(self, when: datetime) -> timedelta:
        return self._now() - _as_instant(when)

    def _is_within(self, when: datetime, span: timedelta) -> bool:
        return self._since(when) <= span

    def _is_within_abs(self, when: datetime, span: timedelta) -> bool:
        return abs(self._since(when)) <= span

    def _is_today(self, when: datetime) -> bool:
        return self.is_same_day(when, self._now())

    def _is_yesterday(self, when: datetime) -> bool:
        return self._is_today(_as_instant(when) + _DAY)

    def _time_pattern(self) -> str:
        return "HH:mm" if self.use_24_hour else "hh:mm a"

    def _format(self, when: datetime, skeleton: str, locale: Locale) -> str:
        pattern = locale.best_pattern(skeleton)
        return render_pattern(pattern, self._local(when), locale, lowercase_am_pm=True)

    def _minutes_ago(self, when: datetime, locale: Locale) -> str:
        minutes = self._since(when) // _MINUTE
        return locale.phrase("minutes_ago", count=minutes)

    # --- relative spans ---

    def brief_relative_time_span(self, locale: Locale, when: datetime) -> str:
        """One of "Now", "12 min", "3 hr", "Wed", "Dec 25" or "Dec 25, 2018"."""
        if self._is_within(when, _MINUTE):
            return locale.phrase("just_now")
        if self._is_within(when, _HOUR):
            return self._minutes_ago(when, locale)
        if self._is_within(when, _DAY):
            hours = self._since(when) // _HOUR
            return locale.plural("hours_ago", hours)
        if self._is_within(when, 6 * _DAY):
            return self._format(when, "EEE", locale)
        if self._is_within(when, 365 * _DAY):
            return self._format(when, "MMM d", locale)
        return self._format(when, "MMM d, yyyy", locale)

    def extended_relative_time_span(self, locale: Locale, when: datetime) -> str:
        """Like the brief span, but anything older than an hour gets a time of day."""
        if self._is_within(when, _MINUTE):
            return locale.phrase("just_now")
        if self._is_within(when, _HOUR):
            return self._minutes_ago(when, locale)

        if self._is_within(when, 6 * _DAY):
            prefix = "EEE "
        elif self._is_within(when, 365 * _DAY):
            prefix = "MMM d, "
        else:
            prefix = "MMM d, yyyy, "
        return self._format(when, prefix + self._time_pattern(), locale)

    def simple_relative_time_span(self, locale: Locale, when: datetime) -> str:
        """Shows "Now" and "12 min" for recent instants, otherwise only the time of day."""
        if self._is_within(when, _MINUTE):
            return locale.phrase("just_now")
        if self._is_within(when, _HOUR):
            return self._minutes_ago(when, locale)
        return self.only_time_string(locale, when)

    # --- absolute strings ---

    def only_time_string(self, locale: Locale, when: datetime) -> str:
        """Just the time: "07:23 pm" (12-hour) or "19:23" (24-hour)."""
        return self._format(when, self._time_pattern(), locale)

    def time_string(self, locale: Locale, when: datetime) -> str:
        if self.is_same_day(self._now(), when):
            prefix = ""
        elif self._is_within_abs(when, 6 * _DAY):
            prefix = "EEE "
        elif self._is_within_abs(when, 364 * _DAY):
            prefix = "MMM d, "
        else:
            prefix = "MMM d, yyyy, "
        return self._format(when, prefix + self._time_pattern(), locale)

    def day_precision_time_string(self, locale: Locale, when: datetime) -> str:
        """Day-level label: "Today", "Wed ", "Jan 31", "Jan 12, 2033".

        The weekday form keeps its trailing space.
        """
        if self._is_today(when):
            return locale.phrase("today")
        if self._is_within_abs(when, 6 * _DAY):
            return self._format(when, "EEE ", locale)
        if self._is_within_abs(when, 365 * _DAY):
            return self._format(when, "MMM d", locale)
        return self._format(when, "MMM d, yyyy", locale)

    def day_precision_time_span_string(self, locale: Locale, when: datetime) -> str:
        """Same as :meth:`day_precision_time_string` with one-sided distance checks."""
        if self._is_today(when):
            return locale.phrase("today")
        if self._is_within(when, 6 * _DAY):
            return self._format(when, "EEE ", locale)
        if self._is_within(when, 365 * _DAY):
            return self._format(when, "MMM d", locale)
        return self._format(when, "MMM d, yyyy", locale)

    def message_details_time_string(self, locale: Locale, when: datetime) -> str:
        """Full timestamp, e.g. "Dec 31, 2019 09:00:02 PM GMT-03:00"."""
        if self.use_24_hour:
            skeleton = "MMM d, yyyy HH:mm:ss zzz"
        else:
            skeleton = "MMM d, yyyy hh:mm:ss a zzz"
        return render_pattern(locale.best_pattern(skeleton), self._local(when), locale)

    def conversation_date_header(self, locale: Locale, when: datetime) -> str:
        if self._is_today(when):
            return locale.phrase("today")
        if self._is_yesterday(when):
            return locale.phrase("yesterday")
        if self._is_within(when, HALF_A_YEAR_IN_DAYS * _DAY):
            return self.format_date_with_day_of_week(locale, when)
        return self.format_date_with_year(locale, when)

    def scheduled_messages_date_header(self, locale: Locale, when: datetime) -> str:
        if self._is_today(when):
            return locale.phrase("today")
        if self._is_within_abs(when, HALF_A_YEAR_IN_DAYS * _DAY):
            return self.format_date_with_day_of_week(locale, when)
        return self.format_date_with_year(locale, when)

    def scheduled_message_date(self, locale: Locale, when: datetime) -> str:
        """Scheduling label: "Today at 08:00 pm", "Tonight at ..." or "Tomorrow at ...".

        Intended for instants no more than a day ahead: every instant that
        is not today is labelled "Tomorrow", including past ones.
        """
        if self._is_today(when):
            if self._local(self._now()).hour >= TONIGHT_START_HOUR:
                day = locale.phrase("tonight")
            else:
                day = locale.phrase("today")
        else:
            day = locale.phrase("tomorrow")
        time = self.only_time_string(locale, when)
        return locale.phrase("schedule_at", day=day, time=time)

    def format_date_with_day_of_week(self, locale: Locale, when: datetime) -> str:
        return self._format(when, "EEE, MMM d", locale)

    def format_date_with_year(self, locale: Locale, when: datetime) -> str:
        return self._format(when, "MMM d, yyyy", locale)

    def format_date(self, locale: Locale, when: datetime) -> str:
        return self._format(when, "EEE, MMM d, yyyy", locale)

    def format_date_with_month_and_day(self, locale: Locale, when: datetime) -> str:
        return self._format(when, "MMMM dd", locale)

    def format_date_without_day_of_week(self, locale: Locale, when: datetime) -> str:
        return self._format(when, "MMM d yyyy", locale)

    # --- comparisons ---

    def is_same_day(self, a: datetime, b: datetime) -> bool:
        """True if both instants fall on the same date in the default zone."""
        return self._local(a).date() == self._local(b).date()

    def is_same_extended_relative_timestamp(self, second: datetime, first: datetime) -> bool:
        """True if *second* follows *first* closely enough to share its timestamp."""
        return _as_instant(second) - _as_instant(first) < MAX_RELATIVE_TIMESTAMP

    # --- passthroughs ---

    @staticmethod
    def format_elapsed_time(elapsed: timedelta | None) -> str:
        return format_elapsed_time(elapsed)

    @staticmethod
    def parse_iso8601(text: str | None) -> datetime | None:
        return parse_iso8601(text)
