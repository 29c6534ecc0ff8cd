"""daystamp preview: show every rendering of one instant."""

from __future__ import annotations

from datetime import datetime

import click

from ..core.clock import FixedClock, FixedZone, SystemClock, parse_zone
from ..core.config import load_settings
from ..core.errors import UnknownLocaleError, UnknownZoneError
from ..core.locale import get_locale
from ..formatter import DateFormatter
from ..utils.timestamp import parse_iso8601

RENDERINGS = [
    ("brief", "brief_relative_time_span"),
    ("extended", "extended_relative_time_span"),
    ("simple", "simple_relative_time_span"),
    ("time only", "only_time_string"),
    ("time", "time_string"),
    ("day", "day_precision_time_string"),
    ("day span", "day_precision_time_span_string"),
    ("details", "message_details_time_string"),
    ("conversation header", "conversation_date_header"),
    ("scheduled header", "scheduled_messages_date_header"),
    ("scheduled", "scheduled_message_date"),
    ("date + weekday", "format_date_with_day_of_week"),
    ("date + year", "format_date_with_year"),
    ("date", "format_date"),
    ("month + day", "format_date_with_month_and_day"),
    ("date, no weekday", "format_date_without_day_of_week"),
]


def _parse_instant(value: str, option: str) -> datetime:
    parsed = parse_iso8601(value)
    if parsed is None:
        raise click.BadParameter(f"not an ISO 8601 instant: {value}", param_hint=option)
    return parsed


@click.command()
@click.argument("instant")
@click.option("--now", "now_str", default=None, help="Reference instant (default: the real clock).")
@click.option("--zone", default=None, help="Display timezone, e.g. America/New_York or -03:00.")
@click.option("--locale", "locale_tag", default=None, help="Locale tag, e.g. en_US or de_DE.")
@click.option("--clock", "clock_style", type=click.Choice(["12", "24"]), default=None, help="Force 12- or 24-hour times.")
@click.pass_context
def preview_cmd(
    ctx: click.Context,
    instant: str,
    now_str: str | None,
    zone: str | None,
    locale_tag: str | None,
    clock_style: str | None,
) -> None:
    """Print every display string for INSTANT."""
    settings = load_settings((ctx.obj or {}).get("config_path"))
    when = _parse_instant(instant, "INSTANT")
    clock = FixedClock(_parse_instant(now_str, "--now")) if now_str else SystemClock()

    try:
        locale = get_locale(locale_tag or settings.locale)
        zones = FixedZone(parse_zone(zone)) if zone else settings.zone_provider()
    except (UnknownLocaleError, UnknownZoneError) as e:
        click.echo(str(e), err=True)
        raise SystemExit(1)

    formatter = DateFormatter(
        clock=clock,
        zones=zones,
        use_24_hour=settings.use_24_hour if clock_style is None else clock_style == "24",
    )

    width = max(len(label) for label, _ in RENDERINGS)
    for label, method in RENDERINGS:
        rendered = getattr(formatter, method)(locale, when)
        click.echo(f"{label:<{width}}  {rendered!r}")
