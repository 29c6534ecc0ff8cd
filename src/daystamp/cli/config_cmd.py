"""daystamp config: show or update display settings."""

from __future__ import annotations

import click

from ..core.clock import parse_zone
from ..core.config import default_config_path, load_settings, save_settings
from ..core.errors import UnknownLocaleError, UnknownZoneError
from ..core.locale import available_locales, get_locale


@click.command()
@click.option("--locale", "locale_tag", default=None, help="Default locale tag.")
@click.option("--zone", default=None, help="Display timezone; 'system' clears it.")
@click.option("--clock", "clock_style", type=click.Choice(["12", "24"]), default=None, help="Default clock style.")
@click.pass_context
def config_cmd(
    ctx: click.Context,
    locale_tag: str | None,
    zone: str | None,
    clock_style: str | None,
) -> None:
    """Show settings, or update them when options are given."""
    path = (ctx.obj or {}).get("config_path") or default_config_path()
    settings = load_settings(path)

    if locale_tag is None and zone is None and clock_style is None:
        click.echo(f"Config: {path}")
        click.echo(f"  locale:      {settings.locale}")
        click.echo(f"  timezone:    {settings.timezone or 'system'}")
        click.echo(f"  use_24_hour: {settings.use_24_hour}")
        click.echo(f"Available locales: {', '.join(available_locales())}")
        return

    try:
        if locale_tag is not None:
            settings.locale = get_locale(locale_tag).tag
        if zone is not None:
            if zone == "system":
                settings.timezone = None
            else:
                parse_zone(zone)
                settings.timezone = zone
    except (UnknownLocaleError, UnknownZoneError) as e:
        click.echo(str(e), err=True)
        raise SystemExit(1)

    if clock_style is not None:
        settings.use_24_hour = clock_style == "24"

    written = save_settings(settings, path)
    click.echo(f"Saved {written}")
