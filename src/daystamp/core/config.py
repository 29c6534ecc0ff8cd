"""Display settings: data model and YAML persistence for daystamp.yaml."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .clock import Clock, FixedZone, SystemZone, ZoneProvider, parse_zone
from .errors import UnknownZoneError
from .locale import DEFAULT_LOCALE, Locale, get_locale
from ..formatter import DateFormatter

logger = logging.getLogger(__name__)


class _SettingsLoader(yaml.SafeLoader):
    """SafeLoader that keeps sexagesimal scalars such as ``+5:30`` as written."""


def _construct_int(loader: yaml.SafeLoader, node: yaml.ScalarNode):
    raw = loader.construct_scalar(node)
    if ":" in raw:
        return raw
    return loader.construct_yaml_int(node)


_SettingsLoader.add_constructor("tag:yaml.org,2002:int", _construct_int)


@dataclass
class DisplaySettings:
    """User display preferences."""

    locale: str = DEFAULT_LOCALE
    timezone: str | None = None  # None = follow the system zone
    use_24_hour: bool = False

    def get_locale(self) -> Locale:
        return get_locale(self.locale)

    def zone_provider(self) -> ZoneProvider:
        """Fixed zone when one is configured, otherwise the system zone.

        Raises:
            UnknownZoneError: If the configured timezone is not recognised.
        """
        if self.timezone:
            return FixedZone(parse_zone(self.timezone))
        return SystemZone()


def _find_config_file() -> Optional[Path]:
    """Search for daystamp.yaml in standard locations.

    Search order (highest priority first):
    1. $XDG_CONFIG_HOME/daystamp/daystamp.yaml
    2. ~/.config/daystamp/daystamp.yaml
    3. ~/.daystamp.yaml

    Returns:
        Path to config file if found, None otherwise
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        xdg_file = Path(xdg_config) / "daystamp" / "daystamp.yaml"
        if xdg_file.exists():
            return xdg_file

    config_file = Path.home() / ".config" / "daystamp" / "daystamp.yaml"
    if config_file.exists():
        return config_file

    home_config = Path.home() / ".daystamp.yaml"
    if home_config.exists():
        return home_config

    return None


def default_config_path() -> Path:
    """Where :func:`save_settings` writes when no path is given."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "daystamp" / "daystamp.yaml"
    return Path.home() / ".config" / "daystamp" / "daystamp.yaml"


def load_settings(path: Optional[Path] = None) -> DisplaySettings:
    """Load display settings from file or use defaults.

    Args:
        path: Optional explicit path to config file. If not provided,
              searches in standard locations.

    Note:
        A missing, unreadable or malformed file yields default settings;
        problems are logged rather than raised.
    """
    config_path = path if path else _find_config_file()
    if config_path is None or not config_path.exists():
        return DisplaySettings()

    try:
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.load(f, Loader=_SettingsLoader)
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Failed to load config from %s: %s. Using defaults.", config_path, e)
        return DisplaySettings()

    if not isinstance(loaded, dict):
        if loaded is not None:
            logger.warning("Ignoring %s: expected a mapping at top level", config_path)
        return DisplaySettings()

    display = loaded.get("display") or {}
    if not isinstance(display, dict):
        logger.warning("Ignoring 'display' section in %s: expected a mapping", config_path)
        return DisplaySettings()

    use_24_hour = display.get("use_24_hour", False)
    if not isinstance(use_24_hour, bool):
        logger.warning(
            "Ignoring use_24_hour %r in %s: expected true or false",
            use_24_hour,
            config_path,
        )
        use_24_hour = False

    return DisplaySettings(
        locale=str(display.get("locale") or DEFAULT_LOCALE),
        timezone=_read_timezone(display.get("timezone"), config_path),
        use_24_hour=use_24_hour,
    )


def _read_timezone(value: object, config_path: Path) -> Optional[str]:
    """Normalise the configured timezone, or None to follow the system zone."""
    if value is None or value == "":
        return None

    if isinstance(value, int) and not isinstance(value, bool):
        # bare "-3" or "+5" means whole hours
        sign = "-" if value < 0 else "+"
        value = f"{sign}{abs(value):02d}:00"
    elif not isinstance(value, str):
        logger.warning(
            "Ignoring timezone %r in %s: expected a zone name or offset",
            value,
            config_path,
        )
        return None

    try:
        parse_zone(value)
    except UnknownZoneError:
        logger.warning(
            "Unknown timezone %r in %s, falling back to system zone",
            value,
            config_path,
        )
        return None
    return value


def save_settings(settings: DisplaySettings, path: Optional[Path] = None) -> Path:
    """Write *settings* to YAML.

    Returns:
        The path written to.
    """
    config_path = path or default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    display: dict = {"locale": settings.locale, "use_24_hour": settings.use_24_hour}
    if settings.timezone:
        display["timezone"] = settings.timezone

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump({"display": display}, f, default_flow_style=False, sort_keys=False)

    return config_path


def build_formatter(
    settings: DisplaySettings | None = None, clock: Clock | None = None
) -> DateFormatter:
    """Wire a :class:`~daystamp.formatter.DateFormatter` from settings."""
    settings = settings or load_settings()
    return DateFormatter(
        clock=clock,
        zones=settings.zone_provider(),
        use_24_hour=settings.use_24_hour,
    )
