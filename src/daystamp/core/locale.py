"""Locale tables: month/day names, AM/PM markers, UI phrases, patterns.

Tables are bundled as YAML under ``daystamp/locales/``. A table may map a
pattern skeleton (e.g. ``"MMM d"``) to the locale's preferred layout
(``"d. MMM"``); skeletons without an override render as written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

from .errors import UnknownLocaleError

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent.parent / "locales"
DEFAULT_LOCALE = "en_US"


@dataclass(frozen=True)
class Locale:
    """Display tokens for one language/region."""

    tag: str
    months_short: tuple[str, ...]
    months_full: tuple[str, ...]
    weekdays_short: tuple[str, ...]  # Monday first
    weekdays_full: tuple[str, ...]
    am_pm: tuple[str, str]
    phrases: Mapping = field(default_factory=dict, hash=False, compare=False)
    patterns: Mapping = field(default_factory=dict, hash=False, compare=False)

    @property
    def language(self) -> str:
        return self.tag.split("_", 1)[0]

    def best_pattern(self, skeleton: str) -> str:
        """Return this locale's layout for *skeleton*, or the skeleton itself."""
        return self.patterns.get(skeleton, skeleton)

    def phrase(self, key: str, **kwargs: object) -> str:
        return self.phrases[key].format(**kwargs)

    def plural(self, key: str, count: int) -> str:
        """Render a phrase that has ``one``/``other`` forms."""
        forms = self.phrases[key]
        form = forms["one"] if count == 1 else forms["other"]
        return form.format(count=count)


def normalize_tag(tag: str) -> str:
    """Canonicalise a tag: ``en-us`` -> ``en_US``, ``DE`` -> ``de``."""
    parts = tag.strip().replace("-", "_").split("_")
    language = parts[0].lower()
    if len(parts) == 1 or not parts[1]:
        return language
    return f"{language}_{parts[1].upper()}"


def available_locales() -> list[str]:
    """Tags of all bundled locale tables."""
    return sorted(p.stem for p in LOCALES_DIR.glob("*.yaml"))


def _resolve_tag(tag: str) -> str:
    wanted = normalize_tag(tag)
    bundled = available_locales()
    if wanted in bundled:
        return wanted

    language = wanted.split("_", 1)[0]
    for candidate in bundled:
        if candidate.split("_", 1)[0] == language:
            logger.debug("No table for %s, falling back to %s", tag, candidate)
            return candidate

    raise UnknownLocaleError(
        f"No locale table for {tag!r} (available: {', '.join(bundled)})"
    )


def _freeze(table: dict) -> Mapping:
    """Read-only view of *table*; cached locales are shared by every caller."""
    return MappingProxyType(
        {key: _freeze(value) if isinstance(value, dict) else value for key, value in table.items()}
    )


def _load_table(path: Path) -> Locale:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    months = data["months"]
    weekdays = data["weekdays"]
    am, pm = data["am_pm"]
    return Locale(
        tag=data.get("tag", path.stem),
        months_short=tuple(months["short"]),
        months_full=tuple(months["full"]),
        weekdays_short=tuple(weekdays["short"]),
        weekdays_full=tuple(weekdays["full"]),
        am_pm=(am, pm),
        phrases=_freeze(data.get("phrases") or {}),
        patterns=_freeze(data.get("patterns") or {}),
    )


@lru_cache(maxsize=None)
def get_locale(tag: str = DEFAULT_LOCALE) -> Locale:
    """Load the bundled locale table for *tag*.

    Lookup normalises separators and case, then falls back to any table
    for the same language ("en_GB" -> "en_US").

    Raises:
        UnknownLocaleError: If no table shares the tag's language.
    """
    resolved = _resolve_tag(tag)
    return _load_table(LOCALES_DIR / f"{resolved}.yaml")
