"""Injectable "now" and default-zone providers.

The formatter never reads the wall clock or the OS timezone directly.
Production code wires :class:`SystemClock` and :class:`SystemZone`; tests
wire :class:`FixedClock` and :class:`FixedZone`.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from pathlib import Path
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import UnknownZoneError

logger = logging.getLogger(__name__)

_OFFSET_RE = re.compile(r"^(?:UTC|GMT)?([+-])(\d{1,2})(?::?(\d{2}))?$")


class Clock(Protocol):
    def now(self) -> datetime: ...


class ZoneProvider(Protocol):
    def zone(self) -> tzinfo: ...


class SystemClock:
    """Real wall clock, UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FixedClock:
    """Clock that always returns the same instant."""

    instant: datetime

    def now(self) -> datetime:
        return self.instant


class SystemZone:
    """The platform's default timezone, re-read on every call."""

    def zone(self) -> tzinfo:
        return system_zone()


@dataclass(frozen=True)
class FixedZone:
    """Zone provider pinned to one timezone."""

    tz: tzinfo

    def zone(self) -> tzinfo:
        return self.tz


def parse_zone(name: str) -> tzinfo:
    """Resolve a zone name to a tzinfo.

    Accepts IANA keys ("America/New_York"), "UTC"/"Z", and fixed offsets
    such as "-03:00", "+0530" or "GMT+2".

    Raises:
        UnknownZoneError: If the name is not a known zone or offset.
    """
    name = name.strip()
    if name in ("Z", "UTC", "GMT"):
        return timezone.utc

    match = _OFFSET_RE.match(name)
    if match:
        sign, hours, minutes = match.groups()
        offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
        if offset >= timedelta(hours=24):
            raise UnknownZoneError(f"Offset out of range: {name}")
        return timezone(-offset if sign == "-" else offset)

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UnknownZoneError(f"Unknown timezone: {name}") from e


def system_zone() -> tzinfo:
    """Best-effort lookup of the OS timezone.

    Search order:
    1. $TZ
    2. the /etc/localtime symlink target
    3. the interpreter's current local offset (loses DST rules)
    """
    tz_env = os.environ.get("TZ")
    if tz_env:
        try:
            return parse_zone(tz_env.lstrip(":"))
        except UnknownZoneError:
            logger.debug("Ignoring unrecognised TZ=%s", tz_env)

    localtime = Path("/etc/localtime")
    if localtime.is_symlink():
        target = str(localtime.resolve())
        if "zoneinfo/" in target:
            key = target.split("zoneinfo/", 1)[1]
            try:
                return ZoneInfo(key)
            except (ZoneInfoNotFoundError, ValueError):
                logger.debug("Ignoring /etc/localtime target %s", target)

    return datetime.now().astimezone().tzinfo or timezone.utc
