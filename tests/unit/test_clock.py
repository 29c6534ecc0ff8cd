"""Tests for clock and zone providers."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest

from daystamp.core.clock import (
    FixedClock,
    FixedZone,
    SystemClock,
    SystemZone,
    parse_zone,
    system_zone,
)
from daystamp.core.errors import UnknownZoneError


class TestClocks:

    def test_system_clock_is_utc_aware(self):
        now = SystemClock().now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_fixed_clock(self):
        instant = datetime(2020, 1, 1, tzinfo=timezone.utc)
        clock = FixedClock(instant)
        assert clock.now() == instant
        assert clock.now() == instant


class TestParseZone:

    @pytest.mark.parametrize(
        "name, offset",
        [
            ("-03:00", timedelta(hours=-3)),
            ("+0530", timedelta(hours=5, minutes=30)),
            ("GMT+2", timedelta(hours=2)),
            ("UTC-07:00", timedelta(hours=-7)),
            ("Z", timedelta(0)),
            ("UTC", timedelta(0)),
        ],
    )
    def test_offsets(self, name, offset):
        assert parse_zone(name).utcoffset(None) == offset

    def test_iana(self):
        assert parse_zone("America/New_York") == ZoneInfo("America/New_York")

    @pytest.mark.parametrize("name", ["Mars/Olympus_Mons", "+25:00", "../etc"])
    def test_unknown(self, name):
        with pytest.raises(UnknownZoneError):
            parse_zone(name)


class TestZoneProviders:

    def test_fixed_zone(self):
        tz = timezone(timedelta(hours=-3))
        assert FixedZone(tz).zone() is tz

    def test_system_zone_honours_tz_env(self, monkeypatch):
        monkeypatch.setenv("TZ", "Asia/Tokyo")
        assert system_zone() == ZoneInfo("Asia/Tokyo")
        assert SystemZone().zone() == ZoneInfo("Asia/Tokyo")

    def test_system_zone_ignores_bad_tz_env(self, monkeypatch):
        monkeypatch.setenv("TZ", "Not/AZone")
        with patch.object(Path, "is_symlink", return_value=False):
            assert system_zone() is not None

    def test_system_zone_reads_localtime_symlink(self, monkeypatch):
        monkeypatch.delenv("TZ", raising=False)
        with patch.object(Path, "is_symlink", return_value=True), \
             patch.object(Path, "resolve", return_value=Path("/usr/share/zoneinfo/Europe/Paris")):
            assert system_zone() == ZoneInfo("Europe/Paris")
