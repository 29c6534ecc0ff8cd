"""Tests for elapsed-time rendering and ISO 8601 parsing."""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from daystamp.utils.timestamp import format_elapsed_time, parse_iso8601


class TestFormatElapsedTime:

    @pytest.mark.parametrize(
        "elapsed, expected",
        [
            (None, "00:00"),
            (timedelta(0), "00:00"),
            (timedelta(seconds=5), "00:05"),
            (timedelta(minutes=5), "05:00"),
            (timedelta(hours=5), "5:00:00"),
            (timedelta(days=5), "120:00:00"),
            (timedelta(seconds=-5), "00:-5"),
            (timedelta(seconds=-15), "00:-15"),
            (timedelta(minutes=-5), "00:-300"),
            (timedelta(minutes=-15), "00:-900"),
            (timedelta(hours=-5), "00:-18000"),
            (timedelta(hours=-15), "00:-54000"),
            (timedelta(days=-5), "00:-432000"),
        ],
    )
    def test_table(self, elapsed, expected):
        assert format_elapsed_time(elapsed) == expected

    def test_none_matches_zero(self):
        assert format_elapsed_time(None) == format_elapsed_time(timedelta(0))

    def test_mixed_components(self):
        assert format_elapsed_time(timedelta(hours=1, minutes=2, seconds=3)) == "1:02:03"

    def test_just_under_an_hour(self):
        assert format_elapsed_time(timedelta(minutes=59, seconds=59)) == "59:59"

    def test_fractional_seconds_truncated(self):
        assert format_elapsed_time(timedelta(seconds=5, milliseconds=900)) == "00:05"


class TestParseIso8601:

    @pytest.mark.parametrize("text", [None, "", "bogus", "2020-01-01", "2020-01-01T01:00:00"])
    def test_absent(self, text):
        assert parse_iso8601(text) is None

    def test_utc(self):
        assert parse_iso8601("2020-01-01T01:00:00Z") == datetime(
            2020, 1, 1, 1, 0, 0, tzinfo=timezone.utc
        )

    def test_result_is_utc(self):
        parsed = parse_iso8601("2020-01-01T01:00:00Z")
        assert parsed.utcoffset() == timedelta(0)

    @pytest.mark.parametrize("offset", ["-03:00", "-0300", "-03"])
    def test_offset_forms(self, offset):
        parsed = parse_iso8601(f"2019-12-31T21:00:00{offset}")
        assert parsed == datetime(2020, 1, 1, 0, 0, 0, tzinfo=timezone.utc)

    def test_fractional_seconds(self):
        parsed = parse_iso8601("2020-09-04T19:17:51.250Z")
        assert parsed.microsecond == 250000

    def test_round_trip_through_isoformat(self):
        instant = datetime(2021, 6, 15, 8, 30, 45, 123000, tzinfo=timezone.utc)
        assert parse_iso8601(instant.isoformat().replace("+00:00", "Z")) == instant
        assert parse_iso8601(instant.isoformat()) == instant

    def test_out_of_range_fields(self):
        assert parse_iso8601("2020-13-01T00:00:00Z") is None
        assert parse_iso8601("2020-01-01T25:00:00Z") is None

    def test_trailing_garbage_rejected(self):
        assert parse_iso8601("2020-01-01T01:00:00Zjunk") is None
        assert parse_iso8601("2020-01-01T01:00:00Z\n") is None
        assert parse_iso8601("2020-01-01T01:00:00+02:00\n") is None

    @pytest.mark.parametrize(
        "text",
        [
            "２０２０-01-01T01:00:00Z",  # fullwidth year
            "2020-01-01T٠١:00:00Z",  # Arabic-Indic hour
            "2020-01-01T01:00:00+０２:00",  # fullwidth offset
        ],
    )
    def test_non_ascii_digits_rejected(self, text):
        assert parse_iso8601(text) is None

    def test_malformed_input_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="daystamp.utils.timestamp"):
            parse_iso8601("bogus")
        assert "Failed to parse date" in caplog.text

    def test_empty_input_does_not_log(self, caplog):
        with caplog.at_level(logging.WARNING, logger="daystamp.utils.timestamp"):
            parse_iso8601("")
        assert caplog.text == ""
