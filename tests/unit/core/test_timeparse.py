# tests/unit/core/test_timeparse.py
"""Tests for audit timestamp parsing and formatting."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from linuxaudit.core.timeparse import format_timestamp, parse_timestamp


class TestParseTimestamp:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1364481363243", datetime(2013, 3, 28, 14, 36, 3, 243000, tzinfo=UTC)),
            ("1364481363", datetime(2013, 3, 28, 14, 36, 3, tzinfo=UTC)),
            ("111111", datetime(2005, 3, 18, 1, 40, tzinfo=UTC)),
            ("1364481363243000", datetime(2013, 3, 28, 14, 36, 3, 243000, tzinfo=UTC)),
        ],
    )
    def test_numeric_scaled_by_digit_count(self, text: str, expected: datetime) -> None:
        assert parse_timestamp(text) == expected

    def test_digits_beyond_microseconds_are_truncated(self) -> None:
        assert parse_timestamp("13644813632430009999") == datetime(2013, 3, 28, 14, 36, 3, 243000, tzinfo=UTC)

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_timestamp("  111111 ") == datetime(2005, 3, 18, 1, 40, tzinfo=UTC)

    def test_iso_with_offset(self) -> None:
        parsed = parse_timestamp("2013-03-28T16:36:03+02:00")
        assert parsed == datetime(2013, 3, 28, 14, 36, 3, tzinfo=UTC)

    def test_naive_iso_taken_as_utc(self) -> None:
        assert parse_timestamp("2013-03-28T14:36:03").tzinfo == UTC

    @pytest.mark.parametrize("text", ["", "   ", "abc", "13x5", "-5", "1.5"])
    def test_rejects_garbage(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_timestamp(text)

    def test_non_ascii_digits_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_timestamp("١٢٣")


class TestFormatTimestamp:
    def test_utc_renders_z(self) -> None:
        assert format_timestamp(datetime(2005, 3, 18, 1, 40, tzinfo=UTC)) == "2005-03-18T01:40:00Z"

    def test_fraction_trailing_zeros_trimmed(self) -> None:
        assert format_timestamp(datetime(2013, 3, 28, 14, 36, 3, 243000, tzinfo=UTC)) == "2013-03-28T14:36:03.243Z"

    def test_full_microseconds_kept(self) -> None:
        assert format_timestamp(datetime(2013, 3, 28, 14, 36, 3, 123456, tzinfo=UTC)) == "2013-03-28T14:36:03.123456Z"

    def test_offset_rendered(self) -> None:
        tz = timezone(timedelta(hours=-5, minutes=-30))
        assert format_timestamp(datetime(2013, 3, 28, 9, 6, 3, tzinfo=tz)) == "2013-03-28T09:06:03-05:30"

    def test_naive_formatted_as_utc(self) -> None:
        assert format_timestamp(datetime(2013, 3, 28, 14, 36, 3)) == "2013-03-28T14:36:03Z"
