"""Tests for duration parsing."""

import pytest

from lucid.duration import Duration, duration_from_float, format_seconds, parse_duration
from lucid.errors import DurationNegative, DurationParseError


class TestDurationFromFloat:
    """Test conversion of float seconds to milliseconds."""

    @pytest.mark.parametrize(
        "seconds, millis",
        [
            (14.0, 14000),
            (14.0001, 14000),
            (0.0, 0),
            (12.345, 12345),
            (12.3454, 12345),
            (12.3456, 12346),
            (0.001, 1),
            (1.1, 1100),
            (0.9996, 1000),
        ],
    )
    def test_rounds_to_nearest_millisecond(self, seconds, millis):
        """Rounds fractional part half away from zero."""
        assert duration_from_float(seconds) == Duration(millis)

    def test_negative_rejected(self):
        """Negative values fail."""
        with pytest.raises(DurationNegative):
            duration_from_float(-1.2)

    def test_negative_zero_rejected(self):
        """-0.0 is negative, checked before flooring."""
        with pytest.raises(DurationNegative):
            duration_from_float(-0.0)

    def test_tiny_negative_rejected(self):
        """Small negative noise is not rounded to zero."""
        with pytest.raises(DurationNegative):
            duration_from_float(-1e-9)

    def test_no_upper_bound(self):
        """Huge values are accepted."""
        assert duration_from_float(1e9).milliseconds == 10**12


class TestParseDuration:
    """Test parsing of the duration argument."""

    def test_parses_integer_text(self):
        assert parse_duration("3") == Duration(3000)

    def test_parses_float_text(self):
        assert parse_duration("0.25") == Duration(250)

    def test_strips_whitespace(self):
        assert parse_duration(" 1.5 ") == Duration(1500)

    @pytest.mark.parametrize("text", ["", "abc", "1,5", "1s", "nan", "inf", "-inf"])
    def test_invalid_text(self, text):
        """Non-numeric and non-finite text fails to parse."""
        with pytest.raises(DurationParseError):
            parse_duration(text)

    @pytest.mark.parametrize("text", ["-1", "-0.001", "-0"])
    def test_negative_text(self, text):
        """Valid numbers below zero are reported as negative."""
        with pytest.raises(DurationNegative):
            parse_duration(text)

    @pytest.mark.parametrize("millis", [0, 1, 999, 1100, 12345, 86400000])
    def test_reparse_seconds_is_stable(self, millis):
        """Parsing the seconds value of a Duration gives the same Duration."""
        duration = Duration(millis)

        assert parse_duration(str(duration.seconds)).milliseconds == millis


class TestDuration:
    """Test the Duration value type."""

    def test_str(self):
        assert str(Duration(12345)) == "12.345s"
        assert str(Duration(0)) == "0.000s"
        assert str(Duration(7)) == "0.007s"

    def test_ordering(self):
        assert Duration(1) < Duration(2)
        assert Duration(1000) == Duration(1000)

    def test_negative_construction_fails(self):
        with pytest.raises(DurationNegative):
            Duration(-1)

    def test_is_immutable(self):
        duration = Duration(1)

        with pytest.raises(Exception):  # FrozenInstanceError
            duration.milliseconds = 2


class TestFormatSeconds:
    """Test elapsed-time formatting."""

    def test_truncates_milliseconds(self):
        assert format_seconds(1.2349) == "1.234s"

    def test_zero(self):
        assert format_seconds(0.0) == "0.000s"

    def test_whole_seconds(self):
        assert format_seconds(3.0) == "3.000s"

    @pytest.mark.parametrize(
        "seconds, expected",
        [(2.3, "2.300s"), (0.1, "0.100s"), (1.001, "1.001s"), (12.345, "12.345s")],
    )
    def test_float_noise_does_not_drop_a_millisecond(self, seconds, expected):
        """Values just below a millisecond boundary in binary still print exactly."""
        assert format_seconds(seconds) == expected
