"""Tests for utility modules: duration value and rendering."""

import pytest

from arbitime.utils.duration import Duration, format_duration


class TestDuration:
    def test_default_is_zero(self):
        assert Duration().nanos == 0

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            Duration(-1)

    def test_unit_properties(self):
        d = Duration(1_500_000)
        assert d.seconds == 0.0015
        assert d.millis == 1.5
        assert d.micros == 1500.0

    def test_ordering(self):
        assert Duration(5) < Duration(10)
        assert Duration(10) >= Duration(0)

    def test_str_uses_format_duration(self):
        assert str(Duration(2_500)) == "2.5µs"


class TestFormatDuration:
    def test_zero(self):
        assert format_duration(Duration(0)) == "0ns"

    def test_nanoseconds(self):
        assert format_duration(Duration(999)) == "999ns"

    def test_microseconds(self):
        assert format_duration(Duration(1_000)) == "1µs"
        assert format_duration(Duration(1_500)) == "1.5µs"
        assert format_duration(Duration(999_999)) == "999.999µs"

    def test_milliseconds(self):
        assert format_duration(Duration(1_000_000)) == "1ms"
        assert format_duration(Duration(12_345_678)) == "12.345678ms"

    def test_seconds(self):
        assert format_duration(Duration(3_000_000_000)) == "3s"
        assert format_duration(Duration(2_000_000_001)) == "2.000000001s"
        assert format_duration(Duration(90_250_000_000)) == "90.25s"

    def test_accepts_int_nanos(self):
        assert format_duration(1_250_000) == "1.25ms"

    def test_negative_int_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            format_duration(-5)
