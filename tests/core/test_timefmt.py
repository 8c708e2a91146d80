"""Tests for duration formatting."""

import pytest

from courttime.core.enums import PeriodFormat
from courttime.core.timefmt import (
    format_clock,
    format_signed_delta,
    period_label,
    period_labels,
)


class TestFormatClock:
    @pytest.mark.parametrize(
        ("ms", "expected"),
        [
            (0, "00:00"),
            (999, "00:00"),
            (1_000, "00:01"),
            (59_999, "00:59"),
            (60_000, "01:00"),
            (95_400, "01:35"),
            (960_000, "16:00"),
            (480_000, "08:00"),
        ],
    )
    def test_floor_to_whole_seconds(self, ms: int, expected: str) -> None:
        assert format_clock(ms) == expected

    def test_minutes_beyond_two_digits(self) -> None:
        assert format_clock(100 * 60_000 + 5_000) == "100:05"

    def test_negative_and_nan_render_zero(self) -> None:
        assert format_clock(-5_000) == "00:00"
        assert format_clock(float("nan")) == "00:00"

    def test_fractional_ms(self) -> None:
        assert format_clock(1999.9) == "00:01"


class TestSignedDelta:
    def test_positive(self) -> None:
        assert format_signed_delta(61_000) == "+01:01"

    def test_negative(self) -> None:
        assert format_signed_delta(-30_500) == "-00:30"

    def test_even(self) -> None:
        assert format_signed_delta(0) == "±00:00"


class TestPeriodLabels:
    def test_quarters(self) -> None:
        assert period_labels(PeriodFormat.QUARTERS) == ["Q1", "Q2", "Q3", "Q4"]

    def test_halves(self) -> None:
        assert period_labels(PeriodFormat.HALVES) == ["H1", "H2"]

    def test_single_label(self) -> None:
        assert period_label(PeriodFormat.QUARTERS, 2) == "Q3"
