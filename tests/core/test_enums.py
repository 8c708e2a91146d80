"""Tests for enum helpers."""

from courttime.core.enums import PeriodFormat
from courttime.core.limits import clamp_int


class TestPeriodFormat:
    def test_period_counts(self) -> None:
        assert PeriodFormat.QUARTERS.num_periods == 4
        assert PeriodFormat.HALVES.num_periods == 2

    def test_parse_by_value_and_name(self) -> None:
        assert PeriodFormat.parse("Halves") is PeriodFormat.HALVES
        assert PeriodFormat.parse("halves") is PeriodFormat.HALVES
        assert PeriodFormat.parse("QUARTERS") is PeriodFormat.QUARTERS

    def test_parse_unknown_uses_default(self) -> None:
        assert PeriodFormat.parse("thirds") is PeriodFormat.QUARTERS
        assert PeriodFormat.parse(None, PeriodFormat.HALVES) is PeriodFormat.HALVES

    def test_parse_passthrough(self) -> None:
        assert PeriodFormat.parse(PeriodFormat.HALVES) is PeriodFormat.HALVES


class TestClampInt:
    def test_in_range(self) -> None:
        assert clamp_int(7, 1, 10, 5) == 7

    def test_clamps_both_ends(self) -> None:
        assert clamp_int(-3, 1, 10, 5) == 1
        assert clamp_int(300, 1, 10, 5) == 10

    def test_numeric_strings(self) -> None:
        assert clamp_int("8", 1, 90, 8) == 8
        assert clamp_int("12.7", 1, 90, 8) == 12

    def test_garbage_falls_back_to_default(self) -> None:
        assert clamp_int("abc", 1, 90, 8) == 8
        assert clamp_int(None, 1, 90, 8) == 8
        assert clamp_int(float("nan"), 1, 90, 8) == 8
        assert clamp_int(float("inf"), 1, 90, 8) == 8
