"""Tests for math/rounding.py - half-up rounding and zero guards."""

import pytest

from manuscript_insight.math import clamp, format_fixed, percent, round_half_up, safe_ratio


class TestRoundHalfUp:
    """Ties always round up, unlike built-in round()."""

    @pytest.mark.parametrize(
        "value, expected",
        [(77.5, 78), (92.5, 93), (0.5, 1), (2.5, 3), (77.4, 77), (77.6, 78), (0.0, 0)],
    )
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected

    def test_differs_from_bankers_rounding(self):
        assert round(92.5) == 92
        assert round_half_up(92.5) == 93


class TestClamp:
    def test_within_range_unchanged(self):
        assert clamp(42.0) == 42.0

    def test_clamps_both_ends(self):
        assert clamp(-10) == 0.0
        assert clamp(250) == 100.0

    def test_custom_bounds(self):
        assert clamp(5, low=10, high=20) == 10


class TestRatios:
    def test_safe_ratio_zero_denominator(self):
        assert safe_ratio(5, 0) == 0.0
        assert safe_ratio(5, 0, default=1.0) == 1.0

    def test_percent(self):
        assert percent(1, 4) == 25.0

    def test_percent_of_nothing_is_zero(self):
        assert percent(3, 0) == 0.0


class TestFormatFixed:
    def test_exact_ties_round_up(self):
        assert format_fixed(2.25, 1) == "2.3"
        assert format_fixed(0.125, 2) == "0.13"
        assert format_fixed(92.5) == "93"

    def test_pads_to_digits(self):
        assert format_fixed(3, 1) == "3.0"
        assert format_fixed(0, 2) == "0.00"

    def test_integer_digits(self):
        assert format_fixed(66.66666) == "67"
