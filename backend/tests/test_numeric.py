"""Tests for rounding helpers."""

import math

from signal_core.numeric import finite_or_none, format_price, round_half_up


class TestRoundHalfUp:
    def test_rounds_to_places(self):
        assert round_half_up(0.1234567, 6) == 0.123457
        assert round_half_up(94.0499999999, 2) == 94.05

    def test_exact_ties_round_away_from_zero(self):
        # 0.125 and 2.5 are exactly representable
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(2.5, 0) == 3.0
        assert round_half_up(-0.125, 2) == -0.13

    def test_uses_binary_value(self):
        # 1.005 is stored slightly below 1.005
        assert round_half_up(1.005, 2) == 1.0

    def test_large_values(self):
        assert round_half_up(1e30, 6) == 1e30

    def test_non_finite_passthrough(self):
        assert math.isinf(round_half_up(float("inf"), 2))
        assert math.isnan(round_half_up(float("nan"), 2))


class TestFiniteOrNone:
    def test_values(self):
        assert finite_or_none(1.5) == 1.5
        assert finite_or_none(0.0) == 0.0
        assert finite_or_none(None) is None
        assert finite_or_none(float("nan")) is None
        assert finite_or_none(float("-inf")) is None


def test_format_price():
    assert format_price(14 / 3) == "4.67"
    assert format_price(5.5) == "5.50"
    assert format_price(0.125) == "0.13"
