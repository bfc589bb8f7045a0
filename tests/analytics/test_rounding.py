"""
Unit tests for the shared half-up rounding helpers.
"""

from __future__ import annotations

from src.analytics.rounding import round_half_up, round_int


def test_halves_round_up_not_to_even() -> None:
    assert round_half_up(2.5) == 3.0
    assert round_half_up(0.125, 2) == 0.13
    assert round_int(88.5) == 89


def test_binary_float_edge_cases_round_from_decimal_repr() -> None:
    assert round_half_up(1.005, 2) == 1.01
    assert round_half_up(2.675, 2) == 2.68
    assert round_half_up(57.14285, 1) == 57.1


def test_negative_halves_round_away_from_zero() -> None:
    assert round_half_up(-2.5) == -3.0
    assert round_half_up(-12.25, 1) == -12.3
