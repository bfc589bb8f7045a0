"""
Unit tests for competitor price positioning, price suggestions, and the median-price lookup.
"""

from __future__ import annotations

import pytest

from src.pricing_engine.competitor_analysis import (
    CompetitorPrice,
    analyze_competitor_prices,
    median_price_lookup,
    suggest_price,
)


def _prices(*values: float) -> list[CompetitorPrice]:
    return [
        CompetitorPrice(competitor_name=f"Camp {index}", price=value, currency="EUR", date="2024-07-10")
        for index, value in enumerate(values)
    ]


def test_price_well_below_market_is_lower_and_suggests_increase() -> None:
    analysis = analyze_competitor_prices(_prices(100, 120, 140), 100)
    suggestion = suggest_price(analysis, 100)

    assert analysis.avg_price == 120.0
    assert analysis.min_price == 100.0
    assert analysis.max_price == 140.0
    assert analysis.your_position == "lower"
    assert analysis.price_gap == -20.0
    assert suggestion.recommended_price == 114.0
    assert suggestion.change_percent == 14.0
    assert suggestion.reasoning.startswith("Your price is €20 below market average.")


def test_price_within_ten_percent_is_competitive_and_kept() -> None:
    analysis = analyze_competitor_prices(_prices(100, 120, 140), 130)
    suggestion = suggest_price(analysis, 130)

    assert analysis.your_position == "competitive"
    assert suggestion.recommended_price == 130.0
    assert suggestion.change_percent == 0.0


def test_price_well_above_market_is_higher() -> None:
    analysis = analyze_competitor_prices(_prices(100, 120, 140), 140)
    suggestion = suggest_price(analysis, 140)

    assert analysis.your_position == "higher"
    assert suggestion.recommended_price == 126.0
    assert suggestion.change_percent == -10.0


def test_no_competitors_is_competitive_at_your_price() -> None:
    analysis = analyze_competitor_prices([], 95)

    assert analysis.your_position == "competitive"
    assert analysis.avg_price == 95
    assert analysis.price_gap == 0.0


def test_median_price_lookup_keys_by_date() -> None:
    lookup = median_price_lookup(
        [
            {"date": "2024-07-10", "price_p50": 118.5},
            {"date": "2024-07-11T00:00:00Z", "priceP50": 121},
            {"date": "2024-07-12"},
            {"price_p50": 99},
        ]
    )

    assert lookup == {"2024-07-10": 118.5, "2024-07-11": pytest.approx(121.0)}


def test_competitor_price_from_payload_defaults() -> None:
    price = CompetitorPrice.from_payload({"competitor_name": "Camping Les Pins", "price": "104", "date": "2024-07-10"})

    assert price.price == 104.0
    assert price.currency == "EUR"
    assert price.url == "#"
    assert price.availability is True
