# This file analyzes your price against competitor prices for the Competitors page.
# It exists so positioning, gap, and the follow-up price suggestion are computed in one tested place.
# Positioning uses a +/-10% band around the market average.
# It also turns competitor range rows into the date-keyed median lookup merged into the calendar.

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from src.analytics.rounding import round_half_up

POSITION_BAND_PCT = 10.0
LOWER_POSITION_TARGET = 0.95
HIGHER_POSITION_TARGET = 1.05


@dataclass(frozen=True)
class CompetitorPrice:
    competitor_name: str
    price: float
    currency: str
    date: str
    url: str = "#"
    room_type: str | None = None
    availability: bool = True

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> CompetitorPrice:
        return cls(
            competitor_name=str(payload["competitor_name"]),
            price=float(payload["price"]),
            currency=str(payload.get("currency", "EUR")),
            date=str(payload["date"])[:10],
            url=str(payload.get("url") or "#"),
            room_type=payload.get("room_type"),
            availability=bool(payload.get("availability", True)),
        )


@dataclass(frozen=True)
class CompetitorAnalysis:
    avg_price: float
    min_price: float
    max_price: float
    your_position: str
    price_gap: float
    competitors: list[CompetitorPrice] = field(default_factory=list)


@dataclass(frozen=True)
class PriceSuggestion:
    recommended_price: float
    reasoning: str
    change_percent: float


def analyze_competitor_prices(competitors: Iterable[CompetitorPrice], your_price: float) -> CompetitorAnalysis:
    items = list(competitors)
    if not items:
        return CompetitorAnalysis(
            avg_price=your_price,
            min_price=your_price,
            max_price=your_price,
            your_position="competitive",
            price_gap=0.0,
        )

    prices = [item.price for item in items]
    avg_price = sum(prices) / len(prices)
    gap_percent = (your_price - avg_price) / avg_price * 100.0 if avg_price else 0.0

    if gap_percent < -POSITION_BAND_PCT:
        position = "lower"
    elif gap_percent > POSITION_BAND_PCT:
        position = "higher"
    else:
        position = "competitive"

    return CompetitorAnalysis(
        avg_price=round_half_up(avg_price, 2),
        min_price=round_half_up(min(prices), 2),
        max_price=round_half_up(max(prices), 2),
        your_position=position,
        price_gap=round_half_up(your_price - avg_price, 2),
        competitors=items,
    )


def suggest_price(analysis: CompetitorAnalysis, current_price: float, *, currency_symbol: str = "€") -> PriceSuggestion:
    gap = abs(analysis.price_gap)
    if analysis.your_position == "lower":
        recommended = analysis.avg_price * LOWER_POSITION_TARGET
        reasoning = (
            f"Your price is {currency_symbol}{gap:.0f} below market average. "
            "Consider increasing prices while staying competitive."
        )
    elif analysis.your_position == "higher":
        recommended = analysis.avg_price * HIGHER_POSITION_TARGET
        reasoning = (
            f"Your price is {currency_symbol}{gap:.0f} above market average. "
            "Monitor occupancy for opportunities."
        )
    else:
        recommended = current_price
        reasoning = "Your pricing is competitive with the market. Maintain current strategy."

    change_percent = (recommended - current_price) / current_price * 100.0 if current_price else 0.0
    return PriceSuggestion(
        recommended_price=round_half_up(recommended, 2),
        reasoning=reasoning,
        change_percent=round_half_up(change_percent, 1),
    )


def median_price_lookup(range_rows: Iterable[Mapping[str, Any]]) -> dict[str, float]:
    """Map ISO date to the competitor median price (`price_p50`)."""

    lookup: dict[str, float] = {}
    for row in range_rows:
        median = row.get("price_p50", row.get("priceP50"))
        if median is None or row.get("date") is None:
            continue
        lookup[str(row["date"])[:10]] = float(median)
    return lookup
