# This file defines the pricing recommendation data contracts shared by providers, API, and dashboard.
# It exists so remote payloads and synthetic output are parsed into one immutable shape.
# The parser accepts snake_case payloads from the demo API and camelCase payloads from older backends.
# Summary helpers derive the averages shown in the Pricing Engine header.

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from src.analytics.rounding import round_half_up

CONFIDENCE_LEVELS = ("very_high", "high", "medium", "low")
HIGH_CONFIDENCE_LEVELS = frozenset({"very_high", "high"})


def _pick(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


@dataclass(frozen=True)
class RecommendationFactors:
    seasonality: float = 0.0
    weather_impact: float = 0.0
    holiday_impact: float = 0.0
    trend_impact: float = 0.0

    def to_payload(self) -> dict[str, float]:
        return {
            "seasonality": self.seasonality,
            "weather_impact": self.weather_impact,
            "holiday_impact": self.holiday_impact,
            "trend_impact": self.trend_impact,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> RecommendationFactors:
        if not payload:
            return cls()
        return cls(
            seasonality=float(_pick(payload, "seasonality", default=0.0)),
            weather_impact=float(_pick(payload, "weather_impact", "weatherImpact", default=0.0)),
            holiday_impact=float(_pick(payload, "holiday_impact", "holidayImpact", default=0.0)),
            trend_impact=float(_pick(payload, "trend_impact", "trendImpact", default=0.0)),
        )


@dataclass(frozen=True)
class PricingRecommendation:
    date: str
    current_price: float
    recommended_price: float
    price_change: float
    price_change_percent: float
    predicted_occupancy: float
    expected_revenue: float
    revenue_impact: float
    confidence: str
    explanation: str = ""
    factors: RecommendationFactors = field(default_factory=RecommendationFactors)
    reasoning_primary: str = ""
    reasoning_contributing: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.confidence not in CONFIDENCE_LEVELS:
            raise ValueError(f"confidence must be one of {CONFIDENCE_LEVELS}, got {self.confidence!r}")

    def to_payload(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "current_price": self.current_price,
            "recommended_price": self.recommended_price,
            "price_change": self.price_change,
            "price_change_percent": self.price_change_percent,
            "predicted_occupancy": self.predicted_occupancy,
            "expected_revenue": self.expected_revenue,
            "revenue_impact": self.revenue_impact,
            "confidence": self.confidence,
            "explanation": self.explanation,
            "factors": self.factors.to_payload(),
            "reasoning": {
                "primary": self.reasoning_primary,
                "contributing": list(self.reasoning_contributing),
            },
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> PricingRecommendation:
        current_price = float(_pick(payload, "current_price", "currentPrice", default=0.0))
        recommended_price = float(_pick(payload, "recommended_price", "recommendedPrice", default=0.0))
        price_change = _pick(payload, "price_change", "priceChange")
        price_change_percent = _pick(payload, "price_change_percent", "priceChangePercent")
        if price_change is None:
            price_change = recommended_price - current_price
        if price_change_percent is None:
            price_change_percent = (
                round_half_up(price_change / current_price * 100.0, 1) if current_price else 0.0
            )

        reasoning = _pick(payload, "reasoning", default={}) or {}
        return cls(
            date=str(payload["date"])[:10],
            current_price=current_price,
            recommended_price=recommended_price,
            price_change=float(price_change),
            price_change_percent=float(price_change_percent),
            predicted_occupancy=float(_pick(payload, "predicted_occupancy", "predictedOccupancy", default=0.0)),
            expected_revenue=float(_pick(payload, "expected_revenue", "expectedRevenue", default=0.0)),
            revenue_impact=float(_pick(payload, "revenue_impact", "revenueImpact", default=0.0)),
            confidence=str(_pick(payload, "confidence", default="medium")),
            explanation=str(_pick(payload, "explanation", default="")),
            factors=RecommendationFactors.from_payload(_pick(payload, "factors")),
            reasoning_primary=str(reasoning.get("primary", "")),
            reasoning_contributing=tuple(str(item) for item in reasoning.get("contributing", [])),
        )


@dataclass(frozen=True)
class RecommendationSummary:
    forecast_days: int
    current_average_price: float
    recommended_average_price: float
    average_price_change: float
    average_revenue_impact: float
    high_confidence_count: int

    def to_payload(self) -> dict[str, Any]:
        return {
            "forecast_days": self.forecast_days,
            "current_average_price": self.current_average_price,
            "recommended_average_price": self.recommended_average_price,
            "average_price_change": self.average_price_change,
            "average_revenue_impact": self.average_revenue_impact,
            "high_confidence_count": self.high_confidence_count,
        }


def summarize_recommendations(recommendations: Iterable[PricingRecommendation]) -> RecommendationSummary:
    items = list(recommendations)
    if not items:
        return RecommendationSummary(
            forecast_days=0,
            current_average_price=0.0,
            recommended_average_price=0.0,
            average_price_change=0.0,
            average_revenue_impact=0.0,
            high_confidence_count=0,
        )

    count = len(items)
    current_avg = sum(item.current_price for item in items) / count
    recommended_avg = sum(item.recommended_price for item in items) / count
    revenue_impact = (recommended_avg - current_avg) / current_avg * 100.0 if current_avg else 0.0
    return RecommendationSummary(
        forecast_days=count,
        current_average_price=round_half_up(current_avg),
        recommended_average_price=round_half_up(recommended_avg),
        average_price_change=round_half_up(recommended_avg - current_avg),
        average_revenue_impact=round_half_up(revenue_impact, 1),
        high_confidence_count=sum(1 for item in items if item.confidence in HIGH_CONFIDENCE_LEVELS),
    )


@dataclass(frozen=True)
class RecommendationSet:
    property_id: str
    strategy: str
    model: str
    generated_at: datetime
    recommendations: list[PricingRecommendation]
    summary: RecommendationSummary

    def by_date(self) -> dict[str, PricingRecommendation]:
        return {item.date: item for item in self.recommendations}

    def to_payload(self) -> dict[str, Any]:
        return {
            "property_id": self.property_id,
            "strategy": self.strategy,
            "model": self.model,
            "generated_at": self.generated_at.isoformat(),
            "recommendations": [item.to_payload() for item in self.recommendations],
            "summary": self.summary.to_payload(),
        }


def recommendation_set_from_payload(
    payload: Mapping[str, Any],
    *,
    property_id: str,
    strategy: str,
) -> RecommendationSet:
    """Parse the `data` block of a pricing-recommendations response."""

    raw_items = payload.get("recommendations") or []
    recommendations = [PricingRecommendation.from_payload(item) for item in raw_items]

    generated_at_raw = _pick(payload, "generated_at", "generatedAt")
    if isinstance(generated_at_raw, str):
        generated_at = datetime.fromisoformat(generated_at_raw.replace("Z", "+00:00"))
    else:
        generated_at = datetime.now(tz=UTC)

    return RecommendationSet(
        property_id=str(_pick(payload, "property_id", "propertyId", default=property_id)),
        strategy=str(_pick(payload, "strategy", default=strategy)),
        model=str(_pick(payload, "model", default="remote")),
        generated_at=generated_at,
        recommendations=recommendations,
        summary=summarize_recommendations(recommendations),
    )
