# This file defines schemas for the pricing recommendations endpoint.
# It exists so recommendation payloads are strongly typed for the dashboard's remote provider.
# Confidence is restricted to the four labels the pricing engine produces.

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from src.api.schemas.common import EnvelopeFields


class RecommendationFactorsV1(BaseModel):
    seasonality: float
    weather_impact: float
    holiday_impact: float
    trend_impact: float


class RecommendationReasoningV1(BaseModel):
    primary: str
    contributing: list[str]


class PricingRecommendationV1(BaseModel):
    date: str
    current_price: float
    recommended_price: float
    price_change: float
    price_change_percent: float
    predicted_occupancy: float
    expected_revenue: float
    revenue_impact: float
    confidence: Literal["very_high", "high", "medium", "low"]
    explanation: str
    factors: RecommendationFactorsV1
    reasoning: RecommendationReasoningV1


class RecommendationSummaryV1(BaseModel):
    forecast_days: int
    current_average_price: float
    recommended_average_price: float
    average_price_change: float
    average_revenue_impact: float
    high_confidence_count: int


class RecommendationSetV1(BaseModel):
    property_id: str
    strategy: Literal["conservative", "balanced", "aggressive"]
    model: str
    generated_at: datetime
    recommendations: list[PricingRecommendationV1]
    summary: RecommendationSummaryV1


class PricingRecommendationsResponseV1(EnvelopeFields):
    data: RecommendationSetV1
