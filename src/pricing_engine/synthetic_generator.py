# This file generates seeded synthetic pricing recommendations for demo mode.
# It exists so the dashboard shows plausible forward-looking prices without a trained model.
# Prices follow a seasonal multiplier, a weekend premium, and bounded random jitter from numpy.
# Passing the same generator seed and reference date reproduces identical recommendations.

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

import numpy as np

from src.analytics.rounding import round_half_up, round_int
from src.pricing_engine.pricing_config import PricingEngineConfig
from src.pricing_engine.recommendation import (
    CONFIDENCE_LEVELS,
    PricingRecommendation,
    RecommendationFactors,
)


def _confidence_probabilities(config: PricingEngineConfig) -> list[float]:
    weights = [config.confidence_weights[level] for level in CONFIDENCE_LEVELS]
    total = sum(weights)
    return [weight / total for weight in weights]


def _season_word(multiplier: float) -> str:
    if multiplier > 1.5:
        return "peak"
    if multiplier > 1:
        return "shoulder"
    return "low"


def _explanations(
    *,
    is_weekend: bool,
    seasonal_multiplier: float,
    predicted_occupancy: int,
    price_change: int,
    is_peak: bool,
) -> list[str]:
    return [
        f"{'Weekend premium' if is_weekend else 'Weekday'} pricing with "
        f"{_season_word(seasonal_multiplier)} season adjustment",
        f"High demand expected - {predicted_occupancy}% occupancy forecast",
        "Weather forecast: sunny conditions typically increase bookings by 12%",
        f"Competitor prices trending {'up' if price_change > 0 else 'stable'} in the area",
        f"{'Peak summer' if is_peak else 'Off-peak'} Mediterranean season pricing",
    ]


def generate_recommendation(
    day: date,
    *,
    config: PricingEngineConfig,
    rng: np.random.Generator,
) -> PricingRecommendation:
    """Generate one synthetic recommendation for `day`."""

    seasonal_multiplier = config.seasonal_multiplier(day.month)
    is_weekend = config.is_weekend(day.weekday())
    weekend_multiplier = config.weekend_multiplier if is_weekend else 1.0
    base = config.base_price

    current_price = round_int(base * seasonal_multiplier * (0.95 + rng.random() * 0.1))
    recommended_price = round_int(base * seasonal_multiplier * weekend_multiplier * (1 + rng.random() * 0.1))
    price_change = recommended_price - current_price
    price_change_percent = round_half_up(price_change / current_price * 100.0, 1) if current_price else 0.0

    base_occupancy = config.base_occupancy(day.month)
    weekend_boost = config.weekend_occupancy_boost if is_weekend else 0
    jitter = round_int(rng.random() * 15 - 5)
    predicted_occupancy = min(
        config.max_predicted_occupancy,
        max(config.min_predicted_occupancy, base_occupancy + weekend_boost + jitter),
    )

    occupancy_fraction = predicted_occupancy / 100.0
    expected_revenue = round_int(recommended_price * occupancy_fraction * config.total_units)
    current_revenue = round_int(current_price * occupancy_fraction * config.total_units)
    revenue_impact = (
        round_half_up((expected_revenue - current_revenue) / current_revenue * 100.0, 1) if current_revenue else 0.0
    )

    confidence = str(rng.choice(CONFIDENCE_LEVELS, p=_confidence_probabilities(config)))

    explanations = _explanations(
        is_weekend=is_weekend,
        seasonal_multiplier=seasonal_multiplier,
        predicted_occupancy=predicted_occupancy,
        price_change=price_change,
        is_peak=day.month in config.peak_months,
    )
    explanation = explanations[int(rng.integers(0, len(explanations)))]

    factors = RecommendationFactors(
        seasonality=seasonal_multiplier,
        weather_impact=0.05 + rng.random() * 0.1,
        holiday_impact=0.0,
        trend_impact=0.02 + rng.random() * 0.05,
    )

    return PricingRecommendation(
        date=day.isoformat(),
        current_price=float(current_price),
        recommended_price=float(recommended_price),
        price_change=float(price_change),
        price_change_percent=price_change_percent,
        predicted_occupancy=float(predicted_occupancy),
        expected_revenue=float(expected_revenue),
        revenue_impact=revenue_impact,
        confidence=confidence,
        explanation=explanation,
        factors=factors,
        reasoning_primary=f"{_season_word(seasonal_multiplier).title()} season pricing strategy",
        reasoning_contributing=(
            "Weekend premium applied" if is_weekend else "Standard weekday rate",
            f"{predicted_occupancy}% occupancy forecast",
            "Historical demand patterns",
        ),
    )


def generate_synthetic_recommendations(
    *,
    config: PricingEngineConfig,
    days: int | None = None,
    today: date | None = None,
    seed: int | None = None,
) -> list[PricingRecommendation]:
    """Generate recommendations for day offsets 1..days after `today`."""

    horizon = config.forecast_days if days is None else days
    if horizon < 0:
        raise ValueError("days must be nonnegative")
    reference = today or datetime.now(tz=UTC).date()
    rng = np.random.default_rng(config.random_seed if seed is None else seed)
    return [
        generate_recommendation(reference + timedelta(days=offset), config=config, rng=rng)
        for offset in range(1, horizon + 1)
    ]
