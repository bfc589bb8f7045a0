"""
Unit tests for the swappable recommendation providers.
The synthetic provider must be reproducible; the remote provider must parse backend payloads in either key style.
"""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from src.pricing_engine.pricing_config import load_pricing_engine_config
from src.pricing_engine.providers import RemoteRecommendationProvider, SyntheticRecommendationProvider


class _FakeRecommendationsClient:
    def __init__(self, payload: dict[str, Any]) -> None:
        self.payload = payload
        self.calls: list[dict[str, Any]] = []

    def get_pricing_recommendations(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(kwargs)
        return self.payload


def test_synthetic_provider_is_reproducible_and_summarized() -> None:
    provider = SyntheticRecommendationProvider(
        config=load_pricing_engine_config(), seed=21, today_fn=lambda: date(2024, 6, 10)
    )

    first = provider.get_recommendations(property_id="camp-1", days=7)
    second = provider.get_recommendations(property_id="camp-1", days=7)

    assert first.recommendations == second.recommendations
    assert first.model == "synthetic-seasonal-v1"
    assert first.summary.forecast_days == 7
    assert set(first.by_date()) == {f"2024-06-{day:02d}" for day in range(11, 18)}


def test_providers_reject_unknown_strategy_and_non_positive_days() -> None:
    provider = SyntheticRecommendationProvider(config=load_pricing_engine_config())

    with pytest.raises(ValueError, match="strategy"):
        provider.get_recommendations(property_id="camp-1", days=7, strategy="reckless")
    with pytest.raises(ValueError, match="days"):
        provider.get_recommendations(property_id="camp-1", days=0)


def test_remote_provider_parses_camel_case_payload() -> None:
    client = _FakeRecommendationsClient(
        {
            "propertyId": "camp-1",
            "model": "gradient-boost-v3",
            "generatedAt": "2024-06-10T08:00:00Z",
            "recommendations": [
                {
                    "date": "2024-06-11",
                    "currentPrice": 100,
                    "recommendedPrice": 120,
                    "predictedOccupancy": 82,
                    "confidence": "very_high",
                    "factors": {"seasonality": 1.3, "weatherImpact": 0.1},
                    "reasoning": {"primary": "Shoulder season", "contributing": ["Sunny"]},
                }
            ],
        }
    )
    provider = RemoteRecommendationProvider(api_client=client)

    result = provider.get_recommendations(property_id="camp-1", days=1, strategy="aggressive", target_occupancy=65)

    assert client.calls == [{"property_id": "camp-1", "days": 1, "strategy": "aggressive", "target_occupancy": 65}]
    (item,) = result.recommendations
    assert result.model == "gradient-boost-v3"
    assert result.strategy == "aggressive"
    assert item.price_change == 20.0
    assert item.price_change_percent == 20.0
    assert item.factors.weather_impact == 0.1
    assert item.reasoning_contributing == ("Sunny",)
    assert result.summary.high_confidence_count == 1
