# This file defines the swappable source of pricing recommendations.
# It exists so pages and the demo API depend on one protocol instead of a concrete generator or HTTP call.
# The remote provider reads the backend recommendations endpoint; the synthetic provider runs the seeded generator.
# Both return a RecommendationSet with a summary and a by-date lookup.

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, date, datetime
from typing import Any, Protocol

from src.pricing_engine.pricing_config import VALID_STRATEGIES, PricingEngineConfig
from src.pricing_engine.recommendation import (
    RecommendationSet,
    recommendation_set_from_payload,
    summarize_recommendations,
)
from src.pricing_engine.synthetic_generator import generate_synthetic_recommendations

logger = logging.getLogger(__name__)


class RecommendationProvider(Protocol):
    def get_recommendations(
        self,
        *,
        property_id: str,
        days: int,
        strategy: str = "balanced",
        target_occupancy: float | None = None,
    ) -> RecommendationSet: ...


class PricingRecommendationsClient(Protocol):
    def get_pricing_recommendations(
        self,
        *,
        property_id: str,
        days: int,
        strategy: str,
        target_occupancy: float | None,
    ) -> dict[str, Any]: ...


def _validate_request(days: int, strategy: str) -> None:
    if days <= 0:
        raise ValueError("days must be > 0")
    if strategy not in VALID_STRATEGIES:
        raise ValueError(f"strategy must be one of {VALID_STRATEGIES}, got {strategy!r}")


class SyntheticRecommendationProvider:
    """Recommendation provider backed by the seeded synthetic generator."""

    def __init__(
        self,
        *,
        config: PricingEngineConfig,
        seed: int | None = None,
        today_fn: Callable[[], date] | None = None,
    ) -> None:
        self.config = config
        self.seed = config.random_seed if seed is None else seed
        self.today_fn = today_fn or (lambda: datetime.now(tz=UTC).date())

    def get_recommendations(
        self,
        *,
        property_id: str,
        days: int,
        strategy: str = "balanced",
        target_occupancy: float | None = None,
    ) -> RecommendationSet:
        _validate_request(days, strategy)
        recommendations = generate_synthetic_recommendations(
            config=self.config,
            days=days,
            today=self.today_fn(),
            seed=self.seed,
        )
        logger.debug(
            "Generated %d synthetic recommendations for %s (strategy=%s, target_occupancy=%s)",
            len(recommendations),
            property_id,
            strategy,
            target_occupancy,
        )
        return RecommendationSet(
            property_id=property_id,
            strategy=strategy,
            model=self.config.model_name,
            generated_at=datetime.now(tz=UTC),
            recommendations=recommendations,
            summary=summarize_recommendations(recommendations),
        )


class RemoteRecommendationProvider:
    """Recommendation provider that calls the backend analytics endpoint."""

    def __init__(self, *, api_client: PricingRecommendationsClient) -> None:
        self.api_client = api_client

    def get_recommendations(
        self,
        *,
        property_id: str,
        days: int,
        strategy: str = "balanced",
        target_occupancy: float | None = None,
    ) -> RecommendationSet:
        _validate_request(days, strategy)
        payload = self.api_client.get_pricing_recommendations(
            property_id=property_id,
            days=days,
            strategy=strategy,
            target_occupancy=target_occupancy,
        )
        return recommendation_set_from_payload(payload, property_id=property_id, strategy=strategy)
