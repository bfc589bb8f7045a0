# This file serves pricing recommendations for the `/analytics` endpoints.
# It exists so the demo backend answers the same recommendation contract a production model would.
# Requests are scoped to a known file id and delegated to the configured recommendation provider.

from __future__ import annotations

import logging
from typing import Any

from src.api.error_handlers import APIError
from src.api.services.file_service import FileStore
from src.pricing_engine.providers import RecommendationProvider

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Recommendation lookups for files held by the demo backend."""

    def __init__(self, *, files: FileStore, provider: RecommendationProvider, max_days: int) -> None:
        self.files = files
        self.provider = provider
        self.max_days = max_days

    def pricing_recommendations(
        self,
        *,
        property_id: str,
        days: int,
        strategy: str,
        target_occupancy: float | None,
    ) -> dict[str, Any]:
        self.files.get_file(property_id)
        if days > self.max_days:
            raise APIError(
                status_code=400,
                error_code="INVALID_QUERY_PARAM",
                message=f"days must be <= {self.max_days}.",
            )
        try:
            recommendation_set = self.provider.get_recommendations(
                property_id=property_id,
                days=days,
                strategy=strategy,
                target_occupancy=target_occupancy,
            )
        except ValueError as exc:
            raise APIError(
                status_code=400,
                error_code="INVALID_QUERY_PARAM",
                message=str(exc),
            ) from exc

        logger.info(
            "Served %d recommendations for %s (strategy=%s)",
            len(recommendation_set.recommendations),
            property_id,
            strategy,
        )
        return recommendation_set.to_payload()
