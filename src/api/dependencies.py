# This file provides dependency factories for FastAPI routes and middleware.
# It exists so services are created once and shared through dependency injection.
# The setup keeps routers thin and makes endpoint tests easy to override.
# Every service shares the same file store, so uploads are visible to enrichment and analytics.

from __future__ import annotations

from functools import lru_cache

from src.api.api_config import ApiConfig, get_api_config
from src.api.services.analytics_service import AnalyticsService
from src.api.services.assistant_service import AssistantService
from src.api.services.competitor_service import CompetitorService
from src.api.services.enrichment_service import EnrichmentService
from src.api.services.file_service import FileStore
from src.pricing_engine.pricing_config import load_pricing_engine_config
from src.pricing_engine.providers import RecommendationProvider, SyntheticRecommendationProvider


@lru_cache(maxsize=1)
def get_file_store() -> FileStore:
    return FileStore(config=get_api_config())


@lru_cache(maxsize=1)
def get_enrichment_service() -> EnrichmentService:
    config = get_api_config()
    return EnrichmentService(files=get_file_store(), seed=config.enrichment_seed)


@lru_cache(maxsize=1)
def get_recommendation_provider() -> RecommendationProvider:
    return SyntheticRecommendationProvider(config=load_pricing_engine_config())


@lru_cache(maxsize=1)
def get_analytics_service() -> AnalyticsService:
    config = get_api_config()
    return AnalyticsService(
        files=get_file_store(),
        provider=get_recommendation_provider(),
        max_days=config.max_forecast_days,
    )


@lru_cache(maxsize=1)
def get_competitor_service() -> CompetitorService:
    config = get_api_config()
    return CompetitorService(files=get_file_store(), seed=config.demo_seed)


@lru_cache(maxsize=1)
def get_assistant_service() -> AssistantService:
    config = get_api_config()
    return AssistantService(seed=config.demo_seed)


def get_config() -> ApiConfig:
    return get_api_config()
