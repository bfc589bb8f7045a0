# This file provides shared helpers for API endpoint tests.
# It exists so tests can run against fresh in-memory services instead of the process-wide singletons.
# The helpers build consistent config objects and scoped TestClient contexts.
# Centralized test wiring keeps API tests small and focused on behavior.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date

from fastapi.testclient import TestClient

from src.api.api_config import ApiConfig
from src.api.app import app
from src.api.dependencies import (
    get_analytics_service,
    get_assistant_service,
    get_competitor_service,
    get_config,
    get_enrichment_service,
    get_file_store,
)
from src.api.services.analytics_service import AnalyticsService
from src.api.services.assistant_service import AssistantService
from src.api.services.competitor_service import CompetitorService
from src.api.services.enrichment_service import EnrichmentService
from src.api.services.file_service import FileStore
from src.pricing_engine.pricing_config import load_pricing_engine_config
from src.pricing_engine.providers import SyntheticRecommendationProvider

FIXED_TODAY = date(2024, 6, 10)

SAMPLE_CSV = (
    "Date,Price,Occupancy,Accommodation Type\n"
    "2024-06-01,120,80,Tent Pitch\n"
    "2024-06-02,130,0.9,Tent Pitch\n"
    "2024-06-03,,75,Safari Tent\n"
).encode("utf-8")


def build_test_config(*, seed_demo_file: bool = False) -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test Pricing API",
        api_version_path="/api/v1",
        schema_version="1.0.0",
        host="0.0.0.0",
        port=8000,
        environment="test",
        default_page_size=2,
        max_page_size=5,
        max_upload_bytes=4096,
        max_forecast_days=60,
        request_timeout_seconds=30,
        seed_demo_file=seed_demo_file,
        demo_seed=2024,
        enrichment_seed=7,
        allowed_origins=[],
        app_version="0.1.0",
    )


@dataclass
class ApiServices:
    files: FileStore
    enrichment: EnrichmentService
    analytics: AnalyticsService
    competitors: CompetitorService
    assistant: AssistantService


def build_services(config: ApiConfig) -> ApiServices:
    files = FileStore(config=config)
    provider = SyntheticRecommendationProvider(
        config=load_pricing_engine_config(),
        today_fn=lambda: FIXED_TODAY,
    )
    return ApiServices(
        files=files,
        enrichment=EnrichmentService(files=files, seed=config.enrichment_seed),
        analytics=AnalyticsService(files=files, provider=provider, max_days=config.max_forecast_days),
        competitors=CompetitorService(files=files, seed=config.demo_seed),
        assistant=AssistantService(seed=config.demo_seed),
    )


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    services: ApiServices | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()
    resolved = services or build_services(resolved_config)

    app.dependency_overrides[get_config] = lambda: resolved_config
    app.dependency_overrides[get_file_store] = lambda: resolved.files
    app.dependency_overrides[get_enrichment_service] = lambda: resolved.enrichment
    app.dependency_overrides[get_analytics_service] = lambda: resolved.analytics
    app.dependency_overrides[get_competitor_service] = lambda: resolved.competitors
    app.dependency_overrides[get_assistant_service] = lambda: resolved.assistant

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


def upload_sample(client: TestClient, *, name: str = "bookings.csv", content: bytes = SAMPLE_CSV) -> dict:
    response = client.post("/api/v1/files/upload", files={"file": (name, content, "text/csv")})
    assert response.status_code == 201, response.text
    return response.json()["data"]
