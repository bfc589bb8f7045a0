# This file defines runtime configuration for the user dashboard.
# It exists so API settings, cache policies, polling cadence, and UI defaults can be tuned through environment variables.
# Keeping these values centralized avoids hard-coded behavior scattered across the app.
# Demo mode short-circuits every backend call to the seeded demo data.

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

SUPPORTED_LANGUAGES = ("en", "fr")


@dataclass(frozen=True)
class DashboardConfig:
    api_base_url: str
    request_timeout_seconds: int
    demo_mode: bool
    file_data_page_size: int
    max_file_rows: int
    forecast_days: int
    calendar_forward_days: int
    data_cache_ttl_seconds: int
    metadata_cache_ttl_seconds: int
    enrichment_poll_interval_seconds: float
    enrichment_max_retries: int
    enrichment_max_polls: int
    state_file_path: Path
    default_language: str
    currency_symbol: str

    def clamp_forecast_days(self, requested_days: int | None) -> int:
        if requested_days is None:
            return self.forecast_days
        return max(1, min(int(requested_days), 90))


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def load_dashboard_config(*, load_env: bool = True) -> DashboardConfig:
    if load_env:
        load_dotenv()

    api_base_url = os.getenv("DASHBOARD_API_BASE_URL")
    if not api_base_url:
        api_host = os.getenv("API_HOST", "localhost")
        api_port = os.getenv("API_PORT", "8000")
        api_base_url = f"http://{api_host}:{api_port}/api/v1"

    language = os.getenv("DASHBOARD_DEFAULT_LANGUAGE", "en").strip().lower()
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(f"DASHBOARD_DEFAULT_LANGUAGE must be one of {SUPPORTED_LANGUAGES}, got {language!r}")

    return DashboardConfig(
        api_base_url=api_base_url.rstrip("/"),
        request_timeout_seconds=int(os.getenv("DASHBOARD_REQUEST_TIMEOUT_SECONDS", "8")),
        demo_mode=_env_bool("DASHBOARD_DEMO_MODE", True),
        file_data_page_size=int(os.getenv("DASHBOARD_FILE_DATA_PAGE_SIZE", "1000")),
        max_file_rows=int(os.getenv("DASHBOARD_MAX_FILE_ROWS", "10000")),
        forecast_days=int(os.getenv("DASHBOARD_FORECAST_DAYS", "14")),
        calendar_forward_days=int(os.getenv("DASHBOARD_CALENDAR_FORWARD_DAYS", "30")),
        data_cache_ttl_seconds=int(os.getenv("DASHBOARD_DATA_CACHE_TTL_SECONDS", "90")),
        metadata_cache_ttl_seconds=int(os.getenv("DASHBOARD_METADATA_CACHE_TTL_SECONDS", "300")),
        enrichment_poll_interval_seconds=float(os.getenv("DASHBOARD_ENRICHMENT_POLL_INTERVAL_SECONDS", "2")),
        enrichment_max_retries=int(os.getenv("DASHBOARD_ENRICHMENT_MAX_RETRIES", "3")),
        enrichment_max_polls=int(os.getenv("DASHBOARD_ENRICHMENT_MAX_POLLS", "60")),
        state_file_path=Path(os.getenv("DASHBOARD_STATE_FILE", ".dashboard_state.json")),
        default_language=language,
        currency_symbol=os.getenv("DASHBOARD_CURRENCY_SYMBOL", "€"),
    )
