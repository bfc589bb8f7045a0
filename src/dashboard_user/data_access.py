# This file is the single data interface for the Streamlit pricing dashboard.
# It exists so pages can request business-ready datasets without caring whether data came from the API or demo generators.
# The module enforces API-first behavior, demo fallback, and TTL caching for repeated queries.
# Failed fetches are logged at warning level and degrade to demo data or empty results instead of raising.

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta
from typing import Any, cast

import pandas as pd

from src.analytics.dashboard_aggregation import DashboardSummary, aggregate_bookings, empty_dashboard_summary
from src.analytics.enrichment_features import ENRICHMENT_FEATURES, enrich_booking_frame
from src.analytics.kpi_metrics import LAST_YEAR_DAYS
from src.common.schema_map import extract_stay_dates
from src.dashboard_user.api_client import ApiUnavailableError, DashboardApiClient, ResourceNotFoundError
from src.dashboard_user.dashboard_config import DashboardConfig
from src.dashboard_user.enrichment_poller import EnrichmentPoller, EnrichmentProgress, PollOutcome
from src.demo.assistant_replies import build_demo_reply, quick_suggestion
from src.demo.mock_data import (
    DEMO_FILE_ID,
    demo_bookings_frame,
    demo_competitor_prices,
    demo_competitor_range,
    demo_kpi,
    demo_uploaded_file,
)
from src.ingestion.uploads import UploadedFile, frame_to_records, process_upload
from src.pricing_engine.competitor_analysis import CompetitorPrice, median_price_lookup
from src.pricing_engine.pricing_config import PricingEngineConfig, load_pricing_engine_config
from src.pricing_engine.providers import RemoteRecommendationProvider, SyntheticRecommendationProvider
from src.pricing_engine.recommendation import RecommendationSet

logger = logging.getLogger(__name__)

MIN_LAST_YEAR_DATES = 28


class _TTLCache:
    def __init__(self) -> None:
        self._store: dict[tuple[Any, ...], tuple[float, Any]] = {}

    def get(self, key: tuple[Any, ...]) -> Any | None:
        cached = self._store.get(key)
        if not cached:
            return None
        expires_at, value = cached
        if time.time() > expires_at:
            self._store.pop(key, None)
            return None
        return value

    def set(self, key: tuple[Any, ...], *, value: Any, ttl_seconds: int) -> None:
        self._store[key] = (time.time() + ttl_seconds, value)

    def clear(self) -> None:
        self._store.clear()


def split_last_year_rows(frame: pd.DataFrame, *, today: date) -> pd.DataFrame | None:
    """Return rows at least a year old when they cover enough distinct dates to compare against."""

    if frame.empty:
        return None
    stay_dates = extract_stay_dates(frame)
    cutoff = today - timedelta(days=LAST_YEAR_DAYS)
    mask = stay_dates.map(lambda day: isinstance(day, date) and day <= cutoff).astype(bool).to_numpy()
    if stay_dates[mask].nunique() < MIN_LAST_YEAR_DATES:
        return None
    return frame[mask].reset_index(drop=True)


class DashboardDataAccess:
    def __init__(
        self,
        *,
        config: DashboardConfig,
        api_client: DashboardApiClient | None = None,
        pricing_config: PricingEngineConfig | None = None,
        today_fn: Callable[[], date] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self.api_client = api_client or DashboardApiClient(
            base_url=config.api_base_url,
            timeout_seconds=config.request_timeout_seconds,
        )
        self.today_fn = today_fn or (lambda: datetime.now(tz=UTC).date())
        self.pricing_config = pricing_config or load_pricing_engine_config()
        self.synthetic_provider = SyntheticRecommendationProvider(config=self.pricing_config, today_fn=self.today_fn)
        self.remote_provider = RemoteRecommendationProvider(api_client=self.api_client)
        self.poller = EnrichmentPoller(
            self.api_client,
            interval_seconds=config.enrichment_poll_interval_seconds,
            max_retries=config.enrichment_max_retries,
            sleep=sleep,
        )
        self.cache = _TTLCache()
        self._local_frames: dict[str, pd.DataFrame] = {}

    def invalidate(self) -> None:
        self.cache.clear()

    def _demo_frame(self) -> pd.DataFrame:
        cache_key = ("demo_frame", self.today_fn())
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cast(pd.DataFrame, cached)
        frame = demo_bookings_frame(today=self.today_fn())
        self.cache.set(cache_key, value=frame, ttl_seconds=self.config.metadata_cache_ttl_seconds)
        return frame

    def list_files(self) -> tuple[list[UploadedFile], str]:
        cache_key = ("files",)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cast(tuple[list[UploadedFile], str], cached)

        def loader() -> tuple[list[UploadedFile], str]:
            if self.config.demo_mode:
                return [demo_uploaded_file(self._demo_frame())], "demo"
            try:
                rows = self.api_client.list_files()
                return [UploadedFile.from_dict(row) for row in rows], "api"
            except ApiUnavailableError as exc:
                logger.warning("File list unavailable, showing demo file: %s", exc)
                return [demo_uploaded_file(self._demo_frame())], "demo"
            except ValueError as exc:
                logger.warning("File list request rejected: %s", exc)
                return [], "empty"

        value = loader()
        self.cache.set(cache_key, value=value, ttl_seconds=self.config.metadata_cache_ttl_seconds)
        return value

    def get_booking_rows(self, file_id: str) -> tuple[pd.DataFrame, str]:
        cache_key = ("booking_rows", file_id)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cast(tuple[pd.DataFrame, str], cached)

        def loader() -> tuple[pd.DataFrame, str]:
            if file_id in self._local_frames:
                return self._local_frames[file_id], "local"
            if self.config.demo_mode:
                return (self._demo_frame(), "demo") if file_id == DEMO_FILE_ID else (pd.DataFrame(), "empty")
            try:
                rows = self.api_client.get_all_file_rows(
                    file_id,
                    page_size=self.config.file_data_page_size,
                    max_rows=self.config.max_file_rows,
                )
                return pd.DataFrame(rows), "api"
            except ResourceNotFoundError:
                logger.warning("File %s no longer exists on the API", file_id)
                return pd.DataFrame(), "empty"
            except ApiUnavailableError as exc:
                logger.warning("File data for %s unavailable, showing demo bookings: %s", file_id, exc)
                return self._demo_frame(), "demo"
            except ValueError as exc:
                logger.warning("File data request for %s rejected: %s", file_id, exc)
                return pd.DataFrame(), "empty"

        value = loader()
        self.cache.set(cache_key, value=value, ttl_seconds=self.config.data_cache_ttl_seconds)
        return value

    def get_recommendations(
        self,
        *,
        property_id: str,
        days: int | None = None,
        strategy: str = "balanced",
        target_occupancy: float | None = None,
    ) -> tuple[RecommendationSet, str]:
        horizon = self.config.clamp_forecast_days(days)
        cache_key = ("recommendations", property_id, horizon, strategy, target_occupancy, self.today_fn())
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cast(tuple[RecommendationSet, str], cached)

        def synthetic() -> RecommendationSet:
            return self.synthetic_provider.get_recommendations(
                property_id=property_id,
                days=horizon,
                strategy=strategy,
                target_occupancy=target_occupancy,
            )

        if self.config.demo_mode:
            value = (synthetic(), "demo")
        else:
            try:
                remote = self.remote_provider.get_recommendations(
                    property_id=property_id,
                    days=horizon,
                    strategy=strategy,
                    target_occupancy=target_occupancy,
                )
                value = (remote, "api")
            except (ApiUnavailableError, ValueError) as exc:
                logger.warning("Pricing recommendations unavailable for %s, using synthetic ones: %s", property_id, exc)
                value = (synthetic(), "demo")

        self.cache.set(cache_key, value=value, ttl_seconds=self.config.data_cache_ttl_seconds)
        return value

    def get_competitor_range(self, file_id: str, *, start_date: date, end_date: date) -> tuple[list[dict[str, Any]], str]:
        cache_key = ("competitor_range", file_id, start_date, end_date)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cast(tuple[list[dict[str, Any]], str], cached)

        def loader() -> tuple[list[dict[str, Any]], str]:
            if self.config.demo_mode or file_id in self._local_frames:
                return demo_competitor_range(start_date, end_date), "demo"
            try:
                return self.api_client.get_competitor_range(file_id, start_date=start_date, end_date=end_date), "api"
            except ResourceNotFoundError:
                logger.warning("No competitor range for missing file %s", file_id)
                return [], "empty"
            except ApiUnavailableError as exc:
                logger.warning("Competitor range unavailable for %s, using demo band: %s", file_id, exc)
                return demo_competitor_range(start_date, end_date), "demo"
            except ValueError as exc:
                logger.warning("Competitor range request for %s rejected: %s", file_id, exc)
                return [], "empty"

        value = loader()
        self.cache.set(cache_key, value=value, ttl_seconds=self.config.data_cache_ttl_seconds)
        return value

    def get_competitor_prices(self, *, on_date: date | None = None) -> tuple[list[CompetitorPrice], str]:
        reference = on_date or self.today_fn()
        cache_key = ("competitor_prices", reference)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cast(tuple[list[CompetitorPrice], str], cached)

        if self.config.demo_mode:
            value = (demo_competitor_prices(today=reference), "demo")
        else:
            try:
                rows = self.api_client.get_competitor_prices(on_date=reference)
                value = ([CompetitorPrice.from_payload(row) for row in rows], "api")
            except (ApiUnavailableError, ValueError) as exc:
                logger.warning("Competitor prices unavailable, using demo prices: %s", exc)
                value = (demo_competitor_prices(today=reference), "demo")

        self.cache.set(cache_key, value=value, ttl_seconds=self.config.data_cache_ttl_seconds)
        return value

    def get_dashboard_summary(self, file_id: str | None, *, strategy: str = "balanced") -> tuple[DashboardSummary, str]:
        """Aggregate a file's bookings with recommendations and competitor medians joined by date."""

        if not file_id:
            return empty_dashboard_summary(), "empty"

        today = self.today_fn()
        cache_key = ("dashboard_summary", file_id, strategy, today)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cast(tuple[DashboardSummary, str], cached)

        frame, source = self.get_booking_rows(file_id)
        if frame.empty:
            value = (empty_dashboard_summary(), source)
            self.cache.set(cache_key, value=value, ttl_seconds=self.config.data_cache_ttl_seconds)
            return value

        forward_days = self.config.calendar_forward_days
        recommendation_set, _ = self.get_recommendations(
            property_id=file_id,
            days=forward_days,
            strategy=strategy,
        )
        range_rows, _ = self.get_competitor_range(
            file_id,
            start_date=today - timedelta(days=LAST_YEAR_DAYS),
            end_date=today + timedelta(days=forward_days),
        )

        summary = aggregate_bookings(
            frame,
            recommendations=recommendation_set.by_date(),
            competitor_prices=median_price_lookup(range_rows),
            today=today,
            forward_days=forward_days,
            last_year_rows=split_last_year_rows(frame, today=today),
        )
        value = (summary, source)
        self.cache.set(cache_key, value=value, ttl_seconds=self.config.data_cache_ttl_seconds)
        return value

    def upload_file(self, file_name: str, content: bytes) -> tuple[UploadedFile, str]:
        """Upload through the API, or parse locally in demo mode and when the API is down.

        A rejected upload raises `ValueError` for the page to report.
        """

        if not self.config.demo_mode:
            try:
                uploaded = UploadedFile.from_dict(self.api_client.upload_file(file_name, content))
                self.invalidate()
                return uploaded, "api"
            except ApiUnavailableError as exc:
                logger.warning("Upload API unavailable, parsing %s locally: %s", file_name, exc)

        uploaded, frame = process_upload(file_name, content)
        if uploaded.status == "success":
            self._local_frames[uploaded.id] = frame
        self.invalidate()
        return uploaded, "local"

    def delete_file(self, file_id: str) -> bool:
        if file_id in self._local_frames:
            del self._local_frames[file_id]
            self.invalidate()
            return True
        if self.config.demo_mode:
            return False
        try:
            self.api_client.delete_file(file_id)
        except ResourceNotFoundError:
            logger.warning("File %s was already deleted", file_id)
        except (ApiUnavailableError, ValueError) as exc:
            logger.warning("Could not delete file %s: %s", file_id, exc)
            return False
        self.invalidate()
        return True

    def enrich_file(
        self,
        uploaded: UploadedFile,
        *,
        features: list[str] | None = None,
        on_progress: Callable[[EnrichmentProgress], None] | None = None,
    ) -> tuple[UploadedFile, PollOutcome | None]:
        """Run enrichment for a file and return its updated metadata.

        Locally held files are enriched in-process. Files on the API start a job that is polled until
        a terminal status; the file is marked `failed` when polling stops without completing.
        """

        requested = list(features or ENRICHMENT_FEATURES)
        if uploaded.id in self._local_frames or self.config.demo_mode:
            frame = self._local_frames.get(uploaded.id)
            if frame is not None:
                self._local_frames[uploaded.id] = enrich_booking_frame(frame, features=tuple(requested))
            self.invalidate()
            return uploaded.with_enrichment_status("completed"), None

        try:
            job = self.api_client.start_enrichment(uploaded.id, features=requested)
        except (ApiUnavailableError, ValueError) as exc:
            logger.warning("Could not start enrichment for %s: %s", uploaded.id, exc)
            return uploaded.with_enrichment_status("failed"), None

        outcome = self.poller.poll(
            str(job.get("job_id")),
            on_progress=on_progress,
            max_polls=self.config.enrichment_max_polls,
        )
        self.invalidate()
        if outcome.succeeded:
            return uploaded.with_enrichment_status("completed"), outcome
        logger.warning("Enrichment for %s stopped: %s", uploaded.id, outcome.stopped_reason)
        return uploaded.with_enrichment_status("failed"), outcome

    def preview_rows(self, file_id: str, *, limit: int = 20) -> list[dict[str, Any]]:
        frame, _ = self.get_booking_rows(file_id)
        return frame_to_records(frame.head(limit))

    def assistant_reply(
        self,
        message: str,
        *,
        history: list[dict[str, str]],
        context: dict[str, Any],
        business_name: str | None = None,
    ) -> tuple[str, str]:
        if not self.config.demo_mode:
            try:
                reply = self.api_client.send_assistant_message(message, conversation_history=history, context=context)
                return str(reply.get("message") or ""), "api"
            except (ApiUnavailableError, ValueError) as exc:
                logger.warning("Assistant API unavailable, using demo reply: %s", exc)

        kpi = demo_kpi(self._demo_frame().to_dict(orient="records"))
        return (
            build_demo_reply(message, kpi, business_name=business_name, currency_symbol=self.config.currency_symbol),
            "demo",
        )

    def quick_suggestion(self, *, context: dict[str, Any]) -> tuple[str, str]:
        if not self.config.demo_mode:
            try:
                return self.api_client.get_quick_suggestion(context=context), "api"
            except (ApiUnavailableError, ValueError) as exc:
                logger.warning("Quick suggestion unavailable, using demo suggestion: %s", exc)
        return quick_suggestion(context, currency_symbol=self.config.currency_symbol), "demo"
