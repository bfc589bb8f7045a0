# This file serves competitor prices and price bands for the `/competitor-data` endpoints.
# It exists so the dashboard can overlay market prices without any live scraping.
# Prices come from the seeded demo generators, so identical requests return identical bands.

from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Any

from src.api.error_handlers import APIError
from src.api.services.file_service import FileStore
from src.demo.mock_data import DEMO_COMPETITORS, demo_competitor_prices, demo_competitor_range

MAX_RANGE_DAYS = 400


class CompetitorService:
    def __init__(self, *, files: FileStore, seed: int) -> None:
        self.files = files
        self.seed = seed

    def price_range(self, *, file_id: str, start_date: date, end_date: date) -> list[dict[str, Any]]:
        self.files.get_file(file_id)
        if start_date > end_date:
            raise APIError(
                status_code=400,
                error_code="INVALID_DATE_RANGE",
                message="start_date must be less than or equal to end_date.",
            )
        if (end_date - start_date).days > MAX_RANGE_DAYS:
            raise APIError(
                status_code=400,
                error_code="INVALID_DATE_RANGE",
                message=f"Date ranges are limited to {MAX_RANGE_DAYS} days.",
            )
        return demo_competitor_range(start_date, end_date, seed=self.seed)

    def current_prices(self, *, today: date | None = None) -> list[dict[str, Any]]:
        return [asdict(item) for item in demo_competitor_prices(today=today, seed=self.seed)]

    def catalog(self) -> list[dict[str, Any]]:
        return [dict(item) for item in DEMO_COMPETITORS]
