# This file generates the seeded demo dataset for the fictional campsite "Camp Azur Étoiles".
# It exists so the demo API and dashboard fallback share one reproducible booking history.
# Bookings cover one year of days for six accommodation types with Mediterranean seasonality and weather.
# Competitor catalogs and competitor price ranges are generated from the same seeded approach.

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Any

import numpy as np
import pandas as pd

from src.analytics.enrichment_features import (
    FRENCH_PUBLIC_HOLIDAYS,
    MONTHLY_BASE_TEMPERATURE_C,
    MONTHLY_RAIN_PROBABILITY,
    season_for_date,
)
from src.analytics.rounding import round_half_up, round_int
from src.ingestion.uploads import UploadedFile, preview_records
from src.pricing_engine.competitor_analysis import CompetitorPrice

DEMO_SEED = 2024
DEMO_HISTORY_DAYS = 365
DEMO_FILE_ID = "demo-file-001"
DEMO_FILE_NAME = "camp_azur_bookings.csv"

DEMO_BUSINESS: dict[str, Any] = {
    "id": "demo-business-001",
    "business_name": "Camp Azur Étoiles",
    "city": "Bandol",
    "country": "France",
    "latitude": 43.1367,
    "longitude": 5.7533,
    "timezone": "Europe/Paris",
    "currency": "EUR",
    "property_type": "campsite",
    "total_units": 85,
}

ACCOMMODATION_BASE_PRICES: dict[str, dict[str, float]] = {
    "Tent Pitch": {"low": 18, "shoulder": 28, "high": 45},
    "Caravan Pitch": {"low": 22, "shoulder": 35, "high": 55},
    "Mobile Home Classic": {"low": 55, "shoulder": 85, "high": 145},
    "Mobile Home Premium": {"low": 75, "shoulder": 115, "high": 195},
    "Glamping Pod": {"low": 85, "shoulder": 125, "high": 185},
    "Safari Tent": {"low": 95, "shoulder": 145, "high": 225},
}

BASE_OCCUPANCY_BY_SEASON = {"low": 35, "shoulder": 65, "high": 92}
HOLIDAY_PRICE_PREMIUM = 1.25
PRICED_HOLIDAYS = {(7, 14), (8, 15), (5, 1), (5, 8)}

DEMO_COMPETITORS: list[dict[str, Any]] = [
    {"id": "comp-1", "name": "Camping du Soleil Levant", "location": "Sanary-sur-Mer", "distance_km": 8, "rating": 4.2, "total_units": 120},
    {"id": "comp-2", "name": "Domaine des Oliviers", "location": "La Cadière-d'Azur", "distance_km": 12, "rating": 4.5, "total_units": 95},
    {"id": "comp-3", "name": "Les Terrasses de Provence", "location": "Le Castellet", "distance_km": 15, "rating": 4.0, "total_units": 75},
    {"id": "comp-4", "name": "Camping Mer et Vignes", "location": "Bandol", "distance_km": 3, "rating": 3.8, "total_units": 60},
]

COMPETITOR_SEASON_FACTORS = {"low": 0.75, "shoulder": 1.15, "high": 1.6}
COMPETITOR_BASE_PRICE = 95.0


@dataclass(frozen=True)
class DemoKpi:
    avg_price: float
    avg_occupancy: int
    occupancy_change: float
    revenue_change: float
    total_records: int


def _today() -> date:
    return datetime.now(tz=UTC).date()


def generate_demo_bookings(
    *,
    today: date | None = None,
    days: int = DEMO_HISTORY_DAYS,
    seed: int = DEMO_SEED,
) -> list[dict[str, Any]]:
    """Generate `days + 1` dates ending today, one row per accommodation type per date."""

    reference = today or _today()
    rng = np.random.default_rng(seed)
    units_per_type = DEMO_BUSINESS["total_units"] // len(ACCOMMODATION_BASE_PRICES)
    rows: list[dict[str, Any]] = []

    for offset in range(days, -1, -1):
        day = reference - timedelta(days=offset)
        season = season_for_date(day)
        is_weekend = day.weekday() in (4, 5, 6)
        month_index = day.month - 1
        temperature = MONTHLY_BASE_TEMPERATURE_C[month_index] + (rng.random() * 6 - 3)
        is_rainy = bool(rng.random() < MONTHLY_RAIN_PROBABILITY[month_index])
        holiday_name = FRENCH_PUBLIC_HOLIDAYS.get((day.month, day.day))

        for accommodation_type, prices in ACCOMMODATION_BASE_PRICES.items():
            base_price = prices[season]
            price = float(base_price)
            if is_weekend and season != "low":
                price *= 1.15
            if is_rainy:
                price *= 0.92
            price *= 0.95 + rng.random() * 0.1
            if (day.month, day.day) in PRICED_HOLIDAYS:
                price *= HOLIDAY_PRICE_PREMIUM

            base_occupancy = BASE_OCCUPANCY_BY_SEASON[season]
            if is_weekend:
                base_occupancy += 10
            if is_rainy:
                base_occupancy -= 15
            occupancy = min(100.0, max(10.0, base_occupancy + (rng.random() * 20 - 10)))
            occupied_units = round_int(occupancy / 100 * units_per_type)

            rows.append(
                {
                    "id": f"{day.isoformat()}-{accommodation_type.replace(' ', '-').lower()}",
                    "date": day.isoformat(),
                    "accommodation_type": accommodation_type,
                    "base_price": base_price,
                    "price": round_half_up(price, 2),
                    "occupancy": round_int(occupancy),
                    "revenue": round_half_up(occupied_units * price, 2),
                    "temperature": round_half_up(temperature, 1),
                    "weather_condition": "Rainy" if is_rainy else "Sunny" if temperature > 25 else "Partly Cloudy",
                    "is_holiday": holiday_name is not None,
                    "holiday_name": holiday_name,
                    "season": season,
                    "is_weekend": is_weekend,
                    "bookings_count": occupied_units,
                    "cancellations": int(rng.integers(0, 3)),
                }
            )
    return rows


def demo_bookings_frame(*, today: date | None = None, seed: int = DEMO_SEED) -> pd.DataFrame:
    return pd.DataFrame(generate_demo_bookings(today=today, seed=seed))


def demo_uploaded_file(frame: pd.DataFrame, *, uploaded_at: datetime | None = None) -> UploadedFile:
    """Describe the seeded dataset as an already uploaded and enriched file."""

    return UploadedFile(
        id=DEMO_FILE_ID,
        name=DEMO_FILE_NAME,
        size=int(len(frame.to_csv(index=False).encode("utf-8"))),
        uploaded_at=uploaded_at or datetime.now(tz=UTC),
        rows=int(len(frame)),
        columns=int(len(frame.columns)),
        status="success",
        preview=preview_records(frame),
        enrichment_status="completed",
    )


def demo_kpi(rows: list[dict[str, Any]], *, window_days: int = 30) -> DemoKpi:
    """Summarize the latest window against the window before it."""

    per_day = len(ACCOMMODATION_BASE_PRICES)
    recent = rows[-window_days * per_day :]
    previous = rows[-2 * window_days * per_day : -window_days * per_day]
    if not recent:
        return DemoKpi(avg_price=0.0, avg_occupancy=0, occupancy_change=0.0, revenue_change=0.0, total_records=0)

    avg_price = sum(row["price"] for row in recent) / len(recent)
    avg_occupancy = sum(row["occupancy"] for row in recent) / len(recent)
    recent_revenue = sum(row["revenue"] for row in recent)
    if previous:
        previous_occupancy = sum(row["occupancy"] for row in previous) / len(previous)
        previous_revenue = sum(row["revenue"] for row in previous)
        occupancy_change = avg_occupancy - previous_occupancy
        revenue_change = (recent_revenue - previous_revenue) / previous_revenue * 100 if previous_revenue else 0.0
    else:
        occupancy_change = 0.0
        revenue_change = 0.0

    return DemoKpi(
        avg_price=round_half_up(avg_price, 2),
        avg_occupancy=round_int(avg_occupancy),
        occupancy_change=round_half_up(occupancy_change, 1),
        revenue_change=round_half_up(revenue_change, 1),
        total_records=len(rows),
    )


def demo_competitor_prices(*, today: date | None = None, seed: int = DEMO_SEED) -> list[CompetitorPrice]:
    """Current competitor prices in the 85-145 EUR band."""

    reference = today or _today()
    rng = np.random.default_rng(seed + reference.toordinal())
    return [
        CompetitorPrice(
            competitor_name=competitor["name"],
            price=float(round_int(85 + rng.random() * 60)),
            currency="EUR",
            date=reference.isoformat(),
            room_type="Standard Pitch",
        )
        for competitor in DEMO_COMPETITORS
    ]


def demo_competitor_range(start: date, end: date, *, seed: int = DEMO_SEED) -> list[dict[str, Any]]:
    """Seeded p10/p50/p90 competitor price band per date, inclusive of both ends."""

    rows: list[dict[str, Any]] = []
    day = start
    while day <= end:
        rng = np.random.default_rng(seed + day.toordinal())
        factor = COMPETITOR_SEASON_FACTORS[season_for_date(day)]
        median = COMPETITOR_BASE_PRICE * factor * (1 + (rng.random() * 0.3 - 0.15))
        rows.append(
            {
                "date": day.isoformat(),
                "price_p10": round_half_up(median * 0.8, 2),
                "price_p50": round_half_up(median, 2),
                "price_p90": round_half_up(median * 1.25, 2),
                "competitor_count": len(DEMO_COMPETITORS),
            }
        )
        day += timedelta(days=1)
    return rows
