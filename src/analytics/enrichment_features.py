"""
Enrichment feature derivation for uploaded booking rows.
Adds temporal, French public holiday, and seeded Mediterranean weather columns keyed on each row's stay date.
Weather values are seeded per date so re-running enrichment on the same file yields identical columns.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from typing import Any

import numpy as np
import pandas as pd

from src.analytics.rounding import round_half_up
from src.common.schema_map import extract_stay_dates

logger = logging.getLogger(__name__)

ENRICHMENT_FEATURES = ("weather", "holidays", "temporal")

FEATURE_FIELDS: dict[str, tuple[str, ...]] = {
    "weather": ("temperature", "precipitation", "sunshine_hours", "weather_condition"),
    "holidays": ("is_holiday", "holiday_name", "is_school_break"),
    "temporal": ("day_of_week", "month", "season", "is_weekend"),
}

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

FRENCH_PUBLIC_HOLIDAYS: dict[tuple[int, int], str] = {
    (1, 1): "Jour de l'An",
    (5, 1): "Fête du Travail",
    (5, 8): "Victoire 1945",
    (7, 14): "Fête Nationale",
    (8, 15): "Assomption",
    (11, 1): "Toussaint",
    (11, 11): "Armistice 1918",
    (12, 25): "Noël",
}

MONTHLY_BASE_TEMPERATURE_C = (10, 11, 14, 17, 21, 25, 28, 28, 24, 19, 14, 11)
MONTHLY_RAIN_PROBABILITY = (0.3, 0.25, 0.2, 0.15, 0.1, 0.05, 0.02, 0.03, 0.1, 0.2, 0.25, 0.3)
MONTHLY_SUNSHINE_HOURS = (5, 6, 7, 8, 10, 11, 12, 11, 9, 7, 5, 4)


def season_for_date(day: date) -> str:
    """High season runs 15 June to 31 August; April to mid-June and September to October are shoulder."""

    if day.month in (7, 8) or (day.month == 6 and day.day >= 15):
        return "high"
    if 4 <= day.month <= 6 or 9 <= day.month <= 10:
        return "shoulder"
    return "low"


def temporal_features(day: date) -> dict[str, Any]:
    return {
        "day_of_week": DAY_NAMES[day.weekday()],
        "month": day.month,
        "season": season_for_date(day),
        "is_weekend": day.weekday() >= 5,
    }


def holiday_features(day: date) -> dict[str, Any]:
    holiday_name = FRENCH_PUBLIC_HOLIDAYS.get((day.month, day.day))
    is_school_break = day.month in (7, 8) or (day.month == 12 and day.day >= 20) or (
        day.month == 1 and day.day <= 3
    )
    return {
        "is_holiday": holiday_name is not None,
        "holiday_name": holiday_name,
        "is_school_break": is_school_break,
    }


def weather_features(day: date, *, seed: int = 7) -> dict[str, Any]:
    rng = np.random.default_rng(seed + day.toordinal())
    month_index = day.month - 1
    temperature = MONTHLY_BASE_TEMPERATURE_C[month_index] + (rng.random() * 6 - 3)
    is_rainy = bool(rng.random() < MONTHLY_RAIN_PROBABILITY[month_index])
    precipitation = 2 + rng.random() * 13 if is_rainy else 0.0
    sunshine = MONTHLY_SUNSHINE_HOURS[month_index] * (0.4 if is_rainy else 0.9 + rng.random() * 0.2)

    if is_rainy:
        condition = "Rainy"
    elif temperature > 25:
        condition = "Sunny"
    else:
        condition = "Partly Cloudy"

    return {
        "temperature": round_half_up(temperature, 1),
        "precipitation": round_half_up(precipitation, 1),
        "sunshine_hours": round_half_up(sunshine, 1),
        "weather_condition": condition,
    }


def derive_features(day: date, feature: str, *, seed: int = 7) -> dict[str, Any]:
    if feature == "weather":
        return weather_features(day, seed=seed)
    if feature == "holidays":
        return holiday_features(day)
    if feature == "temporal":
        return temporal_features(day)
    raise ValueError(f"Unknown enrichment feature {feature!r}; expected one of {ENRICHMENT_FEATURES}")


def enrich_booking_frame(
    df: pd.DataFrame,
    *,
    features: Iterable[str] = ENRICHMENT_FEATURES,
    seed: int = 7,
) -> pd.DataFrame:
    """Return a copy of `df` with the requested feature columns added.

    Rows without a parseable stay date receive null feature values.
    """

    requested = list(features)
    unknown = [feature for feature in requested if feature not in FEATURE_FIELDS]
    if unknown:
        raise ValueError(f"Unknown enrichment features: {unknown}")

    enriched = df.copy().reset_index(drop=True)
    if enriched.empty:
        for feature in requested:
            for column in FEATURE_FIELDS[feature]:
                enriched[column] = pd.Series(dtype="object")
        return enriched

    stay_dates = extract_stay_dates(enriched)
    unique_dates = {day for day in stay_dates if day is not None}

    for feature in requested:
        by_date = {day: derive_features(day, feature, seed=seed) for day in unique_dates}
        for column in FEATURE_FIELDS[feature]:
            enriched[column] = stay_dates.map(
                lambda day, column=column: by_date[day][column] if day is not None else None
            )

    logger.info(
        "Enriched %d rows across %d dates with features %s",
        len(enriched),
        len(unique_dates),
        ",".join(requested),
    )
    return enriched
