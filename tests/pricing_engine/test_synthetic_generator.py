"""
Unit tests for the seeded synthetic recommendation generator and its YAML-backed configuration.
Seeded runs must be reproducible and stay inside the seasonal price and occupancy bands.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from src.pricing_engine.pricing_config import load_pricing_engine_config
from src.pricing_engine.recommendation import CONFIDENCE_LEVELS
from src.pricing_engine.synthetic_generator import generate_synthetic_recommendations


@pytest.fixture
def config():
    return load_pricing_engine_config()


def test_same_seed_and_date_reproduce_recommendations(config) -> None:
    first = generate_synthetic_recommendations(config=config, days=14, today=date(2024, 7, 1), seed=11)
    second = generate_synthetic_recommendations(config=config, days=14, today=date(2024, 7, 1), seed=11)
    other = generate_synthetic_recommendations(config=config, days=14, today=date(2024, 7, 1), seed=12)

    assert first == second
    assert first != other


def test_dates_cover_offsets_one_to_n(config) -> None:
    recommendations = generate_synthetic_recommendations(config=config, days=3, today=date(2024, 12, 30), seed=1)

    assert [item.date for item in recommendations] == ["2024-12-31", "2025-01-01", "2025-01-02"]


def test_peak_prices_stay_within_seasonal_band(config) -> None:
    recommendations = generate_synthetic_recommendations(config=config, days=20, today=date(2024, 7, 1), seed=3)

    for item in recommendations:
        weekday = date.fromisoformat(item.date).weekday()
        weekend = 1.15 if weekday in (4, 5, 6) else 1.0
        assert 162 <= item.current_price <= 180
        assert round(95 * 1.8 * weekend) - 1 <= item.recommended_price <= round(95 * 1.8 * weekend * 1.1) + 1
        assert item.price_change == item.recommended_price - item.current_price
        assert 20 <= item.predicted_occupancy <= 98
        assert item.confidence in CONFIDENCE_LEVELS
        assert item.reasoning_primary == "Peak season pricing strategy"


def test_low_season_uses_low_multiplier(config) -> None:
    recommendations = generate_synthetic_recommendations(config=config, days=10, today=date(2024, 1, 8), seed=5)

    assert all(63 <= item.current_price <= 70 for item in recommendations)
    assert all(item.reasoning_primary == "Low season pricing strategy" for item in recommendations)


def test_zero_days_yields_nothing_and_negative_days_raise(config) -> None:
    assert generate_synthetic_recommendations(config=config, days=0, today=date(2024, 7, 1)) == []
    with pytest.raises(ValueError):
        generate_synthetic_recommendations(config=config, days=-1, today=date(2024, 7, 1))


def test_config_reads_yaml_and_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRICING_BASE_PRICE", "120")
    config = load_pricing_engine_config()

    assert config.base_price == 120.0
    assert config.peak_months == (6, 7, 8)
    assert config.seasonal_multiplier(5) == 1.3
    assert config.seasonal_multiplier(9) == 1.2
    assert config.seasonal_multiplier(2) == 0.7
    assert config.is_weekend(4) and not config.is_weekend(3)
    assert config.strategy("aggressive").name == "Aggressive"
    with pytest.raises(ValueError):
        config.strategy("reckless")


def test_config_rejects_overlapping_seasons(tmp_path: Path) -> None:
    path = tmp_path / "pricing.yaml"
    path.write_text(
        "\n".join(
            [
                "seasons:",
                "  peak: {months: [6, 7, 8]}",
                "  spring_shoulder: {months: [5, 6]}",
                "confidence_weights: {very_high: 1, high: 1, medium: 1, low: 1}",
                "strategies:",
                "  conservative: {demand_sensitivity: 0.3, price_aggression: 0.4, occupancy_target: 85}",
                "  balanced: {demand_sensitivity: 0.6, price_aggression: 0.7, occupancy_target: 75}",
                "  aggressive: {demand_sensitivity: 0.9, price_aggression: 1.0, occupancy_target: 65}",
            ]
        ),
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="must not overlap"):
        load_pricing_engine_config(config_path=path)


def test_each_shoulder_season_reads_its_own_base_occupancy(tmp_path: Path) -> None:
    path = tmp_path / "pricing.yaml"
    path.write_text(
        "\n".join(
            [
                "seasons:",
                "  peak: {months: [6, 7, 8], base_occupancy: 85}",
                "  spring_shoulder: {months: [4, 5], base_occupancy: 70}",
                "  autumn_shoulder: {months: [9, 10], base_occupancy: 55}",
                "  low: {base_occupancy: 35}",
                "confidence_weights: {very_high: 1, high: 1, medium: 1, low: 1}",
                "strategies:",
                "  conservative: {demand_sensitivity: 0.3, price_aggression: 0.4, occupancy_target: 85}",
                "  balanced: {demand_sensitivity: 0.6, price_aggression: 0.7, occupancy_target: 75}",
                "  aggressive: {demand_sensitivity: 0.9, price_aggression: 1.0, occupancy_target: 65}",
            ]
        ),
        encoding="utf-8",
    )

    config = load_pricing_engine_config(config_path=path)

    assert config.base_occupancy(7) == 85
    assert config.base_occupancy(5) == 70
    assert config.base_occupancy(10) == 55
    assert config.base_occupancy(1) == 35
