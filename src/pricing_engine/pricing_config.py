# This file defines runtime configuration for the pricing recommendation engine.
# It exists so the synthetic provider, strategy presets, and page derivations share one policy surface.
# The loader merges YAML defaults with environment overrides and validates the seasonal model.
# Keeping these settings in one place makes demo recommendations reproducible and easier to audit.

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

VALID_STRATEGIES = ("conservative", "balanced", "aggressive")
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "pricing_engine.yaml"


def _load_yaml(path: str | Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config at {path} must be a mapping, got: {type(loaded).__name__}")
    return dict(loaded)


def _env_str(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return float(value)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return int(value)


def _as_int_tuple(value: Any, field_name: str) -> tuple[int, ...]:
    if not isinstance(value, list):
        raise ValueError(f"{field_name} must be a list of integers")
    return tuple(int(item) for item in value)


def _as_float_mapping(value: Any, field_name: str) -> dict[str, float]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{field_name} must be a mapping of string->float")
    return {str(key): float(raw) for key, raw in value.items()}


@dataclass(frozen=True)
class StrategyPreset:
    key: str
    name: str
    description: str
    demand_sensitivity: float
    price_aggression: float
    occupancy_target: int


@dataclass(frozen=True)
class PricingEngineConfig:
    model_name: str
    base_price: float
    total_units: int
    forecast_days: int
    random_seed: int
    table_capacity: int

    peak_months: tuple[int, ...]
    peak_multiplier: float
    peak_base_occupancy: int
    spring_shoulder_months: tuple[int, ...]
    spring_shoulder_multiplier: float
    autumn_shoulder_months: tuple[int, ...]
    autumn_shoulder_multiplier: float
    spring_shoulder_base_occupancy: int
    autumn_shoulder_base_occupancy: int
    low_multiplier: float
    low_base_occupancy: int

    weekend_weekdays: tuple[int, ...]
    weekend_multiplier: float
    weekend_occupancy_boost: int

    min_predicted_occupancy: int
    max_predicted_occupancy: int

    confidence_weights: dict[str, float]
    strategies: dict[str, StrategyPreset]

    def seasonal_multiplier(self, month: int) -> float:
        if month in self.peak_months:
            return self.peak_multiplier
        if month in self.spring_shoulder_months:
            return self.spring_shoulder_multiplier
        if month in self.autumn_shoulder_months:
            return self.autumn_shoulder_multiplier
        return self.low_multiplier

    def season_label(self, month: int) -> str:
        if month in self.peak_months:
            return "peak"
        if month in self.spring_shoulder_months or month in self.autumn_shoulder_months:
            return "shoulder"
        return "low"

    def base_occupancy(self, month: int) -> int:
        if month in self.peak_months:
            return self.peak_base_occupancy
        if month in self.spring_shoulder_months:
            return self.spring_shoulder_base_occupancy
        if month in self.autumn_shoulder_months:
            return self.autumn_shoulder_base_occupancy
        return self.low_base_occupancy

    def is_weekend(self, weekday: int) -> bool:
        return weekday in self.weekend_weekdays

    def strategy(self, key: str) -> StrategyPreset:
        if key not in self.strategies:
            raise ValueError(f"strategy must be one of {sorted(self.strategies)}, got {key!r}")
        return self.strategies[key]

    def to_dict(self) -> dict[str, Any]:
        return {
            "model_name": self.model_name,
            "base_price": self.base_price,
            "total_units": self.total_units,
            "forecast_days": self.forecast_days,
            "random_seed": self.random_seed,
            "table_capacity": self.table_capacity,
            "peak_months": list(self.peak_months),
            "peak_multiplier": self.peak_multiplier,
            "spring_shoulder_months": list(self.spring_shoulder_months),
            "spring_shoulder_multiplier": self.spring_shoulder_multiplier,
            "autumn_shoulder_months": list(self.autumn_shoulder_months),
            "autumn_shoulder_multiplier": self.autumn_shoulder_multiplier,
            "low_multiplier": self.low_multiplier,
            "weekend_weekdays": list(self.weekend_weekdays),
            "weekend_multiplier": self.weekend_multiplier,
            "confidence_weights": dict(self.confidence_weights),
            "strategies": sorted(self.strategies),
        }


def _load_strategies(raw: Any) -> dict[str, StrategyPreset]:
    if not isinstance(raw, dict):
        raise ValueError("strategies must be a mapping keyed by strategy name")
    strategies: dict[str, StrategyPreset] = {}
    for key, values in raw.items():
        values = dict(values or {})
        strategies[str(key)] = StrategyPreset(
            key=str(key),
            name=str(values.get("name", str(key).title())),
            description=str(values.get("description", "")),
            demand_sensitivity=float(values["demand_sensitivity"]),
            price_aggression=float(values["price_aggression"]),
            occupancy_target=int(values["occupancy_target"]),
        )
    return strategies


def load_pricing_engine_config(*, config_path: str | Path | None = None) -> PricingEngineConfig:
    resolved_path = config_path or _env_str("PRICING_CONFIG_PATH") or DEFAULT_CONFIG_PATH
    cfg = _load_yaml(resolved_path)
    seasons = dict(cfg.get("seasons", {}))
    peak_cfg = dict(seasons.get("peak", {}))
    spring_cfg = dict(seasons.get("spring_shoulder", {}))
    autumn_cfg = dict(seasons.get("autumn_shoulder", {}))
    low_cfg = dict(seasons.get("low", {}))
    weekend_cfg = dict(cfg.get("weekend", {}))
    bounds_cfg = dict(cfg.get("occupancy_bounds", {}))

    model_name = str(_env_str("PRICING_MODEL_NAME", str(cfg.get("model_name", "synthetic-seasonal-v1"))))
    base_price = _env_float("PRICING_BASE_PRICE", float(cfg.get("base_price", 95)))
    total_units = _env_int("PRICING_TOTAL_UNITS", int(cfg.get("total_units", 85)))
    forecast_days = _env_int("PRICING_FORECAST_DAYS", int(cfg.get("forecast_days", 30)))
    random_seed = _env_int("PRICING_RANDOM_SEED", int(cfg.get("random_seed", 42)))
    table_capacity = _env_int("PRICING_TABLE_CAPACITY", int(cfg.get("table_capacity", 100)))

    peak_months = _as_int_tuple(peak_cfg.get("months", [6, 7, 8]), "seasons.peak.months")
    spring_months = _as_int_tuple(spring_cfg.get("months", [4, 5]), "seasons.spring_shoulder.months")
    autumn_months = _as_int_tuple(autumn_cfg.get("months", [9, 10]), "seasons.autumn_shoulder.months")
    weekend_weekdays = _as_int_tuple(weekend_cfg.get("weekdays", [4, 5, 6]), "weekend.weekdays")

    confidence_weights = _as_float_mapping(cfg.get("confidence_weights"), "confidence_weights")
    strategies = _load_strategies(cfg.get("strategies", {}))

    min_occupancy = int(bounds_cfg.get("min", 20))
    max_occupancy = int(bounds_cfg.get("max", 98))

    if base_price <= 0:
        raise ValueError("base_price must be > 0")
    if total_units <= 0 or table_capacity <= 0:
        raise ValueError("total_units and table_capacity must be > 0")
    if forecast_days <= 0:
        raise ValueError("forecast_days must be > 0")
    for month in (*peak_months, *spring_months, *autumn_months):
        if not 1 <= month <= 12:
            raise ValueError(f"season months must be in 1..12, got {month}")
    if set(peak_months) & (set(spring_months) | set(autumn_months)) or set(spring_months) & set(autumn_months):
        raise ValueError("season month lists must not overlap")
    for weekday in weekend_weekdays:
        if not 0 <= weekday <= 6:
            raise ValueError(f"weekend weekdays must be in 0..6, got {weekday}")
    if not 0 <= min_occupancy <= max_occupancy <= 100:
        raise ValueError("occupancy_bounds must satisfy 0 <= min <= max <= 100")
    if set(confidence_weights) != {"very_high", "high", "medium", "low"}:
        raise ValueError("confidence_weights must define very_high, high, medium and low")
    if any(weight < 0 for weight in confidence_weights.values()) or sum(confidence_weights.values()) <= 0:
        raise ValueError("confidence_weights must be nonnegative with a positive total")
    missing_strategies = [key for key in VALID_STRATEGIES if key not in strategies]
    if missing_strategies:
        raise ValueError(f"strategies missing presets: {missing_strategies}")

    return PricingEngineConfig(
        model_name=model_name,
        base_price=base_price,
        total_units=total_units,
        forecast_days=forecast_days,
        random_seed=random_seed,
        table_capacity=table_capacity,
        peak_months=peak_months,
        peak_multiplier=float(peak_cfg.get("multiplier", 1.8)),
        peak_base_occupancy=int(peak_cfg.get("base_occupancy", 85)),
        spring_shoulder_months=spring_months,
        spring_shoulder_multiplier=float(spring_cfg.get("multiplier", 1.3)),
        autumn_shoulder_months=autumn_months,
        autumn_shoulder_multiplier=float(autumn_cfg.get("multiplier", 1.2)),
        spring_shoulder_base_occupancy=int(spring_cfg.get("base_occupancy", 65)),
        autumn_shoulder_base_occupancy=int(autumn_cfg.get("base_occupancy", 65)),
        low_multiplier=float(low_cfg.get("multiplier", 0.7)),
        low_base_occupancy=int(low_cfg.get("base_occupancy", 35)),
        weekend_weekdays=weekend_weekdays,
        weekend_multiplier=float(weekend_cfg.get("multiplier", 1.15)),
        weekend_occupancy_boost=int(weekend_cfg.get("occupancy_boost", 10)),
        min_predicted_occupancy=min_occupancy,
        max_predicted_occupancy=max_occupancy,
        confidence_weights=confidence_weights,
        strategies=strategies,
    )
