"""
Persisted dashboard UI state.
Language, navigation flags, business profile, the uploaded-file list, and the active file are stored
as one JSON document. The document is read once per session into an immutable `UiPreferences`
object that pages receive; every save replaces the whole document, so the last write wins.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any

from src.demo.mock_data import DEMO_BUSINESS
from src.ingestion.uploads import UploadedFile

logger = logging.getLogger(__name__)

STATE_VERSION = 1


@dataclass(frozen=True)
class NavigationFlags:
    show_pricing_engine: bool = True
    show_competitors: bool = True
    show_assistant: bool = True

    @classmethod
    def from_dict(cls, payload: dict[str, Any] | None) -> NavigationFlags:
        payload = payload or {}
        return cls(**{key: bool(payload[key]) for key in cls.__dataclass_fields__ if key in payload})


@dataclass(frozen=True)
class BusinessProfile:
    business_name: str = DEMO_BUSINESS["business_name"]
    property_type: str = DEMO_BUSINESS["property_type"]
    city: str = DEMO_BUSINESS["city"]
    country: str = DEMO_BUSINESS["country"]
    latitude: float = DEMO_BUSINESS["latitude"]
    longitude: float = DEMO_BUSINESS["longitude"]
    currency: str = DEMO_BUSINESS["currency"]
    timezone: str = DEMO_BUSINESS["timezone"]
    total_units: int = DEMO_BUSINESS["total_units"]

    @property
    def location(self) -> str:
        return f"{self.city}, {self.country}"

    @classmethod
    def from_dict(cls, payload: dict[str, Any] | None) -> BusinessProfile:
        payload = payload or {}
        known = {key: payload[key] for key in cls.__dataclass_fields__ if payload.get(key) is not None}
        return cls(**known)


@dataclass(frozen=True)
class UiPreferences:
    language: str = "en"
    navigation: NavigationFlags = field(default_factory=NavigationFlags)
    business: BusinessProfile = field(default_factory=BusinessProfile)
    uploaded_files: tuple[UploadedFile, ...] = ()
    active_file_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": STATE_VERSION,
            "language": self.language,
            "navigation": asdict(self.navigation),
            "business": asdict(self.business),
            "uploaded_files": [item.to_dict() for item in self.uploaded_files],
            "active_file_id": self.active_file_id,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any], *, default_language: str = "en") -> UiPreferences:
        files = tuple(
            UploadedFile.from_dict(item)
            for item in payload.get("uploaded_files") or []
            if isinstance(item, dict) and item.get("id") and item.get("name")
        )
        return cls(
            language=str(payload.get("language") or default_language),
            navigation=NavigationFlags.from_dict(payload.get("navigation")),
            business=BusinessProfile.from_dict(payload.get("business")),
            uploaded_files=files,
            active_file_id=payload.get("active_file_id"),
        )

    def with_file(self, uploaded: UploadedFile) -> UiPreferences:
        others = tuple(item for item in self.uploaded_files if item.id != uploaded.id)
        return replace(self, uploaded_files=(uploaded, *others))

    def without_file(self, file_id: str) -> UiPreferences:
        remaining = tuple(item for item in self.uploaded_files if item.id != file_id)
        active = None if self.active_file_id == file_id else self.active_file_id
        return replace(self, uploaded_files=remaining, active_file_id=active)


class UiStateStore:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self, *, default_language: str = "en") -> UiPreferences:
        if not self.path.exists():
            return UiPreferences(language=default_language)
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable UI state at %s: %s", self.path, exc)
            return UiPreferences(language=default_language)
        if not isinstance(payload, dict):
            logger.warning("Ignoring UI state at %s with unexpected shape", self.path)
            return UiPreferences(language=default_language)
        return UiPreferences.from_dict(payload, default_language=default_language)

    def save(self, preferences: UiPreferences) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_name(f"{self.path.name}.tmp")
        temp_path.write_text(json.dumps(preferences.to_dict(), indent=2, default=str), encoding="utf-8")
        temp_path.replace(self.path)

    def update(self, preferences: UiPreferences, **changes: Any) -> UiPreferences:
        updated = replace(preferences, **changes)
        self.save(updated)
        return updated
