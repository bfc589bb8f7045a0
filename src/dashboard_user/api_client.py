# This file implements the API-first data client used by the Streamlit dashboard.
# It exists so dashboard pages can call the backend endpoints without embedding request details everywhere.
# The client unwraps response envelopes and converts transport failures into one clear exception type.
# Keeping API calls here makes the demo fallback logic in data_access.py much cleaner.

from __future__ import annotations

from datetime import date
from typing import Any

import requests


class ApiUnavailableError(RuntimeError):
    """Raised when the API cannot be reached or responds with server errors."""


class ResourceNotFoundError(ValueError):
    """Raised when the API answers 404 for a file, job, or endpoint."""


class DashboardApiClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int = 8,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def list_files(self) -> list[dict[str, Any]]:
        payload = self._request_json("GET", "/files")
        return list(payload.get("data") or [])

    def get_file(self, file_id: str) -> dict[str, Any]:
        return self._data_object(self._request_json("GET", f"/files/{file_id}"))

    def get_file_data(
        self, file_id: str, *, limit: int, offset: int = 0
    ) -> tuple[list[dict[str, Any]], dict[str, Any]]:
        payload = self._request_json(
            "GET",
            f"/files/{file_id}/data",
            params={"limit": limit, "offset": offset},
        )
        return list(payload.get("data") or []), dict(payload.get("pagination") or {})

    def get_all_file_rows(self, file_id: str, *, page_size: int, max_rows: int) -> list[dict[str, Any]]:
        """Page through `/files/{id}/data` until `has_more` is false or `max_rows` is reached."""

        rows: list[dict[str, Any]] = []
        offset = 0
        while len(rows) < max_rows:
            page, pagination = self.get_file_data(
                file_id, limit=min(page_size, max_rows - len(rows)), offset=offset
            )
            rows.extend(page)
            if not page or not pagination.get("has_more"):
                break
            offset += len(page)
        return rows

    def upload_file(self, file_name: str, content: bytes) -> dict[str, Any]:
        payload = self._request_json(
            "POST",
            "/files/upload",
            files={"file": (file_name, content)},
        )
        return self._data_object(payload)

    def delete_file(self, file_id: str) -> None:
        self._request_json("DELETE", f"/files/{file_id}")

    def enrich_file(self, file_id: str, *, features: list[str] | None = None) -> dict[str, Any]:
        body = {"features": features} if features else {}
        return self._data_object(self._request_json("POST", f"/files/{file_id}/enrich", json_body=body))

    def start_enrichment(self, data_id: str, *, features: list[str]) -> dict[str, Any]:
        payload = self._request_json(
            "POST",
            "/enrichment/start",
            json_body={"data_id": data_id, "features": features},
        )
        return self._data_object(payload)

    def get_enrichment_status(self, job_id: str) -> dict[str, Any]:
        return self._data_object(self._request_json("GET", f"/enrichment/status/{job_id}"))

    def cancel_enrichment(self, job_id: str) -> dict[str, Any]:
        return self._data_object(self._request_json("POST", f"/enrichment/cancel/{job_id}"))

    def get_pricing_recommendations(
        self,
        *,
        property_id: str,
        days: int,
        strategy: str,
        target_occupancy: float | None,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"property_id": property_id, "days": days, "strategy": strategy}
        if target_occupancy is not None:
            params["target_occupancy"] = target_occupancy
        payload = self._request_json("GET", "/analytics/pricing-recommendations", params=params)
        return self._data_object(payload)

    def get_competitor_range(self, file_id: str, *, start_date: date, end_date: date) -> list[dict[str, Any]]:
        payload = self._request_json(
            "GET",
            f"/competitor-data/{file_id}/range",
            params={"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
        )
        return list(payload.get("data") or [])

    def get_competitor_prices(self, *, on_date: date | None = None) -> list[dict[str, Any]]:
        params = {"date": on_date.isoformat()} if on_date else None
        payload = self._request_json("GET", "/competitor-data/prices", params=params)
        return list(payload.get("data") or [])

    def send_assistant_message(
        self,
        message: str,
        *,
        conversation_history: list[dict[str, str]] | None = None,
        context: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        payload = self._request_json(
            "POST",
            "/assistant/message",
            json_body={
                "message": message,
                "conversation_history": conversation_history or [],
                "context": context or {},
            },
        )
        return self._data_object(payload)

    def get_quick_suggestion(self, *, context: dict[str, Any] | None = None) -> str:
        payload = self._request_json("POST", "/assistant/quick-suggestion", json_body={"context": context or {}})
        return str(self._data_object(payload).get("suggestion") or "No suggestion available")

    @staticmethod
    def _data_object(payload: dict[str, Any]) -> dict[str, Any]:
        data = payload.get("data")
        if not isinstance(data, dict):
            raise ApiUnavailableError("API envelope did not contain an object in `data`")
        return data

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json_body,
                files=files,
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise ApiUnavailableError(f"API request failed for {url}: {exc}") from exc

        if response.status_code == 404:
            raise ResourceNotFoundError(f"Endpoint returned 404 for {url}")
        if response.status_code >= 500:
            raise ApiUnavailableError(
                f"API request failed with status {response.status_code} for {url}"
            )
        if response.status_code >= 400:
            raise ValueError(
                f"API request was rejected with status {response.status_code} for {url}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ApiUnavailableError(f"API did not return valid JSON for {url}") from exc

        if not isinstance(payload, dict):
            raise ApiUnavailableError(f"Unexpected payload shape from {url}")
        return payload
