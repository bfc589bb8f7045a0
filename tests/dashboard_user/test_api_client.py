# This test file validates the dashboard API client behavior against expected envelope patterns.
# It exists so request parsing and error handling stay stable as endpoints evolve.
# The tests focus on success payload extraction, pagination, and clear failure modes.

from __future__ import annotations

from datetime import date
from typing import Any

import pytest
import requests

from src.dashboard_user.api_client import ApiUnavailableError, DashboardApiClient, ResourceNotFoundError


class _FakeResponse:
    def __init__(self, *, status_code: int, payload: Any = None, invalid_json: bool = False) -> None:
        self.status_code = status_code
        self._payload = {} if payload is None else payload
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("not json")
        return self._payload


class _FakeSession:
    def __init__(
        self, responses: list[_FakeResponse] | None = None, raise_error: Exception | None = None
    ) -> None:
        self.responses = responses or []
        self.raise_error = raise_error
        self.calls: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> _FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.raise_error is not None:
            raise self.raise_error
        return self.responses.pop(0)


def _client(session: _FakeSession) -> DashboardApiClient:
    return DashboardApiClient(base_url="http://localhost:8000/api/v1/", timeout_seconds=5, session=session)


def test_list_files_unwraps_envelope() -> None:
    session = _FakeSession(
        responses=[_FakeResponse(status_code=200, payload={"data": [{"id": "file-1", "name": "a.csv"}]})]
    )

    files = _client(session).list_files()

    assert files == [{"id": "file-1", "name": "a.csv"}]
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://localhost:8000/api/v1/files"
    assert session.calls[0]["timeout"] == 5


def test_get_all_file_rows_pages_until_has_more_is_false() -> None:
    session = _FakeSession(
        responses=[
            _FakeResponse(
                status_code=200,
                payload={"data": [{"n": 1}, {"n": 2}], "pagination": {"has_more": True}},
            ),
            _FakeResponse(
                status_code=200,
                payload={"data": [{"n": 3}], "pagination": {"has_more": False}},
            ),
        ]
    )

    rows = _client(session).get_all_file_rows("file-1", page_size=2, max_rows=100)

    assert [row["n"] for row in rows] == [1, 2, 3]
    assert [call["params"] for call in session.calls] == [
        {"limit": 2, "offset": 0},
        {"limit": 2, "offset": 2},
    ]


def test_pricing_recommendations_sends_query_params() -> None:
    session = _FakeSession(
        responses=[_FakeResponse(status_code=200, payload={"data": {"recommendations": []}})]
    )

    payload = _client(session).get_pricing_recommendations(
        property_id="camp-1", days=14, strategy="balanced", target_occupancy=None
    )

    assert payload == {"recommendations": []}
    assert session.calls[0]["params"] == {"property_id": "camp-1", "days": 14, "strategy": "balanced"}


def test_competitor_range_formats_dates() -> None:
    session = _FakeSession(responses=[_FakeResponse(status_code=200, payload={"data": [{"date": "2024-07-01"}]})])

    rows = _client(session).get_competitor_range(
        "file-1", start_date=date(2024, 7, 1), end_date=date(2024, 7, 2)
    )

    assert rows == [{"date": "2024-07-01"}]
    assert session.calls[0]["url"].endswith("/competitor-data/file-1/range")
    assert session.calls[0]["params"] == {"start_date": "2024-07-01", "end_date": "2024-07-02"}


def test_upload_posts_multipart_file() -> None:
    session = _FakeSession(responses=[_FakeResponse(status_code=201, payload={"data": {"id": "file-9"}})])

    uploaded = _client(session).upload_file("bookings.csv", b"date,price\n")

    assert uploaded == {"id": "file-9"}
    assert session.calls[0]["files"] == {"file": ("bookings.csv", b"date,price\n")}


def test_quick_suggestion_returns_text() -> None:
    session = _FakeSession(responses=[_FakeResponse(status_code=200, payload={"data": {"suggestion": "Raise rates"}})])

    assert _client(session).get_quick_suggestion(context={}) == "Raise rates"


def test_not_found_raises_resource_error() -> None:
    session = _FakeSession(responses=[_FakeResponse(status_code=404)])

    with pytest.raises(ResourceNotFoundError):
        _client(session).get_file("missing")


def test_client_errors_raise_value_error() -> None:
    session = _FakeSession(responses=[_FakeResponse(status_code=422)])

    with pytest.raises(ValueError, match="rejected with status 422"):
        _client(session).start_enrichment("file-1", features=["weather"])


@pytest.mark.parametrize(
    "response",
    [
        _FakeResponse(status_code=503),
        _FakeResponse(status_code=200, invalid_json=True),
        _FakeResponse(status_code=200, payload=["not", "an", "object"]),
        _FakeResponse(status_code=200, payload={"data": []}),
    ],
)
def test_unusable_responses_raise_api_unavailable(response: _FakeResponse) -> None:
    session = _FakeSession(responses=[response])

    with pytest.raises(ApiUnavailableError):
        _client(session).get_enrichment_status("job-1")


def test_transport_errors_raise_api_unavailable() -> None:
    session = _FakeSession(raise_error=requests.ConnectionError("connection refused"))

    with pytest.raises(ApiUnavailableError, match="API request failed"):
        _client(session).list_files()
