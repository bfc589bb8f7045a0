# This file tests competitor price endpoints.
# It exists to confirm the price band contract used by the calendar overlay and Competitors page.

from __future__ import annotations

from tests.api.support import api_test_client, upload_sample


def test_range_returns_one_band_per_day() -> None:
    with api_test_client() as client:
        uploaded = upload_sample(client)
        response = client.get(
            f"/api/v1/competitor-data/{uploaded['id']}/range",
            params={"start_date": "2024-07-01", "end_date": "2024-07-03"},
        )

    assert response.status_code == 200
    rows = response.json()["data"]
    assert [row["date"] for row in rows] == ["2024-07-01", "2024-07-02", "2024-07-03"]
    for row in rows:
        assert row["price_p10"] < row["price_p50"] < row["price_p90"]
        assert row["competitor_count"] == 4


def test_range_rejects_inverted_dates() -> None:
    with api_test_client() as client:
        uploaded = upload_sample(client)
        response = client.get(
            f"/api/v1/competitor-data/{uploaded['id']}/range",
            params={"start_date": "2024-07-05", "end_date": "2024-07-01"},
        )

    assert response.status_code == 400
    assert response.json()["error_code"] == "INVALID_DATE_RANGE"


def test_range_for_unknown_file_returns_404() -> None:
    with api_test_client() as client:
        response = client.get(
            "/api/v1/competitor-data/missing/range",
            params={"start_date": "2024-07-01", "end_date": "2024-07-02"},
        )

    assert response.status_code == 404


def test_current_prices_are_in_demo_band() -> None:
    with api_test_client() as client:
        response = client.get("/api/v1/competitor-data/prices", params={"date": "2024-06-10"})

    assert response.status_code == 200
    prices = response.json()["data"]
    assert len(prices) == 4
    assert all(85 <= item["price"] <= 145 for item in prices)
    assert {item["date"] for item in prices} == {"2024-06-10"}
