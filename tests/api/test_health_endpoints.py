# This file tests API health, readiness, version, and metrics endpoints.
# It exists to validate operational contracts used by the dashboard and monitoring.
# The tests confirm request IDs and version metadata are always returned.

from __future__ import annotations

from tests.api.support import api_test_client, build_test_config


def test_health_endpoint_returns_expected_fields() -> None:
    config = build_test_config()
    with api_test_client(config=config) as client:
        response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["environment"] == "test"
    assert payload["service_name"] == config.api_name
    assert payload["api_version"] == "v1"
    assert payload["schema_version"] == config.schema_version
    assert payload["request_id"]
    assert "timestamp" in payload


def test_request_id_header_is_echoed() -> None:
    with api_test_client() as client:
        response = client.get("/health", headers={"x-request-id": "req-123"})

    assert response.headers["x-request-id"] == "req-123"
    assert response.json()["request_id"] == "req-123"
    assert float(response.headers["x-response-time-ms"]) >= 0.0


def test_ready_endpoint_reports_file_store_state() -> None:
    with api_test_client(config=build_test_config(seed_demo_file=False)) as client:
        response = client.get("/ready")

    assert response.status_code == 200
    payload = response.json()
    assert payload["ready"] is True
    assert payload["file_count"] == 0
    assert payload["demo_file_loaded"] is False


def test_ready_endpoint_with_seeded_demo_file() -> None:
    with api_test_client(config=build_test_config(seed_demo_file=True)) as client:
        payload = client.get("/ready").json()

    assert payload["ready"] is True
    assert payload["file_count"] == 1
    assert payload["demo_file_loaded"] is True


def test_version_endpoint_returns_version_metadata() -> None:
    config = build_test_config()
    with api_test_client(config=config) as client:
        response = client.get("/version")

    assert response.status_code == 200
    payload = response.json()
    assert payload["api_version_path"] == "/api/v1"
    assert payload["app_version"] == config.app_version
    assert payload["project"] == config.api_name


def test_metrics_endpoint_exposes_request_counters() -> None:
    with api_test_client() as client:
        client.get("/health")
        response = client.get("/metrics")

    assert response.status_code == 200
    assert "api_http_requests_total" in response.text
