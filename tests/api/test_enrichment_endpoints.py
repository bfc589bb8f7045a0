# This file tests enrichment job endpoints.
# It exists to confirm that a job advances one feature per status read and finishes by enriching the file.
# Cancellation and unknown ids are checked against the shared error payload.

from __future__ import annotations

from tests.api.support import api_test_client, upload_sample


def test_enrichment_job_progresses_to_complete() -> None:
    with api_test_client() as client:
        uploaded = upload_sample(client)
        started = client.post(
            "/api/v1/enrichment/start",
            json={"data_id": uploaded["id"], "features": ["weather", "holidays", "temporal"]},
        )
        job_id = started.json()["data"]["job_id"]
        observations = [client.get(f"/api/v1/enrichment/status/{job_id}").json()["data"] for _ in range(4)]
        file_after = client.get(f"/api/v1/files/{uploaded['id']}").json()["data"]

    assert started.status_code == 202
    assert started.json()["data"]["status"] == "pending"
    assert [item["status"] for item in observations] == ["running", "running", "complete", "complete"]
    assert [item["progress"] for item in observations] == [33, 67, 100, 100]
    assert observations[-1]["completed_features"] == ["weather", "holidays", "temporal"]
    assert file_after["enrichment_status"] == "completed"
    assert file_after["columns"] == 15


def test_start_marks_file_pending() -> None:
    with api_test_client() as client:
        uploaded = upload_sample(client)
        client.post("/api/v1/enrichment/start", json={"data_id": uploaded["id"], "features": ["temporal"]})
        file_after = client.get(f"/api/v1/files/{uploaded['id']}").json()["data"]

    assert file_after["enrichment_status"] == "pending"


def test_cancel_sets_error_status_and_fails_file() -> None:
    with api_test_client() as client:
        uploaded = upload_sample(client)
        job_id = client.post(
            "/api/v1/enrichment/start", json={"data_id": uploaded["id"]}
        ).json()["data"]["job_id"]
        cancelled = client.post(f"/api/v1/enrichment/cancel/{job_id}").json()["data"]
        status = client.get(f"/api/v1/enrichment/status/{job_id}").json()["data"]
        file_after = client.get(f"/api/v1/files/{uploaded['id']}").json()["data"]

    assert cancelled["status"] == "error"
    assert status["status"] == "error"
    assert status["progress"] == 0
    assert file_after["enrichment_status"] == "failed"


def test_unknown_job_returns_404() -> None:
    with api_test_client() as client:
        response = client.get("/api/v1/enrichment/status/job-missing")

    assert response.status_code == 404
    assert response.json()["error_code"] == "JOB_NOT_FOUND"


def test_start_for_unknown_file_returns_404() -> None:
    with api_test_client() as client:
        response = client.post("/api/v1/enrichment/start", json={"data_id": "nope"})

    assert response.status_code == 404
    assert response.json()["error_code"] == "FILE_NOT_FOUND"


def test_start_rejects_unknown_features() -> None:
    with api_test_client() as client:
        uploaded = upload_sample(client)
        response = client.post(
            "/api/v1/enrichment/start",
            json={"data_id": uploaded["id"], "features": ["traffic"]},
        )

    assert response.status_code == 400
    assert response.json()["details"] == {"unknown": ["traffic"]}
