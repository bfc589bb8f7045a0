# This file tests the uploaded-file endpoints.
# It exists to confirm uploads, offset pagination, enrichment, and deletion behave as the dashboard expects.
# Error cases check the shared error payload shape and status codes.

from __future__ import annotations

from tests.api.support import api_test_client, build_test_config, upload_sample


def test_upload_then_list_and_fetch_file() -> None:
    with api_test_client() as client:
        uploaded = upload_sample(client)
        listed = client.get("/api/v1/files").json()
        fetched = client.get(f"/api/v1/files/{uploaded['id']}").json()

    assert uploaded["status"] == "success"
    assert uploaded["rows"] == 3
    assert uploaded["columns"] == 4
    assert uploaded["enrichment_status"] == "none"
    assert len(uploaded["preview"]) == 3
    assert uploaded["preview"][2]["Price"] is None
    assert [item["id"] for item in listed["data"]] == [uploaded["id"]]
    assert fetched["data"]["name"] == "bookings.csv"


def test_file_data_uses_offset_pagination() -> None:
    with api_test_client() as client:
        uploaded = upload_sample(client)
        first = client.get(f"/api/v1/files/{uploaded['id']}/data").json()
        second = client.get(f"/api/v1/files/{uploaded['id']}/data", params={"offset": 2}).json()

    assert len(first["data"]) == 2
    assert first["pagination"] == {"offset": 0, "limit": 2, "total": 3, "has_more": True}
    assert len(second["data"]) == 1
    assert second["pagination"]["has_more"] is False


def test_file_data_limit_is_capped_at_max_page_size() -> None:
    with api_test_client() as client:
        uploaded = upload_sample(client)
        payload = client.get(f"/api/v1/files/{uploaded['id']}/data", params={"limit": 50}).json()

    assert payload["pagination"]["limit"] == 5
    assert len(payload["data"]) == 3


def test_upload_rejects_unsupported_extension() -> None:
    with api_test_client() as client:
        response = client.post("/api/v1/files/upload", files={"file": ("notes.txt", b"hello", "text/plain")})

    assert response.status_code == 400
    payload = response.json()
    assert payload["error_code"] == "UNSUPPORTED_FILE"
    assert payload["request_id"]


def test_upload_rejects_oversized_file() -> None:
    with api_test_client() as client:
        response = client.post(
            "/api/v1/files/upload",
            files={"file": ("big.csv", b"a\n" + b"1\n" * 3000, "text/csv")},
        )

    assert response.status_code == 400
    assert response.json()["error_code"] == "UPLOAD_TOO_LARGE"


def test_unreadable_upload_is_stored_with_error_status() -> None:
    with api_test_client() as client:
        response = client.post("/api/v1/files/upload", files={"file": ("empty.csv", b"", "text/csv")})

    assert response.status_code == 201
    payload = response.json()
    assert payload["data"]["status"] == "error"
    assert payload["data"]["rows"] == 0
    assert payload["warnings"]


def test_unknown_file_returns_404() -> None:
    with api_test_client() as client:
        response = client.get("/api/v1/files/missing")

    assert response.status_code == 404
    assert response.json()["error_code"] == "FILE_NOT_FOUND"


def test_delete_file_removes_it() -> None:
    with api_test_client() as client:
        uploaded = upload_sample(client)
        deleted = client.delete(f"/api/v1/files/{uploaded['id']}")
        after = client.get(f"/api/v1/files/{uploaded['id']}")
        again = client.delete(f"/api/v1/files/{uploaded['id']}")

    assert deleted.status_code == 200
    assert deleted.json()["data"] == {"id": uploaded["id"], "deleted": True}
    assert after.status_code == 404
    assert again.status_code == 404


def test_enrich_file_adds_feature_columns() -> None:
    with api_test_client() as client:
        uploaded = upload_sample(client)
        response = client.post(f"/api/v1/files/{uploaded['id']}/enrich", json={})
        rows = client.get(f"/api/v1/files/{uploaded['id']}/data").json()["data"]

    assert response.status_code == 200
    enriched = response.json()["data"]
    assert enriched["enrichment_status"] == "completed"
    assert enriched["columns"] == 15
    assert rows[0]["season"] == "shoulder"
    assert rows[0]["is_weekend"] is True


def test_seeded_demo_file_is_listed() -> None:
    with api_test_client(config=build_test_config(seed_demo_file=True)) as client:
        payload = client.get("/api/v1/files").json()

    assert payload["data"][0]["id"] == "demo-file-001"
    assert payload["data"][0]["rows"] == 366 * 6
    assert payload["data"][0]["enrichment_status"] == "completed"
