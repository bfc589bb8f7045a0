# This file builds the response envelope shared by every demo API endpoint.
# It exists so the dashboard client always receives version metadata, a request id, and a warnings list.
# Routers pass the request, the API config, and the payload; the envelope fields are filled in here.
# Offset pagination metadata is attached only to paged row endpoints.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from fastapi import Request

from src.api.api_config import ApiConfig
from src.api.schema_versions import build_version_fields


def generated_at_utc() -> datetime:
    return datetime.now(tz=UTC)


def build_offset_pagination(*, offset: int, limit: int, total: int) -> dict[str, Any]:
    """Describe one page of `total` rows starting at `offset`."""

    return {
        "offset": offset,
        "limit": limit,
        "total": total,
        "has_more": offset + limit < total,
    }


def build_envelope(
    *,
    api_version_path: str,
    schema_version: str,
    request_id: str,
    data: Any,
    warnings: list[str] | None = None,
    pagination: dict[str, Any] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        **build_version_fields(api_version_path=api_version_path, schema_version=schema_version),
        "request_id": request_id,
        "generated_at": generated_at_utc(),
        "data": data,
        "warnings": list(warnings or []),
    }
    if pagination is not None:
        payload["pagination"] = pagination
    return payload


def envelope_for(
    request: Request,
    config: ApiConfig,
    data: Any,
    *,
    warnings: list[str] | None = None,
    pagination: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Wrap `data` for the current request using the configured API version."""

    return build_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        request_id=str(getattr(request.state, "request_id", "unknown")),
        data=data,
        warnings=warnings,
        pagination=pagination,
    )
