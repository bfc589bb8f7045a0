# This file defines schemas for uploaded-file metadata and paged file rows.
# It exists so the `/files` contract the dashboard parses is explicit and validated.
# Row payloads stay loosely typed because uploads carry arbitrary booking columns.

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from src.api.schemas.common import EnvelopeFields, OffsetPagination


class UploadedFileV1(BaseModel):
    id: str
    name: str
    size: int = Field(ge=0)
    rows: int = Field(ge=0)
    columns: int = Field(ge=0)
    status: Literal["pending", "processing", "success", "error"]
    preview: list[dict[str, Any]] = Field(default_factory=list)
    enrichment_status: Literal["none", "pending", "completed", "failed"] = "none"
    uploaded_at: datetime
    error: str | None = None


class FileListResponseV1(EnvelopeFields):
    data: list[UploadedFileV1]


class FileResponseV1(EnvelopeFields):
    data: UploadedFileV1


class FileDataResponseV1(EnvelopeFields):
    data: list[dict[str, Any]]
    pagination: OffsetPagination


class DeleteResultV1(BaseModel):
    id: str
    deleted: bool


class DeleteResponseV1(EnvelopeFields):
    data: DeleteResultV1


class EnrichFileRequestV1(BaseModel):
    features: list[str] | None = None
    latitude: float | None = None
    longitude: float | None = None
    country: str | None = None
