"""
Upload parsing and the uploaded-file lifecycle.
Booking exports arrive as CSV or Excel workbooks; this module reads them with pandas and tracks
each file through `pending -> processing -> success | error` plus its enrichment status.
"""

from __future__ import annotations

import io
import logging
import uuid
import zipfile
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from pathlib import PurePath
from typing import Any

import pandas as pd
import xlrd

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".csv", ".xlsx", ".xls")
FILE_STATUSES = ("pending", "processing", "success", "error")
ENRICHMENT_STATUSES = ("none", "pending", "completed", "failed")
PREVIEW_ROW_COUNT = 5

_EXCEL_ENGINES = {".xlsx": "openpyxl", ".xls": "xlrd"}


class UploadError(ValueError):
    """Raised when an upload has an unsupported extension or unreadable content."""


@dataclass
class UploadedFile:
    id: str
    name: str
    size: int
    uploaded_at: datetime
    rows: int = 0
    columns: int = 0
    status: str = "pending"
    preview: list[dict[str, Any]] = field(default_factory=list)
    enrichment_status: str = "none"
    error: str | None = None

    def with_enrichment_status(self, status: str) -> UploadedFile:
        if status not in ENRICHMENT_STATUSES:
            raise ValueError(f"enrichment_status must be one of {ENRICHMENT_STATUSES}, got {status!r}")
        return replace(self, enrichment_status=status)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "size": self.size,
            "rows": self.rows,
            "columns": self.columns,
            "status": self.status,
            "preview": list(self.preview),
            "enrichment_status": self.enrichment_status,
            "uploaded_at": self.uploaded_at.isoformat(),
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> UploadedFile:
        uploaded_at = payload.get("uploaded_at")
        if isinstance(uploaded_at, str):
            parsed_at = datetime.fromisoformat(uploaded_at.replace("Z", "+00:00"))
        elif isinstance(uploaded_at, datetime):
            parsed_at = uploaded_at
        else:
            parsed_at = datetime.now(tz=UTC)
        return cls(
            id=str(payload["id"]),
            name=str(payload["name"]),
            size=int(payload.get("size") or 0),
            uploaded_at=parsed_at,
            rows=int(payload.get("rows") or 0),
            columns=int(payload.get("columns") or 0),
            status=str(payload.get("status") or "pending"),
            preview=list(payload.get("preview") or []),
            enrichment_status=str(payload.get("enrichment_status") or "none"),
            error=payload.get("error"),
        )


def format_file_size(size_bytes: int) -> str:
    """Render a byte count as `0 Bytes`, `1.5 KB`, `2.25 MB` and so on."""

    if size_bytes <= 0:
        return "0 Bytes"
    units = ("Bytes", "KB", "MB", "GB")
    value = float(size_bytes)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    rendered = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{rendered} {units[index]}"


def upload_extension(file_name: str) -> str:
    """Return the lowercase extension of an upload or raise `UploadError`."""

    extension = PurePath(file_name).suffix.lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise UploadError(
            f"Unsupported file type {extension or '(none)'!r}; expected one of {', '.join(ALLOWED_EXTENSIONS)}"
        )
    return extension


def read_upload_frame(file_name: str, content: bytes) -> pd.DataFrame:
    """Parse uploaded CSV or Excel bytes into a DataFrame."""

    extension = upload_extension(file_name)
    buffer = io.BytesIO(content)
    try:
        if extension == ".csv":
            return pd.read_csv(buffer)
        return pd.read_excel(buffer, engine=_EXCEL_ENGINES[extension])
    except pd.errors.EmptyDataError as exc:
        raise UploadError(f"{file_name} is empty") from exc
    except (ValueError, UnicodeDecodeError, pd.errors.ParserError, zipfile.BadZipFile, xlrd.XLRDError) as exc:
        raise UploadError(f"Could not read {file_name}: {exc}") from exc


def preview_records(frame: pd.DataFrame, *, limit: int = PREVIEW_ROW_COUNT) -> list[dict[str, Any]]:
    head = frame.head(limit)
    return frame_to_records(head)


def frame_to_records(frame: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert a frame to JSON-friendly records with NaN mapped to None."""

    cleaned = frame.astype(object).where(frame.notna(), None)
    return [{str(key): value for key, value in row.items()} for row in cleaned.to_dict(orient="records")]


def process_upload(
    file_name: str,
    content: bytes,
    *,
    file_id: str | None = None,
    now: datetime | None = None,
) -> tuple[UploadedFile, pd.DataFrame]:
    """Run one upload through its lifecycle.

    An unsupported extension raises `UploadError`. Content that cannot be parsed yields a file in
    `error` status and an empty frame so callers can still list the failed upload.
    """

    upload_extension(file_name)
    uploaded = UploadedFile(
        id=file_id or f"file-{uuid.uuid4().hex[:12]}",
        name=file_name,
        size=len(content),
        uploaded_at=now or datetime.now(tz=UTC),
    )
    uploaded.status = "processing"

    try:
        frame = read_upload_frame(file_name, content)
    except UploadError as exc:
        logger.warning("Upload %s failed to parse: %s", file_name, exc)
        uploaded.status = "error"
        uploaded.error = str(exc)
        return uploaded, pd.DataFrame()

    uploaded.rows = int(len(frame))
    uploaded.columns = int(len(frame.columns))
    uploaded.preview = preview_records(frame)
    uploaded.status = "success"
    logger.info("Parsed upload %s: %d rows x %d columns", file_name, uploaded.rows, uploaded.columns)
    return uploaded, frame
