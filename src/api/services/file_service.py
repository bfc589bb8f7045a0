# This file implements the in-memory file store behind the `/files` endpoints.
# It exists so routers stay transport-focused while upload parsing and row slicing live in one layer.
# Each stored file keeps its UploadedFile metadata next to the parsed booking frame.
# The store is seeded with the demo dataset so a fresh API serves meaningful data.

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any

import pandas as pd

from src.api.api_config import ApiConfig
from src.api.error_handlers import APIError, not_found_error
from src.demo.mock_data import demo_bookings_frame, demo_uploaded_file
from src.ingestion.uploads import UploadedFile, UploadError, frame_to_records, process_upload

logger = logging.getLogger(__name__)


@dataclass
class StoredFile:
    metadata: UploadedFile
    frame: pd.DataFrame


class FileStore:
    """Thread-safe registry of uploaded files and their parsed rows."""

    def __init__(self, *, config: ApiConfig) -> None:
        self.config = config
        self._files: dict[str, StoredFile] = {}
        self._lock = threading.Lock()
        if config.seed_demo_file:
            self.seed_demo_file()

    def seed_demo_file(self) -> UploadedFile:
        frame = demo_bookings_frame(seed=self.config.demo_seed)
        metadata = demo_uploaded_file(frame)
        with self._lock:
            self._files[metadata.id] = StoredFile(metadata=metadata, frame=frame)
        logger.info("Seeded demo file %s with %d rows", metadata.id, len(frame))
        return metadata

    def list_files(self) -> list[UploadedFile]:
        with self._lock:
            files = [stored.metadata for stored in self._files.values()]
        return sorted(files, key=lambda item: item.uploaded_at, reverse=True)

    def _get(self, file_id: str) -> StoredFile:
        with self._lock:
            stored = self._files.get(file_id)
        if stored is None:
            raise not_found_error("file", file_id)
        return stored

    def get_file(self, file_id: str) -> UploadedFile:
        return self._get(file_id).metadata

    def get_frame(self, file_id: str) -> pd.DataFrame:
        return self._get(file_id).frame

    def get_file_data(self, file_id: str, *, offset: int, limit: int) -> tuple[list[dict[str, Any]], int]:
        frame = self._get(file_id).frame
        window = frame.iloc[offset : offset + limit]
        return frame_to_records(window), int(len(frame))

    def upload(self, name: str, content: bytes) -> UploadedFile:
        if len(content) > self.config.max_upload_bytes:
            raise APIError(
                status_code=400,
                error_code="UPLOAD_TOO_LARGE",
                message=f"Uploads are limited to {self.config.max_upload_bytes} bytes.",
                details={"size": len(content)},
            )
        try:
            metadata, frame = process_upload(name, content)
        except UploadError as exc:
            raise APIError(
                status_code=400,
                error_code="UNSUPPORTED_FILE",
                message=str(exc),
                details={"name": name},
            ) from exc

        with self._lock:
            self._files[metadata.id] = StoredFile(metadata=metadata, frame=frame)
        logger.info("Stored upload %s (%s) with status %s", metadata.id, name, metadata.status)
        return metadata

    def delete_file(self, file_id: str) -> None:
        with self._lock:
            removed = self._files.pop(file_id, None)
        if removed is None:
            raise not_found_error("file", file_id)
        logger.info("Deleted file %s", file_id)

    def set_enrichment_status(self, file_id: str, status: str) -> UploadedFile:
        stored = self._get(file_id)
        with self._lock:
            stored.metadata = stored.metadata.with_enrichment_status(status)
        return stored.metadata

    def replace_frame(self, file_id: str, frame: pd.DataFrame) -> UploadedFile:
        stored = self._get(file_id)
        with self._lock:
            stored.frame = frame
            stored.metadata.columns = int(len(frame.columns))
        return stored.metadata
