# This file implements enrichment jobs behind the `/enrichment` and `/files/{id}/enrich` endpoints.
# It exists so the dashboard can start a job, poll its progress, and cancel it like a real backend.
# A job advances one feature per status read so polling clients observe pending, running, and complete.
# Finished jobs write the enriched frame back to the file store and flip the file's enrichment status.

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Any

from src.analytics.enrichment_features import ENRICHMENT_FEATURES, enrich_booking_frame
from src.api.error_handlers import APIError, not_found_error
from src.api.services.file_service import FileStore
from src.ingestion.uploads import UploadedFile

logger = logging.getLogger(__name__)

JOB_STATUSES = ("pending", "running", "complete", "error")
TERMINAL_JOB_STATUSES = ("complete", "error")


@dataclass
class EnrichmentJob:
    job_id: str
    data_id: str
    features: list[str]
    status: str = "pending"
    progress: int = 0
    current_feature: str | None = None
    message: str = "Enrichment queued"
    completed_features: list[str] = field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_JOB_STATUSES

    def to_dict(self) -> dict[str, Any]:
        return {
            "job_id": self.job_id,
            "data_id": self.data_id,
            "status": self.status,
            "progress": self.progress,
            "current_feature": self.current_feature,
            "message": self.message,
            "completed_features": list(self.completed_features),
        }


def _validate_features(features: list[str] | None) -> list[str]:
    requested = list(features or ENRICHMENT_FEATURES)
    unknown = [item for item in requested if item not in ENRICHMENT_FEATURES]
    if unknown or not requested:
        raise APIError(
            status_code=400,
            error_code="INVALID_FEATURES",
            message=f"features must be a non-empty subset of {list(ENRICHMENT_FEATURES)}.",
            details={"unknown": unknown},
        )
    return list(dict.fromkeys(requested))


class EnrichmentService:
    """Step-wise enrichment jobs over files held in the file store."""

    def __init__(self, *, files: FileStore, seed: int = 7) -> None:
        self.files = files
        self.seed = seed
        self._jobs: dict[str, EnrichmentJob] = {}
        self._lock = threading.Lock()

    def start(self, *, data_id: str, features: list[str] | None = None) -> EnrichmentJob:
        self.files.get_file(data_id)
        job = EnrichmentJob(
            job_id=f"job-{uuid.uuid4().hex[:12]}",
            data_id=data_id,
            features=_validate_features(features),
        )
        with self._lock:
            self._jobs[job.job_id] = job
        self.files.set_enrichment_status(data_id, "pending")
        logger.info("Started enrichment job %s for %s with %s", job.job_id, data_id, job.features)
        return job

    def _get(self, job_id: str) -> EnrichmentJob:
        with self._lock:
            job = self._jobs.get(job_id)
        if job is None:
            raise not_found_error("job", job_id)
        return job

    def status(self, job_id: str) -> EnrichmentJob:
        """Return the job after advancing it by one step."""

        job = self._get(job_id)
        with self._lock:
            if not job.is_terminal:
                self._advance(job)
        return job

    def _advance(self, job: EnrichmentJob) -> None:
        if job.status == "pending":
            job.status = "running"
        remaining = [item for item in job.features if item not in job.completed_features]
        if not remaining:
            return

        feature = remaining[0]
        job.current_feature = feature
        job.completed_features.append(feature)
        job.progress = round(len(job.completed_features) / len(job.features) * 100)
        job.message = f"Added {feature} features"
        if len(remaining) > 1:
            return

        try:
            enriched = enrich_booking_frame(
                self.files.get_frame(job.data_id),
                features=tuple(job.features),
                seed=self.seed,
            )
        except (APIError, ValueError) as exc:
            job.status = "error"
            job.message = f"Enrichment failed: {exc}"
            logger.warning("Enrichment job %s failed: %s", job.job_id, exc)
            self._mark_file(job.data_id, "failed")
            return

        self.files.replace_frame(job.data_id, enriched)
        self._mark_file(job.data_id, "completed")
        job.status = "complete"
        job.current_feature = None
        job.message = "Enrichment complete"
        logger.info("Enrichment job %s completed", job.job_id)

    def _mark_file(self, data_id: str, status: str) -> None:
        try:
            self.files.set_enrichment_status(data_id, status)
        except APIError:
            logger.warning("File %s disappeared before enrichment finished", data_id)

    def cancel(self, job_id: str) -> EnrichmentJob:
        job = self._get(job_id)
        with self._lock:
            if job.is_terminal:
                return job
            job.status = "error"
            job.message = "Enrichment cancelled"
            job.current_feature = None
        self._mark_file(job.data_id, "failed")
        logger.info("Cancelled enrichment job %s", job_id)
        return job

    def enrich_file(self, file_id: str, *, features: list[str] | None = None) -> UploadedFile:
        """Enrich a file synchronously and return its updated metadata."""

        requested = _validate_features(features)
        frame = self.files.get_frame(file_id)
        enriched = enrich_booking_frame(frame, features=tuple(requested), seed=self.seed)
        self.files.replace_frame(file_id, enriched)
        return self.files.set_enrichment_status(file_id, "completed")
