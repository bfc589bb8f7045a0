# This file polls enrichment job status for the Data page.
# It exists so the page can show progress until the backend reports `complete` or `error`.
# Polling runs at a fixed interval with no backoff; transport failures are retried a bounded number of times.
# A 404 stops polling at once because the job no longer exists on the backend.

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from src.dashboard_user.api_client import ApiUnavailableError, ResourceNotFoundError

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = ("complete", "error")
STOP_REASONS = ("terminal", "not_found", "failed", "max_polls")


class EnrichmentStatusClient(Protocol):
    def get_enrichment_status(self, job_id: str) -> dict[str, Any]: ...


@dataclass(frozen=True)
class EnrichmentProgress:
    job_id: str
    status: str
    progress: int
    message: str = ""
    current_feature: str | None = None
    completed_features: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], *, job_id: str) -> EnrichmentProgress:
        return cls(
            job_id=str(payload.get("job_id") or job_id),
            status=str(payload.get("status") or "pending"),
            progress=int(payload.get("progress") or 0),
            message=str(payload.get("message") or ""),
            current_feature=payload.get("current_feature"),
            completed_features=tuple(payload.get("completed_features") or ()),
        )


@dataclass(frozen=True)
class PollOutcome:
    final: EnrichmentProgress | None
    polls: int
    stopped_reason: str

    @property
    def succeeded(self) -> bool:
        return self.final is not None and self.final.status == "complete"


class EnrichmentPoller:
    def __init__(
        self,
        api_client: EnrichmentStatusClient,
        *,
        interval_seconds: float = 2.0,
        max_retries: int = 3,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.api_client = api_client
        self.interval_seconds = interval_seconds
        self.max_retries = max_retries
        self.sleep = sleep

    def poll(
        self,
        job_id: str,
        *,
        on_progress: Callable[[EnrichmentProgress], None] | None = None,
        max_polls: int | None = None,
    ) -> PollOutcome:
        """Poll until a terminal status, a 404, exhausted retries, or `max_polls` observations."""

        last: EnrichmentProgress | None = None
        polls = 0
        consecutive_failures = 0
        attempts = 0

        while max_polls is None or polls < max_polls:
            if attempts:
                self.sleep(self.interval_seconds)
            attempts += 1

            try:
                payload = self.api_client.get_enrichment_status(job_id)
            except ResourceNotFoundError:
                logger.warning("Enrichment job %s not found; stopping poll", job_id)
                return PollOutcome(final=last, polls=polls, stopped_reason="not_found")
            except ApiUnavailableError as exc:
                consecutive_failures += 1
                if consecutive_failures > self.max_retries:
                    logger.warning("Enrichment poll for %s gave up after %d failures: %s", job_id, consecutive_failures, exc)
                    return PollOutcome(final=last, polls=polls, stopped_reason="failed")
                logger.info("Enrichment poll for %s failed (%d/%d): %s", job_id, consecutive_failures, self.max_retries, exc)
                continue
            except ValueError as exc:
                logger.warning("Enrichment poll for %s was rejected: %s", job_id, exc)
                return PollOutcome(final=last, polls=polls, stopped_reason="failed")

            consecutive_failures = 0
            polls += 1
            last = EnrichmentProgress.from_payload(payload, job_id=job_id)
            if on_progress is not None:
                on_progress(last)
            if last.is_terminal:
                return PollOutcome(final=last, polls=polls, stopped_reason="terminal")

        return PollOutcome(final=last, polls=polls, stopped_reason="max_polls")
