# This file defines request and status schemas for enrichment jobs.
# It exists so the poller in the dashboard and the job service agree on one status shape.

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from src.api.schemas.common import EnvelopeFields


class EnrichmentStartRequestV1(BaseModel):
    data_id: str
    features: list[str] = Field(default_factory=lambda: ["weather", "holidays", "temporal"])


class EnrichmentJobV1(BaseModel):
    job_id: str
    data_id: str
    status: Literal["pending", "running", "complete", "error"]
    progress: int = Field(ge=0, le=100)
    current_feature: str | None = None
    message: str
    completed_features: list[str]


class EnrichmentJobResponseV1(EnvelopeFields):
    data: EnrichmentJobV1
