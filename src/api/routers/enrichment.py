# This file defines enrichment job endpoints under the versioned API path.
# It exists so the dashboard can start a job, poll it every few seconds, and cancel it.
# Each status read advances the job by one feature until it reaches `complete` or `error`.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.api.api_config import ApiConfig
from src.api.dependencies import get_config, get_enrichment_service
from src.api.response_envelope import envelope_for
from src.api.schemas.enrichment_schemas import EnrichmentJobResponseV1, EnrichmentStartRequestV1
from src.api.services.enrichment_service import EnrichmentService

router = APIRouter(prefix="/enrichment", tags=["enrichment"])
EnrichmentServiceDep = Annotated[EnrichmentService, Depends(get_enrichment_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.post("/start", response_model=EnrichmentJobResponseV1, status_code=202)
def start_enrichment(
    request: Request,
    service: EnrichmentServiceDep,
    config: ConfigDep,
    payload: EnrichmentStartRequestV1,
) -> dict[str, object]:
    job = service.start(data_id=payload.data_id, features=payload.features)
    return envelope_for(request, config, job.to_dict())


@router.get("/status/{job_id}", response_model=EnrichmentJobResponseV1)
def enrichment_status(
    request: Request,
    service: EnrichmentServiceDep,
    config: ConfigDep,
    job_id: str,
) -> dict[str, object]:
    return envelope_for(request, config, service.status(job_id).to_dict())


@router.post("/cancel/{job_id}", response_model=EnrichmentJobResponseV1)
def cancel_enrichment(
    request: Request,
    service: EnrichmentServiceDep,
    config: ConfigDep,
    job_id: str,
) -> dict[str, object]:
    return envelope_for(request, config, service.cancel(job_id).to_dict())
