# This file defines competitor price endpoints under the versioned API path.
# It exists so the Competitors page and the calendar overlay read market prices from the backend.

from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.api.api_config import ApiConfig
from src.api.dependencies import get_competitor_service, get_config
from src.api.response_envelope import envelope_for
from src.api.schemas.competitor_schemas import CompetitorPricesResponseV1, CompetitorRangeResponseV1
from src.api.services.competitor_service import CompetitorService

router = APIRouter(prefix="/competitor-data", tags=["competitors"])
CompetitorServiceDep = Annotated[CompetitorService, Depends(get_competitor_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.get("/prices", response_model=CompetitorPricesResponseV1)
def competitor_prices(
    request: Request,
    service: CompetitorServiceDep,
    config: ConfigDep,
    on_date: date | None = Query(default=None, alias="date"),
) -> dict[str, object]:
    return envelope_for(request, config, service.current_prices(today=on_date))


@router.get("/{file_id}/range", response_model=CompetitorRangeResponseV1)
def competitor_range(
    request: Request,
    service: CompetitorServiceDep,
    config: ConfigDep,
    file_id: str,
    start_date: date,
    end_date: date,
) -> dict[str, object]:
    rows = service.price_range(file_id=file_id, start_date=start_date, end_date=end_date)
    return envelope_for(request, config, rows)
