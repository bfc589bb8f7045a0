# This file defines the pricing recommendations endpoint under the versioned API path.
# It exists so the dashboard's remote recommendation provider has a backend to call.

from __future__ import annotations

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query, Request

from src.api.api_config import ApiConfig
from src.api.dependencies import get_analytics_service, get_config
from src.api.response_envelope import envelope_for
from src.api.schemas.pricing_schemas import PricingRecommendationsResponseV1
from src.api.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["analytics"])
AnalyticsServiceDep = Annotated[AnalyticsService, Depends(get_analytics_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.get("/pricing-recommendations", response_model=PricingRecommendationsResponseV1)
def pricing_recommendations(
    request: Request,
    service: AnalyticsServiceDep,
    config: ConfigDep,
    property_id: str = Query(min_length=1),
    days: int = Query(default=14, ge=1),
    strategy: Literal["conservative", "balanced", "aggressive"] = Query(default="balanced"),
    target_occupancy: float | None = Query(default=None, gt=0, le=100),
) -> dict[str, object]:
    data = service.pricing_recommendations(
        property_id=property_id,
        days=days,
        strategy=strategy,
        target_occupancy=target_occupancy,
    )
    return envelope_for(request, config, data)
