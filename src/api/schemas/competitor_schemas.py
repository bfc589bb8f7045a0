# This file defines schemas for competitor prices and competitor price bands.
# It exists so the Competitors page and the calendar overlay parse one validated contract.

from __future__ import annotations

from pydantic import BaseModel

from src.api.schemas.common import EnvelopeFields


class CompetitorRangeRowV1(BaseModel):
    date: str
    price_p10: float
    price_p50: float
    price_p90: float
    competitor_count: int


class CompetitorRangeResponseV1(EnvelopeFields):
    data: list[CompetitorRangeRowV1]


class CompetitorPriceV1(BaseModel):
    competitor_name: str
    price: float
    currency: str
    date: str
    url: str = "#"
    room_type: str | None = None
    availability: bool = True


class CompetitorPricesResponseV1(EnvelopeFields):
    data: list[CompetitorPriceV1]
