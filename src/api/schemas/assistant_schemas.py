# This file defines request and reply schemas for the pricing assistant endpoints.
# It exists so dashboard context is validated before it reaches the reply builder.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from src.api.schemas.common import EnvelopeFields


class AssistantCurrentData(BaseModel):
    avg_price: float | None = None
    occupancy_rate: float | None = None
    total_bookings: int | None = None
    revenue: float | None = None


class AssistantCompetitorPrice(BaseModel):
    competitor: str
    price: float


class AssistantContextV1(BaseModel):
    business_name: str | None = None
    location: str | None = None
    currency: str | None = None
    current_data: AssistantCurrentData | None = None
    weather_conditions: dict[str, object] | None = None
    competitor_prices: list[AssistantCompetitorPrice] = Field(default_factory=list)


class ConversationTurnV1(BaseModel):
    role: str
    content: str


class AssistantMessageRequestV1(BaseModel):
    message: str = Field(min_length=1)
    conversation_history: list[ConversationTurnV1] = Field(default_factory=list)
    context: AssistantContextV1 = Field(default_factory=AssistantContextV1)


class QuickSuggestionRequestV1(BaseModel):
    context: AssistantContextV1 = Field(default_factory=AssistantContextV1)


class AssistantReplyV1(BaseModel):
    message: str
    timestamp: datetime


class AssistantReplyResponseV1(EnvelopeFields):
    data: AssistantReplyV1


class QuickSuggestionV1(BaseModel):
    suggestion: str


class QuickSuggestionResponseV1(EnvelopeFields):
    data: QuickSuggestionV1
