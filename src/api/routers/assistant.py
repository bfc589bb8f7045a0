# This file defines the pricing assistant endpoints under the versioned API path.
# It exists so the Assistant page can send messages and fetch a quick suggestion.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.api.api_config import ApiConfig
from src.api.dependencies import get_assistant_service, get_config
from src.api.response_envelope import envelope_for
from src.api.schemas.assistant_schemas import (
    AssistantMessageRequestV1,
    AssistantReplyResponseV1,
    QuickSuggestionRequestV1,
    QuickSuggestionResponseV1,
)
from src.api.services.assistant_service import AssistantService

router = APIRouter(prefix="/assistant", tags=["assistant"])
AssistantServiceDep = Annotated[AssistantService, Depends(get_assistant_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.post("/message", response_model=AssistantReplyResponseV1)
def assistant_message(
    request: Request,
    service: AssistantServiceDep,
    config: ConfigDep,
    payload: AssistantMessageRequestV1,
) -> dict[str, object]:
    reply = service.reply(message=payload.message, context=payload.context.model_dump())
    return envelope_for(request, config, reply)


@router.post("/quick-suggestion", response_model=QuickSuggestionResponseV1)
def assistant_quick_suggestion(
    request: Request,
    service: AssistantServiceDep,
    config: ConfigDep,
    payload: QuickSuggestionRequestV1,
) -> dict[str, object]:
    return envelope_for(request, config, service.suggestion(context=payload.context.model_dump()))
