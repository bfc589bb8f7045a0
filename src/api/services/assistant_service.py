# This file answers the pricing assistant endpoints with canned demo replies.
# It exists so the assistant page has a backend contract without calling any language model.
# KPI figures quoted in replies are computed once from the seeded demo bookings.

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from src.demo.assistant_replies import build_demo_reply, quick_suggestion, route_topic
from src.demo.mock_data import DEMO_BUSINESS, DemoKpi, demo_kpi, generate_demo_bookings

logger = logging.getLogger(__name__)


class AssistantService:
    def __init__(self, *, seed: int) -> None:
        self.kpi: DemoKpi = demo_kpi(generate_demo_bookings(seed=seed))

    def reply(self, *, message: str, context: dict[str, Any] | None = None) -> dict[str, Any]:
        context = context or {}
        business_name = context.get("business_name") or DEMO_BUSINESS["business_name"]
        logger.debug("Assistant message routed to %s", route_topic(message))
        return {
            "message": build_demo_reply(message, self.kpi, business_name=business_name),
            "timestamp": datetime.now(tz=UTC),
        }

    def suggestion(self, *, context: dict[str, Any] | None = None) -> dict[str, Any]:
        return {"suggestion": quick_suggestion(context)}
