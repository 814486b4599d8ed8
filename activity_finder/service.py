from __future__ import annotations

import logging
from typing import Protocol, Tuple

from .config import Settings
from .fallback import DEMO_MODE_NOTE, generate_fallback_activities
from .llm import ClaudeSearchClient
from .parser import parse_activities
from .prompts import SYSTEM_PROMPT, build_prompt
from .schemas import ActivityRequest, ActivityResponse


logger = logging.getLogger(__name__)

# Billing and retired-model failures only surface as message text from the API.
DEGRADED_FAILURE_SIGNATURES: Tuple[str, ...] = ("credit balance", "not_found_error")


class ModelClient(Protocol):
    async def generate(self, system: str, prompt: str) -> str: ...


def is_degraded_failure(exc: BaseException) -> bool:
    message = str(exc)
    return any(signature in message for signature in DEGRADED_FAILURE_SIGNATURES)


class ActivityFinder:
    def __init__(self, settings: Settings, model_client: ModelClient | None = None):
        self.settings = settings
        self.model_client = model_client or ClaudeSearchClient(settings)

    async def recommend(self, request: ActivityRequest) -> ActivityResponse:
        """Ask the model for recommendations, degrading to sample data on billing/model errors.

        Any other upstream failure propagates to the caller.
        """
        prompt = build_prompt(request)
        logger.info("Generated prompt: %s...", prompt[:100])
        try:
            response_text = await self.model_client.generate(SYSTEM_PROMPT, prompt)
        except Exception as exc:
            if not is_degraded_failure(exc):
                raise
            logger.warning("Upstream unavailable (%s), serving fallback recommendations", exc)
            return ActivityResponse.from_activities(generate_fallback_activities(request), note=DEMO_MODE_NOTE)

        logger.info("Model response received: %s...", response_text[:200])
        activities = parse_activities(response_text)
        logger.info("Parsed %s activities", len(activities))
        return ActivityResponse.from_activities(activities)
