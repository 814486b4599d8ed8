from __future__ import annotations

import logging
from typing import Any, Dict, List

from anthropic import AsyncAnthropic

from .config import Settings


logger = logging.getLogger(__name__)

WEB_SEARCH_TOOL: Dict[str, Any] = {"type": "web_search_20250305", "name": "web_search"}


class ClaudeSearchClient:
    """Single-shot Messages API call with the server-side web search tool enabled."""

    def __init__(self, settings: Settings):
        self.settings = settings
        if not self.settings.anthropic_configured:
            logger.warning("ANTHROPIC_API_KEY is not configured. Recommendations will fail until set.")
        self.anthropic = (
            AsyncAnthropic(api_key=self.settings.anthropic_api_key, max_retries=0)
            if self.settings.anthropic_configured
            else None
        )

    async def generate(self, system: str, prompt: str) -> str:
        if not self.anthropic:
            raise RuntimeError("ANTHROPIC_API_KEY not configured.")
        message = await self.anthropic.messages.create(
            model=self.settings.anthropic_model,
            max_tokens=self.settings.max_tokens,
            system=system,
            messages=[{"role": "user", "content": prompt}],
            tools=[WEB_SEARCH_TOOL],
        )
        return self._extract_text(message.content)

    @staticmethod
    def _extract_text(blocks: List[Any]) -> str:
        # web search replies interleave tool_use/result blocks with cited text fragments
        parts = [block.text for block in blocks if getattr(block, "type", None) == "text"]
        return "".join(parts).strip()
