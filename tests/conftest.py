from __future__ import annotations

from typing import List, Tuple

import pytest
from fastapi.testclient import TestClient

from activity_finder import config
from activity_finder.app import create_app
from activity_finder.config import Settings


VALID_FORM = {
    "city": "Seattle",
    "kidsAges": "6-10",
    "availability": "Saturday afternoon",
    "travelDistance": "15",
    "preferences": "",
}


class FakeModelClient:
    """Stands in for the Claude client; returns canned text or raises."""

    def __init__(self, text: str = "", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: List[Tuple[str, str]] = []

    async def generate(self, system: str, prompt: str) -> str:
        self.calls.append((system, prompt))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def settings() -> Settings:
    return Settings(anthropic_api_key="test-key")


@pytest.fixture
def form() -> dict:
    return dict(VALID_FORM)


@pytest.fixture
def make_client(settings):
    def _make(model_client=None, app_settings: Settings | None = None) -> TestClient:
        return TestClient(create_app(app_settings or settings, model_client))

    return _make


@pytest.fixture
def fresh_settings(monkeypatch):
    """``get_settings`` with an empty cache and no .env lookup."""
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    config.get_settings.cache_clear()
    yield config.get_settings
    config.get_settings.cache_clear()
