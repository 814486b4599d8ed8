from __future__ import annotations

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class ConfigurationError(RuntimeError):
    """Raised when the process cannot start with the loaded configuration."""


class Settings(BaseModel):
    """Runtime configuration loaded from environment variables."""

    anthropic_api_key: str | None = Field(default=None, repr=False)
    anthropic_model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 2000

    environment: str = "production"  # options: production, development
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    host: str = "0.0.0.0"
    port: int = 3001

    class Config:
        extra = "ignore"

    @property
    def anthropic_configured(self) -> bool:
        return bool(self.anthropic_api_key)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def require_api_key(self) -> None:
        if not self.anthropic_configured:
            raise ConfigurationError("ANTHROPIC_API_KEY not found in environment variables")


def _split_origins(raw: str | None) -> List[str]:
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    return origins or ["*"]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load .env + environment variables and return Settings singleton."""

    load_dotenv()
    return Settings(
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
        anthropic_model=os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514"),
        max_tokens=int(os.getenv("ANTHROPIC_MAX_TOKENS", "2000")),
        environment=os.getenv("APP_ENV", "production").lower(),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3001")),
    )
