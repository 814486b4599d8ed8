"""Process entry point: refuses to start without an Anthropic credential.

    activity-finder
    uvicorn --factory activity_finder.main:build_app
"""
from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from .app import create_app
from .config import ConfigurationError, get_settings


logger = logging.getLogger(__name__)


def build_app() -> FastAPI:
    settings = get_settings()
    try:
        settings.require_api_key()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        raise
    return create_app(settings)


def main() -> None:
    settings = get_settings()
    uvicorn.run(build_app(), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
