from __future__ import annotations

import logging
import traceback
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .schemas import REQUIRED_FIELDS, ActivityRequest, ActivityResponse
from .service import ActivityFinder, ModelClient


logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

FORM_FIELDS = REQUIRED_FIELDS + ("preferences",)


def rejected_fields(errors: Sequence[dict]) -> List[str]:
    """Form fields named by body validation errors; every required field when the body itself is unusable."""
    named = {err["loc"][1] for err in errors if len(err.get("loc", ())) > 1 and err["loc"][0] == "body"}
    fields = [name for name in FORM_FIELDS if name in named]
    return fields or list(REQUIRED_FIELDS)


def create_app(settings: Settings | None = None, model_client: ModelClient | None = None) -> FastAPI:
    """Wire the API around an explicit configuration.

    The credential is not enforced here; see ``activity_finder.main`` for the
    startup check.
    """
    settings = settings or get_settings()
    finder = ActivityFinder(settings, model_client)

    app = FastAPI(title="Family Activity Finder API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        logger.info("Rejected activity request body: %s", exc.errors())
        return JSONResponse(
            status_code=400,
            content={"error": "Missing required fields", "required": rejected_fields(exc.errors())},
        )

    router = APIRouter(prefix="/api")

    @router.post("/activities", response_model=ActivityResponse, response_model_exclude_none=True)
    async def find_activities(payload: Optional[ActivityRequest] = None):
        payload = payload or ActivityRequest()
        logger.info("Received activity request: %s", payload.model_dump(by_alias=True))

        missing = payload.missing_fields()
        if missing:
            return JSONResponse(
                status_code=400,
                content={"error": "Missing required fields", "required": missing},
            )

        try:
            return await finder.recommend(payload)
        except Exception as exc:
            logger.exception("Error in /api/activities: %s", exc)
            body = {"error": "Failed to get activity recommendations", "message": str(exc)}
            if settings.is_development:
                body["details"] = traceback.format_exc()
            return JSONResponse(status_code=500, content=body)

    @router.get("/health")
    async def healthcheck():
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "anthropicConfigured": settings.anthropic_configured,
        }

    app.include_router(router)
    return app
