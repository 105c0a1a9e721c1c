"""
FastAPI application entrypoint.

- Configures CORS.
- Registers standardized error handlers.
- Initializes structured logging.
- Includes infra routes (health/version) and the governance, strategy and brief routers.

Run locally:
  uvicorn northnode.main:app --reload --port 8000
"""

from __future__ import annotations

import os
from typing import List

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from northnode.api.router import router as api_router
from northnode.core.config import get_settings
from northnode.core.errors import register_exception_handlers
from northnode.core.logging import init_logging

APP_VERSION = os.getenv("APP_VERSION", "0.1.0")


def _create_cors_origins() -> List[str]:
    """
    Build the list of allowed CORS origins from ALLOW_ORIGINS (comma-separated, "*" for any).
    """
    raw = get_settings().allow_origins.strip()
    if not raw or raw == "*":
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


def _create_infra_router() -> APIRouter:
    router = APIRouter(prefix="/api", tags=["infra"])

    @router.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @router.get("/version")
    def version() -> dict:
        return {
            "version": APP_VERSION,
            "brief_engine_version": get_settings().brief_engine_version,
        }

    return router


def get_application() -> FastAPI:
    """
    Construct the FastAPI app with CORS, logging, routers, and error handlers.
    """
    init_logging()

    app = FastAPI(title="NorthNode Governance API", version=APP_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_create_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(_create_infra_router())
    app.include_router(api_router)

    register_exception_handlers(app)

    @app.get("/")
    def root() -> dict:
        return {"message": "NorthNode Governance API", "health": "/api/health"}

    return app


# ASGI application
app = get_application()
