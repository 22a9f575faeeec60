"""
FastAPI application factory and API package.

Run with:
    uvicorn quote_pricing.api:app --reload --port 8000

Or via main.py:
    python -m quote_pricing --serve
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quote_pricing import __version__
from quote_pricing.config import get_settings
from quote_pricing.api.routes import health_router, pricing_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory — create and configure the FastAPI instance."""
    settings = get_settings()

    application = FastAPI(
        title=settings.app_name,
        description="Line-item pricing for telecom sales quotes",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
    )

    # CORS: the quoting UI is served from another origin
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router, tags=["Health"])
    application.include_router(pricing_router, prefix="/api/pricing", tags=["Pricing"])

    logger.debug(f"Created {settings.app_name} API")
    return application


# Module-level instance for `uvicorn quote_pricing.api:app`
app = create_app()
