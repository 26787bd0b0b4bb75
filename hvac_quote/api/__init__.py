"""
FastAPI application factory and API package.

Run with:
    uvicorn hvac_quote.api:app --reload --port 8000

Or via main.py:
    python -m hvac_quote.main --serve
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hvac_quote.config import get_settings
from hvac_quote.api.routes import health_router, pricebook_router, proposal_router, quote_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory — create and configure the FastAPI instance."""
    settings = get_settings()

    application = FastAPI(
        title="HVAC Proposal Pricing API",
        description="Price book administration and live proposal quoting",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS: allow the builder frontend (adjust origins in production)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router, tags=["Health"])
    application.include_router(pricebook_router, prefix="/api/pricebook", tags=["Price Book"])
    application.include_router(quote_router, prefix="/api/quote", tags=["Quote"])
    application.include_router(proposal_router, prefix="/api/proposals", tags=["Proposals"])

    logger.info(f"Created {settings.app_name} API (mock_mode={settings.mock_mode})")
    return application


# Module-level instance for `uvicorn hvac_quote.api:app`
app = create_app()
