"""
Coop Lending - Main Application Entry Point

Stateless calculation service for the cooperative's savings and loan
features. Balances, loans and payments are owned by the calling
application and passed in on every request.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from coop_lending import __version__
from coop_lending.core.config import settings
from coop_lending.core.logging import setup_logging
from coop_lending.core.metrics import get_metrics, get_metrics_content_type
from coop_lending.presentation.api import api_router
from coop_lending.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)
from coop_lending.service.lending import get_lending_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Sets up logging and logs the lending policy in force, so a deploy with a
    changed LENDING_ variable is visible in the logs.
    """
    setup_logging()

    logger = structlog.get_logger(__name__)
    policy = get_lending_settings()
    logger.info(
        "application_started",
        version=__version__,
        premium_min_contribution=policy.premium_min_contribution,
        grace_period_days=policy.grace_period_days,
        daily_penalty_rate=policy.daily_penalty_rate,
    )

    yield

    logger.info("application_stopped")


app = FastAPI(
    title="Coop Lending",
    description="Cooperative Savings, Tiered Lending & Penalty Service",
    version=__version__,
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.metrics_enabled:
        return Response(status_code=404)
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""
    return RedirectResponse(url="/docs")
