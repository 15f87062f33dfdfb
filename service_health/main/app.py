"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app, and installs
the health endpoint middleware.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Iterable, Optional

from fastapi import FastAPI

from service_health.domain.entities.probe import Probe
from service_health.main.config import AppSettings, get_settings
from service_health.main.container import app_lifespan, init_container
from service_health.presentation.middleware import HealthCheckMiddleware
from service_health.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Configure logging with basic settings first - before configuration is loaded
configure_logging()

# Get structured logger
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    Records the startup instant and delegates resource management to
    app_lifespan for the container this app was created with.
    """
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up")

    async with app_lifespan(app.state.container):
        yield

    logger.info("Application shutting down")


def create_app(
    settings: Optional[AppSettings] = None,
    checks: Optional[Iterable[Probe]] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment when omitted.
        checks: Probes registered before the first request.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = settings or get_settings()
    update_logging_from_settings(settings)

    container = init_container(settings, checks=checks)
    renderer = container.health_report_renderer()

    app = FastAPI(
        title=settings.health.service,
        version=settings.health.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(HealthCheckMiddleware, renderer=renderer)
    app.state.container = container
    app.state.health = renderer

    logger.debug("health.endpoint.mounted", endpoint=renderer.endpoint)
    return app


app = create_app()
