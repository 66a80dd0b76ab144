"""Application lifespan event handlers.

This module defines the lifespan context manager that handles:
- Application startup: configure logging, open the CMS client
- Application shutdown: close the CMS client
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from app.core.config import Settings, get_settings
from app.observability.logging import get_logger, setup_logging
from app.services.cms.client import CmsClient


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

logger = get_logger(__name__)


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize all application services during startup.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.
    """
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )

    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    if not settings.JWT_SECRET:
        logger.warning("JWT_SECRET not set - cookie sessions will be rejected")

    # CMS client is non-critical: health reports it, other routes answer 503
    await _init_cms_client(app, settings)

    logger.info("Application startup complete")


async def _init_cms_client(app: FastAPI, settings: Settings) -> None:
    """Initialize the CMS client."""
    try:
        cms_client = CmsClient(settings)
        await cms_client.initialize()
        app.state.cms_client = cms_client
    except Exception:
        logger.exception("Failed to initialize CmsClient - content routes unavailable")
        app.state.cms_client = None


async def _shutdown(app: FastAPI) -> None:
    """Shutdown all application services.

    Args:
        app: The FastAPI application instance.
    """
    logger.info("Shutting down application")

    cms_client: CmsClient | None = getattr(app.state, "cms_client", None)
    if cms_client is not None:
        await cms_client.shutdown()
        app.state.cms_client = None

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Uses the settings the app was created with, falling back to the
    cached application settings.

    Args:
        app: The FastAPI application instance.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    try:
        yield
    finally:
        await _shutdown(app)
