"""Application factory for creating FastAPI instances.

This module provides the create_app factory function that:
- Configures the FastAPI application with appropriate settings
- Sets up middleware stack in the correct order
- Registers exception handlers
- Mounts API routers
- Configures metrics
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from app.api.v1.router import router as api_router
from app.core.config import Settings, get_settings
from app.core.events.lifespan import lifespan
from app.core.exceptions import setup_exception_handlers
from app.core.middleware import LoggingMiddleware, RequestIDMiddleware
from app.observability.metrics import setup_metrics


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    prefix = settings.api.prefix
    docs_enabled = settings.is_non_production

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description="Recipe catalogue and gated recipe submission backed by a headless CMS",
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        docs_url=f"{prefix}/docs" if docs_enabled else None,
        redoc_url=f"{prefix}/redoc" if docs_enabled else None,
        openapi_url=f"{prefix}/openapi.json" if docs_enabled else None,
        debug=settings.app.debug,
    )

    # Store settings in app state for the lifespan and handlers
    app.state.settings = settings

    setup_exception_handlers(app)

    # Setup middleware (order matters - first added = last executed)
    _setup_middleware(app, settings)

    app.include_router(api_router, prefix=prefix)

    # Setup metrics (after routes are mounted)
    setup_metrics(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    Order from request perspective:
    1. RequestIDMiddleware (binds request ID for log correlation)
    2. LoggingMiddleware (logs requests/responses)
    3. CORSMiddleware (handles CORS, credentials allowed for the session cookie)
    """
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID"],
        )

    prefix = settings.api.prefix
    app.add_middleware(
        LoggingMiddleware,
        exclude_paths={f"{prefix}/health", f"{prefix}/metrics", "/favicon.ico"},
    )

    app.add_middleware(RequestIDMiddleware)
