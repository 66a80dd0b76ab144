"""FastAPI dependencies for service access.

This module provides reusable dependencies for accessing application services
in FastAPI route handlers. Services are initialized during application startup
and stored in app.state.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.core.exceptions import ServiceUnavailableException
from app.services.cms.client import CmsClient
from app.services.ingestion.service import RecipeIngestionService


async def get_optional_cms_client(request: Request) -> CmsClient | None:
    """Get the CMS client from app state, or None when it failed to start.

    Args:
        request: The incoming request.

    Returns:
        Initialized CmsClient or None.
    """
    return getattr(request.app.state, "cms_client", None)


async def get_cms_client(
    client: Annotated[CmsClient | None, Depends(get_optional_cms_client)],
) -> CmsClient:
    """Get the CMS client from app state.

    Raises:
        ServiceUnavailableException: 503 if client is not initialized.
    """
    if client is None:
        raise ServiceUnavailableException("Content service not available")
    return client


async def get_ingestion_service(
    client: Annotated[CmsClient, Depends(get_cms_client)],
) -> RecipeIngestionService:
    """Get a recipe ingestion service bound to the CMS client."""
    return RecipeIngestionService(client)
