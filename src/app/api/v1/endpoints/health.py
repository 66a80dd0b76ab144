"""Health check endpoint.

Reports whether the service can reach the CMS and its database with a
single minimal read. No retries.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import ORJSONResponse

from app.api.dependencies import get_optional_cms_client
from app.observability.logging import get_logger
from app.schemas.health import HealthFailureResponse, HealthResponse
from app.services.cms.client import CmsClient  # noqa: TC001


logger = get_logger(__name__)

router = APIRouter(tags=["health"])

UNREACHABLE_MESSAGE = "DB or entity service unreachable"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Probe the CMS with a one-record read.",
    responses={503: {"model": HealthFailureResponse}},
)
async def health_check(
    cms_client: Annotated[CmsClient | None, Depends(get_optional_cms_client)],
) -> HealthResponse | ORJSONResponse:
    """Check that the CMS answers.

    ``db`` is true when the probe read returned at least one record.
    """
    try:
        if cms_client is None:
            msg = "CMS client not initialized"
            raise RuntimeError(msg)
        categories = await cms_client.probe()
    except Exception as e:
        logger.warning("Health probe failed", error=str(e))
        return ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=HealthFailureResponse(error=UNREACHABLE_MESSAGE).model_dump(),
        )

    return HealthResponse(db=len(categories) > 0, ts=datetime.now(UTC))
