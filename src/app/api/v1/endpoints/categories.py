"""Category endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import get_cms_client
from app.api.v1.endpoints.recipes import cms_errors
from app.mappers import build_category_view
from app.schemas import CategoryListResponse
from app.services.cms.client import CmsClient  # noqa: TC001


router = APIRouter(tags=["Categories"])


@router.get(
    "/categories",
    response_model=CategoryListResponse,
    summary="List categories",
)
async def list_categories(
    cms_client: Annotated[CmsClient, Depends(get_cms_client)],
) -> CategoryListResponse:
    """List all recipe categories."""
    with cms_errors("Category"):
        categories = await cms_client.find_categories()

    return CategoryListResponse(
        data=[build_category_view(category) for category in categories],
    )
