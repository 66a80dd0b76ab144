"""Recipe endpoints.

Provides:
- POST /recipes/create-from-access for submitting a recipe behind the access gate
- GET /recipes for listing published recipes
- GET /recipes/search for searching recipes by text
- GET /recipes/{slug} for fetching a single recipe
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Depends, Path, Query, Request

from app.api.dependencies import get_cms_client, get_ingestion_service
from app.auth.dependencies import RecipeAccess
from app.core.config import Settings, get_settings
from app.core.exceptions import (
    BadGatewayException,
    BadRequestException,
    NotFoundException,
    ServiceUnavailableException,
)
from app.mappers import build_recipe_summary
from app.observability.logging import get_logger
from app.schemas import (
    CreateFromAccessResponse,
    PageMeta,
    RecipeDetailResponse,
    RecipeListResponse,
    RecipeSearchResponse,
)
from app.services.cms.client import CmsClient  # noqa: TC001
from app.services.cms.exceptions import (
    CmsError,
    CmsNotFoundError,
    CmsUnavailableError,
)
from app.services.ingestion import (
    RecipeDraft,
    RecipeIngestionService,
    RecipeValidationError,
    parse_submission,
)


if TYPE_CHECKING:
    from collections.abc import Iterator


logger = get_logger(__name__)

router = APIRouter(tags=["Recipes"])

# Recipes scanned locally when the CMS text search finds nothing
SEARCH_FALLBACK_PAGE_SIZE = 100


@contextmanager
def cms_errors(resource: str = "Recipe", identifier: object = None) -> Iterator[None]:
    """Translate CMS failures on read endpoints into HTTP errors."""
    try:
        yield
    except CmsNotFoundError:
        raise NotFoundException(resource, identifier) from None
    except CmsUnavailableError:
        raise ServiceUnavailableException("Content service unavailable") from None
    except CmsError as e:
        logger.exception("CMS error")
        raise BadGatewayException(f"Content service error: {e}") from e


@router.post(
    "/recipes/create-from-access",
    response_model=CreateFromAccessResponse,
    summary="Create a recipe behind the access gate",
    description=(
        "Accepts a multipart form with a JSON `data` field and optional "
        "`coverImage` and `galleryImage` files. Requires a chef session cookie "
        "or an unexpired Bearer access grant."
    ),
    responses={
        400: {
            "description": "Invalid recipe data",
            "content": {
                "application/json": {
                    "example": {
                        "ok": False,
                        "error": "servings must be integer >= 1",
                    }
                }
            },
        },
        401: {"description": "Missing, invalid or expired credential"},
        403: {"description": "Authenticated but not a chef"},
        503: {"description": "Content service unavailable"},
    },
)
async def create_from_access(
    request: Request,
    access: RecipeAccess,
    service: Annotated[RecipeIngestionService, Depends(get_ingestion_service)],
) -> CreateFromAccessResponse:
    """Create and publish a recipe.

    This endpoint:
    1. Parses the multipart body
    2. Validates the recipe fields and derives the slug
    3. Creates the recipe, uploads images, links categories and publishes

    Image upload failures are logged and do not fail the request. Failures
    while creating, linking or publishing surface as 500.

    Raises:
        BadRequestException: 400 for the first invalid field.
    """
    async with request.form() as form:
        submission = await parse_submission(form)

    try:
        draft = RecipeDraft.from_submission(submission)
    except RecipeValidationError as e:
        logger.info("Recipe submission rejected", field=e.field, reason=str(e))
        raise BadRequestException(str(e), code="VALIDATION_ERROR") from e

    logger.info(
        "Creating recipe from access",
        slug=draft.slug,
        method=access.method,
        has_cover=draft.cover_image is not None,
        gallery_count=len(draft.gallery_images),
    )

    result = await service.ingest(draft)
    return CreateFromAccessResponse(id=result.id, slug=result.slug)


@router.get(
    "/recipes",
    response_model=RecipeListResponse,
    summary="List recipes",
    description="Published recipes, newest first.",
)
async def list_recipes(
    cms_client: Annotated[CmsClient, Depends(get_cms_client)],
    settings: Annotated[Settings, Depends(get_settings)],
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    page_size: Annotated[
        int | None,
        Query(alias="pageSize", ge=1, le=100, description="Recipes per page"),
    ] = None,
) -> RecipeListResponse:
    """List one page of recipes."""
    with cms_errors():
        result = await cms_client.list_recipes(page=page, page_size=page_size)

    media_base = settings.cms_media_url or ""
    pagination = result.pagination
    return RecipeListResponse(
        data=[build_recipe_summary(recipe, media_base) for recipe in result.items],
        meta=PageMeta(
            page=max(pagination.page, 1),
            page_size=max(pagination.page_size, 1),
            page_count=pagination.page_count,
            total=pagination.total,
        ),
    )


@router.get(
    "/recipes/search",
    response_model=RecipeSearchResponse,
    summary="Search recipes",
    description=(
        "Case-insensitive match on title, description and tags, falling back "
        "to ingredient and step text when the CMS finds nothing."
    ),
)
async def search_recipes(
    cms_client: Annotated[CmsClient, Depends(get_cms_client)],
    settings: Annotated[Settings, Depends(get_settings)],
    q: Annotated[str, Query(description="Search text")] = "",
) -> RecipeSearchResponse:
    """Search recipes. A blank query returns the first page of the listing.

    When the CMS query finds nothing, the most recent recipes are searched
    locally so that ingredient and step text also match.
    """
    query = q.strip()
    with cms_errors():
        if not query:
            recipes = (await cms_client.list_recipes()).items
        else:
            recipes = await cms_client.search_recipes(query)
            if not recipes:
                recent = await cms_client.list_recipes(page_size=SEARCH_FALLBACK_PAGE_SIZE)
                recipes = [recipe for recipe in recent.items if recipe.mentions(query)]
                logger.debug(
                    "No CMS matches, searched recent recipes",
                    query=query,
                    scanned=len(recent.items),
                    matched=len(recipes),
                )

    media_base = settings.cms_media_url or ""
    return RecipeSearchResponse(
        query=query,
        data=[build_recipe_summary(recipe, media_base) for recipe in recipes],
    )


@router.get(
    "/recipes/{slug}",
    response_model=RecipeDetailResponse,
    summary="Get a recipe by slug",
    responses={404: {"description": "Recipe not found"}},
)
async def get_recipe(
    slug: Annotated[str, Path(min_length=1, description="Recipe slug")],
    cms_client: Annotated[CmsClient, Depends(get_cms_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RecipeDetailResponse:
    """Fetch a single recipe."""
    with cms_errors("Recipe", slug):
        recipe = await cms_client.get_recipe_by_slug(slug)

    return RecipeDetailResponse(
        data=build_recipe_summary(recipe, settings.cms_media_url or ""),
    )
