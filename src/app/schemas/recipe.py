"""Recipe and category schemas.

This module contains the response bodies for recipe ingestion and the
read-only catalogue endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from app.schemas.base import APIResponse


# =============================================================================
# Ingestion
# =============================================================================


class CreateFromAccessResponse(APIResponse):
    """Recipe created and published."""

    ok: bool = Field(default=True)
    id: int = Field(..., description="Numeric recipe id")
    slug: str = Field(..., description="Final URL slug")


# =============================================================================
# Catalogue
# =============================================================================


class CategoryView(APIResponse):
    """A recipe category."""

    id: int
    name: str | None = None
    slug: str | None = None


class IngredientView(APIResponse):
    """One ingredient line."""

    id: int | None = None
    item: str
    quantity: str = ""
    unit: str = ""
    notes: str = ""


class InstructionView(APIResponse):
    """One preparation step."""

    id: int | None = None
    step_number: int = Field(..., description="1-based position when the CMS omits it")
    description: str
    image_url: str | None = Field(default=None, description="Absolute URL of the step image")
    tips: str | None = None


class RecipeSummary(APIResponse):
    """A published recipe as shown in listings and detail pages."""

    id: int
    document_id: str | None = None
    slug: str | None = None
    title: str | None = None
    description: str | None = None
    prep_time: int | None = None
    cook_time: int | None = None
    servings: int | None = None
    difficulty: str | None = None
    tags: list[str] = Field(default_factory=list)
    cover_image_url: str | None = Field(
        default=None,
        description="Absolute URL of the cover image",
    )
    gallery_image_urls: list[str] = Field(default_factory=list)
    ingredients: list[IngredientView] = Field(default_factory=list)
    instructions: list[InstructionView] = Field(default_factory=list)
    categories: list[CategoryView] = Field(default_factory=list)
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PageMeta(APIResponse):
    """Pagination metadata."""

    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    page_count: int = Field(..., ge=0)
    total: int = Field(..., ge=0)


class RecipeListResponse(APIResponse):
    """One page of recipes, newest first."""

    data: list[RecipeSummary]
    meta: PageMeta


class RecipeSearchResponse(APIResponse):
    """Recipes matching a search query."""

    query: str
    data: list[RecipeSummary]


class RecipeDetailResponse(APIResponse):
    """A single recipe."""

    data: RecipeSummary


class CategoryListResponse(APIResponse):
    """All categories."""

    data: list[CategoryView]
