"""Pydantic schemas for request/response validation.

This module exports all schema classes for the recipe access API.
"""

# Base classes
from app.schemas.base import (
    APIResponse,
    DownstreamResponse,
)

# Health schemas
from app.schemas.health import HealthFailureResponse, HealthResponse

# Recipe schemas
from app.schemas.recipe import (
    CategoryListResponse,
    CategoryView,
    CreateFromAccessResponse,
    IngredientView,
    InstructionView,
    PageMeta,
    RecipeDetailResponse,
    RecipeListResponse,
    RecipeSearchResponse,
    RecipeSummary,
)


__all__ = [
    "APIResponse",
    "CategoryListResponse",
    "CategoryView",
    "CreateFromAccessResponse",
    "DownstreamResponse",
    "HealthFailureResponse",
    "HealthResponse",
    "IngredientView",
    "InstructionView",
    "PageMeta",
    "RecipeDetailResponse",
    "RecipeListResponse",
    "RecipeSearchResponse",
    "RecipeSummary",
]
