"""Data mappers for transforming between different schema representations.

This package contains functions for mapping CMS entries to API responses.
"""

from app.mappers.recipe import (
    absolute_url,
    build_category_view,
    build_ingredient_view,
    build_instruction_view,
    build_media_url,
    build_recipe_summary,
)


__all__ = [
    "absolute_url",
    "build_category_view",
    "build_ingredient_view",
    "build_instruction_view",
    "build_media_url",
    "build_recipe_summary",
]
