"""Recipe-related data mappers.

This module contains functions for transforming CMS entries into API
response schemas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.schemas import CategoryView, IngredientView, InstructionView, RecipeSummary


if TYPE_CHECKING:
    from app.services.cms.schemas import (
        CmsCategory,
        CmsIngredient,
        CmsInstruction,
        CmsMedia,
        CmsRecipe,
    )


def absolute_url(url: str | None, media_base: str) -> str | None:
    """Prefix CMS-hosted paths with the media base; absolute URLs pass through."""
    if not url:
        return None
    if url.startswith("http"):
        return url
    return f"{media_base.rstrip('/')}{url}"


def build_media_url(media: CmsMedia | None, media_base: str) -> str | None:
    """Absolute URL for a media entry, preferring the medium rendition."""
    if media is None:
        return None
    return absolute_url(media.display_url, media_base)


def build_category_view(category: CmsCategory) -> CategoryView:
    return CategoryView(id=category.id, name=category.name, slug=category.slug)


def build_ingredient_view(ingredient: CmsIngredient) -> IngredientView:
    return IngredientView(
        id=ingredient.id,
        item=ingredient.item,
        quantity=ingredient.quantity,
        unit=ingredient.unit,
        notes=ingredient.notes,
    )


def build_instruction_view(
    instruction: CmsInstruction,
    position: int,
    media_base: str,
) -> InstructionView:
    """Build API view of a step.

    Args:
        instruction: Step component from the CMS.
        position: 1-based position, used when the step has no number.
        media_base: Base URL for a relative step image path.
    """
    step_number = instruction.step_number
    return InstructionView(
        id=instruction.id,
        step_number=position if step_number is None else step_number,
        description=instruction.description,
        image_url=absolute_url(instruction.image_url, media_base),
        tips=instruction.tips,
    )


def build_recipe_summary(recipe: CmsRecipe, media_base: str) -> RecipeSummary:
    """Build API view of a CMS recipe.

    Args:
        recipe: Recipe entry from the CMS.
        media_base: Base URL for relative media paths.

    Returns:
        RecipeSummary for the client.
    """
    gallery_urls = [build_media_url(media, media_base) for media in recipe.gallery_image]

    return RecipeSummary(
        id=recipe.id,
        document_id=recipe.document_id,
        slug=recipe.slug,
        title=recipe.title,
        description=recipe.description,
        prep_time=recipe.prep_time,
        cook_time=recipe.cook_time,
        servings=recipe.servings,
        difficulty=recipe.difficulty,
        tags=recipe.tags,
        cover_image_url=build_media_url(recipe.cover_image, media_base),
        gallery_image_urls=[url for url in gallery_urls if url],
        ingredients=[build_ingredient_view(item) for item in recipe.ingredients],
        instructions=[
            build_instruction_view(step, position, media_base)
            for position, step in enumerate(recipe.instructions, start=1)
        ],
        categories=[build_category_view(category) for category in recipe.categories],
        published_at=recipe.published_at,
        created_at=recipe.created_at,
        updated_at=recipe.updated_at,
    )
