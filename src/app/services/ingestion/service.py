"""Recipe ingestion service.

Turns a validated draft into a published CMS recipe:

1. Resolve category slugs to category ids
2. Create the recipe entry
3. Upload cover and gallery images (failures are logged, never fatal)
4. Link each resolved category to the recipe
5. Publish the recipe

The steps are not transactional. A failure after step 2 leaves the recipe
in the CMS, possibly unpublished or partially linked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.observability.logging import get_logger
from app.services.ingestion.models import IngestionResult


if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.services.cms.client import CmsClient
    from app.services.cms.schemas import CmsRecipe
    from app.services.ingestion.models import RecipeDraft

logger = get_logger(__name__)


class RecipeIngestionService:
    """Orchestrates recipe creation against the CMS."""

    def __init__(self, cms_client: CmsClient) -> None:
        self._cms = cms_client

    async def resolve_categories(self, slugs: Sequence[str]) -> list[int]:
        """Map category slugs to category ids.

        The lookup is bounded by the number of requested slugs. Unknown
        slugs are dropped without error.
        """
        if not slugs:
            return []
        categories = await self._cms.find_categories(
            slugs,
            limit=len(slugs),
            fields=["id", "slug"],
        )
        category_ids = [category.id for category in categories]
        if len(category_ids) < len(slugs):
            logger.debug(
                "Some category slugs did not match",
                requested=list(slugs),
                matched=[category.slug for category in categories],
            )
        return category_ids

    async def ingest(self, draft: RecipeDraft) -> IngestionResult:
        """Create, enrich and publish a recipe from a draft.

        Raises:
            CmsError: If creating, linking or publishing fails.
        """
        category_ids = await self.resolve_categories(draft.category_slugs)

        recipe = await self._cms.create_recipe(draft.attributes)
        recipe_ref = recipe.document_id or recipe.id

        await self._attach_media(recipe, draft)

        for category_id in category_ids:
            await self._cms.link_category(category_id, recipe_ref)

        await self._cms.publish_recipe(recipe_ref)

        logger.info(
            "Recipe ingested",
            recipe_id=recipe.id,
            slug=draft.slug,
            categories=len(category_ids),
        )
        return IngestionResult(
            id=recipe.id,
            slug=recipe.slug or draft.slug,
            document_id=recipe.document_id,
        )

    async def _attach_media(self, recipe: CmsRecipe, draft: RecipeDraft) -> None:
        """Upload cover and gallery images keyed by the recipe's numeric id.

        A failed cover upload skips the gallery. Upload failures never abort
        ingestion.
        """
        try:
            if draft.cover_image is not None:
                await self._cms.upload_media(recipe.id, "coverImage", [draft.cover_image])
            if draft.gallery_images:
                await self._cms.upload_media(recipe.id, "galleryImage", draft.gallery_images)
        except Exception:
            logger.opt(exception=True).warning(
                "Media upload failed, continuing without media",
                recipe_id=recipe.id,
            )
