"""Recipe ingestion models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from app.observability.logging import get_logger
from app.services.ingestion.slug import slugify
from app.services.ingestion.validation import validate_recipe_data


if TYPE_CHECKING:
    from app.services.cms.schemas import MediaFile

logger = get_logger(__name__)


# Keys of the submitted data that are consumed here rather than stored on the recipe
_NON_RECIPE_KEYS = frozenset({"categorySlugs"})


@dataclass(frozen=True)
class Submission:
    """Raw multipart submission: decoded ``data`` JSON plus uploaded files."""

    data: dict[str, Any]
    files: dict[str, list[MediaFile]] = field(default_factory=dict)

    @property
    def cover_image(self) -> MediaFile | None:
        """First ``coverImage`` part.

        A recipe holds a single cover, so later parts are not used.
        """
        covers = self.files.get("coverImage") or []
        return covers[0] if covers else None

    @property
    def gallery_images(self) -> list[MediaFile]:
        return self.files.get("galleryImage") or self.files.get("galleryImages") or []


@dataclass(frozen=True)
class RecipeDraft:
    """A validated recipe submission, consumed once by the ingestion service.

    ``attributes`` holds every submitted field that is stored on the recipe
    entry, including pass-through fields such as ingredients or tags, with
    the final slug filled in.
    """

    title: str
    description: str
    prep_time: int
    cook_time: int
    servings: int
    slug: str
    category_slugs: list[str] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)
    cover_image: MediaFile | None = None
    gallery_images: list[MediaFile] = field(default_factory=list)

    @classmethod
    def from_submission(cls, submission: Submission) -> RecipeDraft:
        """Validate a submission and derive the slug when none was given.

        Raises:
            RecipeValidationError: For the first failing field.
        """
        data = submission.data
        validate_recipe_data(data)

        extra_covers = len(submission.files.get("coverImage") or []) - 1
        if extra_covers > 0:
            logger.debug("Ignoring extra cover images", ignored=extra_covers)

        slug = data.get("slug")
        if not isinstance(slug, str) or not slug:
            slug = slugify(data["title"])

        raw_slugs = data.get("categorySlugs")
        category_slugs = (
            [s for s in raw_slugs if isinstance(s, str) and s]
            if isinstance(raw_slugs, list)
            else []
        )

        attributes = {k: v for k, v in data.items() if k not in _NON_RECIPE_KEYS}
        attributes["slug"] = slug

        return cls(
            title=data["title"],
            description=data["description"],
            prep_time=int(data["prepTime"]),
            cook_time=int(data["cookTime"]),
            servings=int(data["servings"]),
            slug=slug,
            category_slugs=category_slugs,
            attributes=attributes,
            cover_image=submission.cover_image,
            gallery_images=submission.gallery_images,
        )


@dataclass(frozen=True)
class IngestionResult:
    """Identifiers of a created and published recipe."""

    id: int
    slug: str
    document_id: str | None = None
