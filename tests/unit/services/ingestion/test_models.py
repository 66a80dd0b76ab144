"""Unit tests for recipe drafts."""

from __future__ import annotations

from typing import Any
from unittest.mock import patch

import pytest

from app.services.cms.schemas import MediaFile
from app.services.ingestion.exceptions import RecipeValidationError
from app.services.ingestion.models import RecipeDraft, Submission


pytestmark = pytest.mark.unit


@pytest.fixture
def data() -> dict[str, Any]:
    return {
        "title": "Spaghetti Carbonara!",
        "description": "Roman classic",
        "prepTime": 10,
        "cookTime": 15,
        "servings": 4,
        "ingredients": [{"name": "guanciale"}],
    }


class TestRecipeDraftFromSubmission:
    """Tests for RecipeDraft.from_submission."""

    def test_generates_slug_from_title(self, data: dict[str, Any]) -> None:
        """Should slugify the title when no slug is given."""
        draft = RecipeDraft.from_submission(Submission(data=data))

        assert draft.slug == "spaghetti-carbonara"
        assert draft.attributes["slug"] == "spaghetti-carbonara"

    def test_keeps_supplied_slug(self, data: dict[str, Any]) -> None:
        """Should use a supplied non-empty slug unchanged."""
        data["slug"] = "carbonara"

        draft = RecipeDraft.from_submission(Submission(data=data))

        assert draft.slug == "carbonara"

    @pytest.mark.parametrize("slug", ["", None, 12])
    def test_unusable_slug_is_replaced(self, data: dict[str, Any], slug: object) -> None:
        """Should generate a slug when the supplied one is empty or not a string."""
        data["slug"] = slug

        draft = RecipeDraft.from_submission(Submission(data=data))

        assert draft.slug == "spaghetti-carbonara"

    def test_category_slugs_are_not_stored_on_recipe(self, data: dict[str, Any]) -> None:
        """Should move categorySlugs out of the recipe attributes."""
        data["categorySlugs"] = ["pasta", "", 7, "italian"]

        draft = RecipeDraft.from_submission(Submission(data=data))

        assert draft.category_slugs == ["pasta", "italian"]
        assert "categorySlugs" not in draft.attributes

    def test_passes_through_extra_fields(self, data: dict[str, Any]) -> None:
        """Should keep fields the validator does not know about."""
        draft = RecipeDraft.from_submission(Submission(data=data))

        assert draft.attributes["ingredients"] == [{"name": "guanciale"}]
        assert draft.attributes["prepTime"] == 10

    def test_carries_files(self, data: dict[str, Any]) -> None:
        """Should take cover and gallery images from the submission."""
        cover = MediaFile("c.jpg", b"c")
        gallery = [MediaFile("g.jpg", b"g")]

        draft = RecipeDraft.from_submission(
            Submission(data=data, files={"coverImage": [cover], "galleryImage": gallery})
        )

        assert draft.cover_image == cover
        assert draft.gallery_images == gallery

    def test_uses_first_of_several_covers(self, data: dict[str, Any]) -> None:
        """Should keep the first cover and log the ones it drops."""
        covers = [MediaFile("a.jpg", b"a"), MediaFile("b.jpg", b"b"), MediaFile("c.jpg", b"c")]

        with patch("app.services.ingestion.models.logger") as mock_logger:
            draft = RecipeDraft.from_submission(
                Submission(data=data, files={"coverImage": covers})
            )

        assert draft.cover_image == covers[0]
        mock_logger.debug.assert_called_once_with("Ignoring extra cover images", ignored=2)

    def test_single_cover_is_not_logged(self, data: dict[str, Any]) -> None:
        with patch("app.services.ingestion.models.logger") as mock_logger:
            RecipeDraft.from_submission(
                Submission(data=data, files={"coverImage": [MediaFile("a.jpg", b"a")]})
            )

        mock_logger.debug.assert_not_called()

    def test_invalid_data_raises(self, data: dict[str, Any]) -> None:
        """Should raise before building a draft."""
        data["servings"] = 0

        with pytest.raises(RecipeValidationError, match="servings must be integer >= 1"):
            RecipeDraft.from_submission(Submission(data=data))

    def test_integral_floats_become_ints(self, data: dict[str, Any]) -> None:
        """Should normalize numeric fields to int."""
        data["servings"] = 4.0

        draft = RecipeDraft.from_submission(Submission(data=data))

        assert draft.servings == 4
        assert isinstance(draft.servings, int)
