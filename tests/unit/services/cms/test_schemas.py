"""Unit tests for CMS entry models."""

from __future__ import annotations

import pytest

from app.services.cms.schemas import CmsIngredient, CmsInstruction, CmsMedia, CmsRecipe
from tests.fixtures.cms_responses import create_recipe_entry, create_wrapped_recipe_entry


pytestmark = pytest.mark.unit


class TestCmsRecipe:
    """Tests for CmsRecipe parsing."""

    def test_flat_entry(self) -> None:
        """Should parse a flat entry with camelCase keys."""
        recipe = CmsRecipe.model_validate(create_recipe_entry(7, "stew"))

        assert recipe.id == 7
        assert recipe.document_id == "doc-7"
        assert recipe.prep_time == 5
        assert recipe.cook_time == 10
        assert recipe.tags == ["comfort"]
        assert recipe.published_at is not None

    def test_wrapped_and_flat_shapes_agree(self) -> None:
        """Should read the same values from both response shapes."""
        flat = CmsRecipe.model_validate(create_recipe_entry())
        wrapped = CmsRecipe.model_validate(create_wrapped_recipe_entry())

        assert wrapped.slug == flat.slug
        assert wrapped.servings == flat.servings
        assert [c.slug for c in wrapped.categories] == [c.slug for c in flat.categories]

    def test_plural_gallery_key(self) -> None:
        """Should accept galleryImages as the gallery field."""
        recipe = CmsRecipe.model_validate(
            {"id": 1, "galleryImages": [{"id": 2, "url": "/a.jpg"}]}
        )

        assert [m.url for m in recipe.gallery_image] == ["/a.jpg"]

    @pytest.mark.parametrize("value", [None, {"data": None}])
    def test_empty_relations(self, value: object) -> None:
        """Should read null relations as empty lists."""
        recipe = CmsRecipe.model_validate(
            {"id": 1, "categories": value, "galleryImage": value, "tags": None}
        )

        assert recipe.categories == []
        assert recipe.gallery_image == []
        assert recipe.tags == []

    def test_single_media_becomes_list(self) -> None:
        """Should wrap a single gallery entry in a list."""
        recipe = CmsRecipe.model_validate(
            {"id": 1, "galleryImage": {"id": 2, "url": "/a.jpg"}}
        )

        assert len(recipe.gallery_image) == 1

    def test_ignores_unknown_fields(self) -> None:
        """Should tolerate fields added by the CMS."""
        recipe = CmsRecipe.model_validate({"id": 1, "locale": "en", "rating": 5})

        assert recipe.id == 1


class TestCmsMedia:
    """Tests for CmsMedia."""

    def test_display_url_prefers_medium(self) -> None:
        """Should use the medium rendition when present."""
        media = CmsMedia.model_validate(
            {"id": 1, "url": "/o.jpg", "formats": {"medium": {"url": "/m.jpg"}}}
        )

        assert media.display_url == "/m.jpg"

    def test_display_url_falls_back_to_original(self) -> None:
        """Should use the original without a medium rendition."""
        media = CmsMedia.model_validate(
            {"id": 1, "url": "/o.jpg", "formats": {"small": {"url": "/s.jpg"}}}
        )

        assert media.display_url == "/o.jpg"


class TestCmsIngredient:
    """Tests for CmsIngredient."""

    def test_numeric_quantity_becomes_text(self) -> None:
        """Should render numeric quantities without a trailing .0."""
        whole = CmsIngredient.model_validate({"item": "Flour", "quantity": 2.0})
        fraction = CmsIngredient.model_validate({"item": "Salt", "quantity": 0.5})

        assert whole.quantity == "2"
        assert fraction.quantity == "0.5"

    def test_name_is_an_alias_for_item(self) -> None:
        """Should read the older ``name`` key."""
        ingredient = CmsIngredient.model_validate({"id": 1, "name": "Tomato"})

        assert ingredient.item == "Tomato"
        assert ingredient.unit == ""
        assert ingredient.notes == ""

    def test_nulls_become_blank(self) -> None:
        ingredient = CmsIngredient.model_validate(
            {"item": "Egg", "quantity": None, "unit": None, "notes": None}
        )

        assert (ingredient.quantity, ingredient.unit, ingredient.notes) == ("", "", "")


class TestCmsInstruction:
    """Tests for CmsInstruction."""

    @pytest.mark.parametrize(
        "image",
        [
            {"id": 4, "url": "/uploads/step.jpg"},
            {"data": {"id": 4, "attributes": {"url": "/uploads/step.jpg"}}},
            "/uploads/step.jpg",
        ],
    )
    def test_image_url_from_any_shape(self, image: object) -> None:
        """Should keep only the image URL, whatever the relation shape."""
        step = CmsInstruction.model_validate({"description": "Stir", "image": image})

        assert step.image_url == "/uploads/step.jpg"

    def test_missing_image(self) -> None:
        step = CmsInstruction.model_validate({"description": "Stir", "image": {"data": None}})

        assert step.image_url is None

    def test_text_is_an_alias_for_description(self) -> None:
        """Should read the older ``text`` key."""
        step = CmsInstruction.model_validate({"stepNumber": 2, "text": "Bake"})

        assert step.description == "Bake"
        assert step.step_number == 2

    def test_recipe_reads_components_from_both_shapes(self) -> None:
        """Should parse ingredients and steps in flat and wrapped entries."""
        flat = CmsRecipe.model_validate(create_recipe_entry())
        wrapped = CmsRecipe.model_validate(create_wrapped_recipe_entry())

        assert [i.item for i in flat.ingredients] == ["Tomato", "Basil"]
        assert flat.instructions[0].image_url == "/uploads/step-1.jpg"
        assert wrapped.ingredients[0].item == "Tomato"
        assert wrapped.ingredients[0].quantity == "0.5"
        assert wrapped.instructions[0].description == "Chop"
        assert wrapped.instructions[0].image_url == "/uploads/step-1.jpg"


class TestCmsRecipeMentions:
    """Tests for CmsRecipe.mentions."""

    @pytest.mark.parametrize("text", ["SOUP", "warm", "comfort", "basil", "simmer"])
    def test_matches_any_text_field(self, text: str) -> None:
        """Should match title, description, tags, ingredients and steps."""
        recipe = CmsRecipe.model_validate(create_recipe_entry())

        assert recipe.mentions(text) is True

    def test_no_match(self) -> None:
        recipe = CmsRecipe.model_validate(create_recipe_entry())

        assert recipe.mentions("chocolate") is False

    def test_recipe_without_text(self) -> None:
        assert CmsRecipe(id=1).mentions("soup") is False
