"""Typed views of CMS entries.

The CMS answers either with flat entries (``{"id": 1, "documentId": "...",
"title": ...}``) or with the older wrapped shape (``{"id": 1, "attributes":
{...}}`` and relations as ``{"data": ...}``). Both are normalized once, in
``CmsEntry``'s pre-validation hook; nothing downstream inspects raw shapes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import Field, field_validator, model_validator

from app.schemas.base import DownstreamResponse


def _unwrap_relation(value: Any) -> Any:
    """Turn ``{"data": x}`` relation wrappers into ``x``."""
    if isinstance(value, dict) and set(value) == {"data"}:
        return value["data"]
    return value


class CmsEntry(DownstreamResponse):
    """Base class for CMS entries."""

    id: int
    document_id: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _flatten(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        if isinstance(value.get("attributes"), dict):
            value = {"id": value.get("id"), **value["attributes"]}
        return cls._normalize(
            {key: _unwrap_relation(item) for key, item in value.items()}
        )

    @classmethod
    def _normalize(cls, value: dict[str, Any]) -> dict[str, Any]:
        """Hook for entry-specific key adjustments on the flattened dict."""
        return value


class CmsMedia(CmsEntry):
    """Uploaded media file."""

    url: str
    name: str | None = None
    mime: str | None = None
    formats: dict[str, Any] | None = None

    @property
    def display_url(self) -> str:
        """Medium rendition when available, else the original."""
        medium = (self.formats or {}).get("medium")
        if isinstance(medium, dict) and medium.get("url"):
            return str(medium["url"])
        return self.url


class CmsCategory(CmsEntry):
    """Recipe category."""

    name: str | None = None
    slug: str | None = None


class CmsIngredient(DownstreamResponse):
    """Ingredient component of a recipe."""

    id: int | None = None
    item: str = ""
    quantity: str = ""
    unit: str = ""
    notes: str = ""

    @model_validator(mode="before")
    @classmethod
    def _accept_name(cls, value: Any) -> Any:
        if isinstance(value, dict) and not value.get("item") and value.get("name"):
            return {**value, "item": value["name"]}
        return value

    @field_validator("item", "quantity", "unit", "notes", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        # Quantities are often stored as numbers
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class CmsInstruction(DownstreamResponse):
    """Instruction step component of a recipe.

    ``image`` may arrive as a media relation (wrapped or flat) or as a bare
    URL string; only its URL is kept, as ``image_url``.
    """

    id: int | None = None
    step_number: int | None = None
    description: str = ""
    image_url: str | None = None
    tips: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _flatten(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        value = dict(value)
        if not value.get("description") and value.get("text"):
            value["description"] = value["text"]

        image = _unwrap_relation(value.pop("image", None))
        if isinstance(image, dict):
            attributes = image.get("attributes")
            image = (attributes if isinstance(attributes, dict) else image).get("url")
        if isinstance(image, str) and image:
            value["imageUrl"] = image
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value


class CmsRecipe(CmsEntry):
    """Recipe entry."""

    slug: str | None = None
    title: str | None = None
    description: str | None = None
    prep_time: int | None = None
    cook_time: int | None = None
    servings: int | None = None
    difficulty: str | None = None
    tags: list[str] = Field(default_factory=list)
    cover_image: CmsMedia | None = None
    gallery_image: list[CmsMedia] = Field(default_factory=list)
    ingredients: list[CmsIngredient] = Field(default_factory=list)
    instructions: list[CmsInstruction] = Field(default_factory=list)
    categories: list[CmsCategory] = Field(default_factory=list)
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def _normalize(cls, value: dict[str, Any]) -> dict[str, Any]:
        # Older content types name the gallery field in the plural
        if "galleryImage" not in value and value.get("galleryImages") is not None:
            value["galleryImage"] = value.pop("galleryImages")
        return value

    @field_validator(
        "tags",
        "gallery_image",
        "categories",
        "ingredients",
        "instructions",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, dict):
            return [value]
        return value

    def mentions(self, text: str) -> bool:
        """Case-insensitive match on title, description, tags, ingredients and steps."""
        needle = text.lower()
        haystack = [
            self.title or "",
            self.description or "",
            *self.tags,
            *(ingredient.item for ingredient in self.ingredients),
            *(step.description for step in self.instructions),
        ]
        return any(needle in value.lower() for value in haystack)


class CmsPagination(DownstreamResponse):
    """Pagination block from a collection response's ``meta``."""

    page: int = 1
    page_size: int = 25
    page_count: int = 0
    total: int = 0


EntryT = TypeVar("EntryT", bound=CmsEntry)


@dataclass(frozen=True)
class CmsPage(Generic[EntryT]):
    """One page of a collection."""

    items: list[EntryT]
    pagination: CmsPagination


@dataclass(frozen=True)
class MediaFile:
    """An uploaded file held in memory, ready to forward to the CMS."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"
