"""Headless CMS client module."""

from app.services.cms.client import CmsClient
from app.services.cms.exceptions import (
    CmsError,
    CmsNotFoundError,
    CmsResponseError,
    CmsTimeoutError,
    CmsUnavailableError,
)
from app.services.cms.schemas import (
    CmsCategory,
    CmsIngredient,
    CmsInstruction,
    CmsMedia,
    CmsPage,
    CmsPagination,
    CmsRecipe,
    MediaFile,
)


__all__ = [
    "CmsCategory",
    "CmsClient",
    "CmsError",
    "CmsIngredient",
    "CmsInstruction",
    "CmsMedia",
    "CmsNotFoundError",
    "CmsPage",
    "CmsPagination",
    "CmsRecipe",
    "CmsResponseError",
    "CmsTimeoutError",
    "CmsUnavailableError",
    "MediaFile",
]
