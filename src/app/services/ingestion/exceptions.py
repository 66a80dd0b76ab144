"""Recipe ingestion exceptions."""

from __future__ import annotations


class IngestionError(Exception):
    """Base exception for recipe ingestion errors."""


class RecipeValidationError(IngestionError):
    """Raised when submitted recipe data fails field validation.

    Only the first failing field is reported.
    """

    def __init__(self, message: str, field: str) -> None:
        self.field = field
        super().__init__(message)
