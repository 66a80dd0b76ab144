"""Recipe ingestion module."""

from app.services.ingestion.exceptions import IngestionError, RecipeValidationError
from app.services.ingestion.models import IngestionResult, RecipeDraft, Submission
from app.services.ingestion.multipart import parse_submission
from app.services.ingestion.service import RecipeIngestionService
from app.services.ingestion.slug import slugify
from app.services.ingestion.validation import find_validation_error, validate_recipe_data


__all__ = [
    "IngestionError",
    "IngestionResult",
    "RecipeDraft",
    "RecipeIngestionService",
    "RecipeValidationError",
    "Submission",
    "find_validation_error",
    "parse_submission",
    "slugify",
    "validate_recipe_data",
]
