"""Field validation for submitted recipe data.

Checks run in a fixed order and stop at the first failure:
title, description, prepTime, cookTime, servings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.services.ingestion.exceptions import RecipeValidationError


if TYPE_CHECKING:
    from collections.abc import Mapping


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_integer(value: Any) -> bool:
    # JSON has a single number type; 5.0 counts as an integer, true does not
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _is_integer_at_least(value: Any, minimum: int) -> bool:
    return _is_integer(value) and value >= minimum


_RULES: tuple[tuple[str, Any, str], ...] = (
    ("title", _is_non_empty_string, "title is required"),
    ("description", _is_non_empty_string, "description is required"),
    ("prepTime", lambda v: _is_integer_at_least(v, 0), "prepTime must be integer >= 0"),
    ("cookTime", lambda v: _is_integer_at_least(v, 0), "cookTime must be integer >= 0"),
    ("servings", lambda v: _is_integer_at_least(v, 1), "servings must be integer >= 1"),
)


def find_validation_error(data: Mapping[str, Any]) -> RecipeValidationError | None:
    """Return the first failing field as an error, or None when data is valid."""
    for field, check, message in _RULES:
        if not check(data.get(field)):
            return RecipeValidationError(message, field)
    return None


def validate_recipe_data(data: Mapping[str, Any]) -> None:
    """Validate submitted recipe data.

    Raises:
        RecipeValidationError: For the first failing field.
    """
    error = find_validation_error(data)
    if error is not None:
        raise error
