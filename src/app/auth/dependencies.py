"""FastAPI security dependencies for the recipe submission gate."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request, status

from app.auth.access import AccessVerifier
from app.auth.models import AccessDecision
from app.core.config import get_settings
from app.core.exceptions import ForbiddenException, UnauthorizedException


def get_access_verifier(request: Request) -> AccessVerifier:
    """Build the access verifier from the settings the app was created with.

    Falls back to the cached application settings when the app carries none.
    """
    settings = getattr(request.app.state, "settings", None) or get_settings()
    return AccessVerifier.from_settings(settings)


async def require_recipe_access(
    request: Request,
    verifier: Annotated[AccessVerifier, Depends(get_access_verifier)],
) -> AccessDecision:
    """Reject the request unless it may create recipes.

    Returns:
        The successful AccessDecision.

    Raises:
        ForbiddenException: 403 for a valid token with the wrong role.
        UnauthorizedException: 401 for every other failure.
    """
    decision = verifier.verify(request.cookies, request.headers)
    if decision.ok:
        return decision

    message = decision.error or "Access denied"
    code = decision.code or "ACCESS_DENIED"
    if decision.status_code == status.HTTP_403_FORBIDDEN:
        raise ForbiddenException(message, code=code)
    raise UnauthorizedException(message, code=code)


RecipeAccess = Annotated[AccessDecision, Depends(require_recipe_access)]
