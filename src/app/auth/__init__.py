"""Recipe submission access gate.

This module provides:
- Cookie JWT verification for chefs
- Expiry checks for client-held access grants
- FastAPI dependencies that turn decisions into 401/403 responses
"""

from app.auth.access import AccessVerifier
from app.auth.dependencies import (
    RecipeAccess,
    get_access_verifier,
    require_recipe_access,
)
from app.auth.exceptions import (
    AccessError,
    ConfigError,
    ForbiddenError,
    GrantExpiredError,
    InvalidGrantError,
    InvalidTokenError,
    MissingCredentialError,
)
from app.auth.models import AccessDecision, AccessGrant


__all__ = [
    "AccessDecision",
    "AccessError",
    "AccessGrant",
    "AccessVerifier",
    "ConfigError",
    "ForbiddenError",
    "GrantExpiredError",
    "InvalidGrantError",
    "InvalidTokenError",
    "MissingCredentialError",
    "RecipeAccess",
    "get_access_verifier",
    "require_recipe_access",
]
