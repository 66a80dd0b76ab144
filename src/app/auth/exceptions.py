"""Access gate exceptions.

Raised by the access verifier and converted into an AccessDecision.
The ``code`` attribute is stable and drives the HTTP status mapping.
"""

from __future__ import annotations


class AccessError(Exception):
    """Base exception for rejected recipe-submission credentials."""

    code = "ACCESS_DENIED"
    status_code = 401


class ConfigError(AccessError):
    """Raised when the JWT signing secret is not configured."""

    code = "CONFIG_ERROR"


class InvalidTokenError(AccessError):
    """Raised when the cookie JWT fails signature or claim verification."""

    code = "INVALID_TOKEN"


class ForbiddenError(AccessError):
    """Raised when a valid token carries a role other than the required one."""

    code = "FORBIDDEN"
    status_code = 403


class InvalidGrantError(AccessError):
    """Raised when a Bearer access grant is not a JSON object with expiresAt."""

    code = "INVALID_GRANT"


class GrantExpiredError(AccessError):
    """Raised when a Bearer access grant is past its expiresAt."""

    code = "GRANT_EXPIRED"


class MissingCredentialError(AccessError):
    """Raised when neither a cookie token nor a Bearer grant is present."""

    code = "MISSING_CREDENTIAL"
