"""Recipe submission access gate.

A request may create a recipe when it carries either:

1. A signed JWT in the ``access_token`` cookie whose ``role`` claim is
   ``chef``, verified locally against ``JWT_SECRET``; or
2. An ``Authorization: Bearer <json>`` access grant whose ``expiresAt``
   (epoch milliseconds) is still in the future. Grants are not signed; they
   gate casual submissions only.

The cookie takes precedence: when present, the Bearer header is ignored.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import orjson
from jose import jwt
from jose.exceptions import JWTError
from pydantic import ValidationError

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
from app.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from app.core.config import Settings

logger = get_logger(__name__)

BEARER_PREFIX = "Bearer "

# Only signature, exp and nbf are enforced on session tokens
_DECODE_OPTIONS = {
    "verify_aud": False,
    "verify_iat": False,
    "verify_sub": False,
    "verify_jti": False,
    "verify_at_hash": False,
}


def _now() -> datetime:
    return datetime.now(UTC)


class AccessVerifier:
    """Decides whether a request may create a recipe.

    Attributes:
        secret: Shared JWT signing secret; empty when unconfigured.
        algorithms: Accepted JWT signing algorithms.
        cookie_name: Cookie carrying the JWT.
        required_role: Value the ``role`` claim must hold.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithms: list[str] | None = None,
        cookie_name: str = "access_token",
        required_role: str = "chef",
        clock: Callable[[], datetime] = _now,
    ) -> None:
        self.secret = secret
        self.algorithms = algorithms or ["HS256"]
        self.cookie_name = cookie_name
        self.required_role = required_role
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> AccessVerifier:
        return cls(
            settings.JWT_SECRET,
            algorithms=settings.access.jwt_algorithms,
            cookie_name=settings.access.cookie_name,
            required_role=settings.access.required_role,
        )

    def verify(
        self,
        cookies: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> AccessDecision:
        """Check request credentials.

        Args:
            cookies: Request cookies.
            headers: Request headers; ``authorization`` is looked up
                case-insensitively when a Starlette ``Headers`` is passed.

        Returns:
            AccessDecision; never raises for credential problems.
        """
        token = cookies.get(self.cookie_name)
        try:
            if token:
                self._verify_cookie_token(token)
                return AccessDecision.allow("cookie")

            authorization = headers.get("authorization") or ""
            if not authorization.startswith(BEARER_PREFIX):
                msg = "Missing access token"
                raise MissingCredentialError(msg)

            self._verify_grant(authorization[len(BEARER_PREFIX) :])
            logger.info("Recipe submission accepted via unsigned access grant")
            return AccessDecision.allow("grant")

        except AccessError as e:
            logger.debug("Access denied", code=e.code, reason=str(e))
            return AccessDecision.deny(str(e), e.code, e.status_code)

    def _verify_cookie_token(self, token: str) -> None:
        if not self.secret:
            logger.error("JWT_SECRET is not configured; cookie tokens cannot be verified")
            msg = "Missing JWT_SECRET"
            raise ConfigError(msg)

        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=self.algorithms,
                options=_DECODE_OPTIONS,
            )
        except JWTError as e:
            msg = "Invalid token"
            raise InvalidTokenError(msg) from e

        if claims.get("role") != self.required_role:
            msg = f"Forbidden: not a {self.required_role}"
            raise ForbiddenError(msg)

    def _verify_grant(self, raw_grant: str) -> None:
        try:
            grant = AccessGrant.model_validate(orjson.loads(raw_grant))
        except (orjson.JSONDecodeError, ValidationError) as e:
            msg = "Invalid access grant"
            raise InvalidGrantError(msg) from e

        now_ms = self._clock().timestamp() * 1000
        if now_ms >= grant.expires_at:
            msg = "Access grant expired"
            raise GrantExpiredError(msg)
