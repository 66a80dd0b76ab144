"""Credential builders for access gate tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import jwt


TEST_JWT_SECRET = "test-jwt-secret-for-recipe-access"


def make_session_token(
    role: str = "chef",
    secret: str = TEST_JWT_SECRET,
    **claims: Any,
) -> str:
    """Sign a session token the way the auth frontend does."""
    payload = {
        "sub": "user-1",
        "role": role,
        "exp": datetime.now(UTC) + timedelta(hours=1),
        **claims,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_grant_header(expires_at: Any) -> str:
    """Build an ``Authorization`` value carrying a JSON access grant."""
    return f'Bearer {{"expiresAt": {expires_at}}}'
