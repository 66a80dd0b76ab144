"""Access gate models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, StrictFloat, StrictInt


class AccessDecision(BaseModel):
    """Outcome of checking a request's recipe-submission credentials.

    Attributes:
        ok: Whether the request may create a recipe.
        error: Client-facing reason when ``ok`` is false.
        code: Stable error code of the failure (see app.auth.exceptions).
        status_code: HTTP status to answer with when ``ok`` is false.
        method: Which credential granted access.
    """

    ok: bool
    error: str | None = None
    code: str | None = None
    status_code: int = 200
    method: Literal["cookie", "grant"] | None = None

    model_config = {"frozen": True}

    @classmethod
    def allow(cls, method: Literal["cookie", "grant"]) -> AccessDecision:
        return cls(ok=True, method=method)

    @classmethod
    def deny(cls, error: str, code: str, status_code: int) -> AccessDecision:
        return cls(ok=False, error=error, code=code, status_code=status_code)


class AccessGrant(BaseModel):
    """Client-held access grant sent as ``Authorization: Bearer <json>``.

    The grant is not signed; only its expiry is checked.
    """

    expires_at: StrictInt | StrictFloat = Field(
        ...,
        alias="expiresAt",
        description="Expiry as Unix epoch milliseconds",
    )

    model_config = {"populate_by_name": True, "extra": "ignore"}
