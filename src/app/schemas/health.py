"""Health check schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from app.schemas.base import APIResponse


class HealthResponse(APIResponse):
    """Service and CMS database are reachable."""

    ok: bool = Field(default=True, description="Overall health")
    db: bool = Field(..., description="Whether the probe read returned a record")
    ts: datetime = Field(..., description="Time of the check")


class HealthFailureResponse(APIResponse):
    """The CMS probe failed."""

    ok: bool = Field(default=False, description="Overall health")
    db: bool = Field(default=False, description="Database reachability")
    error: str = Field(..., description="Failure reason")
