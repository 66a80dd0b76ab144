"""CMS client exceptions.

These exceptions are caught by the endpoint layer and converted to
appropriate HTTP responses, or left to propagate where a CMS failure
must abort the request.
"""

from __future__ import annotations

from typing import Any


class CmsError(Exception):
    """Base exception for CMS client errors."""


class CmsUnavailableError(CmsError):
    """Raised when the CMS cannot be reached."""


class CmsTimeoutError(CmsUnavailableError):
    """Raised when a request to the CMS times out."""


class CmsResponseError(CmsError):
    """Raised when the CMS answers with an HTTP error status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class CmsNotFoundError(CmsResponseError):
    """Raised when a requested entry does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(status_code=404, message=message)
