"""Shared test fixtures and configuration for the recipe access service tests.

This module provides settings and credential fixtures used across unit
and integration tests.
"""

from __future__ import annotations

import os

import pytest

# YAML overrides are selected by APP_ENV before any Settings is built
os.environ.setdefault("APP_ENV", "test")

from app.core.config import Settings  # noqa: E402
from app.core.config.settings import (  # noqa: E402
    AccessSettings,
    ApiSettings,
    AppSettings,
    CmsSettings,
    LoggingSettings,
    MetricsSettings,
    ObservabilitySettings,
)
from tests.fixtures.cms_responses import TEST_CMS_URL  # noqa: E402
from tests.fixtures.credentials import TEST_JWT_SECRET, make_session_token  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests: metrics off, fixed secret, fake CMS URL."""
    return Settings(
        APP_ENV="test",
        JWT_SECRET=TEST_JWT_SECRET,
        CMS_API_TOKEN="test-cms-token",
        app=AppSettings(name="test-app", version="0.0.1-test", debug=True),
        api=ApiSettings(prefix="/api", cors_origins=["http://localhost:5173"]),
        access=AccessSettings(),
        cms=CmsSettings(url=TEST_CMS_URL, timeout=5.0),
        logging=LoggingSettings(level="DEBUG", format="json"),
        observability=ObservabilitySettings(metrics=MetricsSettings(enabled=False)),
    )


@pytest.fixture
def chef_token() -> str:
    """Valid session token with the chef role."""
    return make_session_token()
