"""Unit tests for the application factory."""

from __future__ import annotations

import pytest
from fastapi.routing import APIRoute

from app.core.config import Settings
from app.factory import create_app


pytestmark = pytest.mark.unit


def _paths(settings: Settings) -> set[str]:
    app = create_app(settings)
    return {route.path for route in app.routes if isinstance(route, APIRoute)}


class TestCreateApp:
    """Tests for create_app."""

    def test_mounts_routes_under_prefix(self, test_settings: Settings) -> None:
        """Should mount every endpoint under /api."""
        assert {
            "/api/health",
            "/api/recipes/create-from-access",
            "/api/recipes",
            "/api/recipes/search",
            "/api/recipes/{slug}",
            "/api/categories",
        } <= _paths(test_settings)

    def test_search_is_matched_before_slug(self, test_settings: Settings) -> None:
        """Should register the search route ahead of the slug route."""
        app = create_app(test_settings)
        paths = [route.path for route in app.routes if isinstance(route, APIRoute)]

        assert paths.index("/api/recipes/search") < paths.index("/api/recipes/{slug}")

    def test_stores_settings(self, test_settings: Settings) -> None:
        """Should keep the settings on app state."""
        app = create_app(test_settings)

        assert app.state.settings is test_settings
        assert app.title == "test-app"

    def test_docs_disabled_in_production(self, test_settings: Settings) -> None:
        """Should not serve API docs in production."""
        settings = test_settings.model_copy(update={"APP_ENV": "production"})

        app = create_app(settings)

        assert app.docs_url is None
        assert app.openapi_url is None

    def test_docs_enabled_outside_production(self, test_settings: Settings) -> None:
        """Should serve API docs under the prefix."""
        assert create_app(test_settings).docs_url == "/api/docs"
