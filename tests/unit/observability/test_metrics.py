"""Unit tests for metrics setup."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi import FastAPI

from app.core.config import Settings
from app.core.config.settings import MetricsSettings, ObservabilitySettings
from app.observability.metrics import setup_metrics


pytestmark = pytest.mark.unit


class TestSetupMetrics:
    """Tests for setup_metrics."""

    def test_disabled_returns_none(self, test_settings: Settings) -> None:
        """Should skip instrumentation when disabled."""
        app = FastAPI()

        assert setup_metrics(app, test_settings) is None
        assert not any(getattr(r, "path", "") == "/api/metrics" for r in app.routes)

    def test_enabled_exposes_endpoint(self, test_settings: Settings) -> None:
        """Should instrument the app and expose the metrics route."""
        settings = test_settings.model_copy(
            update={
                "observability": ObservabilitySettings(
                    metrics=MetricsSettings(enabled=True)
                )
            }
        )
        app = FastAPI()

        with patch("app.observability.metrics.Instrumentator") as instrumentator_cls:
            result = setup_metrics(app, settings)

        instrumentator = instrumentator_cls.return_value
        assert result is instrumentator
        instrumentator.instrument.assert_called_once_with(app)
        instrumentator.expose.assert_called_once_with(
            app, endpoint="/api/metrics", tags=["Monitoring"]
        )
        excluded = instrumentator_cls.call_args.kwargs["excluded_handlers"]
        assert "/api/health" in excluded
