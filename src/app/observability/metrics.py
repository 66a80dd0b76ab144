"""Prometheus metrics instrumentation.

Request count, latency and in-progress gauges are collected automatically
and exposed at ``{api.prefix}/metrics``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_fastapi_instrumentator import Instrumentator, metrics

from app.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from app.core.config import Settings

logger = get_logger(__name__)

METRIC_NAMESPACE = "recipe_access"


def setup_metrics(app: FastAPI, settings: Settings) -> Instrumentator | None:
    """Instrument the application and mount the metrics endpoint.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.

    Returns:
        The configured Instrumentator, or None when metrics are disabled.
    """
    if not settings.observability.metrics.enabled:
        logger.info("Metrics collection disabled")
        return None

    prefix = settings.api.prefix
    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=[
            f"{prefix}/health",
            f"{prefix}/metrics",
        ],
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True,
    )
    instrumentator.add(
        metrics.default(
            metric_namespace=METRIC_NAMESPACE,
            metric_subsystem="http",
        )
    )
    # Multipart uploads dominate request size on the ingestion route
    instrumentator.add(
        metrics.request_size(
            should_include_handler=True,
            should_include_method=True,
            should_include_status=True,
            metric_namespace=METRIC_NAMESPACE,
            metric_subsystem="http",
        )
    )
    instrumentator.instrument(app)

    endpoint = f"{prefix}/metrics"
    instrumentator.expose(app, endpoint=endpoint, tags=["Monitoring"])
    logger.info("Prometheus metrics configured", endpoint=endpoint)

    return instrumentator


__all__ = ["setup_metrics"]
