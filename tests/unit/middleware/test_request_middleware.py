"""Unit tests for request ID and logging middleware."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from unittest.mock import patch

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from app.core.middleware import LoggingMiddleware, RequestIDMiddleware
from app.observability.logging import get_context


pytestmark = pytest.mark.unit


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(LoggingMiddleware, exclude_paths={"/api/health"})
    app.add_middleware(RequestIDMiddleware)

    @app.get("/api/echo")
    async def echo(request: Request) -> dict[str, object]:
        return {"request_id": request.state.request_id, "context": get_context()}

    @app.get("/api/health")
    async def health() -> dict[str, bool]:
        return {"ok": True}

    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware."""

    async def test_generates_request_id(self, client: AsyncClient) -> None:
        """Should generate an ID and echo it in the response header."""
        response = await client.get("/api/echo")

        request_id = response.headers["X-Request-ID"]
        assert request_id
        assert response.json()["request_id"] == request_id

    async def test_propagates_incoming_request_id(self, client: AsyncClient) -> None:
        """Should reuse an incoming X-Request-ID."""
        response = await client.get("/api/echo", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
        assert response.json()["context"]["request_id"] == "abc-123"


class TestLoggingMiddleware:
    """Tests for LoggingMiddleware."""

    async def test_binds_request_context(self, client: AsyncClient) -> None:
        """Should bind method, path and client IP for handlers."""
        response = await client.get(
            "/api/echo",
            headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"},
        )

        context = response.json()["context"]
        assert context["method"] == "GET"
        assert context["path"] == "/api/echo"
        assert context["client_ip"] == "203.0.113.7"

    async def test_logs_completion(self, client: AsyncClient) -> None:
        """Should log the response status and duration."""
        with patch("app.core.middleware.logging.logger") as mock_logger:
            await client.get("/api/echo")

        messages = [c.args[0] for c in mock_logger.info.call_args_list]
        assert messages == ["Request started", "Request completed"]
        completed = mock_logger.info.call_args_list[-1].kwargs
        assert completed["status_code"] == 200
        assert "duration_ms" in completed

    async def test_skips_excluded_paths(self, client: AsyncClient) -> None:
        """Should not log excluded paths."""
        with patch("app.core.middleware.logging.logger") as mock_logger:
            await client.get("/api/health")

        mock_logger.info.assert_not_called()

    async def test_flags_slow_requests(self) -> None:
        """Should warn when a request exceeds the threshold."""
        slow_app = FastAPI()
        slow_app.add_middleware(LoggingMiddleware, slow_threshold=-1.0)

        @slow_app.get("/x")
        async def x() -> dict[str, bool]:
            return {"ok": True}

        with patch("app.core.middleware.logging.logger") as mock_logger:
            async with AsyncClient(
                transport=ASGITransport(app=slow_app), base_url="http://test"
            ) as ac:
                await ac.get("/x")

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "Slow request detected"
