"""Integration test fixtures.

The application runs in-process over ASGITransport with a real CmsClient
whose HTTP traffic is served by respx.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import respx
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings, get_settings
from app.factory import create_app
from app.services.cms.client import CmsClient
from tests.fixtures.cms_responses import TEST_CMS_URL


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

    from fastapi import FastAPI


pytestmark = pytest.mark.integration


@pytest.fixture
def cms_mock() -> Generator[respx.MockRouter]:
    """Route table standing in for the CMS."""
    with respx.mock(base_url=TEST_CMS_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
async def cms_client(test_settings: Settings) -> AsyncGenerator[CmsClient]:
    client = CmsClient(test_settings)
    await client.initialize()
    yield client
    await client.shutdown()


@pytest.fixture
def app(test_settings: Settings, cms_client: CmsClient) -> FastAPI:
    """Create FastAPI app with test settings and an initialized CMS client.

    ASGITransport does not run the lifespan, so the state it would set up
    is installed directly.
    """
    app = create_app(test_settings)
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.state.cms_client = cms_client
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        yield ac
