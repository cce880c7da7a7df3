"""API test fixtures — FastAPI app over an in-process ASGI transport."""

import pytest
from httpx import ASGITransport, AsyncClient

from layered_add.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def lenient_client():
    """Client that receives the catch-all 500 instead of the re-raised app exception."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
