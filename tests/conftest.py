"""Pytest configuration and shared fixtures."""

import httpx
import pytest

from velocityiq.api.dependencies import limiter
from velocityiq.main import app


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture
async def api_client():
    """HTTP client bound to the ASGI app; dependency overrides cleared afterwards."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()
