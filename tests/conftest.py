"""Pytest configuration and fixtures for the product service."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tronics.application import create_app
from tronics.services.product_registry import ProductRegistry


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "asyncio: marks tests as async tests")


@pytest.fixture()
def registry():
    """Provide an empty registry for each test."""
    return ProductRegistry()


@pytest.fixture()
def app(registry):
    """Build an application that owns the per-test registry."""
    return create_app(registry)


@pytest_asyncio.fixture()
async def client(app):
    """Return an HTTPX async client pointing at the FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client
