"""Shared test fixtures."""
import pytest
from httpx import ASGITransport, AsyncClient

from book_registry.dependencies import get_registry
from book_registry.main import app
from book_registry.services.registry import BookRegistry


@pytest.fixture
def registry() -> BookRegistry:
    """Fresh, empty registry."""
    return BookRegistry()


@pytest.fixture
async def client(registry: BookRegistry):
    """Create test client bound to a fresh registry."""
    app.dependency_overrides[get_registry] = lambda: registry
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
