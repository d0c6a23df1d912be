"""API test fixtures — fresh cart registry + FastAPI test client.

Invariants:
    - Every test gets its own CartRegistry seeded with the default catalog
    - get_registry dependency overridden to use that registry

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real app without a server;
      lifespan is not run, so the registry is injected instead of initialized
"""

import pytest
from httpx import ASGITransport, AsyncClient

from shopcart.core.catalog import default_catalog
from shopcart.infrastructure.cart_registry import CartRegistry, get_registry
from shopcart.main import app


@pytest.fixture
def registry():
    return CartRegistry(default_catalog(), max_carts=3)


@pytest.fixture
async def client(registry):
    """FastAPI test client with the registry dependency overridden."""
    app.dependency_overrides[get_registry] = lambda: registry

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def cart_id(client):
    res = await client.post("/api/v1/carts")
    return res.json()["cart_id"]
