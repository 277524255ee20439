"""API test fixtures — FastAPI app served over httpx ASGITransport.

Invariants:
    - get_db dependency overridden to use the per-test in-memory database
    - db_manager patched so the readiness probe sees the test database
"""

import pytest
from httpx import ASGITransport, AsyncClient

import records_api.infrastructure.database as db_module
from records_api.infrastructure.database import get_db
from records_api.main import app


@pytest.fixture
async def client(test_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
