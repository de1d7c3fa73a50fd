"""API test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - get_db_manager dependency overridden to the test DatabaseSessionManager
    - database.db_manager patched so the readiness probe sees the test DB
"""

import pytest
from httpx import ASGITransport, AsyncClient

import geometry.infrastructure.database as db_module
from geometry.infrastructure.database import get_db_manager
from geometry.main import app


@pytest.fixture
async def client(db_manager):
    """FastAPI test client with DB dependency overridden."""
    app.dependency_overrides[get_db_manager] = lambda: db_manager

    original_manager = db_module.db_manager
    db_module.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
