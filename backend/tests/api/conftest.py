"""API test fixtures — seeded SQLite store + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - Lifespan is not run: the app never touches the configured DATABASE_URL

Design Decisions:
    - httpx ASGITransport with base_url http://test: link assertions use that host
"""

import pytest
from httpx import ASGITransport, AsyncClient

from profile_api.infrastructure.database import get_db
from profile_api.main import app
from tests.seed_data import create_memory_engine, seed_profile_store, session_factory

API = "http://test/api/v1"


@pytest.fixture
async def test_engine():
    engine = await create_memory_engine()
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    factory = session_factory(test_engine)
    async with factory() as session:
        await seed_profile_store(session)
    return factory


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def client_without_store():
    """Client whose requests see no database (directory absent)."""
    async def no_db():
        yield None

    app.dependency_overrides[get_db] = no_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
