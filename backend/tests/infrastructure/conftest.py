"""Infrastructure fixtures — seeded in-memory SQLite store per test.

Invariants:
    - Every test gets a fresh in-memory database
    - test_db is a plain AsyncSession (no error-mapping wrapper)
"""

import pytest

from tests.seed_data import create_memory_engine, seed_profile_store, session_factory


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
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
