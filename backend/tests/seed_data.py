"""Seed Data — shared profile store contents for SQL-backed tests.

Invariants:
    - Mirrors the in-memory fixtures in tests/services/conftest.py
    - Versions 1.0 and 1.1; "web" inherits "default" on 1.0; one requirements document
"""

from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

from profile_api.db.base import Base
import profile_api.models  # noqa: F401
from profile_api.models.container import ContainerRecord
from profile_api.models.profile import ProfileFile, ProfileRecord
from profile_api.models.requirements import empty_requirements_document
from profile_api.models.version import Version


async def create_memory_engine():
    """In-memory SQLite engine with all tables (StaticPool: one shared connection)."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine


def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def seed_profile_store(session: AsyncSession) -> None:
    """Insert the shared test fixture data."""
    session.add_all([Version(id="1.0"), Version(id="1.1")])
    await session.flush()
    session.add_all([
        ProfileRecord(
            version_id="1.0", profile_id="default",
            parents=[], attributes={"abstract": "true"},
            files=[ProfileFile(
                name="io.fabric8.agent.properties",
                content=b"repo=central\nlevel=info\n",
            )],
        ),
        ProfileRecord(
            version_id="1.0", profile_id="web",
            parents=["default"], attributes={},
            files=[
                ProfileFile(name="io.fabric8.agent.properties", content=b"level=debug\n"),
                ProfileFile(name="web/index.html", content=b"<html/>"),
                ProfileFile(name="logo.png", content=b"\x89PNG"),
            ],
        ),
        ProfileRecord(version_id="1.1", profile_id="web", parents=[], attributes={}),
        ContainerRecord(id="root", version_id="1.0", profile_ids=["default"]),
        ContainerRecord(id="web1", version_id="1.0", profile_ids=["web"], alive=True),
        ContainerRecord(id="web2", version_id="1.1", profile_ids=["web"]),
        ContainerRecord(id="web3", version_id="1.0", profile_ids=["default", "web"]),
        empty_requirements_document(),
    ])
    await session.commit()
