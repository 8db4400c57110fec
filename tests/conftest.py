"""Root conftest — shared async SQLite fixtures for every test layer.

Invariants:
    - Every test gets a fresh in-memory SQLite database with both tables
    - StaticPool: every session shares the one in-memory connection
    - clock fixture controls updated_ts written by drivers

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency, supports RETURNING
"""

import os

# Ensure tests never reach a real database by accident
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import organizer.models  # noqa: F401  (populates Base.metadata)
from organizer.db.base import Base
from organizer.infrastructure.database import DatabaseSessionManager
from organizer.services.store import build_store


class FakeClock:
    """Callable clock with a settable `now`."""

    def __init__(self, now: int = 1_700_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(db_manager, clock):
    return build_store(db_manager, clock=clock)
