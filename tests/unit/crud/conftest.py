"""Fixtures for storage tests against a real SQLite database.

Each test gets its own database file. NullPool gives every session a fresh
connection so concurrent sessions really are concurrent writers.
"""

from uuid import UUID

import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from cradle.core.shared_models import SubscriptionTier
from cradle.db.init_db import create_tables
from cradle.models import User

FREE_USER_ID = UUID("00000000-0000-0000-0000-00000000f7ee")
PREMIUM_USER_ID = UUID("00000000-0000-0000-0000-00000000b0b0")


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'cradle.db'}",
        poolclass=NullPool,
        connect_args={"timeout": 30},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        session.add_all(
            [
                User(id=FREE_USER_ID, email="free@example.com"),
                User(
                    id=PREMIUM_USER_ID,
                    email="premium@example.com",
                    subscription_tier=SubscriptionTier.PREMIUM.value,
                ),
            ]
        )
        await session.commit()
        yield session
