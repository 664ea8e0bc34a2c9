"""API test fixtures.

Provides an async HTTP client wired to the FastAPI app with the DI container
and the DB session overridden. Available to all colocated API tests under api/.

Pattern:
    1. Override get_container -> returns test_container (all fakes)
    2. Override get_db        -> yields an AsyncMock session
    3. Test signs a real JWT, hits the endpoint, asserts on response + fake state
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock
from uuid import UUID

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from cradle.api.deps import get_container, get_db
from cradle.core.config import settings

TEST_USER_ID = UUID("00000000-0000-0000-0000-0000000000aa")


def make_token(user_id: UUID = TEST_USER_ID, **overrides) -> str:
    """Sign a bearer token the way the auth service does."""
    payload = {
        "userId": str(user_id),
        "exp": datetime.now(UTC) + timedelta(hours=1),
    }
    payload.update(overrides)
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def fake_db():
    return AsyncMock()


@pytest_asyncio.fixture
async def client(test_container, fake_db):
    """Async HTTP client with faked DI container and DB session."""
    from cradle.main import app

    async def _fake_get_db():
        yield fake_db

    app.dependency_overrides[get_container] = lambda: test_container
    app.dependency_overrides[get_db] = _fake_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
