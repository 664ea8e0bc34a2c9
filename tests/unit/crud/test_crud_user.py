"""Tests for crud.user against SQLite."""

from uuid import uuid4

import pytest

from cradle import crud
from tests.unit.crud.conftest import FREE_USER_ID, PREMIUM_USER_ID


@pytest.mark.asyncio
async def test_get_returns_user_with_subscription(db):
    user = await crud.user.get(db, PREMIUM_USER_ID)

    assert user.email == "premium@example.com"
    assert user.subscription_tier == "PREMIUM"


@pytest.mark.asyncio
async def test_get_applies_column_defaults(db):
    user = await crud.user.get(db, FREE_USER_ID)

    assert user.subscription_tier == "FREE"
    assert user.subscription_status == "ACTIVE"


@pytest.mark.asyncio
async def test_get_missing_returns_none(db):
    assert await crud.user.get(db, uuid4()) is None


def test_exposes_only_primary_key_lookup():
    assert not hasattr(crud.user, "get_by_email")
    assert not hasattr(crud.user, "get_subscription_tier")
