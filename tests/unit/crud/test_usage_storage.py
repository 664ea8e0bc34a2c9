"""End-to-end usage domain tests over the real repositories and SQLite."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from cradle import crud
from cradle.domains.usage.ledger import UsageLedger
from cradle.domains.usage.limit_checker import UsageLimitChecker
from cradle.domains.usage.report import UsageReportService
from cradle.domains.usage.repository import (
    DailyUsageRepository,
    EntitlementRepository,
    PhotoRepository,
)
from cradle.domains.usage.types import LimitType
from cradle.models import Photo, User
from tests.unit.crud.conftest import FREE_USER_ID, PREMIUM_USER_ID


class _Clock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return _Clock(datetime(2025, 3, 14, 22, 0, tzinfo=UTC))


@pytest.fixture
def services(clock):
    entitlements = EntitlementRepository()
    daily_usage = DailyUsageRepository()
    checker = UsageLimitChecker(
        entitlement_repo=entitlements,
        daily_usage_repo=daily_usage,
        photo_repo=PhotoRepository(),
        clock=clock,
    )
    ledger = UsageLedger(daily_usage_repo=daily_usage, clock=clock)
    report = UsageReportService(
        entitlement_repo=entitlements,
        daily_usage_repo=daily_usage,
        limit_checker=checker,
        clock=clock,
    )
    return checker, ledger, report


@pytest.mark.asyncio
async def test_free_user_message_quota(db, services):
    checker, ledger, _ = services

    for _ in range(10):
        assert (await checker.check_limit(db, FREE_USER_ID, LimitType.MESSAGE)).allowed
        await ledger.increment_usage(db, FREE_USER_ID, LimitType.MESSAGE)

    result = await checker.check_limit(db, FREE_USER_ID, LimitType.MESSAGE)
    assert result.allowed is False
    assert result.remaining == 0
    assert result.reset_time == datetime(2025, 3, 15, tzinfo=UTC)


@pytest.mark.asyncio
async def test_usage_does_not_carry_into_next_utc_day(db, services, clock):
    checker, ledger, report = services
    await ledger.increment_usage(db, FREE_USER_ID, LimitType.VOICE, 10)
    assert (await checker.check_limit(db, FREE_USER_ID, LimitType.VOICE)).allowed is False

    clock.now += timedelta(hours=2)  # 2025-03-15 00:00 UTC
    result = await checker.check_limit(db, FREE_USER_ID, LimitType.VOICE)

    assert result.allowed is True
    assert result.remaining == 10
    history = await report.get_history(db, FREE_USER_ID, days=7)
    assert [r.voice_minutes_used for r in history.records] == [10.0]


@pytest.mark.asyncio
async def test_premium_is_unlimited_but_still_recorded(db, services):
    checker, ledger, report = services

    await ledger.increment_usage(db, PREMIUM_USER_ID, LimitType.MESSAGE, 50)
    result = await checker.check_limit(db, PREMIUM_USER_ID, LimitType.MESSAGE)

    assert result.unlimited is True
    assert (await report.get_today(db, PREMIUM_USER_ID)).messages_used == 50


@pytest.mark.asyncio
async def test_unknown_user_is_denied(db, services):
    checker, _, _ = services

    result = await checker.check_limit(db, uuid4(), LimitType.MESSAGE)

    assert result.allowed is False
    assert result.unlimited is False


@pytest.mark.asyncio
async def test_photo_limit_counts_lifetime_rows(db, services):
    checker, _, _ = services
    db.add_all(
        [Photo(user_id=FREE_USER_ID, s3_key=f"photos/{FREE_USER_ID}/{i}.jpg") for i in range(100)]
    )
    await db.commit()

    assert await crud.photo.count_by_user(db, user_id=FREE_USER_ID) == 100
    result = await checker.check_photo_limit(db, FREE_USER_ID)
    assert result.allowed is False
    assert result.reset_time is None
    assert (await checker.check_photo_limit(db, PREMIUM_USER_ID)).unlimited is True


@pytest.mark.asyncio
async def test_limits_overview_reports_status(db, services):
    _, _, report = services

    overview = await report.get_limits_overview(db, FREE_USER_ID)

    assert overview.subscription_tier == "FREE"
    assert overview.subscription_status == "ACTIVE"
    assert overview.photo.remaining == 100


@pytest.mark.asyncio
async def test_unrecognised_tier_gets_free_limits_in_overview(db, services):
    checker, _, report = services
    user_id = uuid4()
    db.add(User(id=user_id, email="gold@example.com", subscription_tier="GOLD"))
    await db.commit()

    result = await checker.check_limit(db, user_id, LimitType.MESSAGE)
    overview = await report.get_limits_overview(db, user_id)

    assert result.unlimited is False
    assert result.remaining == 10
    assert overview.subscription_tier == "GOLD"
    assert overview.message.unlimited is False
    assert overview.voice.remaining == 10
    assert overview.photo.remaining == 100
