"""Usage report service: today's counters, recent history and a limits overview."""

from datetime import timedelta
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from cradle.domains.usage.day_boundary import Clock, utc_now, utc_today
from cradle.domains.usage.protocols import UsageLimitCheckerProtocol, UsageReportProtocol
from cradle.domains.usage.repository import (
    DailyUsageRepositoryProtocol,
    EntitlementRepositoryProtocol,
)
from cradle.domains.usage.types import LimitType, clamp_history_days
from cradle.schemas.usage import (
    DailyUsageRecord,
    DailyUsageSnapshot,
    UsageHistory,
    UsageLimitsOverview,
    UsagePeriod,
)


class UsageReportService(UsageReportProtocol):
    """Read-only usage views for the API."""

    def __init__(
        self,
        entitlement_repo: EntitlementRepositoryProtocol,
        daily_usage_repo: DailyUsageRepositoryProtocol,
        limit_checker: UsageLimitCheckerProtocol,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize the report service."""
        self._entitlement_repo = entitlement_repo
        self._daily_usage_repo = daily_usage_repo
        self._limit_checker = limit_checker
        self._clock = clock

    async def get_today(self, db: AsyncSession, user_id: UUID) -> DailyUsageSnapshot:
        """Today's counters, zeros when nothing was recorded yet."""
        today = utc_today(self._clock())
        record = await self._daily_usage_repo.get_for_day(db, user_id=user_id, usage_date=today)
        if record is None:
            return DailyUsageSnapshot(usage_date=today)
        return DailyUsageSnapshot.model_validate(record)

    async def get_history(
        self, db: AsyncSession, user_id: UUID, days: Optional[int] = None
    ) -> UsageHistory:
        """Rows from ``today - days`` through today, newest first.

        *days* of ``None`` or 0 means 7; anything else is clamped to ``[1, 90]``.
        """
        days = clamp_history_days(days)
        end_date = utc_today(self._clock())
        start_date = end_date - timedelta(days=days)
        records = await self._daily_usage_repo.list_between(
            db, user_id=user_id, start_date=start_date, end_date=end_date
        )
        return UsageHistory(
            records=[DailyUsageRecord.model_validate(r) for r in records],
            period=UsagePeriod(start_date=start_date, end_date=end_date, days=days),
        )

    async def get_limits_overview(self, db: AsyncSession, user_id: UUID) -> UsageLimitsOverview:
        """Every quota check plus the user's subscription tier and status."""
        user = await self._entitlement_repo.get_user(db, user_id=user_id)
        return UsageLimitsOverview(
            subscription_tier=user.subscription_tier if user else None,
            subscription_status=user.subscription_status if user else None,
            message=await self._limit_checker.check_limit(db, user_id, LimitType.MESSAGE),
            voice=await self._limit_checker.check_limit(db, user_id, LimitType.VOICE),
            photo=await self._limit_checker.check_photo_limit(db, user_id),
        )
