"""Fake usage report service for testing."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from cradle.domains.usage.protocols import UsageReportProtocol
from cradle.domains.usage.types import clamp_history_days
from cradle.schemas.usage import (
    DailyUsageRecord,
    DailyUsageSnapshot,
    UsageHistory,
    UsageLimitResult,
    UsageLimitsOverview,
    UsagePeriod,
)


class FakeUsageReport(UsageReportProtocol):
    """Test implementation of UsageReportProtocol.

    Returns seeded payloads; unseeded users get zero counters and unlimited
    quotas. Every call is logged in ``calls``.
    """

    def __init__(self, today: date = date(2025, 3, 14)) -> None:
        """Initialize with a fixed 'today'."""
        self.today = today
        self._today: dict[UUID, DailyUsageSnapshot] = {}
        self._history: dict[UUID, list[DailyUsageRecord]] = {}
        self._limits: dict[UUID, UsageLimitsOverview] = {}
        self.calls: list[tuple] = []

    def seed_today(self, user_id: UUID, snapshot: DailyUsageSnapshot) -> None:
        """Set the snapshot returned by get_today."""
        self._today[user_id] = snapshot

    def seed_history(self, user_id: UUID, records: list[DailyUsageRecord]) -> None:
        """Set the rows returned by get_history (filtered by window)."""
        self._history[user_id] = records

    def seed_limits(self, user_id: UUID, overview: UsageLimitsOverview) -> None:
        """Set the overview returned by get_limits_overview."""
        self._limits[user_id] = overview

    async def get_today(self, db: AsyncSession, user_id: UUID) -> DailyUsageSnapshot:
        """Return the seeded snapshot or zeros."""
        self.calls.append(("get_today", user_id))
        return self._today.get(user_id) or DailyUsageSnapshot(usage_date=self.today)

    async def get_history(
        self, db: AsyncSession, user_id: UUID, days: Optional[int] = None
    ) -> UsageHistory:
        """Return seeded rows inside the clamped window, newest first."""
        self.calls.append(("get_history", user_id, days))
        days = clamp_history_days(days)
        start = self.today - timedelta(days=days)
        records = [r for r in self._history.get(user_id, []) if start <= r.usage_date <= self.today]
        records.sort(key=lambda r: r.usage_date, reverse=True)
        return UsageHistory(
            records=records,
            period=UsagePeriod(start_date=start, end_date=self.today, days=days),
        )

    async def get_limits_overview(self, db: AsyncSession, user_id: UUID) -> UsageLimitsOverview:
        """Return the seeded overview or an all-unlimited one."""
        self.calls.append(("get_limits_overview", user_id))
        unlimited = UsageLimitResult(allowed=True, unlimited=True)
        return self._limits.get(user_id) or UsageLimitsOverview(
            message=unlimited, voice=unlimited, photo=unlimited
        )
