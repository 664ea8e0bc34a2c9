"""Usage domain protocols, split into read (checker), write (ledger) and report concerns.

UsageLimitChecker: Singleton that checks quotas given a user_id per call.
UsageLedger: Singleton that records chargeable actions.
UsageReport: Singleton that reads counters back for display.
"""

from typing import Optional, Protocol, Union, runtime_checkable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from cradle.domains.usage.types import LimitType
from cradle.schemas.usage import (
    DailyUsageSnapshot,
    UsageHistory,
    UsageLimitResult,
    UsageLimitsOverview,
)


@runtime_checkable
class UsageLimitCheckerProtocol(Protocol):
    """Singleton, read-only quota evaluation.

    A denial is returned as data (``allowed=False``); only storage faults raise.
    """

    async def check_limit(
        self, db: AsyncSession, user_id: UUID, limit_type: LimitType
    ) -> UsageLimitResult:
        """Evaluate today's daily quota for *limit_type*."""
        ...

    async def check_photo_limit(self, db: AsyncSession, user_id: UUID) -> UsageLimitResult:
        """Evaluate the lifetime photo quota."""
        ...


@runtime_checkable
class UsageLedgerProtocol(Protocol):
    """Singleton that adds to today's counters after an action succeeded."""

    async def increment_usage(
        self,
        db: AsyncSession,
        user_id: UUID,
        limit_type: LimitType,
        amount: Union[int, float] = 1,
    ) -> None:
        """Atomically add *amount* to today's counter for *limit_type*."""
        ...


@runtime_checkable
class UsageReportProtocol(Protocol):
    """Read-only views over a user's usage."""

    async def get_today(self, db: AsyncSession, user_id: UUID) -> DailyUsageSnapshot:
        """Today's counters, zeros when nothing was recorded."""
        ...

    async def get_history(
        self, db: AsyncSession, user_id: UUID, days: Optional[int] = None
    ) -> UsageHistory:
        """Recent daily rows, newest first."""
        ...

    async def get_limits_overview(self, db: AsyncSession, user_id: UUID) -> UsageLimitsOverview:
        """Every quota check plus the user's subscription state."""
        ...
