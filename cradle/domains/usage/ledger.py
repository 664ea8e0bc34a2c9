"""Usage ledger: singleton write service for daily counters.

Callers record a chargeable action only after it succeeded. Every call is a
single atomic upsert on the (user, UTC day) row, so concurrent increments
never lose updates and no in-process lock is needed. The tier is not
consulted: PREMIUM usage is recorded too.
"""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from cradle.domains.usage.day_boundary import Clock, utc_now, utc_today
from cradle.domains.usage.exceptions import InvalidUsageAmountError
from cradle.domains.usage.protocols import UsageLedgerProtocol
from cradle.domains.usage.repository import DailyUsageRepositoryProtocol
from cradle.domains.usage.types import COUNTER_COLUMNS, LimitType, is_valid_amount

logger = logging.getLogger(__name__)


class UsageLedger(UsageLedgerProtocol):
    """Writes increments straight through to the daily usage repository."""

    def __init__(
        self,
        daily_usage_repo: DailyUsageRepositoryProtocol,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize the ledger with its repository and clock."""
        self._daily_usage_repo = daily_usage_repo
        self._clock = clock

    async def increment_usage(
        self,
        db: AsyncSession,
        user_id: UUID,
        limit_type: LimitType,
        amount: Union[int, float] = 1,
    ) -> None:
        """Add *amount* to today's counter for *limit_type*.

        Messages count whole units; voice takes fractional minutes.

        Raises:
            InvalidUsageAmountError: If *amount* is not a finite positive number,
                or not an integer for messages.
        """
        limit_type = LimitType(limit_type)
        if not is_valid_amount(limit_type, amount):
            raise InvalidUsageAmountError(amount)

        usage_date = utc_today(self._clock())
        try:
            await self._daily_usage_repo.increment(
                db,
                user_id=user_id,
                usage_date=usage_date,
                column=COUNTER_COLUMNS[limit_type],
                amount=amount,
            )
        except Exception:
            logger.error(
                "Failed to record %s usage for user %s (amount=%s, date=%s)",
                limit_type.value,
                user_id,
                amount,
                usage_date,
                exc_info=True,
            )
            raise


class NullUsageLedger(UsageLedgerProtocol):
    """No-op ledger for contexts where usage is not tracked."""

    async def increment_usage(
        self,
        db: AsyncSession,
        user_id: UUID,
        limit_type: LimitType,
        amount: Union[int, float] = 1,
    ) -> None:
        """Discard the increment."""
