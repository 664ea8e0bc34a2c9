"""Usage limit checker: singleton read-only quota evaluation.

One instance lives in the container. Each call receives the ``user_id`` and
does at most one lookup per table. FREE users get daily message and voice
quotas keyed by the UTC calendar day plus a lifetime photo quota; PREMIUM
users are unlimited and their counters are never read.

A denial is data, not an exception. Request handlers turn a denied result
into ``UsageLimitExceededError`` with ``ensure_allowed``.
"""

from datetime import datetime
from typing import Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from cradle.core.logging import logger
from cradle.domains.usage.day_boundary import Clock, next_utc_midnight, utc_now, utc_today
from cradle.domains.usage.exceptions import UsageLimitExceededError
from cradle.domains.usage.protocols import UsageLimitCheckerProtocol
from cradle.domains.usage.repository import (
    DailyUsageRepositoryProtocol,
    EntitlementRepositoryProtocol,
    PhotoRepositoryProtocol,
)
from cradle.domains.usage.types import (
    COUNTER_COLUMNS,
    DAILY_LIMITS,
    FREE_PHOTO_LIMIT,
    LimitType,
    is_unlimited,
    remaining_quota,
)
from cradle.schemas.usage import UsageLimitResult

_UNLIMITED = UsageLimitResult(allowed=True, unlimited=True)


class UsageLimitChecker(UsageLimitCheckerProtocol):
    """Singleton limit checker reading entitlement and counters per call."""

    def __init__(
        self,
        entitlement_repo: EntitlementRepositoryProtocol,
        daily_usage_repo: DailyUsageRepositoryProtocol,
        photo_repo: PhotoRepositoryProtocol,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize the checker with repository dependencies."""
        self._entitlement_repo = entitlement_repo
        self._daily_usage_repo = daily_usage_repo
        self._photo_repo = photo_repo
        self._clock = clock

    async def check_limit(
        self, db: AsyncSession, user_id: UUID, limit_type: LimitType
    ) -> UsageLimitResult:
        """Check today's quota for a message or voice action."""
        limit_type = LimitType(limit_type)
        now = self._clock()
        log = logger.with_context(user_id=str(user_id), limit_type=limit_type.value)

        user = await self._entitlement_repo.get_user(db, user_id=user_id)
        if user is None:
            log.warning("Quota check for unknown user, denying")
            return UsageLimitResult(
                allowed=False,
                unlimited=False,
                remaining=0,
                reset_time=next_utc_midnight(now),
            )

        if is_unlimited(user.subscription_tier):
            return _UNLIMITED.model_copy()

        used = await self._get_used(db, user_id, limit_type, now)
        limit = DAILY_LIMITS[limit_type]
        result = UsageLimitResult(
            allowed=used < limit,
            unlimited=False,
            remaining=remaining_quota(limit, used),
            reset_time=next_utc_midnight(now),
        )
        if not result.allowed:
            log.info(f"Daily {limit_type.value} limit reached ({used}/{limit})")
        return result

    async def check_photo_limit(self, db: AsyncSession, user_id: UUID) -> UsageLimitResult:
        """Check the lifetime photo quota. Never carries a reset time."""
        user = await self._entitlement_repo.get_user(db, user_id=user_id)
        if user is None:
            logger.with_context(user_id=str(user_id)).warning(
                "Photo quota check for unknown user, denying"
            )
            return UsageLimitResult(allowed=False, unlimited=False, remaining=0)

        if is_unlimited(user.subscription_tier):
            return _UNLIMITED.model_copy()

        count = await self._photo_repo.count_by_user(db, user_id=user_id)
        return UsageLimitResult(
            allowed=count < FREE_PHOTO_LIMIT,
            unlimited=False,
            remaining=remaining_quota(FREE_PHOTO_LIMIT, count),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _get_used(
        self, db: AsyncSession, user_id: UUID, limit_type: LimitType, now: datetime
    ) -> Union[int, float]:
        record = await self._daily_usage_repo.get_for_day(
            db, user_id=user_id, usage_date=utc_today(now)
        )
        if record is None:
            return 0
        return getattr(record, COUNTER_COLUMNS[limit_type]) or 0


class AlwaysAllowLimitChecker(UsageLimitCheckerProtocol):
    """No-op checker for local development."""

    async def check_limit(
        self, db: AsyncSession, user_id: UUID, limit_type: LimitType
    ) -> UsageLimitResult:
        """Always allow; no enforcement."""
        return _UNLIMITED.model_copy()

    async def check_photo_limit(self, db: AsyncSession, user_id: UUID) -> UsageLimitResult:
        """Always allow; no enforcement."""
        return _UNLIMITED.model_copy()


def ensure_allowed(result: UsageLimitResult, limit_type: Union[LimitType, str]) -> None:
    """Raise ``UsageLimitExceededError`` if *result* is a denial."""
    if result.allowed:
        return
    name = limit_type.value if isinstance(limit_type, LimitType) else limit_type
    raise UsageLimitExceededError(
        limit_type=name,
        remaining=result.remaining if result.remaining is not None else 0,
        reset_time=result.reset_time,
    )
