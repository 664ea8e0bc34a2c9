"""Fake usage limit checker for testing.

Always allows actions unless explicitly configured to deny.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from cradle.domains.usage.protocols import UsageLimitCheckerProtocol
from cradle.domains.usage.types import PHOTO_QUOTA, LimitType
from cradle.schemas.usage import UsageLimitResult


class FakeUsageLimitChecker(UsageLimitCheckerProtocol):
    """Test implementation of UsageLimitCheckerProtocol.

    By default every check returns an unlimited allow.
    Call ``deny(user_id, limit_type)`` to make specific checks come back denied.

    Usage:
        checker = FakeUsageLimitChecker()
        checker.deny(user_id, LimitType.MESSAGE, reset_time=midnight)

        result = await checker.check_limit(db, user_id, LimitType.MESSAGE)
        assert not result.allowed
    """

    def __init__(self) -> None:
        """Initialize with empty deny map and call log."""
        self._denied: dict[tuple[UUID, str], UsageLimitResult] = {}
        self.calls: list[tuple[UUID, str]] = []

    def deny(
        self,
        user_id: UUID,
        limit_type: Union[LimitType, str],
        reset_time: Optional[datetime] = None,
    ) -> None:
        """Configure a specific (user, quota) pair to be denied."""
        key = limit_type.value if isinstance(limit_type, LimitType) else limit_type
        self._denied[(user_id, key)] = UsageLimitResult(
            allowed=False, unlimited=False, remaining=0, reset_time=reset_time
        )

    def allow_all(self) -> None:
        """Reset to default allow-all behaviour."""
        self._denied.clear()

    async def check_limit(
        self, db: AsyncSession, user_id: UUID, limit_type: LimitType
    ) -> UsageLimitResult:
        """Return the configured denial or an unlimited allow."""
        return self._result(user_id, LimitType(limit_type).value)

    async def check_photo_limit(self, db: AsyncSession, user_id: UUID) -> UsageLimitResult:
        """Return the configured denial or an unlimited allow."""
        return self._result(user_id, PHOTO_QUOTA)

    def _result(self, user_id: UUID, key: str) -> UsageLimitResult:
        self.calls.append((user_id, key))
        denied = self._denied.get((user_id, key))
        if denied is not None:
            return denied.model_copy()
        return UsageLimitResult(allowed=True, unlimited=True)
