"""Usage domain repositories wrapping the crud singletons."""

from datetime import date
from typing import Optional, Protocol, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from cradle import crud
from cradle.models.daily_usage import DailyUsage
from cradle.models.user import User


class EntitlementRepositoryProtocol(Protocol):
    """Read access to a user's subscription."""

    async def get_user(self, db: AsyncSession, *, user_id: UUID) -> Optional[User]:
        """Get the user carrying the subscription tier and status."""
        ...


class DailyUsageRepositoryProtocol(Protocol):
    """Data access for per-user-per-day counters."""

    async def get_for_day(
        self, db: AsyncSession, *, user_id: UUID, usage_date: date
    ) -> Optional[DailyUsage]:
        """Get the row for one UTC day."""
        ...

    async def list_between(
        self, db: AsyncSession, *, user_id: UUID, start_date: date, end_date: date
    ) -> list[DailyUsage]:
        """List rows in an inclusive date window, newest first."""
        ...

    async def increment(
        self,
        db: AsyncSession,
        *,
        user_id: UUID,
        usage_date: date,
        column: str,
        amount: Union[int, float],
        commit: bool = True,
    ) -> None:
        """Atomically add to one counter, creating the row if needed."""
        ...


class PhotoRepositoryProtocol(Protocol):
    """Data access for stored photos."""

    async def count_by_user(self, db: AsyncSession, *, user_id: UUID) -> int:
        """Count every photo a user has stored."""
        ...


class EntitlementRepository(EntitlementRepositoryProtocol):
    """Delegates to the crud.user singleton."""

    async def get_user(self, db: AsyncSession, *, user_id: UUID) -> Optional[User]:
        """Get the user carrying the subscription tier and status."""
        return await crud.user.get(db, user_id)


class DailyUsageRepository(DailyUsageRepositoryProtocol):
    """Delegates to the crud.daily_usage singleton."""

    async def get_for_day(
        self, db: AsyncSession, *, user_id: UUID, usage_date: date
    ) -> Optional[DailyUsage]:
        """Get the row for one UTC day."""
        return await crud.daily_usage.get_for_day(db, user_id=user_id, usage_date=usage_date)

    async def list_between(
        self, db: AsyncSession, *, user_id: UUID, start_date: date, end_date: date
    ) -> list[DailyUsage]:
        """List rows in an inclusive date window, newest first."""
        return await crud.daily_usage.list_between(
            db, user_id=user_id, start_date=start_date, end_date=end_date
        )

    async def increment(
        self,
        db: AsyncSession,
        *,
        user_id: UUID,
        usage_date: date,
        column: str,
        amount: Union[int, float],
        commit: bool = True,
    ) -> None:
        """Atomically add to one counter, creating the row if needed."""
        await crud.daily_usage.increment(
            db,
            user_id=user_id,
            usage_date=usage_date,
            column=column,
            amount=amount,
            commit=commit,
        )


class PhotoRepository(PhotoRepositoryProtocol):
    """Delegates to the crud.photo singleton."""

    async def count_by_user(self, db: AsyncSession, *, user_id: UUID) -> int:
        """Count every photo a user has stored."""
        return await crud.photo.count_by_user(db, user_id=user_id)
