"""Fake usage repositories for testing."""

from datetime import date, datetime, timezone
from typing import Optional, Union
from uuid import UUID, uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from cradle.core.shared_models import SubscriptionStatus, SubscriptionTier
from cradle.models.daily_usage import DailyUsage
from cradle.models.user import User


class FakeEntitlementRepository:
    """In-memory fake for EntitlementRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize an empty user store."""
        self._users: dict[UUID, User] = {}
        self._calls: list[tuple] = []

    def seed(
        self,
        user_id: UUID,
        tier: SubscriptionTier = SubscriptionTier.FREE,
        status: SubscriptionStatus = SubscriptionStatus.ACTIVE,
    ) -> User:
        """Store a user with the given subscription."""
        now = datetime.now(timezone.utc)
        user = User(
            id=user_id,
            email=f"{user_id}@example.com",
            subscription_tier=tier.value,
            subscription_status=status.value,
            created_at=now,
            modified_at=now,
        )
        self._users[user_id] = user
        return user

    def call_count(self, method: str) -> int:
        """Return the number of times a method was called."""
        return sum(1 for name, *_ in self._calls if name == method)

    async def get_user(self, db: AsyncSession, *, user_id: UUID) -> Optional[User]:
        """Get a seeded user."""
        self._calls.append(("get_user", db, user_id))
        return self._users.get(user_id)


class FakeDailyUsageRepository:
    """In-memory fake for DailyUsageRepositoryProtocol keyed by (user_id, usage_date)."""

    def __init__(self) -> None:
        """Initialize an empty row store."""
        self._rows: dict[tuple[UUID, date], DailyUsage] = {}
        self._calls: list[tuple] = []

    def seed(
        self,
        user_id: UUID,
        usage_date: date,
        *,
        messages_used: int = 0,
        voice_minutes_used: float = 0.0,
        photos_stored: int = 0,
    ) -> DailyUsage:
        """Store a row for one user and day."""
        now = datetime.now(timezone.utc)
        row = DailyUsage(
            id=uuid4(),
            user_id=user_id,
            usage_date=usage_date,
            messages_used=messages_used,
            voice_minutes_used=voice_minutes_used,
            photos_stored=photos_stored,
            created_at=now,
            modified_at=now,
        )
        self._rows[(user_id, usage_date)] = row
        return row

    def row(self, user_id: UUID, usage_date: date) -> Optional[DailyUsage]:
        """Return the stored row without recording a call."""
        return self._rows.get((user_id, usage_date))

    def call_count(self, method: str) -> int:
        """Return the number of times a method was called."""
        return sum(1 for name, *_ in self._calls if name == method)

    async def get_for_day(
        self, db: AsyncSession, *, user_id: UUID, usage_date: date
    ) -> Optional[DailyUsage]:
        """Get the row for one UTC day."""
        self._calls.append(("get_for_day", db, user_id, usage_date))
        return self._rows.get((user_id, usage_date))

    async def list_between(
        self, db: AsyncSession, *, user_id: UUID, start_date: date, end_date: date
    ) -> list[DailyUsage]:
        """List rows in an inclusive date window, newest first."""
        self._calls.append(("list_between", db, user_id, start_date, end_date))
        rows = [
            row
            for (uid, day), row in self._rows.items()
            if uid == user_id and start_date <= day <= end_date
        ]
        return sorted(rows, key=lambda r: r.usage_date, reverse=True)

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
        """Add to one counter, creating the row if needed."""
        self._calls.append(("increment", db, user_id, usage_date, column, amount))
        row = self._rows.get((user_id, usage_date)) or self.seed(user_id, usage_date)
        setattr(row, column, (getattr(row, column) or 0) + amount)


class FakePhotoRepository:
    """In-memory fake for PhotoRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with no photos."""
        self._counts: dict[UUID, int] = {}
        self._calls: list[tuple] = []

    def seed(self, user_id: UUID, count: int) -> None:
        """Set how many photos a user has stored."""
        self._counts[user_id] = count

    def call_count(self, method: str) -> int:
        """Return the number of times a method was called."""
        return sum(1 for name, *_ in self._calls if name == method)

    async def count_by_user(self, db: AsyncSession, *, user_id: UUID) -> int:
        """Count a user's photos."""
        self._calls.append(("count_by_user", db, user_id))
        return self._counts.get(user_id, 0)
