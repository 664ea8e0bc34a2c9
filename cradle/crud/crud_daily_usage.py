"""CRUD operations for the DailyUsage model."""

from datetime import date, datetime, timezone
from typing import List, Optional, Union
from uuid import UUID, uuid4

from sqlalchemy import and_, desc, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from cradle.crud._base import CRUDBase
from cradle.models.daily_usage import DailyUsage

COUNTER_COLUMNS = ("messages_used", "voice_minutes_used", "photos_stored")


class CRUDDailyUsage(CRUDBase[DailyUsage]):
    """CRUD operations for the DailyUsage model."""

    async def get_for_day(
        self, db: AsyncSession, *, user_id: UUID, usage_date: date
    ) -> Optional[DailyUsage]:
        """Get the row for one user and one UTC day, if any."""
        # Upserts bypass the identity map; always refresh from the row
        query = (
            select(DailyUsage)
            .where(and_(DailyUsage.user_id == user_id, DailyUsage.usage_date == usage_date))
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def list_between(
        self,
        db: AsyncSession,
        *,
        user_id: UUID,
        start_date: date,
        end_date: date,
    ) -> List[DailyUsage]:
        """List rows with ``start_date <= usage_date <= end_date``, newest first."""
        query = (
            select(DailyUsage)
            .where(
                and_(
                    DailyUsage.user_id == user_id,
                    DailyUsage.usage_date >= start_date,
                    DailyUsage.usage_date <= end_date,
                )
            )
            .order_by(desc(DailyUsage.usage_date))
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

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
        """Add ``amount`` to one counter of the (user, day) row, creating it if absent.

        Runs as a single INSERT ... ON CONFLICT DO UPDATE so concurrent callers
        never lose an increment. Commits the session unless ``commit`` is False,
        in which case the caller owns the transaction.

        Args:
            db: Database session
            user_id: Owner of the row
            usage_date: UTC calendar day
            column: One of ``COUNTER_COLUMNS``
            amount: Positive amount to add
            commit: Whether to commit the session after the upsert

        Raises:
            ValueError: If ``column`` is not a counter column
        """
        if column not in COUNTER_COLUMNS:
            raise ValueError(f"Unknown usage counter: {column}")

        now = datetime.now(timezone.utc).replace(tzinfo=None)
        values = {
            "id": uuid4(),
            "user_id": user_id,
            "usage_date": usage_date,
            "messages_used": 0,
            "voice_minutes_used": 0.0,
            "photos_stored": 0,
            "created_at": now,
            "modified_at": now,
        }
        values[column] = amount

        insert = postgresql.insert if db.bind.dialect.name == "postgresql" else sqlite.insert
        stmt = insert(DailyUsage).values(**values)
        counter = getattr(DailyUsage, column)
        stmt = stmt.on_conflict_do_update(
            index_elements=[DailyUsage.user_id, DailyUsage.usage_date],
            set_={
                column: counter + stmt.excluded[column],
                "modified_at": stmt.excluded.modified_at,
            },
        )
        await db.execute(stmt)
        if commit:
            await db.commit()


daily_usage = CRUDDailyUsage(DailyUsage)
