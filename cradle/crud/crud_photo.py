"""CRUD operations for the Photo model."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cradle.crud._base import CRUDBase
from cradle.models.photo import Photo


class CRUDPhoto(CRUDBase[Photo]):
    """CRUD operations for the Photo model."""

    async def count_by_user(self, db: AsyncSession, *, user_id: UUID) -> int:
        """Count every photo ever stored by a user."""
        result = await db.execute(
            select(func.count()).select_from(Photo).where(Photo.user_id == user_id)
        )
        return int(result.scalar_one())


photo = CRUDPhoto(Photo)
