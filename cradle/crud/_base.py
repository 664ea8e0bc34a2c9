"""Base CRUD class."""

from typing import Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from cradle.models._base import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """Read helpers shared by every CRUD class."""

    def __init__(self, model: Type[ModelType]):
        """Bind the CRUD object to a model class."""
        self.model = model

    async def get(self, db: AsyncSession, id: UUID) -> Optional[ModelType]:
        """Get a single object by primary key, or ``None``."""
        return await db.get(self.model, id)
