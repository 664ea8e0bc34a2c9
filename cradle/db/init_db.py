"""Create tables from the ORM metadata."""

from sqlalchemy.ext.asyncio import AsyncEngine

from cradle.core.logging import logger
from cradle.models import Base


async def create_tables(engine: AsyncEngine) -> None:
    """Create every table known to ``Base.metadata`` that does not exist yet.

    No migration history is kept; this is idempotent and safe on restarts.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Ensured {len(Base.metadata.tables)} tables exist")
