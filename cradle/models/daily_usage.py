"""Daily usage model."""

from datetime import date
from uuid import UUID

from sqlalchemy import Date, Float, ForeignKey, Index, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from cradle.models._base import Base


class DailyUsage(Base):
    """Per-user counters for one UTC calendar day.

    At most one row exists per (user_id, usage_date). Rows are created by the
    first increment of the day and kept forever as history.
    """

    __tablename__ = "daily_usage"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE", name="fk_daily_usage_user_id"),
        nullable=False,
    )
    usage_date: Mapped[date] = mapped_column(Date, nullable=False)
    messages_used: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    voice_minutes_used: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    # Report-only; photo quota is counted from the photos table
    photos_stored: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "usage_date", name="uq_daily_usage_user_date"),
        Index("idx_daily_usage_user_date", "user_id", "usage_date"),
    )
