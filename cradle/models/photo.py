"""Photo model."""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from cradle.models._base import Base


class Photo(Base):
    """An uploaded photo. Row count per user is the lifetime photo quota."""

    __tablename__ = "photos"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE", name="fk_photos_user_id"),
        nullable=False,
    )
    s3_key: Mapped[str] = mapped_column(String(512), unique=True, nullable=False)
    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc).replace(tzinfo=None),
        nullable=False,
    )

    __table_args__ = (Index("idx_photos_user_uploaded_at", "user_id", "uploaded_at"),)
