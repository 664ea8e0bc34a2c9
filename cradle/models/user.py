"""User model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from cradle.core.shared_models import SubscriptionStatus, SubscriptionTier
from cradle.models._base import Base


class User(Base):
    """An app user and their subscription entitlement.

    Owned by the auth subsystem; the usage domain only reads the tier.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    subscription_tier: Mapped[str] = mapped_column(
        String(20), default=SubscriptionTier.FREE.value, nullable=False
    )
    subscription_status: Mapped[str] = mapped_column(
        String(20), default=SubscriptionStatus.ACTIVE.value, nullable=False
    )
    subscription_expires_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
