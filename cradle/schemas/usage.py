"""Usage schemas."""

from datetime import date, datetime
from typing import Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UsageLimitResult(BaseModel):
    """Outcome of a quota check.

    ``remaining`` and ``reset_time`` are ``None`` when the caller is unlimited.
    Photo checks never carry a reset time since the photo quota is lifetime.
    """

    allowed: bool = Field(..., description="Whether the action may proceed")
    unlimited: bool = Field(..., description="True for tiers without a quota")
    remaining: Optional[Union[int, float]] = Field(
        None, description="Quota left (messages, voice minutes or photos)"
    )
    reset_time: Optional[datetime] = Field(
        None, description="Next UTC midnight, when the daily counters reset"
    )


class DailyUsageSnapshot(BaseModel):
    """Counters for one user and one UTC day."""

    model_config = ConfigDict(from_attributes=True)

    usage_date: date
    messages_used: int = 0
    voice_minutes_used: float = 0.0
    photos_stored: int = 0


class DailyUsageRecord(DailyUsageSnapshot):
    """A persisted daily usage row."""

    id: UUID
    user_id: UUID


class UsagePeriod(BaseModel):
    """Inclusive window covered by a usage history."""

    start_date: date
    end_date: date
    days: int


class UsageHistory(BaseModel):
    """Daily usage rows for a window, newest first."""

    records: list[DailyUsageRecord] = Field(default_factory=list)
    period: UsagePeriod


class UsageLimitsOverview(BaseModel):
    """All quota checks for a user in one payload."""

    subscription_tier: Optional[str] = Field(
        None, description="Stored tier value; unknown tiers get FREE limits"
    )
    subscription_status: Optional[str] = None
    message: UsageLimitResult
    voice: UsageLimitResult
    photo: UsageLimitResult
