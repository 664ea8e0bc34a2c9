"""Schemas for the application."""

from .usage import (
    DailyUsageRecord,
    DailyUsageSnapshot,
    UsageHistory,
    UsageLimitResult,
    UsageLimitsOverview,
    UsagePeriod,
)

__all__ = [
    "DailyUsageRecord",
    "DailyUsageSnapshot",
    "UsageHistory",
    "UsageLimitResult",
    "UsageLimitsOverview",
    "UsagePeriod",
]
