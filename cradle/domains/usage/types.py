"""Usage domain types and pure business logic.

Constants, enums, and pure functions used by the checker, ledger and report
service. No IO; everything here is deterministic.
"""

import math
from enum import Enum
from typing import Optional, Union

from cradle.core.shared_models import SubscriptionTier


class LimitType(str, Enum):
    """Daily-limited action types."""

    MESSAGE = "message"
    VOICE = "voice"


PHOTO_QUOTA = "photo"

FREE_MESSAGE_LIMIT = 10
FREE_VOICE_MINUTES_LIMIT = 10
FREE_PHOTO_LIMIT = 100

HISTORY_DEFAULT_DAYS = 7
HISTORY_MAX_DAYS = 90

DAILY_LIMITS: dict[LimitType, int] = {
    LimitType.MESSAGE: FREE_MESSAGE_LIMIT,
    LimitType.VOICE: FREE_VOICE_MINUTES_LIMIT,
}

# LimitType -> DailyUsage counter column
COUNTER_COLUMNS: dict[LimitType, str] = {
    LimitType.MESSAGE: "messages_used",
    LimitType.VOICE: "voice_minutes_used",
}

Number = Union[int, float]


def is_unlimited(tier: Optional[str]) -> bool:
    """PREMIUM is unlimited; every other tier value is held to FREE limits."""
    return tier == SubscriptionTier.PREMIUM.value


def remaining_quota(limit: Number, used: Number) -> Number:
    """Quota left, never negative."""
    return max(0, limit - used)


def is_valid_amount(limit_type: LimitType, amount: Number) -> bool:
    """Finite and strictly positive; messages must also be whole."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return False
    if limit_type == LimitType.MESSAGE and not isinstance(amount, int):
        return False
    return math.isfinite(amount) and amount > 0


def clamp_history_days(days: Optional[int]) -> int:
    """Clamp a requested history window to ``[1, HISTORY_MAX_DAYS]``.

    ``None`` and 0 fall back to ``HISTORY_DEFAULT_DAYS``.
    """
    if not days:
        return HISTORY_DEFAULT_DAYS
    return max(1, min(int(days), HISTORY_MAX_DAYS))
