"""Shared models for the backend."""

from enum import Enum


class SubscriptionTier(str, Enum):
    """Subscription tier enum. The only signal used for usage gating."""

    FREE = "FREE"
    PREMIUM = "PREMIUM"


class SubscriptionStatus(str, Enum):
    """Subscription status enum."""

    ACTIVE = "ACTIVE"
    CANCELLED = "CANCELLED"
    EXPIRED = "EXPIRED"
    TRIALING = "TRIALING"
