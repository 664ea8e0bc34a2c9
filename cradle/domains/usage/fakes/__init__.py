"""Fake implementations for usage domain testing."""

from cradle.domains.usage.fakes.ledger import FakeUsageLedger
from cradle.domains.usage.fakes.limit_checker import FakeUsageLimitChecker
from cradle.domains.usage.fakes.report import FakeUsageReport
from cradle.domains.usage.fakes.repository import (
    FakeDailyUsageRepository,
    FakeEntitlementRepository,
    FakePhotoRepository,
)

__all__ = [
    "FakeDailyUsageRepository",
    "FakeEntitlementRepository",
    "FakePhotoRepository",
    "FakeUsageLedger",
    "FakeUsageLimitChecker",
    "FakeUsageReport",
]
