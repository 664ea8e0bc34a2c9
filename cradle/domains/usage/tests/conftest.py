"""Usage domain test fixtures and helpers."""

from datetime import UTC, datetime, timedelta
from typing import Optional
from unittest.mock import AsyncMock
from uuid import UUID

import pytest

from cradle.domains.usage.fakes.repository import (
    FakeDailyUsageRepository,
    FakeEntitlementRepository,
    FakePhotoRepository,
)
from cradle.domains.usage.ledger import UsageLedger
from cradle.domains.usage.limit_checker import UsageLimitChecker
from cradle.domains.usage.report import UsageReportService

DEFAULT_USER_ID = UUID("00000000-0000-0000-0000-000000000001")
OTHER_USER_ID = UUID("00000000-0000-0000-0000-000000000002")

# 2025-03-14 15:30 UTC
DEFAULT_NOW = datetime(2025, 3, 14, 15, 30, tzinfo=UTC)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _FakeClock:
    """Settable clock passed to services as ``clock=``."""

    def __init__(self, now: datetime = DEFAULT_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


def _make_checker(
    *,
    entitlement_repo: Optional[FakeEntitlementRepository] = None,
    daily_usage_repo: Optional[FakeDailyUsageRepository] = None,
    photo_repo: Optional[FakePhotoRepository] = None,
    clock: Optional[_FakeClock] = None,
) -> tuple[
    UsageLimitChecker,
    FakeEntitlementRepository,
    FakeDailyUsageRepository,
    FakePhotoRepository,
    _FakeClock,
]:
    """Build a UsageLimitChecker wired to fakes. Returns (checker, *fakes)."""
    er = entitlement_repo or FakeEntitlementRepository()
    dr = daily_usage_repo or FakeDailyUsageRepository()
    pr = photo_repo or FakePhotoRepository()
    ck = clock or _FakeClock()
    checker = UsageLimitChecker(
        entitlement_repo=er,
        daily_usage_repo=dr,
        photo_repo=pr,
        clock=ck,
    )
    return checker, er, dr, pr, ck


def _make_ledger(
    *,
    daily_usage_repo: Optional[FakeDailyUsageRepository] = None,
    clock: Optional[_FakeClock] = None,
) -> tuple[UsageLedger, FakeDailyUsageRepository, _FakeClock]:
    """Build a UsageLedger wired to fakes. Returns (ledger, repo, clock)."""
    dr = daily_usage_repo or FakeDailyUsageRepository()
    ck = clock or _FakeClock()
    return UsageLedger(daily_usage_repo=dr, clock=ck), dr, ck


def _make_report(
    *,
    entitlement_repo: Optional[FakeEntitlementRepository] = None,
    daily_usage_repo: Optional[FakeDailyUsageRepository] = None,
    photo_repo: Optional[FakePhotoRepository] = None,
    clock: Optional[_FakeClock] = None,
) -> tuple[UsageReportService, FakeEntitlementRepository, FakeDailyUsageRepository, _FakeClock]:
    """Build a UsageReportService over a real checker, all on fakes."""
    checker, er, dr, _, ck = _make_checker(
        entitlement_repo=entitlement_repo,
        daily_usage_repo=daily_usage_repo,
        photo_repo=photo_repo,
        clock=clock,
    )
    report = UsageReportService(
        entitlement_repo=er,
        daily_usage_repo=dr,
        limit_checker=checker,
        clock=ck,
    )
    return report, er, dr, ck


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def db():
    return AsyncMock()
