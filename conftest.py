"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and cradle/),
making its fixtures available to centralized tests AND colocated domain tests.
"""

import os

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables: must be set before any cradle module import
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-minimum-32-characters-long")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("DISABLE_USAGE_LIMITS", "false")


# ---------------------------------------------------------------------------
# Shared fake fixtures: individual protocol fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_usage_limit_checker():
    """Fake UsageLimitChecker that allows everything unless told to deny."""
    from cradle.domains.usage.fakes.limit_checker import FakeUsageLimitChecker

    return FakeUsageLimitChecker()


@pytest.fixture
def fake_usage_ledger():
    """Fake UsageLedger that records increments."""
    from cradle.domains.usage.fakes.ledger import FakeUsageLedger

    return FakeUsageLedger()


@pytest.fixture
def fake_usage_report():
    """Fake UsageReport that returns seeded payloads."""
    from cradle.domains.usage.fakes.report import FakeUsageReport

    return FakeUsageReport()


# ---------------------------------------------------------------------------
# Composite fixture: full test container
# ---------------------------------------------------------------------------


@pytest.fixture
def test_container(fake_usage_limit_checker, fake_usage_ledger, fake_usage_report):
    """A Container with all dependencies replaced by fakes.

    Tests that need to inspect a fake should request it directly
    (e.g. ``fake_usage_ledger``); it is the same instance held here.
    """
    from cradle.core.container import Container

    return Container(
        usage_limit_checker=fake_usage_limit_checker,
        usage_ledger=fake_usage_ledger,
        usage_report=fake_usage_report,
    )
