"""Container Factory.

All construction logic lives here. The factory reads settings and builds
the container with environment-appropriate implementations.
"""

from cradle.core.config import Environment, Settings
from cradle.core.container.container import Container
from cradle.core.logging import logger
from cradle.domains.usage.ledger import UsageLedger
from cradle.domains.usage.limit_checker import AlwaysAllowLimitChecker, UsageLimitChecker
from cradle.domains.usage.protocols import UsageLimitCheckerProtocol
from cradle.domains.usage.report import UsageReportService
from cradle.domains.usage.repository import (
    DailyUsageRepository,
    EntitlementRepository,
    PhotoRepository,
)


def create_container(settings: Settings) -> Container:
    """Build container with environment-appropriate implementations.

    Args:
        settings: Application settings (from core/config)

    Returns:
        Fully constructed Container ready for use
    """
    # -----------------------------------------------------------------
    # Repositories (thin wrappers over the crud singletons)
    # -----------------------------------------------------------------
    entitlement_repo = EntitlementRepository()
    daily_usage_repo = DailyUsageRepository()
    photo_repo = PhotoRepository()

    # -----------------------------------------------------------------
    # Usage domain
    # Checker reads, ledger writes, report composes both for the API.
    # -----------------------------------------------------------------
    usage_limit_checker = _create_usage_limit_checker(
        settings, entitlement_repo, daily_usage_repo, photo_repo
    )
    usage_ledger = UsageLedger(daily_usage_repo=daily_usage_repo)
    usage_report = UsageReportService(
        entitlement_repo=entitlement_repo,
        daily_usage_repo=daily_usage_repo,
        limit_checker=usage_limit_checker,
    )

    return Container(
        usage_limit_checker=usage_limit_checker,
        usage_ledger=usage_ledger,
        usage_report=usage_report,
    )


# ---------------------------------------------------------------------------
# Private factory functions
# ---------------------------------------------------------------------------


def _create_usage_limit_checker(
    settings: Settings,
    entitlement_repo: EntitlementRepository,
    daily_usage_repo: DailyUsageRepository,
    photo_repo: PhotoRepository,
) -> UsageLimitCheckerProtocol:
    """Real checker everywhere except local runs that opt out of limits."""
    if settings.DISABLE_USAGE_LIMITS:
        if settings.ENVIRONMENT != Environment.LOCAL:
            raise RuntimeError("DISABLE_USAGE_LIMITS is only allowed in the local environment")
        logger.warning("Usage limits disabled; every action is allowed")
        return AlwaysAllowLimitChecker()

    return UsageLimitChecker(
        entitlement_repo=entitlement_repo,
        daily_usage_repo=daily_usage_repo,
        photo_repo=photo_repo,
    )
