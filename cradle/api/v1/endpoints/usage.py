"""Usage statistics endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cradle import schemas
from cradle.api import deps
from cradle.api.deps import Inject
from cradle.core.logging import ContextualLogger
from cradle.domains.usage.protocols import UsageReportProtocol
from cradle.domains.usage.types import HISTORY_DEFAULT_DAYS

router = APIRouter()


@router.get("/today", response_model=schemas.DailyUsageSnapshot)
async def get_today_usage(
    db: AsyncSession = Depends(deps.get_db),
    user_id: UUID = Depends(deps.get_current_user_id),
    usage_report: UsageReportProtocol = Inject(UsageReportProtocol),
) -> schemas.DailyUsageSnapshot:
    """Get today's (UTC) usage counters for the caller.

    Returns zeros when nothing has been recorded today.
    """
    return await usage_report.get_today(db, user_id)


@router.get("/history", response_model=schemas.UsageHistory)
async def get_usage_history(
    days: int = Query(
        HISTORY_DEFAULT_DAYS,
        description="Days to look back; 0 means the default, others are clamped to 1-90",
    ),
    db: AsyncSession = Depends(deps.get_db),
    user_id: UUID = Depends(deps.get_current_user_id),
    usage_report: UsageReportProtocol = Inject(UsageReportProtocol),
) -> schemas.UsageHistory:
    """Get the caller's daily usage rows, newest first."""
    return await usage_report.get_history(db, user_id, days=days)


@router.get("/limits", response_model=schemas.UsageLimitsOverview)
async def get_usage_limits(
    db: AsyncSession = Depends(deps.get_db),
    user_id: UUID = Depends(deps.get_current_user_id),
    usage_report: UsageReportProtocol = Inject(UsageReportProtocol),
    log: ContextualLogger = Depends(deps.get_user_logger),
) -> schemas.UsageLimitsOverview:
    """Get message, voice and photo quota status plus the subscription tier."""
    overview = await usage_report.get_limits_overview(db, user_id)
    log.debug(
        f"Limits overview: message={overview.message.allowed} "
        f"voice={overview.voice.allowed} photo={overview.photo.allowed}"
    )
    return overview
