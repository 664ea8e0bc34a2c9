"""Dependencies that are used in the API endpoints."""

from typing import Callable, Optional, Union, get_type_hints
from uuid import UUID

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from cradle.core import container as container_mod
from cradle.core.config import settings
from cradle.core.container import Container
from cradle.core.exceptions import AuthenticationException
from cradle.core.logging import ContextualLogger, logger
from cradle.db.session import get_db
from cradle.domains.usage.limit_checker import ensure_allowed
from cradle.domains.usage.protocols import UsageLimitCheckerProtocol
from cradle.domains.usage.types import PHOTO_QUOTA, LimitType
from cradle.schemas.usage import UsageLimitResult

__all__ = [
    "Inject",
    "get_container",
    "get_current_user_id",
    "get_db",
    "get_user_logger",
    "require_quota",
]

_bearer = HTTPBearer(auto_error=False)


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> UUID:
    """Resolve the caller's user id from a ``Bearer`` JWT.

    The token is issued by the auth service and carries the id in its
    ``userId`` claim.

    Raises:
    ------
        AuthenticationException: If the header is missing, the token does not
            verify, or the claim is not a UUID.

    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("No token provided")

    try:
        payload = jwt.decode(
            credentials.credentials,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except jwt.PyJWTError as e:
        logger.debug(f"Rejected bearer token: {e}")
        raise AuthenticationException("Invalid or expired token") from e

    try:
        return UUID(str(payload["userId"]))
    except (KeyError, ValueError) as e:
        raise AuthenticationException("Invalid token payload") from e


async def get_user_logger(user_id: UUID = Depends(get_current_user_id)) -> ContextualLogger:
    """Logger carrying the caller's user id."""
    return logger.with_context(user_id=str(user_id))


# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------


def get_container() -> Container:
    """Get the DI container. Initialized at startup."""
    c = container_mod.container
    if c is None:
        raise RuntimeError("Container not initialized. Call initialize_container() first.")
    return c


# ---------------------------------------------------------------------------
# Protocol Injection
# ---------------------------------------------------------------------------

# Cache of protocol_type → Container field name, built once at first call.
_INJECT_CACHE: dict[type, str] = {}


def _resolve_field_name(protocol_type: type) -> str:
    """Find which Container field matches the given protocol type."""
    if not _INJECT_CACHE:
        for name, hint in get_type_hints(Container).items():
            _INJECT_CACHE[hint] = name

    field_name = _INJECT_CACHE.get(protocol_type)
    if field_name is None:
        available = list(_INJECT_CACHE.values())
        raise TypeError(
            f"No binding for {protocol_type.__name__} in Container. Available fields: {available}"
        )
    return field_name


def Inject(protocol_type: type):  # noqa: N802 - uppercase to match FastAPI convention
    """Resolve a protocol implementation from the DI container.

    Works like ``Depends()`` but looks up the implementation by protocol type.

    Usage in FastAPI endpoints::

        @router.get("/today")
        async def get_today(report: UsageReportProtocol = Inject(UsageReportProtocol)):
            ...
    """
    field_name = _resolve_field_name(protocol_type)

    def _resolve(c: Container = Depends(get_container)):
        return getattr(c, field_name)

    return Depends(_resolve)


# ---------------------------------------------------------------------------
# Quota enforcement
# ---------------------------------------------------------------------------


def require_quota(limit_type: Union[LimitType, str]) -> Callable:
    """Build a dependency that answers 429 when the caller is out of quota.

    Pass ``LimitType.MESSAGE``, ``LimitType.VOICE`` or ``"photo"``. The
    dependency returns the ``UsageLimitResult`` so the route can echo the
    remaining quota. Recording usage after the action is the route's job.

    Usage::

        @router.post("/chat")
        async def chat(
            quota: UsageLimitResult = Depends(require_quota(LimitType.MESSAGE)),
            ledger: UsageLedgerProtocol = Inject(UsageLedgerProtocol),
        ):
            ...
    """
    quota = limit_type if limit_type == PHOTO_QUOTA else LimitType(limit_type)

    async def _check_quota(
        db: AsyncSession = Depends(get_db),
        user_id: UUID = Depends(get_current_user_id),
        checker: UsageLimitCheckerProtocol = Inject(UsageLimitCheckerProtocol),
    ) -> UsageLimitResult:
        if quota == PHOTO_QUOTA:
            result = await checker.check_photo_limit(db, user_id)
        else:
            result = await checker.check_limit(db, user_id, quota)
        ensure_allowed(result, quota)
        return result

    return _check_quota
