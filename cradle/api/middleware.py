"""Middleware and exception handlers for the FastAPI application."""

import time
import traceback
import uuid
from datetime import UTC, datetime

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from cradle.core.config import Environment, settings
from cradle.core.exceptions import (
    AuthenticationException,
    BadRequestError,
    CradleException,
    InvalidStateError,
    NotFoundException,
    PermissionException,
)
from cradle.core.logging import logger
from cradle.domains.usage.exceptions import UsageLimitExceededError


async def add_request_id(request: Request, call_next: callable) -> Response:
    """Middleware to generate and add a request ID to the request for tracing.

    Args:
    ----
        request (Request): The incoming request.
        call_next (callable): The next middleware in the chain.

    Returns:
    -------
        Response: The response to the incoming request, with ``X-Request-ID`` set.

    """
    request.state.request_id = str(uuid.uuid4())
    response = await call_next(request)
    response.headers["X-Request-ID"] = request.state.request_id
    return response


async def log_requests(request: Request, call_next: callable) -> Response:
    """Middleware to log incoming requests with their duration and status code."""
    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time
    logger.with_context(
        request_id=getattr(request.state, "request_id", None),
        status_code=response.status_code,
    ).info(
        f"Handled request {request.method} {request.url.path} in {duration:.2f} seconds. "
        f"Response code: {response.status_code}"
    )
    return response


async def exception_logging_middleware(request: Request, call_next: callable) -> Response:
    """Middleware to log unhandled exceptions and answer 500.

    Args:
    ----
        request (Request): The incoming request.
        call_next (callable): The next middleware in the chain.

    Returns:
    -------
        Response: The response to the incoming request.

    """
    try:
        return await call_next(request)
    except Exception as exc:
        logger.with_context(request_id=getattr(request.state, "request_id", None)).error(
            f"Unhandled exception: {exc}\n{traceback.format_exc()}"
        )
        response_content = {
            "detail": f"Internal Server Error: {exc.__class__.__name__}: {str(exc)}"
        }
        if settings.ENVIRONMENT == Environment.LOCAL:
            response_content["trace"] = traceback.format_exc()
        return JSONResponse(status_code=500, content=response_content)


# Exception handlers
async def usage_limit_exceeded_exception_handler(
    request: Request, exc: UsageLimitExceededError
) -> JSONResponse:
    """Exception handler for UsageLimitExceededError.

    Returns:
    -------
        JSONResponse: A 429 Too Many Requests response carrying the error code,
            remaining quota and reset time. Daily quotas also set ``Retry-After``.

    """
    headers = {}
    reset_time = None
    if exc.reset_time is not None:
        reset_time = exc.reset_time.isoformat()
        retry_after = int((exc.reset_time - datetime.now(UTC)).total_seconds())
        headers["Retry-After"] = str(max(retry_after, 0) + 1)

    return JSONResponse(
        status_code=429,
        content={
            "error": exc.error_code,
            "detail": str(exc),
            "remaining": exc.remaining,
            "reset_time": reset_time,
        },
        headers=headers,
    )


async def authentication_exception_handler(
    request: Request, exc: AuthenticationException
) -> JSONResponse:
    """Exception handler for AuthenticationException. Answers 401."""
    return JSONResponse(
        status_code=401,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def permission_exception_handler(request: Request, exc: PermissionException) -> JSONResponse:
    """Exception handler for PermissionException.

    Returns:
    -------
        JSONResponse: A 403 Forbidden status response that details the error message.

    """
    return JSONResponse(status_code=403, content={"detail": str(exc)})


async def not_found_exception_handler(request: Request, exc: NotFoundException) -> JSONResponse:
    """Exception handler for NotFoundException.

    Returns:
    -------
        JSONResponse: A 404 Not Found status response that details the error message.

    """
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def bad_request_exception_handler(request: Request, exc: BadRequestError) -> JSONResponse:
    """Exception handler for BadRequestError and its domain subclasses. Answers 400."""
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def invalid_state_exception_handler(request: Request, exc: InvalidStateError) -> JSONResponse:
    """Exception handler for InvalidStateError.

    Returns:
    -------
        JSONResponse: A 400 Bad Request status response that details the error message.

    """
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def cradle_exception_handler(request: Request, exc: CradleException) -> JSONResponse:
    """Fallback for CradleException types without a dedicated handler."""
    logger.error(f"Unmapped {exc.__class__.__name__}: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})
