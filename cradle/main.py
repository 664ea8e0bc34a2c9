"""Main module of the FastAPI application.

This module sets up the FastAPI application, the middleware that logs incoming
requests and unhandled exceptions, and the exception handlers that map domain
errors to HTTP status codes.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from cradle.api.middleware import (
    add_request_id,
    authentication_exception_handler,
    bad_request_exception_handler,
    cradle_exception_handler,
    exception_logging_middleware,
    invalid_state_exception_handler,
    log_requests,
    not_found_exception_handler,
    permission_exception_handler,
    usage_limit_exceeded_exception_handler,
)
from cradle.api.v1.api import api_router
from cradle.core.config import settings
from cradle.core.exceptions import (
    AuthenticationException,
    BadRequestError,
    CradleException,
    InvalidStateError,
    NotFoundException,
    PermissionException,
)
from cradle.core.logging import logger
from cradle.db.init_db import create_tables
from cradle.db.session import async_engine
from cradle.domains.usage.exceptions import UsageLimitExceededError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events.

    Initializes the DI container and creates missing tables.
    """
    from cradle.core.container import initialize_container, reset_container

    logger.info("Initializing dependency injection container...")
    initialize_container(settings)
    logger.info("Container initialized successfully")

    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables(async_engine)

    yield

    reset_container()
    await async_engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.include_router(api_router)

# Last registered runs outermost
app.middleware("http")(exception_logging_middleware)
app.middleware("http")(log_requests)
app.middleware("http")(add_request_id)

# Register exception handlers (most specific class wins)
app.exception_handler(UsageLimitExceededError)(usage_limit_exceeded_exception_handler)
app.exception_handler(AuthenticationException)(authentication_exception_handler)
app.exception_handler(PermissionException)(permission_exception_handler)
app.exception_handler(NotFoundException)(not_found_exception_handler)
app.exception_handler(BadRequestError)(bad_request_exception_handler)
app.exception_handler(InvalidStateError)(invalid_state_exception_handler)
app.exception_handler(CradleException)(cradle_exception_handler)
