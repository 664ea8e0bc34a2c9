"""Logging setup for the Cradle backend.

Every module logs through ``logger`` (or a child derived from it with
``with_context``) so that identity dimensions such as ``request_id`` or
``user_id`` travel with each record. Outside the local environment records
are emitted as JSON.

Usage:
    from cradle.core.logging import logger

    log = logger.with_context(user_id=str(user_id))
    log.info("Checked message quota")
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

from pythonjsonlogger import jsonlogger

from cradle.core.config import Environment, settings

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s %(dimensions)s"
_JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class _DimensionsFilter(logging.Filter):
    """Guarantee ``record.dimensions`` exists so the text format never fails."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "dimensions"):
            record.dimensions = {}
        return True


class _JsonFormatter(jsonlogger.JsonFormatter):
    """Flatten contextual dimensions into top-level JSON keys."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        dimensions = log_record.pop("dimensions", None) or {}
        log_record.update(dimensions)
        log_record["level"] = record.levelname


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that carries a dict of dimensions and an optional prefix."""

    def __init__(
        self,
        base_logger: logging.Logger,
        dimensions: Optional[dict[str, Any]] = None,
        prefix: str = "",
    ) -> None:
        """Wrap *base_logger* with fixed dimensions and message prefix."""
        super().__init__(base_logger, dict(dimensions or {}))
        self.dimensions: dict[str, Any] = dict(dimensions or {})
        self.prefix = prefix

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        """Attach dimensions to the record and apply the prefix."""
        extra = dict(kwargs.get("extra") or {})
        extra["dimensions"] = {**self.dimensions, **extra.get("dimensions", {})}
        kwargs["extra"] = extra
        if self.prefix:
            msg = f"{self.prefix}{msg}"
        return msg, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a child logger with additional dimensions."""
        return ContextualLogger(self.logger, {**self.dimensions, **dimensions}, self.prefix)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a child logger that prefixes every message."""
        return ContextualLogger(self.logger, self.dimensions, prefix)


def _build_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if settings.ENVIRONMENT in (Environment.LOCAL, Environment.TEST):
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    else:
        handler.setFormatter(_JsonFormatter(_JSON_FORMAT))
    handler.addFilter(_DimensionsFilter())
    return handler


def _setup_base_logger() -> logging.Logger:
    base = logging.getLogger("cradle")
    if not base.handlers:
        base.addHandler(_build_handler())
    base.setLevel(settings.LOG_LEVEL.upper())
    base.propagate = False
    return base


logger = ContextualLogger(_setup_base_logger())
