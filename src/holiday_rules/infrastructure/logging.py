"""
Structured JSON Logger.

Every record goes to stdout as one JSON object. Fields bound with
StructuredLogger.with_fields (provider, year, locale, operation) and the
Flask request id are merged into that object.
"""

import json
import logging
import os
import sys
import time
import uuid
from datetime import datetime, timezone
from functools import wraps
from typing import TYPE_CHECKING, Any, Callable, Dict, TypeVar

from flask import Flask, g, has_request_context, request

if TYPE_CHECKING:
    from holiday_rules.core.holiday_set import HolidaySet


F = TypeVar("F", bound=Callable[..., Any])

REQUEST_ID_HEADER = "X-Request-ID"


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "severity": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "logger": record.name,
        }

        if has_request_context() and g.get("request_id"):
            entry["request_id"] = g.request_id
            entry["endpoint"] = request.endpoint

        entry.update(getattr(record, "extra_fields", None) or {})

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # Source location only for warnings and above
        if record.levelno >= logging.WARNING:
            entry["source"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(entry, ensure_ascii=False, default=str)


class StructuredLogger(logging.LoggerAdapter):
    """Adapter carrying bound fields into each record's extra_fields."""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra = dict(kwargs.get("extra") or {})
        fields = {**self.extra, **extra.pop("extra_fields", {})}
        kwargs["extra"] = {**extra, "extra_fields": fields}
        return msg, kwargs

    def with_fields(self, **fields: Any) -> "StructuredLogger":
        """Return a logger with additional bound fields."""
        return StructuredLogger(self.logger, {**self.extra, **fields})

    def for_holiday_set(self, holiday_set: "HolidaySet") -> "StructuredLogger":
        """Bind the provider, year and locale of a computed holiday set."""
        return self.with_fields(
            provider_id=holiday_set.provider_id,
            year=holiday_set.year,
            locale=holiday_set.locale,
        )


def _level_from_env() -> int:
    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str = "holiday_rules") -> StructuredLogger:
    """
    Get a structured logger writing JSON to stdout.

    The handler is installed once per logger name; the level comes from
    the LOG_LEVEL environment variable (default INFO).
    """
    base_logger = logging.getLogger(name)

    if not base_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        base_logger.addHandler(handler)
        base_logger.setLevel(_level_from_env())
        base_logger.propagate = False

    return StructuredLogger(base_logger, {})


def log_request_context(app: Flask) -> None:
    """
    Tag each request with an id and log one line per response.

    The id comes from the X-Request-ID header when the caller sends one.
    """
    request_logger = get_logger("holiday_rules.request")

    @app.before_request
    def before_request() -> None:
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        g.started = time.perf_counter()

    @app.after_request
    def after_request(response):
        fields: Dict[str, Any] = {
            "method": request.method,
            "path": request.path,
            "status_code": response.status_code,
        }
        if "started" in g:
            fields["duration_ms"] = int((time.perf_counter() - g.started) * 1000)
        provider_id = (request.view_args or {}).get("provider_id")
        if provider_id:
            fields["provider_id"] = provider_id

        request_logger.with_fields(**fields).info(
            f"{request.method} {request.path} -> {response.status_code}"
        )
        if g.get("request_id"):
            response.headers.setdefault(REQUEST_ID_HEADER, g.request_id)
        return response


def log_duration(operation: str) -> Callable[[F], F]:
    """
    Decorator logging how long an operation took.

    Success is logged at DEBUG, failure at WARNING; errors are re-raised.
    """
    def decorator(func: F) -> F:
        operation_logger = get_logger(func.__module__).with_fields(operation=operation)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                operation_logger.with_fields(
                    duration_ms=int((time.perf_counter() - started) * 1000),
                    status="error",
                    error_type=type(e).__name__,
                ).warning(f"{operation} failed: {e}")
                raise
            operation_logger.with_fields(
                duration_ms=int((time.perf_counter() - started) * 1000),
                status="success",
            ).debug(f"{operation} completed")
            return result
        return wrapper  # type: ignore
    return decorator


# Global application logger
logger = get_logger("holiday_rules")
