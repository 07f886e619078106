"""
Infrastructure Layer.

Cross-cutting adapters used by the core and the API:
- Structured logging configuration
"""

from holiday_rules.infrastructure.logging import (
    get_logger,
    log_duration,
    log_request_context,
    logger,
    StructuredLogger,
)


__all__ = [
    "get_logger",
    "log_duration",
    "log_request_context",
    "logger",
    "StructuredLogger",
]
