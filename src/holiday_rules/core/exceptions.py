"""
Custom exceptions for the holiday-rules package.

Provides a hierarchy of business and infrastructure exceptions
for proper error handling and HTTP status code mapping.
"""

from typing import Any, Optional


class HolidayRulesError(Exception):
    """Base exception for all holiday-rules errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# =============================================================================
# Business Errors (4xx)
# =============================================================================

class BusinessError(HolidayRulesError):
    """Base exception for invalid caller input (typically 4xx)."""
    pass


def _format_date(year: Any, month: Any, day: Any) -> str:
    if all(isinstance(part, int) and not isinstance(part, bool) for part in (year, month, day)):
        return f"{year:04d}-{month:02d}-{day:02d}"
    return f"{year!r}-{month!r}-{day!r}"


class InvalidDateError(BusinessError):
    """Raised when a calendar date cannot be constructed."""

    def __init__(self, year: int, month: int, day: int, reason: Optional[str] = None):
        super().__init__(
            f"Invalid date: {_format_date(year, month, day)}"
            + (f" ({reason})" if reason else ""),
            {"year": year, "month": month, "day": day}
        )
        self.year = year
        self.month = month
        self.day = day


class InvalidArgumentError(BusinessError):
    """Raised when an argument (year, timezone, key) is out of range or malformed."""

    def __init__(self, argument: str, value: object, message: str):
        super().__init__(
            f"Invalid {argument} {value!r}: {message}",
            {"argument": argument, "value": value}
        )
        self.argument = argument
        self.value = value


class UnknownLocaleError(BusinessError):
    """Raised when a locale is not supported."""

    def __init__(self, locale: str):
        super().__init__(
            f"Locale '{locale}' is not a valid locale",
            {"locale": locale}
        )
        self.locale = locale


class HolidayNotFoundError(BusinessError):
    """Raised when a holiday key is not part of a holiday set."""

    def __init__(self, key: str, provider_id: str, year: int):
        super().__init__(
            f"Holiday not found: {key} ({provider_id}, {year})",
            {"key": key, "provider_id": provider_id, "year": year}
        )
        self.key = key


class UnknownProviderError(BusinessError):
    """Raised when no provider is registered under the requested id."""

    def __init__(self, provider_id: str):
        super().__init__(
            f"Unknown holiday provider: {provider_id}",
            {"provider_id": provider_id}
        )
        self.provider_id = provider_id


# =============================================================================
# Infrastructure Errors (5xx)
# =============================================================================

class InfrastructureError(HolidayRulesError):
    """Base exception for configuration and internal errors (typically 5xx)."""
    pass


class ConfigurationError(InfrastructureError):
    """Raised when a required configuration is missing or invalid."""

    def __init__(self, config_name: str, message: Optional[str] = None):
        msg = message or f"Configuration missing: {config_name}"
        super().__init__(msg, {"config_name": config_name})
        self.config_name = config_name


class ProviderConfigurationError(InfrastructureError):
    """Raised when a provider definition emits an inconsistent holiday set."""

    def __init__(self, provider_id: str, message: str):
        super().__init__(
            f"Provider {provider_id} is misconfigured: {message}",
            {"provider_id": provider_id}
        )
        self.provider_id = provider_id
