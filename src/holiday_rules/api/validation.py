"""
API Request Validation.

Uses Pydantic for query string validation.
"""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from holiday_rules.core import HolidayType


class LocalizedQuery(BaseModel):
    """Locale and timezone overrides accepted by every provider endpoint."""

    locale: Optional[str] = Field(
        default=None,
        min_length=2,
        max_length=16,
        description="Locale for holiday names, e.g. sv_SE",
    )
    timezone: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=64,
        description="IANA timezone overriding the provider default",
    )

    @field_validator("locale", "timezone", mode="before")
    @classmethod
    def strip_value(cls, v: Any) -> Any:
        """Trim whitespace; blank values mean 'use the default'."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class ProviderQuery(LocalizedQuery):
    """Query parameters for a provider year."""

    year: Optional[int] = Field(
        default=None,
        description="Calendar year; defaults to the current year",
    )


class HolidaysQuery(ProviderQuery):
    """Query parameters for /holidays/<provider>."""

    type: Optional[HolidayType] = Field(
        default=None,
        description="Only return holidays of this type",
    )


class CheckDateQuery(LocalizedQuery):
    """Query parameters for /holidays/<provider>/check."""

    day: date = Field(..., alias="date", description="ISO date to check")
