"""
Holiday Lookup Service.

Orchestrates provider resolution and holiday set queries for the API.
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from holiday_rules import providers
from holiday_rules.core import (
    Holiday,
    HolidaySet,
    HolidayType,
    ProviderDefinition,
    now_utc,
)
from holiday_rules.infrastructure.logging import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class HolidayListing:
    """Holidays of a provider year, possibly filtered by type."""
    provider_id: str
    year: int
    locale: str
    timezone: str
    holidays: List[Holiday]


@dataclass(frozen=True)
class DateCheckResult:
    """Outcome of checking a single date against a provider."""
    provider_id: str
    date: date
    holidays: List[Holiday]

    @property
    def is_holiday(self) -> bool:
        return bool(self.holidays)


class HolidayService:
    """
    Service for querying provider holidays.

    Responsible for:
    - Resolving providers from the registry
    - Defaulting the year to the current UTC year
    - Filtering holiday sets by type, key and date
    """

    def __init__(
        self,
        create: Optional[Callable[..., HolidaySet]] = None,
    ) -> None:
        self._create = create or providers.create

    def list_providers(self) -> List[ProviderDefinition]:
        """All registered providers."""
        return providers.available_providers()

    def provider(self, provider_id: str) -> ProviderDefinition:
        """
        Resolve a provider by id or name.

        Raises:
            UnknownProviderError: If no such provider is registered.
        """
        return providers.get_definition(provider_id)

    def holiday_set(
        self,
        provider_id: str,
        year: Optional[int] = None,
        locale: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> HolidaySet:
        """
        Compute the holiday set of a provider.

        Args:
            provider_id: Provider id or name.
            year: Calendar year; the current UTC year when omitted.
            locale: Optional locale override.
            timezone: Optional timezone override.
        """
        if year is None:
            year = now_utc().year
        return self._create(provider_id, year, locale=locale, timezone=timezone)

    def list_holidays(
        self,
        provider_id: str,
        year: Optional[int] = None,
        locale: Optional[str] = None,
        timezone: Optional[str] = None,
        holiday_type: Optional[HolidayType] = None,
    ) -> HolidayListing:
        """Holidays ordered by date, optionally restricted to one type."""
        holiday_set = self.holiday_set(provider_id, year, locale, timezone)
        holidays = list(holiday_set) if holiday_type is None else holiday_set.by_type(holiday_type)

        return HolidayListing(
            provider_id=holiday_set.provider_id,
            year=holiday_set.year,
            locale=holiday_set.locale,
            timezone=holiday_set.timezone,
            holidays=holidays,
        )

    def get_holiday(
        self,
        provider_id: str,
        key: str,
        year: Optional[int] = None,
        locale: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> Holiday:
        """
        Look up a single holiday.

        Raises:
            HolidayNotFoundError: If the provider has no such holiday that year.
        """
        return self.holiday_set(provider_id, year, locale, timezone).get(key)

    def check_date(
        self,
        provider_id: str,
        day: date,
        locale: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> DateCheckResult:
        """Check whether a date is a holiday for a provider."""
        holiday_set = self.holiday_set(provider_id, day.year, locale, timezone)
        result = DateCheckResult(
            provider_id=holiday_set.provider_id,
            date=day,
            holidays=holiday_set.on(day),
        )

        logger.for_holiday_set(holiday_set).with_fields(
            date=day.isoformat(),
            is_holiday=result.is_holiday,
        ).info(f"Checked {day.isoformat()} for {holiday_set.provider_id}")

        return result
