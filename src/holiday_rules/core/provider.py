"""
Provider evaluation.

A provider definition is pure data: a jurisdiction id, its default
timezone and locale, and the tuple of rules it is composed of.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from holiday_rules.config import settings
from holiday_rules.core.calendar_math import load_timezone
from holiday_rules.core.exceptions import ConfigurationError, InvalidArgumentError
from holiday_rules.core.holiday import Holiday
from holiday_rules.core.holiday_set import HolidaySet
from holiday_rules.core.rules import HolidayRule, ProviderContext
from holiday_rules.core.translations import ensure_locale


@dataclass(frozen=True)
class ProviderDefinition:
    """
    Declarative configuration of one jurisdiction.

    Attributes:
        id: ISO 3166 code of the jurisdiction.
        name: Human readable name, also accepted as an alias.
        timezone: Default IANA timezone.
        locale: Default locale for holiday names.
        rules: The holiday rules, in declaration order.
    """
    id: str
    name: str
    timezone: str
    locale: str
    rules: Tuple[HolidayRule, ...]

    def context(
        self,
        year: int,
        locale: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> ProviderContext:
        """
        Validate the inputs and build the evaluation context.

        Raises:
            InvalidArgumentError: If the year is outside the supported range
                or the timezone is unknown.
            UnknownLocaleError: If the locale is not supported.
        """
        validate_year(year)
        resolved_timezone = timezone or self.timezone
        load_timezone(resolved_timezone)
        resolved_locale = ensure_locale(locale or self.locale)
        return ProviderContext(year=year, timezone=resolved_timezone, locale=resolved_locale)


def validate_year(year: int) -> int:
    """
    Check that a year is an integer within the supported range.

    Raises:
        InvalidArgumentError: If it is not.
        ConfigurationError: If the configured range itself is unusable.
    """
    calendar = settings.calendar
    if not 1 <= calendar.min_year <= calendar.max_year <= 9999:
        raise ConfigurationError(
            "HOLIDAY_MIN_YEAR/HOLIDAY_MAX_YEAR",
            f"invalid year range {calendar.min_year}..{calendar.max_year}",
        )
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidArgumentError("year", year, "year must be an integer")
    if not calendar.contains(year):
        raise InvalidArgumentError(
            "year", year,
            f"year must be between {calendar.min_year} and {calendar.max_year}",
        )
    return year


def build_holiday_set(
    definition: ProviderDefinition,
    year: int,
    locale: Optional[str] = None,
    timezone: Optional[str] = None,
) -> HolidaySet:
    """
    Evaluate every rule of a provider for a year.

    Args:
        definition: The provider definition.
        year: The calendar year.
        locale: Locale for names (provider default when omitted).
        timezone: Timezone override (provider default when omitted).

    Returns:
        The complete holiday set.
    """
    context = definition.context(year, locale, timezone)

    holidays: List[Holiday] = []
    for holiday_rule in definition.rules:
        holidays.extend(holiday_rule.evaluate(context))

    return HolidaySet(
        provider_id=definition.id,
        year=context.year,
        locale=context.locale,
        timezone=context.timezone,
        holidays=holidays,
    )
