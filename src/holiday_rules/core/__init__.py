"""Core package - Holiday model, calendar arithmetic and rule evaluation."""

from holiday_rules.core.calculators import (
    easter_holiday,
    easter_offset,
    fixed,
    fixed_holiday,
    nth_weekday_of_month,
    weekday_holiday,
    weekday_relative,
)
from holiday_rules.core.calendar_math import (
    Direction,
    calculate_easter,
    checked_date,
    now_utc,
    nth_weekday,
    resolve_weekday,
)
from holiday_rules.core.exceptions import (
    BusinessError,
    ConfigurationError,
    HolidayNotFoundError,
    HolidayRulesError,
    InfrastructureError,
    InvalidArgumentError,
    InvalidDateError,
    ProviderConfigurationError,
    UnknownLocaleError,
    UnknownProviderError,
)
from holiday_rules.core.holiday import Holiday, HolidayType
from holiday_rules.core.holiday_set import HolidaySet
from holiday_rules.core.provider import ProviderDefinition, build_holiday_set
from holiday_rules.core.rules import HolidayRule, ProviderContext

__all__ = [
    # Calculators
    "easter_holiday",
    "easter_offset",
    "fixed",
    "fixed_holiday",
    "nth_weekday_of_month",
    "weekday_holiday",
    "weekday_relative",
    # Calendar arithmetic
    "Direction",
    "calculate_easter",
    "checked_date",
    "now_utc",
    "nth_weekday",
    "resolve_weekday",
    # Model
    "Holiday",
    "HolidayRule",
    "HolidaySet",
    "HolidayType",
    "ProviderContext",
    "ProviderDefinition",
    "build_holiday_set",
    # Exceptions
    "BusinessError",
    "ConfigurationError",
    "HolidayNotFoundError",
    "HolidayRulesError",
    "InfrastructureError",
    "InvalidArgumentError",
    "InvalidDateError",
    "ProviderConfigurationError",
    "UnknownLocaleError",
    "UnknownProviderError",
]
