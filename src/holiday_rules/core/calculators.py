"""
Holiday calculators.

Date calculators are pure functions of the year. Each factory below
returns one, and the *_holiday helpers wrap them into Holiday values for
a given timezone and locale.
"""

from datetime import date
from typing import Callable, Mapping, Optional

from holiday_rules.core.calendar_math import (
    Direction,
    calculate_easter,
    checked_date,
    nth_weekday,
    resolve_weekday,
    shift_days,
)
from holiday_rules.core.holiday import Holiday, HolidayType
from holiday_rules.core.translations import names_for


DateCalculator = Callable[[int], date]


def fixed(month: int, day: int) -> DateCalculator:
    """Same calendar date every year."""
    def calculate(year: int) -> date:
        return checked_date(year, month, day)
    return calculate


def easter_offset(days: int) -> DateCalculator:
    """Easter Sunday plus a number of days (negative for earlier)."""
    def calculate(year: int) -> date:
        return shift_days(calculate_easter(year), days)
    return calculate


def weekday_relative(month: int, day: int, weekday: int,
                     direction: Direction = Direction.NEXT_OR_SAME) -> DateCalculator:
    """Weekday occurrence relative to a fixed anchor date."""
    def calculate(year: int) -> date:
        return resolve_weekday(checked_date(year, month, day), weekday, direction)
    return calculate


def nth_weekday_of_month(month: int, weekday: int, n: int) -> DateCalculator:
    """n-th weekday of a month (negative n counts from the end)."""
    def calculate(year: int) -> date:
        return nth_weekday(year, month, weekday, n)
    return calculate


def _build(key: str, on: date, timezone: str, locale: str,
           holiday_type: HolidayType, names: Optional[Mapping[str, str]]) -> Holiday:
    return Holiday(
        key=key,
        names=names_for(key, names),
        date=on,
        timezone=timezone,
        type=holiday_type,
        locale=locale,
    )


def fixed_holiday(
    key: str,
    year: int,
    month: int,
    day: int,
    timezone: str,
    locale: str,
    holiday_type: HolidayType = HolidayType.OFFICIAL,
    names: Optional[Mapping[str, str]] = None,
) -> Holiday:
    """
    Create a holiday on a fixed calendar date.

    Raises:
        InvalidDateError: If the date does not exist (e.g. February 30).
    """
    return _build(key, fixed(month, day)(year), timezone, locale, holiday_type, names)


def easter_holiday(
    key: str,
    year: int,
    offset_days: int,
    timezone: str,
    locale: str,
    holiday_type: HolidayType = HolidayType.OFFICIAL,
    names: Optional[Mapping[str, str]] = None,
) -> Holiday:
    """Create a holiday relative to Easter Sunday."""
    return _build(key, easter_offset(offset_days)(year), timezone, locale, holiday_type, names)


def weekday_holiday(
    key: str,
    year: int,
    month: int,
    day: int,
    weekday: int,
    direction: Direction,
    timezone: str,
    locale: str,
    holiday_type: HolidayType = HolidayType.OFFICIAL,
    names: Optional[Mapping[str, str]] = None,
) -> Holiday:
    """Create a holiday on a weekday relative to an anchor date."""
    on = weekday_relative(month, day, weekday, direction)(year)
    return _build(key, on, timezone, locale, holiday_type, names)
