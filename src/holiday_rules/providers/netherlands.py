"""
Holidays in the Netherlands.

The monarch's birthday moves away from Sundays: Queen's Day went to the
Monday after until 1980 and to the Saturday before from then on; King's
Day (since 2014) also moves to the Saturday before.
"""

from datetime import date

from holiday_rules.core.calendar_math import SUNDAY, checked_date, shift_days
from holiday_rules.core.calculators import fixed
from holiday_rules.core.gating import between, since
from holiday_rules.core.holiday import HolidayType
from holiday_rules.core.provider import ProviderDefinition
from holiday_rules.core.rules import rule
from holiday_rules.providers import christian, common


def queens_day(year: int) -> date:
    """30 April from 1949, 31 August (Queen Wilhelmina) before that."""
    day = checked_date(year, 4, 30) if year >= 1949 else checked_date(year, 8, 31)
    if day.weekday() == SUNDAY:
        return shift_days(day, -1 if year >= 1980 else 1)
    return day


def kings_day(year: int) -> date:
    """27 April, or the Saturday before when it is a Sunday."""
    day = checked_date(year, 4, 27)
    if day.weekday() == SUNDAY:
        return shift_days(day, -1)
    return day


NETHERLANDS = ProviderDefinition(
    id="NL",
    name="Netherlands",
    timezone="Europe/Amsterdam",
    locale="nl_NL",
    rules=(
        common.new_years_day(),
        christian.good_friday(HolidayType.OBSERVANCE),
        christian.easter(),
        christian.easter_monday(),
        rule("queensDay", queens_day, when=between(1891, 2013)),
        rule("kingsDay", kings_day, when=since(2014)),
        rule("liberationDay", fixed(5, 5), when=since(1947)),
        christian.ascension_day(),
        christian.pentecost(),
        christian.pentecost_monday(),
        christian.christmas_day(),
        christian.second_christmas_day(),
    ),
)
