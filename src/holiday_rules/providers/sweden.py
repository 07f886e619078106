"""
Holidays in Sweden.

Midsummer and All Saints' Day are the Saturdays of fixed 7-day windows.
The national day dates from 1916 as Swedish flag day and was renamed
in 1983.
"""

from holiday_rules.core.calculators import fixed, weekday_relative
from holiday_rules.core.calendar_math import SATURDAY, Direction
from holiday_rules.core.gating import renamed, since
from holiday_rules.core.holiday import HolidayType
from holiday_rules.core.provider import ProviderDefinition
from holiday_rules.core.rules import rule
from holiday_rules.providers import christian, common


SWEDEN = ProviderDefinition(
    id="SE",
    name="Sweden",
    timezone="Europe/Stockholm",
    locale="sv_SE",
    rules=(
        common.new_years_day(),
        christian.epiphany(),
        christian.good_friday(),
        christian.easter(),
        christian.easter_monday(),
        common.international_workers_day(),
        christian.ascension_day(),
        christian.pentecost(),
        rule(
            "nationalDay",
            fixed(6, 6),
            when=since(1916),
            names=renamed(
                (1916, {"sv_SE": "Svenska flaggans dag"}),
                (1983, {"sv_SE": "Sveriges nationaldag"}),
            ),
        ),
        # Saturday between 20 and 26 June
        rule("stJohnsDay", weekday_relative(6, 20, SATURDAY, Direction.NEXT_OR_SAME)),
        # Saturday between 31 October and 6 November
        rule("allSaintsDay", weekday_relative(10, 31, SATURDAY, Direction.NEXT_OR_SAME)),
        christian.christmas_eve(HolidayType.OFFICIAL),
        christian.christmas_day(),
        christian.second_christmas_day(),
    ),
)
