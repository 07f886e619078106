"""
Holidays in Finland.

Since 1955 Midsummer Day and All Saints' Day fall on the Saturday of a
7-day window instead of a fixed date.
"""

from holiday_rules.core.calculators import fixed, weekday_relative
from holiday_rules.core.calendar_math import SATURDAY, Direction
from holiday_rules.core.gating import since, until
from holiday_rules.core.provider import ProviderDefinition
from holiday_rules.core.rules import gated, rule
from holiday_rules.providers import christian, common


SATURDAY_RULES_SINCE = 1955


FINLAND = ProviderDefinition(
    id="FI",
    name="Finland",
    timezone="Europe/Helsinki",
    locale="fi_FI",
    rules=(
        common.new_years_day(),
        christian.epiphany(),
        christian.good_friday(),
        christian.easter(),
        christian.easter_monday(),
        common.international_workers_day(),
        christian.ascension_day(),
        christian.pentecost(),
        gated(christian.st_johns_day(), until(SATURDAY_RULES_SINCE - 1)),
        rule(
            "stJohnsDay",
            weekday_relative(6, 20, SATURDAY, Direction.NEXT_OR_SAME),
            when=since(SATURDAY_RULES_SINCE),
        ),
        gated(christian.all_saints_day(), until(SATURDAY_RULES_SINCE - 1)),
        rule(
            "allSaintsDay",
            weekday_relative(10, 31, SATURDAY, Direction.NEXT_OR_SAME),
            when=since(SATURDAY_RULES_SINCE),
        ),
        rule("independenceDay", fixed(12, 6), when=since(1917)),
        christian.christmas_day(),
        christian.second_christmas_day(),
    ),
)
