"""
Federal holidays in the United States.

Most holidays moved to fixed Mondays with the Uniform Monday Holiday Act
(effective 1971). Holidays on fixed dates are observed on the Friday
before when they fall on a Saturday and the Monday after when they fall
on a Sunday.
"""

from holiday_rules.core.calculators import fixed, nth_weekday_of_month
from holiday_rules.core.calendar_math import MONDAY, SATURDAY, SUNDAY, THURSDAY
from holiday_rules.core.gating import between, renamed, since
from holiday_rules.core.provider import ProviderDefinition
from holiday_rules.core.rules import rule, substituted
from holiday_rules.providers import christian, common


OBSERVED_SHIFTS = {SATURDAY: -1, SUNDAY: 1}
OBSERVED_SINCE = since(1971)


def _observed(base):
    return substituted(base, OBSERVED_SHIFTS, when=OBSERVED_SINCE)


USA = ProviderDefinition(
    id="US",
    name="USA",
    timezone="America/New_York",
    locale="en_US",
    rules=(
        _observed(common.new_years_day(when=since(1870))),
        rule("martinLutherKingDay", nth_weekday_of_month(1, MONDAY, 3), when=since(1986)),
        rule("washingtonsBirthday", fixed(2, 22), when=between(1879, 1970)),
        rule("washingtonsBirthday", nth_weekday_of_month(2, MONDAY, 3), when=since(1971)),
        rule("memorialDay", fixed(5, 30), when=between(1865, 1970)),
        rule("memorialDay", nth_weekday_of_month(5, MONDAY, -1), when=since(1971)),
        _observed(rule("juneteenth", fixed(6, 19), when=since(2021))),
        _observed(rule("independenceDay", fixed(7, 4), when=since(1776))),
        rule("labourDay", nth_weekday_of_month(9, MONDAY, 1), when=since(1887)),
        rule("columbusDay", fixed(10, 12), when=between(1937, 1970)),
        rule("columbusDay", nth_weekday_of_month(10, MONDAY, 2), when=since(1971)),
        _observed(rule(
            "veteransDay",
            fixed(11, 11),
            when=since(1919),
            names=renamed((1919, {"en_US": "Armistice Day"}), (1954, {"en_US": "Veterans Day"})),
        )),
        rule("thanksgivingDay", nth_weekday_of_month(11, THURSDAY, 4), when=since(1863)),
        _observed(christian.christmas_day(when=since(1870))),
    ),
)
