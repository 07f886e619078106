"""
Holidays in Portugal.

Corpus Christi, All Saints' Day, Republic Day and Restoration of
Independence were suspended from 2013 to 2015 and restored in 2016.
"""

from holiday_rules.core.calculators import fixed
from holiday_rules.core.gating import all_of, any_of, outside, since, until
from holiday_rules.core.holiday import HolidayType
from holiday_rules.core.provider import ProviderDefinition
from holiday_rules.core.rules import rule
from holiday_rules.providers import christian, common


SUSPENDED = outside(2013, 2015)


PORTUGAL = ProviderDefinition(
    id="PT",
    name="Portugal",
    timezone="Europe/Lisbon",
    locale="pt_PT",
    rules=(
        common.new_years_day(),
        christian.good_friday(),
        christian.easter(),
        # Carnation Revolution of 1974
        rule("25thApril", fixed(4, 25), when=since(1974)),
        common.international_workers_day(),
        christian.corpus_christi(HolidayType.OTHER, when=SUSPENDED),
        # Not observed during the Estado Novo
        rule("portugalDay", fixed(6, 10), when=any_of(until(1932), since(1974))),
        christian.assumption_of_mary(),
        rule("portugueseRepublic", fixed(10, 5), when=all_of(since(1910), SUSPENDED)),
        christian.all_saints_day(when=SUSPENDED),
        rule("restorationOfIndependence", fixed(12, 1), when=all_of(since(1640), SUSPENDED)),
        christian.immaculate_conception(),
        christian.christmas_day(),
    ),
)
