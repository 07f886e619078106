"""Holidays in Norway."""

from holiday_rules.core.calculators import fixed
from holiday_rules.core.gating import since
from holiday_rules.core.provider import ProviderDefinition
from holiday_rules.core.rules import rule
from holiday_rules.providers import christian, common


NORWAY = ProviderDefinition(
    id="NO",
    name="Norway",
    timezone="Europe/Oslo",
    locale="nb_NO",
    rules=(
        common.new_years_day(),
        christian.maundy_thursday(),
        christian.good_friday(),
        christian.easter(),
        christian.easter_monday(),
        common.international_workers_day(),
        # Signing of the constitution in 1814, celebrated since 1836
        rule("constitutionDay", fixed(5, 17), when=since(1836)),
        christian.ascension_day(),
        christian.pentecost(),
        christian.pentecost_monday(),
        christian.christmas_day(),
        christian.second_christmas_day(),
    ),
)
