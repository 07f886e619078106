"""Common holidays observed across most jurisdictions."""

from holiday_rules.core.calculators import fixed
from holiday_rules.core.gating import YearPredicate, always
from holiday_rules.core.holiday import HolidayType
from holiday_rules.core.rules import HolidayRule, rule


def new_years_day(holiday_type: HolidayType = HolidayType.OFFICIAL,
                  when: YearPredicate = always) -> HolidayRule:
    return rule("newYearsDay", fixed(1, 1), holiday_type, when)


def international_workers_day(holiday_type: HolidayType = HolidayType.OFFICIAL,
                              when: YearPredicate = always) -> HolidayRule:
    """May Day, celebrated on 1 May."""
    return rule("internationalWorkersDay", fixed(5, 1), holiday_type, when)
