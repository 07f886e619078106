"""
Christian holidays.

Rule factories for the feasts shared by most Western jurisdictions.
Moveable feasts are offsets from Easter Sunday.
"""

from holiday_rules.core.calculators import easter_offset, fixed
from holiday_rules.core.gating import YearPredicate, always
from holiday_rules.core.holiday import HolidayType
from holiday_rules.core.rules import HolidayRule, rule


OFFICIAL = HolidayType.OFFICIAL


def epiphany(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    return rule("epiphany", fixed(1, 6), holiday_type, when)


def maundy_thursday(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    return rule("maundyThursday", easter_offset(-3), holiday_type, when)


def good_friday(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    return rule("goodFriday", easter_offset(-2), holiday_type, when)


def easter(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    return rule("easter", easter_offset(0), holiday_type, when)


def easter_monday(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    return rule("easterMonday", easter_offset(1), holiday_type, when)


def ascension_day(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    """Ascension is celebrated on the 40th day of Easter, a Thursday."""
    return rule("ascensionDay", easter_offset(39), holiday_type, when)


def pentecost(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    """Pentecost (Whitsunday), the seventh Sunday after Easter."""
    return rule("pentecost", easter_offset(49), holiday_type, when)


def pentecost_monday(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    return rule("pentecostMonday", easter_offset(50), holiday_type, when)


def corpus_christi(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    """Thursday after Trinity Sunday."""
    return rule("corpusChristi", easter_offset(60), holiday_type, when)


def st_johns_day(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    return rule("stJohnsDay", fixed(6, 24), holiday_type, when)


def assumption_of_mary(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    return rule("assumptionOfMary", fixed(8, 15), holiday_type, when)


def all_saints_day(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    return rule("allSaintsDay", fixed(11, 1), holiday_type, when)


def immaculate_conception(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    return rule("immaculateConception", fixed(12, 8), holiday_type, when)


def christmas_eve(holiday_type: HolidayType = HolidayType.OBSERVANCE,
                  when: YearPredicate = always) -> HolidayRule:
    return rule("christmasEve", fixed(12, 24), holiday_type, when)


def christmas_day(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    return rule("christmasDay", fixed(12, 25), holiday_type, when)


def second_christmas_day(holiday_type: HolidayType = OFFICIAL, when: YearPredicate = always) -> HolidayRule:
    return rule("secondChristmasDay", fixed(12, 26), holiday_type, when)
