"""
Declarative holiday rules.

A rule couples a date calculator with its gating predicate, type and
name overrides. Providers are tuples of rules evaluated against a shared
read-only context.
"""

from dataclasses import dataclass, field, replace
from datetime import MAXYEAR, MINYEAR
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Union

from holiday_rules.core.calculators import DateCalculator
from holiday_rules.core.calendar_math import shift_days
from holiday_rules.core.gating import NamesByYear, YearPredicate, always
from holiday_rules.core.holiday import Holiday, HolidayType
from holiday_rules.core.translations import SUBSTITUTE_TEMPLATES, names_for


SUBSTITUTE_PREFIX = "substituteHoliday:"


@dataclass(frozen=True)
class ProviderContext:
    """Read-only input shared by every rule of a provider evaluation."""
    year: int
    timezone: str
    locale: str


@dataclass(frozen=True)
class HolidayRule:
    """
    One holiday of a jurisdiction.

    Attributes:
        key: Holiday key, also used to look up translations.
        calculate: Maps the year to the holiday's date.
        type: Holiday classification.
        when: Gating predicate on the year.
        names: Name overrides, static or as a function of the year.
        substitutes: Weekday -> day offset applied to build an observed
            substitute holiday when the original falls on that weekday.
        substitutes_when: Gating predicate for the substitute.
    """
    key: str
    calculate: DateCalculator
    type: HolidayType = HolidayType.OFFICIAL
    when: YearPredicate = always
    names: Union[Mapping[str, str], NamesByYear, None] = None
    substitutes: Mapping[int, int] = field(default_factory=lambda: MappingProxyType({}))
    substitutes_when: YearPredicate = always

    def applies(self, year: int) -> bool:
        """Check the gating predicate."""
        return self.when(year)

    def resolve_names(self, year: int) -> Dict[str, str]:
        """Translated names for the year, with overrides applied."""
        overrides = self.names(year) if callable(self.names) else self.names
        return names_for(self.key, overrides)

    def evaluate(self, context: ProviderContext) -> List[Holiday]:
        """
        Produce the holidays of this rule for a year.

        Returns the holiday when the rule applies, plus any observed
        substitute landing in the year. A substitute may belong to the
        holiday of a neighbouring year, e.g. a Saturday New Year's Day
        observed on December 31 of the year before.
        """
        holidays = []
        if self.applies(context.year):
            holidays.append(Holiday(
                key=self.key,
                names=self.resolve_names(context.year),
                date=self.calculate(context.year),
                timezone=context.timezone,
                type=self.type,
                locale=context.locale,
            ))

        if self.substitutes:
            holidays.extend(self._substitutes(context))
        return holidays

    def _substitutes(self, context: ProviderContext) -> Iterator[Holiday]:
        for year in (context.year - 1, context.year, context.year + 1):
            if not MINYEAR <= year <= MAXYEAR:
                continue
            if not (self.applies(year) and self.substitutes_when(year)):
                continue

            original = self.calculate(year)
            offset = self.substitutes.get(original.weekday())
            if offset is None:
                continue

            observed = shift_days(original, offset)
            if observed.year != context.year:
                continue

            yield Holiday(
                key=f"{SUBSTITUTE_PREFIX}{self.key}",
                names=substitute_names(self.resolve_names(year)),
                date=observed,
                timezone=context.timezone,
                type=self.type,
                locale=context.locale,
            )


def substitute_names(names: Mapping[str, str]) -> Dict[str, str]:
    """Apply the observed-day template of each locale to the original names."""
    return {
        locale: SUBSTITUTE_TEMPLATES[locale].format(name)
        for locale, name in names.items()
        if locale in SUBSTITUTE_TEMPLATES
    }


def rule(
    key: str,
    calculate: DateCalculator,
    holiday_type: HolidayType = HolidayType.OFFICIAL,
    when: YearPredicate = always,
    names: Union[Mapping[str, str], NamesByYear, None] = None,
) -> HolidayRule:
    """Shorthand constructor used by the provider definitions."""
    return HolidayRule(key=key, calculate=calculate, type=holiday_type, when=when, names=names)


def substituted(
    base: HolidayRule,
    shifts: Mapping[int, int],
    when: YearPredicate = always,
) -> HolidayRule:
    """Return a copy of a rule that emits observed substitutes."""
    return replace(base, substitutes=MappingProxyType(dict(shifts)), substitutes_when=when)


def gated(base: HolidayRule, when: YearPredicate) -> HolidayRule:
    """Return a copy of a rule with another gating predicate."""
    return replace(base, when=when)
