"""
Tests for HolidaySet queries and provider evaluation.
"""

from datetime import date, datetime

import pytest

from holiday_rules.core import (
    HolidayNotFoundError,
    HolidayType,
    ProviderConfigurationError,
    ProviderDefinition,
    build_holiday_set,
)
from holiday_rules.core.calculators import fixed
from holiday_rules.core.calendar_math import FRIDAY, SATURDAY
from holiday_rules.core.gating import since, until
from holiday_rules.core.rules import rule, substituted


class TestHolidaySetQueries:
    """Tests for HolidaySet lookups."""

    def test_get_by_key(self, sweden_2024):
        assert sweden_2024.get("nationalDay").date == date(2024, 6, 6)

    def test_get_missing_key_raises(self, sweden_2024):
        with pytest.raises(HolidayNotFoundError) as exc_info:
            sweden_2024.get("thanksgivingDay")
        assert exc_info.value.details["provider_id"] == "SE"

    def test_find_missing_key_returns_none(self, sweden_2024):
        assert sweden_2024.find("thanksgivingDay") is None

    def test_iteration_is_ordered_by_date(self, sweden_2024):
        dates = [h.date for h in sweden_2024]
        assert dates == sorted(dates)
        assert sweden_2024.keys()[0] == "newYearsDay"
        assert sweden_2024.keys()[-1] == "secondChristmasDay"

    def test_by_type(self, sweden_2024):
        official = sweden_2024.by_type(HolidayType.OFFICIAL)

        assert len(official) == len(sweden_2024)
        assert sweden_2024.by_type("bank") == []

    def test_is_holiday(self, sweden_2024):
        assert sweden_2024.is_holiday(date(2024, 6, 22))              # Midsummer
        assert sweden_2024.is_holiday(datetime(2024, 12, 24, 15, 0))  # Christmas Eve
        assert not sweden_2024.is_holiday(date(2024, 6, 21))

    def test_on_returns_holidays_for_date(self, sweden_2024):
        assert [h.key for h in sweden_2024.on(date(2024, 3, 31))] == ["easter"]

    def test_between(self, sweden_2024):
        keys = [h.key for h in sweden_2024.between(date(2024, 12, 24), date(2024, 12, 26))]
        assert keys == ["christmasEve", "christmasDay", "secondChristmasDay"]

        exclusive = sweden_2024.between(date(2024, 12, 24), date(2024, 12, 26), inclusive=False)
        assert [h.key for h in exclusive] == ["christmasDay"]

    def test_between_rejects_reversed_range(self, sweden_2024):
        with pytest.raises(ValueError):
            sweden_2024.between(date(2024, 12, 31), date(2024, 1, 1))

    def test_contains(self, sweden_2024):
        assert "stJohnsDay" in sweden_2024
        assert sweden_2024.get("stJohnsDay") in sweden_2024
        assert "corpusChristi" not in sweden_2024

    def test_to_list(self, sweden_2024):
        first = sweden_2024.to_list()[0]
        assert first == {
            "key": "newYearsDay",
            "name": "Nyårsdagen",
            "date": "2024-01-01",
            "type": "official",
        }


class TestBuildHolidaySet:
    """Tests for build_holiday_set with ad-hoc definitions."""

    def _definition(self, *rules):
        return ProviderDefinition(
            id="ZZ",
            name="Testland",
            timezone="UTC",
            locale="en_US",
            rules=rules,
        )

    def test_duplicate_keys_are_a_configuration_error(self):
        definition = self._definition(
            rule("foundingDay", fixed(3, 1)),
            rule("foundingDay", fixed(9, 1)),
        )

        with pytest.raises(ProviderConfigurationError):
            build_holiday_set(definition, 2024)

    def test_mutually_exclusive_rules_may_share_a_key(self):
        definition = self._definition(
            rule("foundingDay", fixed(3, 1), when=until(1999)),
            rule("foundingDay", fixed(9, 1), when=since(2000)),
        )

        assert build_holiday_set(definition, 1999).get("foundingDay").date == date(1999, 3, 1)
        assert build_holiday_set(definition, 2000).get("foundingDay").date == date(2000, 9, 1)

    def test_evaluation_is_deterministic(self):
        definition = self._definition(rule("foundingDay", fixed(3, 1)))

        first = build_holiday_set(definition, 2024)
        second = build_holiday_set(definition, 2024)

        assert first == second
        assert hash(first) == hash(second)
        assert first.to_list() == second.to_list()

    def test_substitute_from_following_year_lands_in_this_year(self):
        definition = self._definition(
            substituted(rule("foundingDay", fixed(1, 1)), {SATURDAY: -1}),
        )

        holidays_2021 = build_holiday_set(definition, 2021)
        holidays_2022 = build_holiday_set(definition, 2022)

        assert holidays_2021.get("substituteHoliday:foundingDay").date == date(2021, 12, 31)
        assert holidays_2022.keys() == ["foundingDay"]

    def test_substitute_from_previous_year_lands_in_this_year(self):
        definition = self._definition(
            substituted(rule("yearEnd", fixed(12, 31)), {FRIDAY: 1}),
        )

        holidays_2021 = build_holiday_set(definition, 2021)
        holidays_2022 = build_holiday_set(definition, 2022)

        assert holidays_2021.keys() == ["yearEnd"]
        assert holidays_2022.get("substituteHoliday:yearEnd").date == date(2022, 1, 1)
