"""
Tests for Country Providers.

Tests the rule composition and historical gating of each jurisdiction.
"""

from datetime import date

import pytest

from holiday_rules.config import CalendarSettings, LocaleSettings, Settings
from holiday_rules.core import (
    ConfigurationError,
    HolidayType,
    InvalidArgumentError,
    UnknownLocaleError,
    UnknownProviderError,
)
from holiday_rules.providers import PROVIDERS, available_providers, create, get_definition


class TestRegistry:
    """Tests for provider lookup."""

    @pytest.mark.parametrize("provider_id", ["SE", "se", "Sweden", " sweden "])
    def test_lookup_by_id_or_name(self, provider_id):
        assert get_definition(provider_id).id == "SE"

    def test_unknown_provider_raises(self):
        with pytest.raises(UnknownProviderError):
            get_definition("Atlantis")

    def test_available_providers_sorted_by_id(self):
        ids = [d.id for d in available_providers()]
        assert ids == sorted(PROVIDERS)
        assert {"SE", "PT", "FR", "FI", "NO", "NL", "US"} <= set(ids)


class TestProviderErrors:
    """Tests for input validation at construction time."""

    @pytest.mark.parametrize("year", [999, 10000, -1])
    def test_year_out_of_range(self, year):
        with pytest.raises(InvalidArgumentError):
            create("SE", year)

    @pytest.mark.parametrize("year", ["2024", 2024.0, None, True])
    def test_non_integer_year(self, year):
        with pytest.raises(InvalidArgumentError):
            create("SE", year)

    def test_unknown_locale(self):
        with pytest.raises(UnknownLocaleError):
            create("SE", 2024, locale="sv_XX")

    def test_malformed_timezone(self):
        with pytest.raises(InvalidArgumentError):
            create("SE", 2024, timezone="Not/AZone")

    def test_timezone_override(self):
        holidays = create("SE", 2024, timezone="UTC")
        assert holidays.timezone == "UTC"
        assert holidays.get("easter").timezone == "UTC"


class TestConfiguration:
    """Tests for misconfigured defaults."""

    def test_inverted_year_range(self, monkeypatch):
        broken = Settings(calendar=CalendarSettings(min_year=2100, max_year=2000))
        monkeypatch.setattr("holiday_rules.core.provider.settings", broken)

        with pytest.raises(ConfigurationError):
            create("SE", 2024)

    def test_narrowed_year_range(self, monkeypatch):
        narrow = Settings(calendar=CalendarSettings(min_year=1900, max_year=2100))
        monkeypatch.setattr("holiday_rules.core.provider.settings", narrow)

        assert create("SE", 1900).year == 1900
        with pytest.raises(InvalidArgumentError):
            create("SE", 1899)

    def test_unsupported_default_locale(self, monkeypatch):
        broken = Settings(locale=LocaleSettings(default_locale="xx_XX"))
        monkeypatch.setattr("holiday_rules.core.translations.settings", broken)

        with pytest.raises(ConfigurationError):
            create("SE", 2024).get("easter").get_name("en_US")


class TestAllProviders:
    """Properties holding for every registered provider."""

    YEARS = list(range(1000, 10000, 37)) + [1916, 1955, 1983, 2013, 2014, 2021, 9999]

    @pytest.mark.parametrize("provider_id", sorted(PROVIDERS))
    def test_keys_unique_and_dates_within_year(self, provider_id):
        for year in self.YEARS:
            holidays = create(provider_id, year)
            keys = holidays.keys()
            assert len(keys) == len(set(keys))
            assert all(h.date.year == year for h in holidays)

    @pytest.mark.parametrize("provider_id", sorted(PROVIDERS))
    def test_evaluation_is_idempotent(self, provider_id):
        first = create(provider_id, 2024, locale="en_US", timezone="UTC")
        second = create(provider_id, 2024, locale="en_US", timezone="UTC")

        assert first == second
        assert first.to_list() == second.to_list()


class TestSweden:
    """Tests for the Swedish provider."""

    def test_holidays_2024(self, sweden_2024):
        assert sweden_2024.keys() == [
            "newYearsDay",
            "epiphany",
            "goodFriday",
            "easter",
            "easterMonday",
            "internationalWorkersDay",
            "ascensionDay",
            "pentecost",
            "nationalDay",
            "stJohnsDay",
            "allSaintsDay",
            "christmasEve",
            "christmasDay",
            "secondChristmasDay",
        ]

    def test_national_day_absent_before_1916(self):
        assert "nationalDay" not in create("SE", 1900)
        assert "nationalDay" not in create("SE", 1915)

    def test_national_day_named_flag_day_until_1982(self):
        assert create("SE", 1916).get("nationalDay").name == "Svenska flaggans dag"
        assert create("SE", 1950).get("nationalDay").name == "Svenska flaggans dag"
        assert create("SE", 1982).get("nationalDay").name == "Svenska flaggans dag"

    def test_national_day_renamed_in_1983(self):
        assert create("SE", 1983).get("nationalDay").name == "Sveriges nationaldag"
        assert create("SE", 2000).get("nationalDay").name == "Sveriges nationaldag"

    def test_national_day_english_name(self):
        assert create("SE", 2000, locale="en_US").get("nationalDay").name == "National Day"

    def test_midsummer_is_saturday_between_june_20_and_26(self):
        for year in range(1900, 2101):
            midsummer = create("SE", year).get("stJohnsDay").date
            assert midsummer.weekday() == 5
            assert date(year, 6, 20) <= midsummer <= date(year, 6, 26)

    def test_all_saints_is_saturday_between_october_31_and_november_6(self):
        assert create("SE", 2024).get("allSaintsDay").date == date(2024, 11, 2)
        assert create("SE", 2020).get("allSaintsDay").date == date(2020, 10, 31)
        assert create("SE", 2021).get("allSaintsDay").date == date(2021, 11, 6)

    def test_christmas_eve_is_official(self, sweden_2024):
        assert sweden_2024.get("christmasEve").type == HolidayType.OFFICIAL


class TestPortugal:
    """Tests for the Portuguese provider."""

    OFFICIAL = [
        "newYearsDay",
        "internationalWorkersDay",
        "easter",
        "goodFriday",
        "assumptionOfMary",
        "allSaintsDay",
        "immaculateConception",
        "christmasDay",
        "25thApril",
        "portugueseRepublic",
        "restorationOfIndependence",
        "portugalDay",
    ]

    def test_official_holidays(self):
        holidays = create("PT", 2024)
        assert sorted(h.key for h in holidays.by_type(HolidayType.OFFICIAL)) == sorted(self.OFFICIAL)

    def test_no_observance_season_or_bank_holidays(self):
        holidays = create("PT", 2024)
        for holiday_type in (HolidayType.OBSERVANCE, HolidayType.SEASON, HolidayType.BANK):
            assert holidays.by_type(holiday_type) == []

    @pytest.mark.parametrize("year, present", [
        (2010, True),
        (2012, True),
        (2013, False),
        (2014, False),
        (2015, False),
        (2016, True),
    ])
    def test_corpus_christi_suspension(self, year, present):
        holidays = create("PT", year)
        assert ("corpusChristi" in holidays) is present
        assert ("allSaintsDay" in holidays) is present
        assert ("portugueseRepublic" in holidays) is present
        assert ("restorationOfIndependence" in holidays) is present

    def test_corpus_christi_is_type_other(self):
        holiday = create("PT", 2010).get("corpusChristi")

        assert holiday.type == HolidayType.OTHER
        assert holiday.date == date(2010, 6, 3)
        assert holiday.name == "Corpo de Deus"

    def test_carnation_revolution_since_1974(self):
        assert "25thApril" not in create("PT", 1973)
        assert create("PT", 1974).get("25thApril").name == "Dia da Liberdade"

    def test_portugal_day_not_observed_during_estado_novo(self):
        assert "portugalDay" in create("PT", 1932)
        assert "portugalDay" not in create("PT", 1950)
        assert "portugalDay" in create("PT", 1974)


class TestFrance:
    """Tests for the French provider."""

    def test_holidays_2024(self):
        holidays = create("FR", 2024)

        assert holidays.dates() == [
            date(2024, 1, 1),
            date(2024, 4, 1),
            date(2024, 5, 1),
            date(2024, 5, 8),
            date(2024, 5, 9),
            date(2024, 5, 20),
            date(2024, 7, 14),
            date(2024, 8, 15),
            date(2024, 11, 1),
            date(2024, 11, 11),
            date(2024, 12, 25),
        ]

    def test_armistice_since_1919(self):
        assert "armisticeDay" not in create("FR", 1918)
        assert create("FR", 1919).get("armisticeDay").name == "Armistice 1918"


class TestFinland:
    """Tests for the Finnish provider."""

    def test_midsummer_on_fixed_date_before_1955(self):
        assert create("FI", 1954).get("stJohnsDay").date == date(1954, 6, 24)

    def test_midsummer_on_saturday_since_1955(self):
        assert create("FI", 1955).get("stJohnsDay").date == date(1955, 6, 25)

    def test_all_saints_day_switch(self):
        assert create("FI", 1954).get("allSaintsDay").date == date(1954, 11, 1)
        assert create("FI", 2024).get("allSaintsDay").date == date(2024, 11, 2)

    def test_independence_day_since_1917(self):
        assert "independenceDay" not in create("FI", 1916)
        assert create("FI", 1917).get("independenceDay").name == "Itsenäisyyspäivä"


class TestNorway:
    """Tests for the Norwegian provider."""

    def test_easter_week_2024(self):
        holidays = create("NO", 2024)

        assert holidays.get("maundyThursday").date == date(2024, 3, 28)
        assert holidays.get("goodFriday").name == "Langfredag"

    def test_constitution_day_since_1836(self):
        assert "constitutionDay" not in create("NO", 1835)
        assert create("NO", 1836).get("constitutionDay").date == date(1836, 5, 17)


class TestNetherlands:
    """Tests for the Dutch provider."""

    def test_kings_day_moves_to_saturday_when_on_sunday(self):
        assert create("NL", 2014).get("kingsDay").date == date(2014, 4, 26)
        assert create("NL", 2024).get("kingsDay").date == date(2024, 4, 27)

    def test_queens_day_replaced_by_kings_day_in_2014(self):
        holidays_2013 = create("NL", 2013)
        holidays_2014 = create("NL", 2014)

        assert "queensDay" in holidays_2013 and "kingsDay" not in holidays_2013
        assert "kingsDay" in holidays_2014 and "queensDay" not in holidays_2014

    def test_queens_day_sunday_shift_changed_in_1980(self):
        assert create("NL", 1978).get("queensDay").date == date(1978, 5, 1)
        assert create("NL", 1989).get("queensDay").date == date(1989, 4, 29)

    def test_good_friday_is_observance(self):
        assert create("NL", 2024).get("goodFriday").type == HolidayType.OBSERVANCE


class TestUSA:
    """Tests for the US provider."""

    def test_nth_weekday_holidays_2024(self):
        holidays = create("US", 2024)

        assert holidays.get("martinLutherKingDay").date == date(2024, 1, 15)
        assert holidays.get("washingtonsBirthday").date == date(2024, 2, 19)
        assert holidays.get("memorialDay").date == date(2024, 5, 27)
        assert holidays.get("labourDay").date == date(2024, 9, 2)
        assert holidays.get("columbusDay").date == date(2024, 10, 14)
        assert holidays.get("thanksgivingDay").date == date(2024, 11, 28)

    def test_fixed_dates_before_monday_holiday_act(self):
        holidays = create("US", 1970)

        assert holidays.get("washingtonsBirthday").date == date(1970, 2, 22)
        assert holidays.get("memorialDay").date == date(1970, 5, 30)
        assert "martinLutherKingDay" not in holidays

    def test_sunday_holiday_observed_on_monday(self, usa_2021):
        observed = usa_2021.get("substituteHoliday:independenceDay")

        assert observed.date == date(2021, 7, 5)
        assert observed.name == "Independence Day observed"

    def test_saturday_holiday_observed_on_friday(self, usa_2021):
        assert usa_2021.get("substituteHoliday:juneteenth").date == date(2021, 6, 18)
        assert usa_2021.get("substituteHoliday:christmasDay").date == date(2021, 12, 24)

    def test_observed_day_belongs_to_the_year_it_falls_in(self, usa_2021):
        """January 1, 2022 was a Saturday; the observed Friday lies in 2021."""
        observed = usa_2021.get("substituteHoliday:newYearsDay")

        assert observed.date == date(2021, 12, 31)
        assert observed.name == "New Year's Day observed"
        assert usa_2021.is_holiday(date(2021, 12, 31))
        assert "substituteHoliday:newYearsDay" not in create("US", 2022)

    def test_observed_new_year_not_carried_before_1971(self):
        """January 1, 1955 was a Saturday, before observed days applied."""
        assert not create("US", 1954).is_holiday(date(1954, 12, 31))

    def test_no_substitute_on_weekdays(self):
        holidays = create("US", 2024)
        assert not [key for key in holidays.keys() if key.startswith("substituteHoliday:")]

    def test_veterans_day_renamed_in_1954(self):
        assert create("US", 1950).get("veteransDay").name == "Armistice Day"
        assert create("US", 2024).get("veteransDay").name == "Veterans Day"
