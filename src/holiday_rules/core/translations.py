"""
Static holiday name tables.

Maps holiday keys to their display names per locale, plus the templates
used to name substitute (observed) holidays.
"""

from typing import Dict, FrozenSet, Mapping, Optional

from holiday_rules.config import settings
from holiday_rules.core.exceptions import ConfigurationError, UnknownLocaleError


SUPPORTED_LOCALES: FrozenSet[str] = frozenset([
    "cs_CZ", "da_DK", "de_AT", "de_CH", "de_DE", "el_GR", "en_AU", "en_CA",
    "en_GB", "en_IE", "en_NZ", "en_US", "en_ZA", "es_ES", "es_MX", "et_EE",
    "fi_FI", "fr_BE", "fr_CA", "fr_CH", "fr_FR", "hu_HU", "is_IS", "it_CH",
    "it_IT", "ja_JP", "ko_KR", "lt_LT", "lv_LV", "nb_NO", "nl_BE", "nl_NL",
    "nn_NO", "pl_PL", "pt_BR", "pt_PT", "ro_RO", "ru_RU", "sk_SK", "sv_FI",
    "sv_SE", "uk_UA",
])


TRANSLATIONS: Dict[str, Dict[str, str]] = {
    # Common
    "newYearsDay": {
        "en_US": "New Year's Day",
        "fi_FI": "Uudenvuodenpäivä",
        "fr_FR": "Jour de l'An",
        "nb_NO": "Første nyttårsdag",
        "nl_NL": "Nieuwjaarsdag",
        "pt_PT": "Dia de Ano Novo",
        "sv_SE": "Nyårsdagen",
    },
    "internationalWorkersDay": {
        "en_US": "International Workers' Day",
        "fi_FI": "Vappu",
        "fr_FR": "Fête du Travail",
        "nb_NO": "Arbeidernes dag",
        "nl_NL": "Dag van de Arbeid",
        "pt_PT": "Dia do Trabalhador",
        "sv_SE": "Första maj",
    },
    # Christian
    "epiphany": {
        "en_US": "Epiphany",
        "fi_FI": "Loppiainen",
        "fr_FR": "Épiphanie",
        "sv_SE": "Trettondedag jul",
    },
    "maundyThursday": {
        "en_US": "Maundy Thursday",
        "nb_NO": "Skjærtorsdag",
        "sv_SE": "Skärtorsdagen",
    },
    "goodFriday": {
        "en_US": "Good Friday",
        "fi_FI": "Pitkäperjantai",
        "fr_FR": "Vendredi saint",
        "nb_NO": "Langfredag",
        "nl_NL": "Goede Vrijdag",
        "pt_PT": "Sexta-feira Santa",
        "sv_SE": "Långfredagen",
    },
    "easter": {
        "en_US": "Easter Sunday",
        "fi_FI": "Pääsiäispäivä",
        "fr_FR": "Dimanche de Pâques",
        "nb_NO": "Første påskedag",
        "nl_NL": "Eerste paasdag",
        "pt_PT": "Páscoa",
        "sv_SE": "Påskdagen",
    },
    "easterMonday": {
        "en_US": "Easter Monday",
        "fi_FI": "2. pääsiäispäivä",
        "fr_FR": "Lundi de Pâques",
        "nb_NO": "Andre påskedag",
        "nl_NL": "Tweede paasdag",
        "sv_SE": "Annandag påsk",
    },
    "ascensionDay": {
        "en_US": "Ascension Day",
        "fi_FI": "Helatorstai",
        "fr_FR": "Ascension",
        "nb_NO": "Kristi himmelfartsdag",
        "nl_NL": "Hemelvaart",
        "sv_SE": "Kristi himmelfärdsdag",
    },
    "pentecost": {
        "en_US": "Pentecost",
        "fi_FI": "Helluntaipäivä",
        "fr_FR": "Pentecôte",
        "nb_NO": "Første pinsedag",
        "nl_NL": "Eerste pinksterdag",
        "sv_SE": "Pingstdagen",
    },
    "pentecostMonday": {
        "en_US": "Whitmonday",
        "fr_FR": "Lundi de Pentecôte",
        "nb_NO": "Andre pinsedag",
        "nl_NL": "Tweede pinksterdag",
    },
    "corpusChristi": {
        "en_US": "Corpus Christi",
        "pt_PT": "Corpo de Deus",
    },
    "stJohnsDay": {
        "en_US": "St. John's Day",
        "fi_FI": "Juhannuspäivä",
        "sv_SE": "Midsommardagen",
    },
    "assumptionOfMary": {
        "en_US": "Assumption of Mary",
        "fr_FR": "Assomption",
        "pt_PT": "Assunção de Nossa Senhora",
    },
    "allSaintsDay": {
        "en_US": "All Saints' Day",
        "fi_FI": "Pyhäinpäivä",
        "fr_FR": "La Toussaint",
        "pt_PT": "Dia de Todos os Santos",
        "sv_SE": "Alla helgons dag",
    },
    "immaculateConception": {
        "en_US": "Immaculate Conception",
        "pt_PT": "Imaculada Conceição",
    },
    "christmasEve": {
        "en_US": "Christmas Eve",
        "fi_FI": "Jouluaatto",
        "sv_SE": "Julafton",
    },
    "christmasDay": {
        "en_US": "Christmas",
        "fi_FI": "Joulupäivä",
        "fr_FR": "Noël",
        "nb_NO": "Første juledag",
        "nl_NL": "Eerste kerstdag",
        "pt_PT": "Dia de Natal",
        "sv_SE": "Juldagen",
    },
    "secondChristmasDay": {
        "en_US": "Second Christmas Day",
        "fi_FI": "Tapaninpäivä",
        "nb_NO": "Andre juledag",
        "nl_NL": "Tweede kerstdag",
        "sv_SE": "Annandag jul",
    },
    # Country specific
    "nationalDay": {
        "en_US": "National Day",
    },
    "25thApril": {
        "en_US": "Freedom Day",
        "pt_PT": "Dia da Liberdade",
    },
    "portugalDay": {
        "en_US": "Portugal Day",
        "pt_PT": "Dia de Portugal",
    },
    "portugueseRepublic": {
        "en_US": "Implantation of the Portuguese Republic",
        "pt_PT": "Implantação da República Portuguesa",
    },
    "restorationOfIndependence": {
        "en_US": "Restoration of Independence",
        "pt_PT": "Restauração da Independência",
    },
    "victoryInEuropeDay": {
        "en_US": "Victory in Europe Day",
        "fr_FR": "Victoire 1945",
    },
    "bastilleDay": {
        "en_US": "Bastille Day",
        "fr_FR": "La Fête nationale",
    },
    "armisticeDay": {
        "en_US": "Armistice Day",
        "fr_FR": "Armistice 1918",
    },
    "independenceDay": {
        "en_US": "Independence Day",
        "fi_FI": "Itsenäisyyspäivä",
    },
    "constitutionDay": {
        "en_US": "Constitution Day",
        "nb_NO": "Grunnlovsdagen",
    },
    "queensDay": {
        "en_US": "Queen's Day",
        "nl_NL": "Koninginnedag",
    },
    "kingsDay": {
        "en_US": "King's Day",
        "nl_NL": "Koningsdag",
    },
    "liberationDay": {
        "en_US": "Liberation Day",
        "nl_NL": "Bevrijdingsdag",
    },
    "martinLutherKingDay": {
        "en_US": "Dr. Martin Luther King Jr's Birthday",
    },
    "washingtonsBirthday": {
        "en_US": "Washington's Birthday",
    },
    "memorialDay": {
        "en_US": "Memorial Day",
    },
    "juneteenth": {
        "en_US": "Juneteenth",
    },
    "labourDay": {
        "en_US": "Labour Day",
    },
    "columbusDay": {
        "en_US": "Columbus Day",
    },
    "veteransDay": {
        "en_US": "Veterans Day",
    },
    "thanksgivingDay": {
        "en_US": "Thanksgiving Day",
    },
}


SUBSTITUTE_TEMPLATES: Dict[str, str] = {
    "en_US": "{0} observed",
    "fr_FR": "{0} (jour de remplacement)",
    "nl_NL": "{0} (vervangende dag)",
    "pt_PT": "{0} (substituto)",
    "sv_SE": "{0} (ersättningsdag)",
}


def ensure_locale(locale: str) -> str:
    """
    Validate a locale identifier.

    Raises:
        UnknownLocaleError: If the locale is not supported.
    """
    if locale not in SUPPORTED_LOCALES:
        raise UnknownLocaleError(locale)
    return locale


def names_for(key: str, overrides: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Return the translated names for a key, with overrides applied."""
    names = dict(TRANSLATIONS.get(key, {}))
    if overrides:
        names.update(overrides)
    return names


def default_locale() -> str:
    """
    The configured fallback locale.

    Raises:
        ConfigurationError: If HOLIDAY_DEFAULT_LOCALE names an unsupported locale.
    """
    locale = settings.locale.default_locale
    if locale not in SUPPORTED_LOCALES:
        raise ConfigurationError(
            "HOLIDAY_DEFAULT_LOCALE",
            f"Default locale '{locale}' is not supported",
        )
    return locale
