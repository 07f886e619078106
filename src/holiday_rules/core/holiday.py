"""
Holiday Domain Model.

Immutable value representing a single holiday occurrence.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from holiday_rules.core.calendar_math import load_timezone
from holiday_rules.core.exceptions import InvalidArgumentError
from holiday_rules.core.translations import default_locale, ensure_locale


class HolidayType(str, Enum):
    """Classification of a holiday."""
    OFFICIAL = "official"
    OBSERVANCE = "observance"
    SEASON = "season"
    BANK = "bank"
    OTHER = "other"


@dataclass(frozen=True)
class Holiday:
    """
    A holiday falling on a calendar date.

    Attributes:
        key: Stable identifier, unique within a provider's year.
        names: Display names keyed by locale.
        date: Calendar date of the holiday.
        timezone: IANA timezone the date is anchored in.
        type: Holiday classification.
        locale: Locale used to resolve the display name.
    """
    key: str
    names: Mapping[str, str] = field(hash=False)
    date: date
    timezone: str = "UTC"
    type: HolidayType = HolidayType.OFFICIAL
    locale: str = field(default_factory=default_locale)

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key.strip():
            raise InvalidArgumentError("key", self.key, "holiday key must be a non-empty string")
        ensure_locale(self.locale)
        load_timezone(self.timezone)
        object.__setattr__(self, "type", HolidayType(self.type))
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))

    def get_name(self, locale: Optional[str] = None) -> str:
        """
        Resolve the display name.

        Tries the requested locale, then the default locale, then
        falls back to the key.
        """
        for candidate in (locale or self.locale, default_locale()):
            name = self.names.get(candidate)
            if name:
                return name
        return self.key

    @property
    def name(self) -> str:
        """Display name in the holiday's locale."""
        return self.get_name()

    @property
    def start(self) -> datetime:
        """Midnight at the start of the holiday, in its timezone."""
        return datetime.combine(self.date, time.min, tzinfo=load_timezone(self.timezone))

    def to_dict(self) -> Dict[str, Any]:
        """External representation of the holiday."""
        return {
            "key": self.key,
            "name": self.name,
            "date": self.date.isoformat(),
            "type": self.type.value,
        }
