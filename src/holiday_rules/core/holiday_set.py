"""
Holiday Set.

Immutable, query-only collection of the holidays a provider emits for
one year.
"""

from datetime import date, datetime
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from holiday_rules.core.exceptions import (
    HolidayNotFoundError,
    ProviderConfigurationError,
)
from holiday_rules.core.holiday import Holiday, HolidayType


class HolidaySet:
    """
    Holidays of one provider for one year, ordered by date then key.

    Keys are unique; building a set from holidays sharing a key raises
    ProviderConfigurationError.
    """

    __slots__ = ("_provider_id", "_year", "_locale", "_timezone", "_holidays", "_by_key")

    def __init__(
        self,
        provider_id: str,
        year: int,
        locale: str,
        timezone: str,
        holidays: Iterable[Holiday],
    ) -> None:
        by_key: Dict[str, Holiday] = {}
        for holiday in holidays:
            if holiday.key in by_key:
                raise ProviderConfigurationError(
                    provider_id,
                    f"holiday '{holiday.key}' emitted twice for {year}",
                )
            by_key[holiday.key] = holiday

        self._provider_id = provider_id
        self._year = year
        self._locale = locale
        self._timezone = timezone
        self._holidays: Tuple[Holiday, ...] = tuple(
            sorted(by_key.values(), key=lambda h: (h.date, h.key))
        )
        self._by_key = by_key

    @property
    def provider_id(self) -> str:
        return self._provider_id

    @property
    def year(self) -> int:
        return self._year

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def timezone(self) -> str:
        return self._timezone

    def __iter__(self) -> Iterator[Holiday]:
        return iter(self._holidays)

    def __len__(self) -> int:
        return len(self._holidays)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Holiday):
            return self._by_key.get(item.key) == item
        return item in self._by_key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HolidaySet):
            return NotImplemented
        return (
            self._provider_id == other._provider_id
            and self._year == other._year
            and self._locale == other._locale
            and self._timezone == other._timezone
            and self._holidays == other._holidays
        )

    def __hash__(self) -> int:
        return hash((self._provider_id, self._year, self._locale, self._timezone,
                     tuple((h.key, h.date) for h in self._holidays)))

    def __repr__(self) -> str:
        return f"HolidaySet({self._provider_id!r}, {self._year}, {len(self)} holidays)"

    def keys(self) -> List[str]:
        """Holiday keys in date order."""
        return [h.key for h in self._holidays]

    def dates(self) -> List[date]:
        """Distinct holiday dates in order."""
        return sorted({h.date for h in self._holidays})

    def get(self, key: str) -> Holiday:
        """
        Look up a holiday by key.

        Raises:
            HolidayNotFoundError: If the key is not part of the set.
        """
        try:
            return self._by_key[key]
        except KeyError:
            raise HolidayNotFoundError(key, self._provider_id, self._year) from None

    def find(self, key: str) -> Optional[Holiday]:
        """Look up a holiday by key, returning None when absent."""
        return self._by_key.get(key)

    def by_type(self, holiday_type: Union[HolidayType, str]) -> List[Holiday]:
        """Holidays of one type, ordered by date."""
        wanted = HolidayType(holiday_type)
        return [h for h in self._holidays if h.type == wanted]

    def on(self, day: Union[date, datetime]) -> List[Holiday]:
        """Holidays falling on a date."""
        day = _as_date(day)
        return [h for h in self._holidays if h.date == day]

    def is_holiday(self, day: Union[date, datetime]) -> bool:
        """Check whether any holiday falls on a date."""
        return bool(self.on(day))

    def between(
        self,
        start: Union[date, datetime],
        end: Union[date, datetime],
        inclusive: bool = True,
    ) -> List[Holiday]:
        """Holidays within a date range."""
        start, end = _as_date(start), _as_date(end)
        if start > end:
            raise ValueError(f"start {start} is after end {end}")
        if inclusive:
            return [h for h in self._holidays if start <= h.date <= end]
        return [h for h in self._holidays if start < h.date < end]

    def to_list(self) -> List[Dict[str, Any]]:
        """External representation of every holiday."""
        return [h.to_dict() for h in self._holidays]


def _as_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
