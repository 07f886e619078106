"""
Calendar arithmetic.

Easter computation, relative-weekday resolution and checked date
construction shared by every holiday calculator.
Pure functions with no external dependencies.
"""

import calendar
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from holiday_rules.core.exceptions import InvalidArgumentError, InvalidDateError


MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)


class Direction(str, Enum):
    """Search direction for relative-weekday rules."""

    NEXT_OR_SAME = "next_or_same"        # "this <weekday>"
    NEXT = "next"                        # strictly after the anchor
    PREVIOUS_OR_SAME = "previous_or_same"
    PREVIOUS = "previous"                # strictly before the anchor


# (first, last) day offsets of the window relative to the anchor
_WINDOWS = {
    Direction.NEXT_OR_SAME: (0, 6),
    Direction.NEXT: (1, 7),
    Direction.PREVIOUS_OR_SAME: (-6, 0),
    Direction.PREVIOUS: (-7, -1),
}


def now_utc() -> datetime:
    """Get the current UTC datetime."""
    return datetime.now(timezone.utc)


def checked_date(year: int, month: int, day: int) -> date:
    """
    Build a calendar date, raising InvalidDateError on impossible input.

    Args:
        year: The calendar year.
        month: The month (1-12).
        day: The day of month.

    Returns:
        The constructed date.
    """
    try:
        return date(year, month, day)
    except (TypeError, ValueError) as e:
        raise InvalidDateError(year, month, day, str(e)) from e


def shift_days(anchor: date, days: int) -> date:
    """Add a (possibly negative) number of days, checking the date range."""
    try:
        return anchor + timedelta(days=days)
    except OverflowError as e:
        raise InvalidDateError(
            anchor.year, anchor.month, anchor.day,
            f"shifting by {days} days leaves the supported date range",
        ) from e


def calculate_easter(year: int) -> date:
    """
    Calculate Easter Sunday using the Meeus/Jones/Butcher algorithm.

    Valid for every year of the Gregorian calendar.

    Args:
        year: The calendar year.

    Returns:
        Date of Easter Sunday.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1

    return checked_date(year, month, day)


def weekday_window(anchor: date, direction: Direction) -> Tuple[date, date]:
    """Return the inclusive 7-day window a resolved weekday must fall in."""
    first, last = _WINDOWS[Direction(direction)]
    return shift_days(anchor, first), shift_days(anchor, last)


def resolve_weekday(anchor: date, weekday: int, direction: Direction) -> date:
    """
    Resolve the occurrence of a weekday relative to an anchor date.

    The naive candidate is the target weekday within the anchor's
    Monday-based week. When it falls outside the direction's window it is
    moved by exactly one week, which always lands inside the window.

    Args:
        anchor: The anchor date.
        weekday: Target weekday (Monday=0 ... Sunday=6).
        direction: Which side of the anchor to search.

    Returns:
        The resolved date.

    Raises:
        InvalidDateError: If the result leaves the representable range.
    """
    if weekday not in range(7):
        raise ValueError(f"weekday must be in 0..6, got {weekday!r}")

    start, end = weekday_window(anchor, direction)
    candidate = shift_days(anchor, weekday - anchor.weekday())

    if candidate < start:
        candidate = shift_days(candidate, 7)
    elif candidate > end:
        candidate = shift_days(candidate, -7)

    return candidate


def nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    """
    Resolve the n-th occurrence of a weekday in a month.

    Args:
        year: The calendar year.
        month: The month (1-12).
        weekday: Target weekday (Monday=0 ... Sunday=6).
        n: Occurrence, 1-based; negative values count from the month's end
            (-1 is the last occurrence).

    Returns:
        The resolved date.

    Raises:
        InvalidDateError: If the month has no such occurrence.
    """
    if n == 0:
        raise InvalidDateError(year, month, 1, "occurrence must not be zero")

    first_of_month = checked_date(year, month, 1)

    if n > 0:
        first = resolve_weekday(first_of_month, weekday, Direction.NEXT_OR_SAME)
        result = shift_days(first, 7 * (n - 1))
    else:
        last_day = calendar.monthrange(year, month)[1]
        last = resolve_weekday(
            checked_date(year, month, last_day), weekday, Direction.PREVIOUS_OR_SAME
        )
        result = shift_days(last, 7 * (n + 1))

    if result.month != month or result.year != year:
        raise InvalidDateError(year, month, 1, f"no occurrence {n} of weekday {weekday}")

    return result


def load_timezone(name: str) -> ZoneInfo:
    """
    Load an IANA timezone.

    Raises:
        InvalidArgumentError: If the name is malformed or unknown.
    """
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError("timezone", name, "must be a non-empty IANA name")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidArgumentError("timezone", name, "unknown timezone") from e
