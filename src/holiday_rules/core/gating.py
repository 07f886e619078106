"""
Year gating predicates.

Pure functions of the year deciding whether a holiday is emitted and
which names it carries (introduced, renamed or discontinued rules).
"""

from typing import Callable, Dict, Mapping, Sequence, Tuple


YearPredicate = Callable[[int], bool]
NamesByYear = Callable[[int], Dict[str, str]]


def always(year: int) -> bool:
    """Holiday exists every year."""
    return True


def since(first_year: int) -> YearPredicate:
    """Holiday exists from first_year onwards."""
    def predicate(year: int) -> bool:
        return year >= first_year
    predicate.__name__ = f"since_{first_year}"
    return predicate


def until(last_year: int) -> YearPredicate:
    """Holiday exists up to and including last_year."""
    def predicate(year: int) -> bool:
        return year <= last_year
    predicate.__name__ = f"until_{last_year}"
    return predicate


def between(first_year: int, last_year: int) -> YearPredicate:
    """Holiday exists from first_year through last_year inclusive."""
    if first_year > last_year:
        raise ValueError(f"empty year range {first_year}..{last_year}")

    def predicate(year: int) -> bool:
        return first_year <= year <= last_year
    predicate.__name__ = f"between_{first_year}_{last_year}"
    return predicate


def outside(first_year: int, last_year: int) -> YearPredicate:
    """Holiday exists every year except first_year through last_year."""
    inside = between(first_year, last_year)

    def predicate(year: int) -> bool:
        return not inside(year)
    predicate.__name__ = f"outside_{first_year}_{last_year}"
    return predicate


def all_of(*predicates: YearPredicate) -> YearPredicate:
    """Holiday exists when every predicate holds."""
    def predicate(year: int) -> bool:
        return all(p(year) for p in predicates)
    return predicate


def any_of(*predicates: YearPredicate) -> YearPredicate:
    """Holiday exists when at least one predicate holds."""
    def predicate(year: int) -> bool:
        return any(p(year) for p in predicates)
    return predicate


def renamed(*periods: Tuple[int, Mapping[str, str]]) -> NamesByYear:
    """
    Build a year-dependent name table.

    Each period is (first_year, names); the latest period starting at or
    before the year wins. Years before the first period get no override.

    Example:
        renamed((1916, {"sv_SE": "Svenska flaggans dag"}),
                (1983, {"sv_SE": "Sveriges nationaldag"}))
    """
    ordered: Sequence[Tuple[int, Mapping[str, str]]] = sorted(periods, key=lambda p: p[0])

    def names(year: int) -> Dict[str, str]:
        result: Dict[str, str] = {}
        for first_year, period_names in ordered:
            if year < first_year:
                break
            result = dict(period_names)
        return result
    return names
