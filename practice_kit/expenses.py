"""Filtering and totalling expense records."""

from dataclasses import dataclass
from typing import Callable, Iterable

Predicate = Callable[["Record"], bool]


@dataclass(frozen=True)
class Record:
    """One expense."""

    day: int
    amount: float
    category: str


@dataclass(frozen=True)
class DaysPeriod:
    """An inclusive range of days."""

    from_day: int
    to_day: int


class UnknownCategoryError(ValueError):
    """Raised when no record belongs to the requested category."""

    def __init__(self, category: str) -> None:
        super().__init__(f"unknown category {category}")
        self.category = category


def filter_records(records: Iterable[Record], predicate: Predicate) -> list[Record]:
    """Return the records for which ``predicate`` is true, in order."""
    return [record for record in records if predicate(record)]


def by_days_period(period: DaysPeriod) -> Predicate:
    """Return a predicate matching records whose day lies inside ``period``."""

    def matches(record: Record) -> bool:
        return period.from_day <= record.day <= period.to_day

    return matches


def by_category(category: str) -> Predicate:
    """Return a predicate matching records of ``category``."""

    def matches(record: Record) -> bool:
        return record.category == category

    return matches


def _total(records: Iterable[Record]) -> float:
    total = 0.0
    for record in records:
        total += record.amount
    return total


def total_by_period(records: Iterable[Record], period: DaysPeriod) -> float:
    """Return the total amount of records inside ``period``."""
    return _total(filter_records(records, by_days_period(period)))


def category_expenses(records: Iterable[Record], period: DaysPeriod, category: str) -> float:
    """Return the total of ``category`` records inside ``period``.

    Raises UnknownCategoryError if no record at all has that category.
    """
    in_category = filter_records(records, by_category(category))
    if not in_category:
        raise UnknownCategoryError(category)
    return _total(filter_records(in_category, by_days_period(period)))