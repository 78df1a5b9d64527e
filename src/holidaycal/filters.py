"""Lazy holiday filters by type."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from holidaycal.holidays import HolidayRecord, HolidayType

Predicate = Callable[[HolidayRecord], bool]


class HolidayFilter:
    """A restartable, lazy view over *records* keeping those matching *predicate*.

    Nothing is evaluated until iteration; every ``iter()`` starts over from
    the underlying records, so the view reflects their order.
    """

    def __init__(self, records: Iterable[HolidayRecord], predicate: Predicate):
        self.records = records
        self.predicate = predicate

    def __iter__(self) -> Iterator[HolidayRecord]:
        return (r for r in self.records if self.predicate(r))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)


def filter_holidays(records: Iterable[HolidayRecord], holiday_type: HolidayType) -> HolidayFilter:
    """Records of *holiday_type*, in their original order."""
    return HolidayFilter(records, lambda r: r.type is holiday_type)


def official_holidays(records: Iterable[HolidayRecord]) -> HolidayFilter:
    return filter_holidays(records, HolidayType.NATIONAL)


def observance_holidays(records: Iterable[HolidayRecord]) -> HolidayFilter:
    return filter_holidays(records, HolidayType.OBSERVANCE)


def seasonal_holidays(records: Iterable[HolidayRecord]) -> HolidayFilter:
    return filter_holidays(records, HolidayType.SEASON)


def bank_holidays(records: Iterable[HolidayRecord]) -> HolidayFilter:
    return filter_holidays(records, HolidayType.BANK)


def other_holidays(records: Iterable[HolidayRecord]) -> HolidayFilter:
    return filter_holidays(records, HolidayType.OTHER)
