from __future__ import annotations

import datetime

from holidaycal.filters import (
    HolidayFilter,
    bank_holidays,
    filter_holidays,
    observance_holidays,
    official_holidays,
    other_holidays,
    seasonal_holidays,
)
from holidaycal.holidays import HolidayRecord, HolidayType
from holidaycal.registry import build_year


class TestTypeFilters:
    def test_seasonal(self) -> None:
        result = build_year("nl", 2025)
        assert [r.key for r in seasonal_holidays(result)] == ["summerTime", "winterTime"]

    def test_other(self) -> None:
        result = build_year("nl", 2025)
        assert [r.key for r in other_holidays(result)] == ["princesDay"]

    def test_observance_keeps_registry_order(self) -> None:
        result = build_year("nl", 2025)
        keys = [r.key for r in observance_holidays(result)]
        assert keys[:3] == ["epiphany", "valentinesDay", "carnivalDay"]
        assert keys == [k for k in result.keys() if k in keys]

    def test_official(self) -> None:
        result = build_year("nl", 2025)
        official = list(official_holidays(result))
        assert all(r.type is HolidayType.NATIONAL for r in official)
        assert "kingsDay" in {r.key for r in official}
        assert "halloween" not in {r.key for r in official}

    def test_bank_is_empty_when_nothing_matches(self) -> None:
        result = build_year("nl", 2025)
        assert list(bank_holidays(result)) == []
        assert not bank_holidays(result)
        assert len(bank_holidays(result)) == 0

    def test_result_filter_method(self) -> None:
        result = build_year("nl", 2025)
        assert list(result.filter(HolidayType.SEASON)) == list(seasonal_holidays(result))


class TestHolidayFilter:
    def test_restartable(self) -> None:
        filtered = seasonal_holidays(build_year("nl", 2025))
        assert list(filtered) == list(filtered)
        assert len(filtered) == 2

    def test_lazy(self) -> None:
        records: list[HolidayRecord] = []
        filtered = filter_holidays(records, HolidayType.OTHER)
        records.append(HolidayRecord("x", datetime.date(2025, 1, 1), HolidayType.OTHER))
        assert [r.key for r in filtered] == ["x"]

    def test_custom_predicate(self) -> None:
        result = build_year("fr", 2025)
        in_may = HolidayFilter(result, lambda r: r.date.month == 5)
        assert [r.key for r in in_may] == [
            "internationalWorkersDay",
            "victoryInEuropeDay",
            "ascensionDay",
        ]
