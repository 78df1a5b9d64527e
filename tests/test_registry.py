from __future__ import annotations

import datetime

import pytest

from holidaycal import registry
from holidaycal.countries import BELGIUM, JAPAN
from holidaycal.dates import Fixed
from holidaycal.exceptions import DuplicateKey, InvalidYear, UnknownCountry
from holidaycal.holidays import Country, HolidayRecord, HolidayRule, HolidayType
from holidaycal.registry import (
    CountryYearResult,
    build_year,
    get_country,
    register_country,
    supported_countries,
)


class TestCountryLookup:
    def test_by_code_and_name(self) -> None:
        assert get_country("NL") is get_country("netherlands")
        assert get_country(" Japan ").code == "JP"

    def test_unknown_country(self) -> None:
        with pytest.raises(UnknownCountry, match="Unknown country 'zz'"):
            build_year("zz", 2025)

    def test_unknown_country_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            get_country("atlantis")

    def test_supported_countries_sorted_and_unique(self) -> None:
        names = [c.name for c in supported_countries()]
        assert names == sorted(names)
        assert len(names) == len(set(names))
        assert {"Belgium", "France", "Italy", "Japan", "Netherlands", "USA"} <= set(names)

    def test_register_custom_country(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(registry, "_REGISTRY", dict(registry._REGISTRY))
        country = Country(
            name="Testland",
            code="TL",
            timezone="UTC",
            locale="en_US",
            rules=(HolidayRule("foundersDay", Fixed(3, 3), since=2000),),
        )
        register_country(country)
        assert build_year("tl", 2020).get("foundersDay").date == datetime.date(2020, 3, 3)  # type: ignore[union-attr]
        assert "foundersDay" not in build_year("testland", 1999)

    def test_custom_country_does_not_leak(self) -> None:
        assert "Testland" not in [c.name for c in supported_countries()]
        with pytest.raises(UnknownCountry):
            get_country("tl")


class TestBuildYear:
    def test_year_out_of_range(self) -> None:
        with pytest.raises(InvalidYear):
            build_year("us", 999)
        with pytest.raises(InvalidYear):
            build_year("us", 10000)

    def test_easter_country_before_gregorian_reform(self) -> None:
        with pytest.raises(InvalidYear):
            build_year("belgium", 1200)

    def test_country_without_easter_before_gregorian_reform(self) -> None:
        result = build_year("japan", 1200)
        assert len(result) == 0

    def test_declared_order_is_kept(self) -> None:
        result = build_year(BELGIUM, 2025)
        assert result.keys() == [rule.key for rule in BELGIUM.rules]

    def test_sorted_by_date(self) -> None:
        result = build_year("be", 2025)
        dates = [r.date for r in result.sorted_by_date()]
        assert dates == sorted(dates)

    def test_records_carry_country_timezone_and_locale(self) -> None:
        record = build_year("jp", 2025).get("newYearsDay")
        assert record is not None
        assert record.timezone == "Asia/Tokyo"
        assert record.locale == "ja_JP"
        aware = record.as_datetime()
        assert aware.date() == datetime.date(2025, 1, 1)
        assert aware.utcoffset() == datetime.timedelta(hours=9)

    def test_locale_override(self) -> None:
        result = build_year("jp", 2025, locale="en_US")
        assert result.get("mountainDay").name == "Mountain Day"  # type: ignore[union-attr]

    def test_duplicate_key_is_rejected(self) -> None:
        country = Country(
            name="Broken",
            code="XB",
            timezone="UTC",
            locale="en_US",
            rules=(
                HolidayRule("foundersDay", Fixed(3, 3)),
                HolidayRule("foundersDay", Fixed(4, 4)),
            ),
        )
        with pytest.raises(DuplicateKey, match="foundersDay"):
            build_year(country, 2025)

    def test_same_key_in_disjoint_years_is_allowed(self) -> None:
        # Japan declares emperorsBirthday three times, for different eras
        assert build_year(JAPAN, 1980).get("emperorsBirthday").date == datetime.date(1980, 4, 29)  # type: ignore[union-attr]
        assert build_year(JAPAN, 2000).get("emperorsBirthday").date == datetime.date(2000, 12, 23)  # type: ignore[union-attr]
        assert build_year(JAPAN, 2026).get("emperorsBirthday").date == datetime.date(2026, 2, 23)  # type: ignore[union-attr]
        assert "emperorsBirthday" not in build_year(JAPAN, 2019)

    def test_builds_are_independent(self) -> None:
        first = build_year("nl", 2025)
        second = build_year("nl", 2025)
        assert first is not second
        assert list(first) == list(second)


class TestEffectiveYearGuard:
    def test_mountain_day_guard(self) -> None:
        for year in range(2000, 2031):
            result = build_year("jp", year)
            assert ("mountainDay" in result) is (year >= 2016), year

    def test_veterans_day_guard(self) -> None:
        assert "veteransDay" not in build_year("us", 1918)
        assert "veteransDay" in build_year("us", 1919)


class TestCountryYearResult:
    def test_contains_and_len(self) -> None:
        result = build_year("it", 2025)
        assert "stStephensDay" in result
        assert "kingsDay" not in result
        assert len(result) == len(result.keys())

    def test_is_holiday(self) -> None:
        result = build_year("it", 2025)
        assert result.is_holiday(datetime.date(2025, 12, 25))
        assert not result.is_holiday(datetime.date(2025, 12, 24))

    def test_is_working_day(self) -> None:
        result = build_year("nl", 2025)
        # Christmas on a Thursday
        assert not result.is_working_day(datetime.date(2025, 12, 25))
        # Saturday
        assert not result.is_working_day(datetime.date(2025, 12, 27))
        # Valentine's Day is only an observance
        assert result.is_working_day(datetime.date(2025, 2, 14))

    def test_between(self) -> None:
        result = build_year("fr", 2025)
        may = result.between(datetime.date(2025, 5, 1), datetime.date(2025, 5, 31))
        assert [r.key for r in may] == ["internationalWorkersDay", "victoryInEuropeDay", "ascensionDay"]
        exclusive = result.between(
            datetime.date(2025, 5, 1), datetime.date(2025, 5, 29), inclusive=False
        )
        assert [r.key for r in exclusive] == ["victoryInEuropeDay"]

    def test_between_rejects_reversed_range(self) -> None:
        with pytest.raises(ValueError):
            build_year("fr", 2025).between(datetime.date(2025, 6, 1), datetime.date(2025, 5, 1))

    def test_next_and_previous(self) -> None:
        result = build_year("be", 2025, locale="fr_BE")
        assert result.next().year == 2026
        assert result.previous().year == 2024
        assert result.next().locale == "fr_BE"
        assert result.next().country is result.country

    def test_names(self) -> None:
        names = build_year("be", 2025).names()
        assert names["newYearsDay"] == "Nieuwjaar"
        assert build_year("be", 2025).names("fr_BE")["newYearsDay"] == "Nouvel An"

    def test_with_holidays(self) -> None:
        result = build_year("us", 2025)
        extra = HolidayRecord("companyDay", datetime.date(2025, 8, 1), HolidayType.OTHER)
        extended = result.with_holidays([extra])
        assert "companyDay" in extended
        assert "companyDay" not in result

    def test_with_holidays_duplicate(self) -> None:
        result = build_year("us", 2025)
        clash = HolidayRecord("christmasDay", datetime.date(2025, 12, 24))
        with pytest.raises(DuplicateKey):
            result.with_holidays([clash])

    def test_constructor_rejects_duplicates(self) -> None:
        record = HolidayRecord("x", datetime.date(2025, 1, 1))
        with pytest.raises(DuplicateKey):
            CountryYearResult(BELGIUM, 2025, [record, record])
