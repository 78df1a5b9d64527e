from __future__ import annotations

import datetime

import pytest

from holidaycal.holidays import HolidayRecord
from holidaycal.translations import BASE_LOCALE, TRANSLATIONS, resolve_name, translations_for

ALL_SAINTS = HolidayRecord(
    "allSaintsDay", datetime.date(2025, 11, 1), localized_names=TRANSLATIONS["allSaintsDay"]
)


class TestResolveName:
    def test_exact_locale(self) -> None:
        assert resolve_name(ALL_SAINTS, "fr_FR") == "La Toussaint"
        assert resolve_name(ALL_SAINTS, "nl_BE") == "Allerheiligen"
        assert resolve_name(ALL_SAINTS, "it_IT") == "Festa di Tutti i Santi"

    def test_other_variant_of_language_uses_base_locale(self) -> None:
        assert resolve_name(ALL_SAINTS, "fr_CA") == "All Saints' Day"
        assert resolve_name(ALL_SAINTS, "fr") == "All Saints' Day"

    def test_base_locale_fallback(self) -> None:
        assert resolve_name(ALL_SAINTS, "de_DE") == "All Saints' Day"

    def test_key_fallback(self) -> None:
        record = HolidayRecord("companyDay", datetime.date(2025, 8, 1))
        assert resolve_name(record, "de_DE") == "companyDay"

    def test_default_names_are_read_only(self) -> None:
        record = HolidayRecord("companyDay", datetime.date(2025, 8, 1))
        with pytest.raises(TypeError):
            record.localized_names["en_US"] = "Company Day"  # type: ignore[index]
        assert HolidayRecord("teamDay", datetime.date(2025, 9, 1)).localized_names == {}

    def test_key_fallback_without_base_locale(self) -> None:
        record = HolidayRecord(
            "liberationDay", datetime.date(2025, 5, 5), localized_names={"nl_NL": "Bevrijdingsdag"}
        )
        assert resolve_name(record, "ja_JP") == "liberationDay"

    def test_name_property_uses_record_locale(self) -> None:
        record = ALL_SAINTS._replace(locale="it_IT")
        assert record.name == "Festa di Tutti i Santi"


class TestTable:
    def test_every_entry_has_base_locale(self) -> None:
        for key, names in TRANSLATIONS.items():
            assert BASE_LOCALE in names, key

    def test_translations_for_returns_copy(self) -> None:
        names = translations_for("easter")
        names["xx_XX"] = "changed"
        assert "xx_XX" not in TRANSLATIONS["easter"]

    def test_translations_for_unknown_key(self) -> None:
        assert translations_for("nope") == {}
