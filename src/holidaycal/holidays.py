"""Holiday records, rules and country definitions."""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple
from zoneinfo import ZoneInfo

from holidaycal.dates import DateRule, compute_date
from holidaycal.substitution import NO_SUBSTITUTION, Substitution
from holidaycal.translations import BASE_LOCALE, resolve_name, translations_for

NO_NAMES: Mapping[str, str] = MappingProxyType({})

# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------


class HolidayType(Enum):
    NATIONAL = "national"
    OBSERVANCE = "observance"
    SEASON = "season"
    BANK = "bank"
    OTHER = "other"


class HolidayRecord(NamedTuple):
    """A resolved holiday: one key, one date, in one country and year."""

    key: str
    date: datetime.date
    type: HolidayType = HolidayType.NATIONAL
    localized_names: Mapping[str, str] = NO_NAMES
    timezone: str = "UTC"
    locale: str = BASE_LOCALE

    @property
    def name(self) -> str:
        """Name in the record's display locale."""
        return resolve_name(self, self.locale)

    def as_datetime(self) -> datetime.datetime:
        """Midnight of the holiday in the country's timezone."""
        return datetime.datetime.combine(self.date, datetime.time(), tzinfo=ZoneInfo(self.timezone))


class HolidayRule(NamedTuple):
    """How one holiday of a country is derived.

    ``since`` and ``until`` (inclusive) bound the years the holiday exists.
    ``names`` is merged over the static translations of ``key``;
    ``former_names`` lists ``(last_year, names)`` pairs for holidays that
    were renamed, oldest first.
    """

    key: str
    date: DateRule
    type: HolidayType = HolidayType.NATIONAL
    since: int | None = None
    until: int | None = None
    substitution: Substitution = NO_SUBSTITUTION
    names: Mapping[str, str] = NO_NAMES
    former_names: tuple[tuple[int, Mapping[str, str]], ...] = ()

    def applies_to(self, year: int) -> bool:
        if self.since is not None and year < self.since:
            return False
        return self.until is None or year <= self.until

    def nominal_date(self, year: int) -> datetime.date:
        return compute_date(self.date, year)

    def names_in(self, year: int) -> dict[str, str]:
        names = translations_for(self.key)
        names.update(self.names)
        for last_year, former in self.former_names:
            if year <= last_year:
                names.update(former)
                break
        return names


class Country(NamedTuple):
    """A registered country and its ordered holiday rules."""

    name: str
    code: str
    timezone: str
    locale: str
    rules: tuple[HolidayRule, ...]
    bridge_days_since: int | None = None
