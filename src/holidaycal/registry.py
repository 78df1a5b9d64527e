"""Holiday registry: assembles every holiday of a country for one year."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable, Iterator

from holidaycal.countries import COUNTRIES
from holidaycal.exceptions import DuplicateKey, InvalidYear, UnknownCountry
from holidaycal.filters import HolidayFilter, filter_holidays
from holidaycal.holidays import Country, HolidayRecord, HolidayRule, HolidayType
from holidaycal.substitution import apply_substitution
from holidaycal.translations import resolve_name, translations_for

logger = logging.getLogger(__name__)

MIN_YEAR = 1000
MAX_YEAR = 9999

_REGISTRY: dict[str, Country] = {}


def register_country(country: Country) -> None:
    """Make *country* available to :func:`build_year` by name and code."""
    _REGISTRY[country.name.lower()] = country
    _REGISTRY[country.code.lower()] = country


for _country in COUNTRIES:
    register_country(_country)


def supported_countries() -> list[Country]:
    """Registered countries, sorted by name."""
    unique = {c.name: c for c in _REGISTRY.values()}
    return [unique[name] for name in sorted(unique)]


def get_country(country: str | Country) -> Country:
    """Look up a registered country by name or ISO code, case-insensitively."""
    if isinstance(country, Country):
        return country
    found = _REGISTRY.get(country.strip().lower())
    if found is None:
        raise UnknownCountry(country, [c.name for c in supported_countries()])
    return found


# ---------------------------------------------------------------------------
# Year result
# ---------------------------------------------------------------------------


class CountryYearResult:
    """All holidays of one country in one year, keyed by holiday key.

    Iteration follows the declared rule order of the country, not the
    date; use :meth:`sorted_by_date` for a chronological listing.
    """

    def __init__(
        self,
        country: Country,
        year: int,
        records: Iterable[HolidayRecord],
        locale: str | None = None,
    ):
        self.country = country
        self.year = year
        self.locale = locale or country.locale
        self._records: dict[str, HolidayRecord] = {}
        for record in records:
            if record.key in self._records:
                raise DuplicateKey(record.key, country.name, year)
            self._records[record.key] = record

    def __iter__(self) -> Iterator[HolidayRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __repr__(self) -> str:
        return f"<CountryYearResult {self.country.name} {self.year}: {len(self)} holidays>"

    def get(self, key: str) -> HolidayRecord | None:
        return self._records.get(key)

    def keys(self) -> list[str]:
        return list(self._records)

    def dates(self) -> list[datetime.date]:
        return [r.date for r in self]

    def names(self, locale: str | None = None) -> dict[str, str]:
        """``{key: display name}`` in *locale* (default: the result's locale)."""
        locale = locale or self.locale
        return {r.key: resolve_name(r, locale) for r in self}

    def sorted_by_date(self) -> list[HolidayRecord]:
        return sorted(self, key=lambda r: r.date)

    def is_holiday(self, d: datetime.date) -> bool:
        return any(r.date == d for r in self)

    def is_working_day(self, d: datetime.date) -> bool:
        """Weekdays that are not an official (national) holiday."""
        if d.weekday() >= 5:
            return False
        return not any(r.date == d for r in filter_holidays(self, HolidayType.NATIONAL))

    def between(
        self, start: datetime.date, end: datetime.date, *, inclusive: bool = True
    ) -> list[HolidayRecord]:
        """Holidays dated within ``start``..``end``, in registry order."""
        if end < start:
            raise ValueError(f"End date {end} lies before start date {start}.")
        if inclusive:
            return [r for r in self if start <= r.date <= end]
        return [r for r in self if start < r.date < end]

    def filter(self, holiday_type: HolidayType) -> HolidayFilter:
        return filter_holidays(self, holiday_type)

    def next(self) -> CountryYearResult:
        """Holidays of the same country in the following year."""
        return build_year(self.country, self.year + 1, self.locale)

    def previous(self) -> CountryYearResult:
        """Holidays of the same country in the preceding year."""
        return build_year(self.country, self.year - 1, self.locale)

    def with_holidays(self, records: Iterable[HolidayRecord]) -> CountryYearResult:
        """A new result with *records* appended; keys must stay unique."""
        return CountryYearResult(self.country, self.year, [*self, *records], self.locale)


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def _active_rules(country: Country, year: int) -> list[HolidayRule]:
    active: list[HolidayRule] = []
    seen: set[str] = set()
    for rule in country.rules:
        if not rule.applies_to(year):
            logger.debug("%s %d: skipping %s (effective %s-%s)", country.name, year,
                         rule.key, rule.since, rule.until)
            continue
        if rule.key in seen:
            raise DuplicateKey(rule.key, country.name, year)
        seen.add(rule.key)
        active.append(rule)
    return active


def _bridge_days(
    records: list[HolidayRecord], country: Country, year: int, locale: str
) -> list[HolidayRecord]:
    """Days squeezed between two national holidays that become holidays themselves."""
    national = {r.date for r in records if r.type is HolidayType.NATIONAL}
    bridges: list[HolidayRecord] = []
    d = datetime.date(year, 1, 2)
    last = datetime.date(year, 12, 30)
    one_day = datetime.timedelta(days=1)
    while d <= last:
        if (
            d not in national
            and d.weekday() != 6
            and d - one_day in national
            and d + one_day in national
        ):
            key = "bridgeDay" if not bridges else f"bridgeDay{len(bridges) + 1}"
            logger.debug("%s %d: bridge day on %s", country.name, year, d)
            bridges.append(
                HolidayRecord(key, d, HolidayType.NATIONAL, translations_for("bridgeDay"),
                              country.timezone, locale)
            )
        d += one_day
    return bridges


def build_year(
    country: str | Country, year: int, locale: str | None = None
) -> CountryYearResult:
    """Compute every holiday of *country* in *year*.

    Rules are evaluated in declared order; rules whose effective-year guard
    excludes *year* are skipped before any date arithmetic.  Substitutions
    are applied afterwards, in the same order, so that each one can see the
    dates every other holiday occupies.

    Raises :class:`InvalidYear`, :class:`UnknownCountry` or
    :class:`DuplicateKey`; nothing is returned on error.
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYear(year, MIN_YEAR, MAX_YEAR)
    resolved = get_country(country)
    locale = locale or resolved.locale

    rules = _active_rules(resolved, year)
    nominal = [rule.nominal_date(year) for rule in rules]

    records: list[HolidayRecord] = []
    substituted: set[datetime.date] = set()
    for index, (rule, d) in enumerate(zip(rules, nominal, strict=True)):
        names = rule.names_in(year)
        observed = d
        if rule.substitution.applies_to(d):
            taken = {o for i, o in enumerate(nominal) if i != index} | substituted
            observed = apply_substitution(d, rule.substitution.policy, taken)

        if observed != d and not rule.substitution.separate:
            logger.debug("%s %d: %s moved from %s to %s", resolved.name, year, rule.key, d, observed)
            substituted.add(observed)
            d = observed

        records.append(HolidayRecord(rule.key, d, rule.type, names, resolved.timezone, locale))

        if observed != d:
            logger.debug("%s %d: %s observed on %s", resolved.name, year, rule.key, observed)
            substituted.add(observed)
            observed_names = {"en_US": f"{names['en_US']} observed"} if "en_US" in names else {}
            records.append(
                HolidayRecord(f"substituteHoliday:{rule.key}", observed, rule.type,
                              observed_names, resolved.timezone, locale)
            )

    if resolved.bridge_days_since is not None and year >= resolved.bridge_days_since:
        records.extend(_bridge_days(records, resolved, year, locale))

    return CountryYearResult(resolved, year, records, locale)
