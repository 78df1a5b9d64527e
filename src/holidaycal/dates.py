"""Date engine: civil dates of holidays for a given year.

Every holiday date is derived from a small immutable *date rule*.  Rules are
plain values so country tables can be written as data:

  - ``Fixed``          - the same month/day every year
  - ``EasterOffset``   - a number of days before/after Easter Sunday
  - ``NthWeekday``     - e.g. the third Monday of January
  - ``LastWeekday``    - e.g. the last Monday of May
  - ``Equinox``        - Japanese vernal/autumnal equinox day
  - ``Changeover``     - one rule before a given year, another from it on
  - ``Special``        - a base rule with explicit per-year exceptions
"""

from __future__ import annotations

import datetime
import math
from typing import NamedTuple, Union

from holidaycal.exceptions import InvalidYear

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

# The Gregorian computus is only meaningful once the calendar existed.
EASTER_MIN_YEAR = 1583
EASTER_MAX_YEAR = 9999

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def nth_weekday(year: int, month: int, weekday: int, n: int) -> datetime.date:
    """Return the *n*-th occurrence of *weekday* in *month* of *year*.

    *weekday* follows ``datetime`` convention: 0 = Monday … 6 = Sunday.
    *n* is 1-based (1 = first, 2 = second, …).
    """
    first = datetime.date(year, month, 1)
    delta = (weekday - first.weekday()) % 7
    return first + datetime.timedelta(days=delta, weeks=n - 1)


def last_weekday(year: int, month: int, weekday: int) -> datetime.date:
    """Return the last occurrence of *weekday* in *month* of *year*."""
    if month == 12:
        last = datetime.date(year, 12, 31)
    else:
        last = datetime.date(year, month + 1, 1) - datetime.timedelta(days=1)
    return last - datetime.timedelta(days=(last.weekday() - weekday) % 7)


def easter_days(year: int) -> int:
    """Number of days after March 21 on which Easter Sunday falls in *year*.

    Uses the Meeus/Jones/Butcher form of the Gregorian computus, so years
    before the 1583 calendar reform are rejected with :class:`InvalidYear`.
    """
    if not EASTER_MIN_YEAR <= year <= EASTER_MAX_YEAR:
        raise InvalidYear(year, EASTER_MIN_YEAR, EASTER_MAX_YEAR, what="Easter")

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
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1

    # month is 3 or 4; March 21 + offset
    return day - 21 if month == 3 else day + 10


def easter(year: int) -> datetime.date:
    """Easter Sunday of *year*."""
    offset = easter_days(year)
    return datetime.date(year, 3, 21) + datetime.timedelta(days=offset)


# Era parameters of the equinox approximation published by the
# National Astronomical Observatory of Japan: (last year, vernal, autumnal).
_EQUINOX_ERAS: tuple[tuple[int, float, float], ...] = (
    (1979, 20.8357, 23.2588),
    (2099, 20.8431, 23.2488),
    (2150, 21.8510, 24.2488),
)
_EQUINOX_GRADIENT = 0.242194
EQUINOX_MIN_YEAR = 1948
EQUINOX_MAX_YEAR = 2150


def equinox_day(year: int, season: str) -> datetime.date:
    """Japanese vernal (March) or autumnal (September) equinox day."""
    if not EQUINOX_MIN_YEAR <= year <= EQUINOX_MAX_YEAR:
        raise InvalidYear(year, EQUINOX_MIN_YEAR, EQUINOX_MAX_YEAR, what=f"the {season} equinox")
    for last_year, vernal, autumnal in _EQUINOX_ERAS:
        if year <= last_year:
            break
    param = vernal if season == "vernal" else autumnal
    day = math.floor(
        param + _EQUINOX_GRADIENT * (year - 1980) - math.floor((year - 1980) / 4)
    )
    return datetime.date(year, 3 if season == "vernal" else 9, day)


# ---------------------------------------------------------------------------
# Date rules
# ---------------------------------------------------------------------------


class Fixed(NamedTuple):
    """Same month and day every year."""

    month: int
    day: int

    def resolve(self, year: int) -> datetime.date:
        return datetime.date(year, self.month, self.day)


class EasterOffset(NamedTuple):
    """Easter Sunday shifted by a signed number of days."""

    days: int

    def resolve(self, year: int) -> datetime.date:
        return easter(year) + datetime.timedelta(days=self.days)


class NthWeekday(NamedTuple):
    """The *n*-th *weekday* of *month* (1-based)."""

    month: int
    weekday: int
    n: int

    def resolve(self, year: int) -> datetime.date:
        return nth_weekday(year, self.month, self.weekday, self.n)


class LastWeekday(NamedTuple):
    """The last *weekday* of *month*."""

    month: int
    weekday: int

    def resolve(self, year: int) -> datetime.date:
        return last_weekday(year, self.month, self.weekday)


class Equinox(NamedTuple):
    """Japanese equinox day; *season* is ``"vernal"`` or ``"autumnal"``."""

    season: str

    def resolve(self, year: int) -> datetime.date:
        return equinox_day(year, self.season)


class Changeover(NamedTuple):
    """``before`` for years below ``year``, ``after`` from ``year`` on."""

    year: int
    before: DateRule
    after: DateRule

    def resolve(self, year: int) -> datetime.date:
        rule = self.before if year < self.year else self.after
        return rule.resolve(year)


class Special(NamedTuple):
    """``base`` except in the years listed in ``overrides`` as ``{year: (month, day)}``."""

    base: DateRule
    overrides: dict[int, tuple[int, int]]

    def resolve(self, year: int) -> datetime.date:
        if year in self.overrides:
            month, day = self.overrides[year]
            return datetime.date(year, month, day)
        return self.base.resolve(year)


DateRule = Union[Fixed, EasterOffset, NthWeekday, LastWeekday, Equinox, Changeover, Special]

# Easter-derived holidays
EASTER = EasterOffset(0)
EASTER_MONDAY = EasterOffset(1)
GOOD_FRIDAY = EasterOffset(-2)
ASCENSION = EasterOffset(39)
PENTECOST = EasterOffset(49)
PENTECOST_MONDAY = EasterOffset(50)
ASH_WEDNESDAY = EasterOffset(-46)
CARNIVAL = EasterOffset(-49)
CARNIVAL_SECOND = EasterOffset(-48)
CARNIVAL_THIRD = EasterOffset(-47)


def compute_date(rule: DateRule, year: int) -> datetime.date:
    """Civil date of *rule* in *year*.

    Pure and deterministic.  Raises :class:`InvalidYear` when the rule's
    underlying algorithm does not cover *year* (Easter before 1583, the
    equinox formula outside 1948-2150).
    """
    return rule.resolve(year)
