"""Holiday rule tables of the supported countries.

Each table lists the country's holidays in the order they are declared;
the registry keeps that order.  Keys shared between countries (e.g.
``christmasDay``) share their translations.
"""

from __future__ import annotations

import datetime
from typing import Any

from holidaycal.dates import (
    ASCENSION,
    ASH_WEDNESDAY,
    CARNIVAL,
    CARNIVAL_SECOND,
    CARNIVAL_THIRD,
    EASTER,
    EASTER_MONDAY,
    GOOD_FRIDAY,
    MONDAY,
    PENTECOST,
    PENTECOST_MONDAY,
    SUNDAY,
    THURSDAY,
    TUESDAY,
    Changeover,
    DateRule,
    Equinox,
    Fixed,
    LastWeekday,
    NthWeekday,
    Special,
)
from holidaycal.holidays import Country, HolidayRule, HolidayType
from holidaycal.substitution import Substitution, SubstitutionPolicy

OBSERVANCE = HolidayType.OBSERVANCE

# ---------------------------------------------------------------------------
# Shared Christian holidays
# ---------------------------------------------------------------------------

NEW_YEARS_DAY = HolidayRule("newYearsDay", Fixed(1, 1))
EPIPHANY = HolidayRule("epiphany", Fixed(1, 6))
EASTER_SUNDAY = HolidayRule("easter", EASTER)
EASTER_MONDAY_RULE = HolidayRule("easterMonday", EASTER_MONDAY)
INTERNATIONAL_WORKERS_DAY = HolidayRule("internationalWorkersDay", Fixed(5, 1))
ASCENSION_DAY = HolidayRule("ascensionDay", ASCENSION)
WHITSUNDAY = HolidayRule("pentecost", PENTECOST)
WHITMONDAY = HolidayRule("pentecostMonday", PENTECOST_MONDAY)
ASSUMPTION_OF_MARY = HolidayRule("assumptionOfMary", Fixed(8, 15))
ALL_SAINTS_DAY = HolidayRule("allSaintsDay", Fixed(11, 1))
IMMACULATE_CONCEPTION = HolidayRule("immaculateConception", Fixed(12, 8))
CHRISTMAS_DAY = HolidayRule("christmasDay", Fixed(12, 25))
SECOND_CHRISTMAS_DAY = HolidayRule("secondChristmasDay", Fixed(12, 26))
ST_STEPHENS_DAY = HolidayRule("stStephensDay", Fixed(12, 26))

# ---------------------------------------------------------------------------
# Belgium
# ---------------------------------------------------------------------------

BELGIUM = Country(
    name="Belgium",
    code="BE",
    timezone="Europe/Brussels",
    locale="nl_BE",
    rules=(
        NEW_YEARS_DAY,
        EASTER_SUNDAY,
        EASTER_MONDAY_RULE,
        INTERNATIONAL_WORKERS_DAY,
        ASCENSION_DAY,
        WHITSUNDAY,
        WHITMONDAY,
        HolidayRule("nationalDay", Fixed(7, 21), since=1890),
        ASSUMPTION_OF_MARY,
        ALL_SAINTS_DAY,
        HolidayRule("armisticeDay", Fixed(11, 11), since=1919),
        CHRISTMAS_DAY,
    ),
)

# ---------------------------------------------------------------------------
# France
# ---------------------------------------------------------------------------

FRANCE = Country(
    name="France",
    code="FR",
    timezone="Europe/Paris",
    locale="fr_FR",
    rules=(
        NEW_YEARS_DAY,
        EASTER_SUNDAY,
        EASTER_MONDAY_RULE,
        INTERNATIONAL_WORKERS_DAY,
        HolidayRule("victoryInEuropeDay", Fixed(5, 8), since=1945),
        ASCENSION_DAY,
        WHITSUNDAY,
        WHITMONDAY,
        HolidayRule("bastilleDay", Fixed(7, 14), since=1790),
        ASSUMPTION_OF_MARY,
        ALL_SAINTS_DAY,
        HolidayRule("armisticeDay", Fixed(11, 11), since=1919),
        CHRISTMAS_DAY,
    ),
)

# ---------------------------------------------------------------------------
# Italy
# ---------------------------------------------------------------------------

ITALY = Country(
    name="Italy",
    code="IT",
    timezone="Europe/Rome",
    locale="it_IT",
    rules=(
        NEW_YEARS_DAY,
        EPIPHANY,
        EASTER_SUNDAY,
        EASTER_MONDAY_RULE,
        HolidayRule("liberationDay", Fixed(4, 25), since=1949),
        INTERNATIONAL_WORKERS_DAY,
        HolidayRule("republicDay", Fixed(6, 2), since=1946),
        ASSUMPTION_OF_MARY,
        ALL_SAINTS_DAY,
        IMMACULATE_CONCEPTION,
        CHRISTMAS_DAY,
        ST_STEPHENS_DAY,
    ),
)

# ---------------------------------------------------------------------------
# Japan
# ---------------------------------------------------------------------------

# Substitute holidays were introduced by the amendment of 12 April 1973.
# Since 2007 the substitute is the next day that is not already a holiday.
JP_SUBSTITUTE = Substitution(
    SubstitutionPolicy.NEXT_WORKING_DAY_IF_SUNDAY, since=datetime.date(1973, 4, 12)
)


def _jp(key: str, date: DateRule, **kwargs: Any) -> HolidayRule:
    return HolidayRule(key, date, substitution=JP_SUBSTITUTE, **kwargs)


JAPAN = Country(
    name="Japan",
    code="JP",
    timezone="Asia/Tokyo",
    locale="ja_JP",
    bridge_days_since=1986,
    rules=(
        _jp("newYearsDay", Fixed(1, 1), since=1948),
        _jp(
            "comingOfAgeDay",
            Changeover(2000, Fixed(1, 15), NthWeekday(1, MONDAY, 2)),
            since=1948,
        ),
        _jp("nationalFoundationDay", Fixed(2, 11), since=1966),
        _jp("emperorsBirthday", Fixed(2, 23), since=2020),
        _jp("vernalEquinoxDay", Equinox("vernal"), since=1948, until=2150),
        _jp("emperorsBirthday", Fixed(4, 29), since=1949, until=1988),
        _jp("showaDay", Fixed(4, 29), since=2007),
        _jp("greeneryDay", Changeover(2007, Fixed(4, 29), Fixed(5, 4)), since=1989),
        _jp("enthronementDay", Fixed(5, 1), since=2019, until=2019),
        _jp("constitutionMemorialDay", Fixed(5, 3), since=1948),
        _jp("childrensDay", Fixed(5, 5), since=1948),
        _jp(
            "marineDay",
            Special(
                Changeover(2003, Fixed(7, 20), NthWeekday(7, MONDAY, 3)),
                {2020: (7, 23), 2021: (7, 22)},
            ),
            since=1996,
        ),
        _jp(
            "mountainDay",
            Special(Fixed(8, 11), {2020: (8, 10), 2021: (8, 8)}),
            since=2016,
        ),
        _jp(
            "respectForTheAgedDay",
            Changeover(2003, Fixed(9, 15), NthWeekday(9, MONDAY, 3)),
            since=1966,
        ),
        _jp("autumnalEquinoxDay", Equinox("autumnal"), since=1948, until=2150),
        _jp(
            "sportsDay",
            Special(
                Changeover(2000, Fixed(10, 10), NthWeekday(10, MONDAY, 2)),
                {2020: (7, 24), 2021: (7, 23)},
            ),
            since=1966,
            former_names=((2019, {"en_US": "Health And Sports Day", "ja_JP": "体育の日"}),),
        ),
        _jp("enthronementProclamationCeremony", Fixed(10, 22), since=2019, until=2019),
        _jp("cultureDay", Fixed(11, 3), since=1948),
        _jp("laborThanksgivingDay", Fixed(11, 23), since=1948),
        _jp("emperorsBirthday", Fixed(12, 23), since=1989, until=2018),
    ),
)

# ---------------------------------------------------------------------------
# Netherlands
# ---------------------------------------------------------------------------

NETHERLANDS = Country(
    name="Netherlands",
    code="NL",
    timezone="Europe/Amsterdam",
    locale="nl_NL",
    rules=(
        NEW_YEARS_DAY,
        EPIPHANY._replace(type=OBSERVANCE),
        HolidayRule("valentinesDay", Fixed(2, 14), OBSERVANCE),
        HolidayRule("carnivalDay", CARNIVAL, OBSERVANCE),
        HolidayRule("secondCarnivalDay", CARNIVAL_SECOND, OBSERVANCE),
        HolidayRule("thirdCarnivalDay", CARNIVAL_THIRD, OBSERVANCE),
        HolidayRule("ashWednesday", ASH_WEDNESDAY, OBSERVANCE),
        HolidayRule("summerTime", LastWeekday(3, SUNDAY), HolidayType.SEASON),
        HolidayRule("goodFriday", GOOD_FRIDAY, OBSERVANCE),
        EASTER_SUNDAY,
        EASTER_MONDAY_RULE,
        # Queen's Day moved to the Monday when on a Sunday, and from 1980 to the Saturday
        HolidayRule(
            "queensDay",
            Changeover(1949, Fixed(8, 31), Fixed(4, 30)),
            since=1891,
            until=1979,
            substitution=Substitution(SubstitutionPolicy.NEXT_MONDAY_IF_SUNDAY),
        ),
        HolidayRule(
            "queensDay",
            Fixed(4, 30),
            since=1980,
            until=2013,
            substitution=Substitution(SubstitutionPolicy.PREVIOUS_SATURDAY_IF_SUNDAY),
        ),
        HolidayRule(
            "kingsDay",
            Fixed(4, 27),
            since=2014,
            substitution=Substitution(SubstitutionPolicy.PREVIOUS_SATURDAY_IF_SUNDAY),
        ),
        HolidayRule("commemorationDay", Fixed(5, 4), OBSERVANCE, since=1947),
        HolidayRule("liberationDay", Fixed(5, 5), OBSERVANCE, since=1947),
        HolidayRule("mothersDay", NthWeekday(5, SUNDAY, 2), OBSERVANCE),
        ASCENSION_DAY,
        WHITSUNDAY,
        WHITMONDAY,
        HolidayRule("fathersDay", NthWeekday(6, SUNDAY, 3), OBSERVANCE),
        HolidayRule("princesDay", NthWeekday(9, TUESDAY, 3), HolidayType.OTHER),
        HolidayRule("worldAnimalDay", Fixed(10, 4), OBSERVANCE, since=1931),
        HolidayRule("winterTime", LastWeekday(10, SUNDAY), HolidayType.SEASON),
        HolidayRule("halloween", Fixed(10, 31), OBSERVANCE),
        HolidayRule("stMartinsDay", Fixed(11, 11), OBSERVANCE),
        HolidayRule("stNicholasDay", Fixed(12, 5), OBSERVANCE),
        CHRISTMAS_DAY,
        SECOND_CHRISTMAS_DAY,
    ),
)

# ---------------------------------------------------------------------------
# USA
# ---------------------------------------------------------------------------

# Federal holidays on a Saturday are observed the Friday before, on a
# Sunday the Monday after; the holiday itself keeps its date.
US_OBSERVED = Substitution(SubstitutionPolicy.NEAREST_WEEKDAY, separate=True)


def _us(key: str, date: DateRule, **kwargs: Any) -> HolidayRule:
    return HolidayRule(key, date, substitution=US_OBSERVED, **kwargs)


USA = Country(
    name="USA",
    code="US",
    timezone="America/New_York",
    locale="en_US",
    rules=(
        _us("newYearsDay", Fixed(1, 1)),
        _us("martinLutherKingDay", NthWeekday(1, MONDAY, 3), since=1986),
        _us(
            "washingtonsBirthday",
            Changeover(1968, Fixed(2, 22), NthWeekday(2, MONDAY, 3)),
            since=1879,
        ),
        _us("memorialDay", Changeover(1968, Fixed(5, 30), LastWeekday(5, MONDAY)), since=1865),
        _us("juneteenth", Fixed(6, 19), since=2021),
        _us("independenceDay", Fixed(7, 4), since=1776),
        _us("labourDay", NthWeekday(9, MONDAY, 1), since=1887),
        _us(
            "columbusDay",
            Changeover(1970, Fixed(10, 12), NthWeekday(10, MONDAY, 2)),
            since=1937,
        ),
        _us(
            "veteransDay",
            Fixed(11, 11),
            since=1919,
            former_names=((1953, {"en_US": "Armistice Day"}),),
        ),
        _us("thanksgivingDay", NthWeekday(11, THURSDAY, 4), since=1863),
        _us("christmasDay", Fixed(12, 25)),
    ),
)

COUNTRIES: tuple[Country, ...] = (BELGIUM, FRANCE, ITALY, JAPAN, NETHERLANDS, USA)
