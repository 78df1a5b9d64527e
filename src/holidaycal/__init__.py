"""holidaycal

Public, religious, observance and seasonal holidays per country and year,
with Easter-derived dates, observed-date substitution rules and localized
holiday names.
"""

from holidaycal.dates import compute_date, easter, easter_days
from holidaycal.exceptions import DuplicateKey, HolidayError, InvalidYear, UnknownCountry
from holidaycal.filters import (
    HolidayFilter,
    bank_holidays,
    filter_holidays,
    observance_holidays,
    official_holidays,
    other_holidays,
    seasonal_holidays,
)
from holidaycal.holidays import Country, HolidayRecord, HolidayRule, HolidayType
from holidaycal.registry import (
    CountryYearResult,
    build_year,
    get_country,
    register_country,
    supported_countries,
)
from holidaycal.substitution import Substitution, SubstitutionPolicy, apply_substitution
from holidaycal.translations import resolve_name

__all__ = [
    "Country",
    "CountryYearResult",
    "DuplicateKey",
    "HolidayError",
    "HolidayFilter",
    "HolidayRecord",
    "HolidayRule",
    "HolidayType",
    "InvalidYear",
    "Substitution",
    "SubstitutionPolicy",
    "UnknownCountry",
    "apply_substitution",
    "bank_holidays",
    "build_year",
    "compute_date",
    "easter",
    "easter_days",
    "filter_holidays",
    "get_country",
    "observance_holidays",
    "official_holidays",
    "other_holidays",
    "register_country",
    "resolve_name",
    "seasonal_holidays",
    "supported_countries",
]
