"""Errors raised by the holiday engine."""

from __future__ import annotations


class HolidayError(Exception):
    """Base class for every error raised by :mod:`holidaycal`."""


class InvalidYear(HolidayError, ValueError):
    """The requested year lies outside the supported calendrical range."""

    def __init__(self, year: int, low: int, high: int, what: str = "holidays"):
        self.year = year
        self.low = low
        self.high = high
        super().__init__(f"Year {year} is not supported for {what} (valid range: {low}-{high}).")


class UnknownCountry(HolidayError, KeyError):
    """No rule set is registered for the requested country."""

    def __init__(self, country: str, supported: list[str]):
        self.country = country
        self.supported = supported
        super().__init__(f"Unknown country {country!r}. Supported: {', '.join(supported)}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class DuplicateKey(HolidayError):
    """Two rules of the same country emitted the same holiday key for one year."""

    def __init__(self, key: str, country: str, year: int):
        self.key = key
        self.country = country
        self.year = year
        super().__init__(f"Holiday {key!r} defined twice for {country} in {year}.")
