"""Substitution resolver: observed dates for holidays on non-working days.

Each policy reproduces one country's legal wording.  Forward policies move
to the nearest following day that satisfies the policy; the two backward
policies (``PREVIOUS_SATURDAY_IF_SUNDAY``, the Saturday half of
``NEAREST_WEEKDAY``) exist only where the law says so.
"""

from __future__ import annotations

import datetime
from collections.abc import Collection
from enum import Enum
from typing import NamedTuple

from holidaycal.dates import MONDAY, SATURDAY, SUNDAY

ONE_DAY = datetime.timedelta(days=1)


class SubstitutionPolicy(Enum):
    NONE = "none"
    NEXT_MONDAY_IF_WEEKEND = "next_monday_if_weekend"
    NEXT_MONDAY_IF_SUNDAY = "next_monday_if_sunday"
    NEXT_WORKING_DAY_IF_SUNDAY = "next_working_day_if_sunday"
    PREVIOUS_SATURDAY_IF_SUNDAY = "previous_saturday_if_sunday"
    NEAREST_WEEKDAY = "nearest_weekday"


class Substitution(NamedTuple):
    """A policy attached to a holiday rule.

    ``since`` is the first nominal date the policy applies to.  With
    ``separate`` the nominal holiday is kept and the observed date is
    emitted as an extra record instead of moving the holiday.
    """

    policy: SubstitutionPolicy = SubstitutionPolicy.NONE
    since: datetime.date | None = None
    separate: bool = False

    def applies_to(self, d: datetime.date) -> bool:
        if self.policy is SubstitutionPolicy.NONE:
            return False
        return self.since is None or d >= self.since


NO_SUBSTITUTION = Substitution()


def _next_weekday(d: datetime.date, weekday: int) -> datetime.date:
    """First *weekday* strictly after *d*."""
    return d + datetime.timedelta(days=(weekday - d.weekday() - 1) % 7 + 1)


def apply_substitution(
    d: datetime.date,
    policy: SubstitutionPolicy,
    taken: Collection[datetime.date] = (),
) -> datetime.date:
    """Return the observed date of a holiday nominally on *d*.

    *taken* holds dates already occupied by other holidays of the same
    country; only ``NEXT_WORKING_DAY_IF_SUNDAY`` looks at it.  A date that
    already satisfies *policy* is returned unchanged.
    """
    weekday = d.weekday()

    if policy is SubstitutionPolicy.NONE:
        return d

    if policy is SubstitutionPolicy.NEXT_MONDAY_IF_WEEKEND:
        return _next_weekday(d, MONDAY) if weekday in (SATURDAY, SUNDAY) else d

    if policy is SubstitutionPolicy.NEXT_MONDAY_IF_SUNDAY:
        return d + ONE_DAY if weekday == SUNDAY else d

    if policy is SubstitutionPolicy.NEXT_WORKING_DAY_IF_SUNDAY:
        if weekday != SUNDAY:
            return d
        observed = d + ONE_DAY
        while observed.weekday() in (SATURDAY, SUNDAY) or observed in taken:
            observed += ONE_DAY
        return observed

    if policy is SubstitutionPolicy.PREVIOUS_SATURDAY_IF_SUNDAY:
        return d - ONE_DAY if weekday == SUNDAY else d

    if policy is SubstitutionPolicy.NEAREST_WEEKDAY:
        if weekday == SATURDAY:
            return d - ONE_DAY
        if weekday == SUNDAY:
            return d + ONE_DAY
        return d

    raise ValueError(f"Unsupported substitution policy {policy!r}")


def is_compliant(d: datetime.date, policy: SubstitutionPolicy) -> bool:
    """True when *d* needs no shifting under *policy*."""
    return apply_substitution(d, policy) == d
