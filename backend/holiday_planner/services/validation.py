"""Scheduling rules for holiday bookings.

Every check is a pure function over a candidate range and the holidays it is
compared against. A failing check raises the matching ``InvalidHolidayError``
subclass; a passing check returns ``None``. Callers decide which holidays to
pass in: the overlap rule is evaluated against every holiday in the system,
the gap rule only against the candidate employee's own holidays.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from holiday_planner.exceptions import (
    InvalidCancellationError,
    InvalidGapError,
    InvalidOverlapError,
    InvalidStartDateError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from holiday_planner.models.holiday import Holiday

LEAD_TIME_DAYS = 5
MIN_GAP_DAYS = 3

_ONE_DAY = timedelta(days=1)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def starts_after_lead_time(start: datetime, now: datetime, lead_time_days: int = LEAD_TIME_DAYS) -> bool:
    """True when ``start`` lies strictly more than ``lead_time_days`` after ``now``."""
    return now + timedelta(days=lead_time_days) < start


def is_overlapping(
    start: datetime,
    end: datetime,
    existing_start: datetime,
    existing_end: datetime,
) -> bool:
    """Closed-interval overlap: ranges that only touch at an endpoint still overlap."""
    return existing_start <= end and start <= existing_end


def days_between(earlier: datetime, later: datetime) -> int:
    """Whole days from ``earlier`` to ``later``, truncated toward zero."""
    return int((later - earlier) / _ONE_DAY)


def has_insufficient_gap(
    start: datetime,
    end: datetime,
    existing_start: datetime,
    existing_end: datetime,
    min_gap_days: int = MIN_GAP_DAYS,
) -> bool:
    """True when the candidate sits less than ``min_gap_days`` before or after an existing range.

    Negative day counts mean the existing range is not on that side and are
    ignored; genuine overlaps are the overlap rule's business.
    """
    gap_before = days_between(existing_end, start)
    gap_after = days_between(end, existing_start)
    return 0 <= gap_before < min_gap_days or 0 <= gap_after < min_gap_days


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def check_start_date(start: datetime, now: datetime, lead_time_days: int = LEAD_TIME_DAYS) -> None:
    """Creation/update lead time."""
    if not starts_after_lead_time(start, now, lead_time_days):
        raise InvalidStartDateError(lead_time_days)


def check_overlap(start: datetime, end: datetime, existing: Iterable[Holiday]) -> None:
    """Reject the candidate if it shares any instant with any of ``existing``."""
    for holiday in existing:
        if is_overlapping(start, end, holiday.start_of_holiday, holiday.end_of_holiday):
            raise InvalidOverlapError


def check_gap(
    start: datetime,
    end: datetime,
    existing: Iterable[Holiday],
    min_gap_days: int = MIN_GAP_DAYS,
) -> None:
    """Reject the candidate if it is too close to any of ``existing``."""
    for holiday in existing:
        if has_insufficient_gap(start, end, holiday.start_of_holiday, holiday.end_of_holiday, min_gap_days):
            raise InvalidGapError(min_gap_days)


def check_cancellation(holiday: Holiday, now: datetime, lead_time_days: int = LEAD_TIME_DAYS) -> None:
    """A holiday can only be cancelled while it is still outside the lead time."""
    if not starts_after_lead_time(holiday.start_of_holiday, now, lead_time_days):
        raise InvalidCancellationError(lead_time_days)
