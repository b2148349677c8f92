"""Unit tests for the pure scheduling rules."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from holiday_planner.exceptions import (
    InvalidCancellationError,
    InvalidGapError,
    InvalidHolidayError,
    InvalidOverlapError,
    InvalidStartDateError,
)
from holiday_planner.models.holiday import Holiday
from holiday_planner.services import validation

NOW = datetime(2025, 5, 1, tzinfo=UTC)


def _at(day: str) -> datetime:
    return datetime.fromisoformat(f"{day}T00:00:00+00:00")


def _holiday(start: str, end: str, employee_id: str = "klm012345") -> Holiday:
    return Holiday(
        label="existing",
        employee_id=employee_id,
        start_of_holiday=_at(start),
        end_of_holiday=_at(end),
        status="SCHEDULED",
    )


# ---------------------------------------------------------------------------
# Lead time
# ---------------------------------------------------------------------------


def test_start_date_more_than_five_days_ahead_passes() -> None:
    validation.check_start_date(NOW + timedelta(days=5, seconds=1), NOW)


def test_start_date_exactly_five_days_ahead_fails() -> None:
    with pytest.raises(InvalidStartDateError):
        validation.check_start_date(NOW + timedelta(days=5), NOW)


def test_start_date_in_the_past_fails() -> None:
    with pytest.raises(InvalidStartDateError) as exc_info:
        validation.check_start_date(NOW - timedelta(days=1), NOW)
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Start of holiday must be at least 5 days from today."


def test_start_date_respects_custom_lead_time() -> None:
    validation.check_start_date(NOW + timedelta(days=2), NOW, lead_time_days=1)
    with pytest.raises(InvalidStartDateError):
        validation.check_start_date(NOW + timedelta(days=2), NOW, lead_time_days=2)


# ---------------------------------------------------------------------------
# Overlap
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("start", "end"),
    [
        ("2025-06-03", "2025-06-05"),  # inside
        ("2025-05-25", "2025-06-15"),  # surrounding
        ("2025-05-25", "2025-06-02"),  # across the start
        ("2025-06-09", "2025-06-20"),  # across the end
        ("2025-06-10", "2025-06-20"),  # touches the end
        ("2025-05-20", "2025-06-01"),  # touches the start
    ],
)
def test_overlapping_ranges_are_rejected(start: str, end: str) -> None:
    existing = [_holiday("2025-06-01", "2025-06-10")]
    with pytest.raises(InvalidOverlapError):
        validation.check_overlap(_at(start), _at(end), existing)


def test_overlap_ignores_employee() -> None:
    existing = [_holiday("2025-06-01", "2025-06-10", employee_id="klm999999")]
    with pytest.raises(InvalidOverlapError):
        validation.check_overlap(_at("2025-06-05"), _at("2025-06-12"), existing)


def test_disjoint_ranges_pass_overlap() -> None:
    existing = [_holiday("2025-06-01", "2025-06-10"), _holiday("2025-07-01", "2025-07-10")]
    validation.check_overlap(_at("2025-06-11"), _at("2025-06-30"), existing)


def test_overlap_with_no_existing_holidays_passes() -> None:
    validation.check_overlap(_at("2025-06-01"), _at("2025-06-10"), [])


def test_is_overlapping_boundary() -> None:
    end = _at("2025-06-10")
    assert validation.is_overlapping(end, end + timedelta(days=1), _at("2025-06-01"), end)
    assert not validation.is_overlapping(
        end + timedelta(microseconds=1), end + timedelta(days=1), _at("2025-06-01"), end
    )


# ---------------------------------------------------------------------------
# Gap
# ---------------------------------------------------------------------------


def test_days_between_truncates_toward_zero() -> None:
    base = _at("2025-06-10")
    assert validation.days_between(base, base + timedelta(days=2, hours=23)) == 2
    assert validation.days_between(base, base - timedelta(hours=12)) == 0
    assert validation.days_between(base, base - timedelta(days=1, hours=12)) == -1


def test_gap_of_one_day_after_existing_fails() -> None:
    existing = [_holiday("2025-06-01", "2025-06-10")]
    with pytest.raises(InvalidGapError):
        validation.check_gap(_at("2025-06-11"), _at("2025-06-15"), existing)


def test_gap_of_one_day_before_existing_fails() -> None:
    existing = [_holiday("2025-06-10", "2025-06-15")]
    with pytest.raises(InvalidGapError):
        validation.check_gap(_at("2025-06-01"), _at("2025-06-09"), existing)


def test_gap_just_under_three_days_fails() -> None:
    existing = [_holiday("2025-06-01", "2025-06-10")]
    start = _at("2025-06-10") + timedelta(days=2, hours=23, minutes=59)
    with pytest.raises(InvalidGapError):
        validation.check_gap(start, start + timedelta(days=2), existing)


def test_gap_of_exactly_three_days_passes() -> None:
    existing = [_holiday("2025-06-01", "2025-06-10")]
    validation.check_gap(_at("2025-06-13"), _at("2025-06-15"), existing)
    validation.check_gap(_at("2025-05-20"), _at("2025-05-29"), existing)


def test_gap_of_ten_days_passes() -> None:
    existing = [_holiday("2025-06-01", "2025-06-10")]
    validation.check_gap(_at("2025-06-20"), _at("2025-06-25"), existing)


def test_gap_message() -> None:
    existing = [_holiday("2025-06-01", "2025-06-10")]
    with pytest.raises(InvalidGapError) as exc_info:
        validation.check_gap(_at("2025-06-12"), _at("2025-06-15"), existing)
    assert exc_info.value.message == "There should be a gap of at least 3 working days between holidays"


def test_gap_checks_every_existing_holiday() -> None:
    existing = [_holiday("2025-05-01", "2025-05-05"), _holiday("2025-06-20", "2025-06-25")]
    with pytest.raises(InvalidGapError):
        validation.check_gap(_at("2025-06-01"), _at("2025-06-18"), existing)


# ---------------------------------------------------------------------------
# Cancellation
# ---------------------------------------------------------------------------


def test_cancellation_outside_lead_time_passes() -> None:
    validation.check_cancellation(_holiday("2025-05-07", "2025-05-10"), NOW)


def test_cancellation_inside_lead_time_fails() -> None:
    with pytest.raises(InvalidCancellationError) as exc_info:
        validation.check_cancellation(_holiday("2025-05-06", "2025-05-10"), NOW)
    assert exc_info.value.message == "A holiday must be cancelled at least 5 working days before the start date."


def test_rule_violations_share_a_base_class() -> None:
    for error in (InvalidStartDateError(), InvalidOverlapError(), InvalidGapError(), InvalidCancellationError()):
        assert isinstance(error, InvalidHolidayError)
        assert error.status_code == 400
