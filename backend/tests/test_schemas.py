"""Tests for the holiday wire representation and the clock."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from holiday_planner.models.enums import HolidayStatus
from holiday_planner.schemas.holiday import HolidayPayload, HolidayResponse
from holiday_planner.services.clock import Clock, FixedClock, SystemClock


def _wire(**overrides: object) -> dict:
    data: dict = {
        "holidayLabel": "Summer",
        "employeeId": "klm012345",
        "startOfHoliday": "2025-06-01T00:00:00Z",
        "endOfHoliday": "2025-06-10T00:00:00Z",
        "status": "DRAFT",
    }
    data.update(overrides)
    return data


def test_payload_reads_camel_case() -> None:
    payload = HolidayPayload.model_validate(_wire())
    assert payload.holiday_id is None
    assert payload.holiday_label == "Summer"
    assert payload.status is HolidayStatus.DRAFT


def test_payload_accepts_holiday_id() -> None:
    holiday_id = uuid.uuid4()
    payload = HolidayPayload.model_validate(_wire(holidayId=str(holiday_id)))
    assert payload.holiday_id == holiday_id


@pytest.mark.parametrize("employee_id", ["klm12345", "klm0123456", "KLM012345", "abc012345", ""])
def test_payload_rejects_bad_employee_id(employee_id: str) -> None:
    with pytest.raises(ValidationError):
        HolidayPayload.model_validate(_wire(employeeId=employee_id))


def test_payload_rejects_empty_label() -> None:
    with pytest.raises(ValidationError):
        HolidayPayload.model_validate(_wire(holidayLabel=""))


def test_payload_rejects_bad_holiday_id() -> None:
    with pytest.raises(ValidationError):
        HolidayPayload.model_validate(_wire(holidayId="not-a-uuid"))


def test_response_dumps_camel_case() -> None:
    response = HolidayResponse(
        holiday_id=uuid.UUID("00000000-0000-0000-0000-000000000001"),
        holiday_label="Summer",
        employee_id="klm012345",
        start_of_holiday="2025-06-01T00:00:00Z",
        end_of_holiday="2025-06-10T00:00:00Z",
        status=HolidayStatus.SCHEDULED,
    )
    assert response.model_dump(mode="json", by_alias=True) == {
        "holidayId": "00000000-0000-0000-0000-000000000001",
        "holidayLabel": "Summer",
        "employeeId": "klm012345",
        "startOfHoliday": "2025-06-01T00:00:00Z",
        "endOfHoliday": "2025-06-10T00:00:00Z",
        "status": "SCHEDULED",
    }


def test_fixed_clock_advances() -> None:
    clock = FixedClock(datetime(2025, 5, 1, tzinfo=UTC))
    clock.advance(timedelta(days=2))
    assert clock.now() == datetime(2025, 5, 3, tzinfo=UTC)


def test_system_clock_is_aware() -> None:
    clock = SystemClock()
    assert isinstance(clock, Clock)
    assert clock.now().tzinfo is not None
