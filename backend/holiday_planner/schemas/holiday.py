# ruff: noqa: TC003
from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from holiday_planner.models.employee import EMPLOYEE_ID_PATTERN
from holiday_planner.models.enums import HolidayStatus


class HolidayPayload(BaseModel):
    """Request body for creating or updating a holiday.

    Instants travel as ISO-8601 strings and are parsed by the booking service,
    so a malformed value yields a fixed error message instead of a parser
    diagnostic. ``holidayId`` is ignored on create and required on update.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    holiday_id: uuid.UUID | None = None
    holiday_label: str = Field(min_length=1, max_length=255)
    employee_id: str = Field(pattern=EMPLOYEE_ID_PATTERN)
    start_of_holiday: str
    end_of_holiday: str
    status: HolidayStatus


class HolidayResponse(BaseModel):
    """Wire representation of a stored holiday."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    holiday_id: uuid.UUID
    holiday_label: str
    employee_id: str
    start_of_holiday: str
    end_of_holiday: str
    status: HolidayStatus
