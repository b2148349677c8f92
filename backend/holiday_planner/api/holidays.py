# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Query, status

from holiday_planner.api.deps import ClockDep, HolidayStoreDep
from holiday_planner.models.employee import EMPLOYEE_ID_PATTERN
from holiday_planner.schemas.holiday import HolidayPayload, HolidayResponse
from holiday_planner.services import holiday as holiday_service

holidays_router = APIRouter(
    prefix="/holidays",
    tags=["holidays"],
)


@holidays_router.get(
    "",
    response_model=list[HolidayResponse],
    summary="Get an employee's holidays",
)
async def list_holidays(
    store: HolidayStoreDep,
    employee_id: str = Query(alias="employeeId", pattern=EMPLOYEE_ID_PATTERN),
) -> list[HolidayResponse]:
    """Return the holidays booked by the given employee."""
    return await holiday_service.list_holidays(store, employee_id)


@holidays_router.get(
    "/{holiday_id}",
    response_model=HolidayResponse,
)
async def get_holiday(
    holiday_id: uuid.UUID,
    store: HolidayStoreDep,
) -> HolidayResponse:
    """Return a single holiday."""
    return await holiday_service.get_holiday(store, holiday_id)


@holidays_router.post(
    "",
    response_model=HolidayResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a holiday",
)
async def create_holiday(
    payload: HolidayPayload,
    store: HolidayStoreDep,
    clock: ClockDep,
) -> HolidayResponse:
    """Book a holiday and return it with its generated id."""
    return await holiday_service.create_holiday(store, clock, payload)


@holidays_router.put(
    "",
    response_model=HolidayResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Update a holiday",
)
async def update_holiday(
    payload: HolidayPayload,
    store: HolidayStoreDep,
    clock: ClockDep,
) -> HolidayResponse:
    """Replace every field of an existing holiday."""
    return await holiday_service.update_holiday(store, clock, payload)


@holidays_router.delete(
    "/{holiday_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a holiday",
)
async def delete_holiday(
    holiday_id: uuid.UUID,
    store: HolidayStoreDep,
    clock: ClockDep,
) -> None:
    """Cancel a holiday that starts far enough in the future."""
    await holiday_service.cancel_holiday(store, clock, holiday_id)
