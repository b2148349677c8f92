from __future__ import annotations

from fastapi import APIRouter, Path

from holiday_planner.db import SessionDep
from holiday_planner.models.employee import EMPLOYEE_ID_PATTERN
from holiday_planner.schemas.employee import EmployeeListResponse, EmployeeResponse, UpsertEmployeeRequest
from holiday_planner.services import employee as employee_service

employees_router = APIRouter(
    prefix="/employees",
    tags=["employees"],
)


@employees_router.put(
    "/{employee_id}",
    response_model=EmployeeResponse,
)
async def upsert_employee(
    payload: UpsertEmployeeRequest,
    session: SessionDep,
    employee_id: str = Path(pattern=EMPLOYEE_ID_PATTERN),
) -> EmployeeResponse:
    """Create or rename an employee."""
    return await employee_service.upsert_employee(session, employee_id, payload)


@employees_router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
)
async def get_employee(
    session: SessionDep,
    employee_id: str = Path(pattern=EMPLOYEE_ID_PATTERN),
) -> EmployeeResponse:
    """Get a single employee."""
    return await employee_service.get_employee(session, employee_id)


@employees_router.get(
    "",
    response_model=EmployeeListResponse,
)
async def list_employees(session: SessionDep) -> EmployeeListResponse:
    """List all employees."""
    return await employee_service.list_employees(session)
