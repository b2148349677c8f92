from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlmodel import col

from holiday_planner.exceptions import EmployeeNotFoundError
from holiday_planner.models.employee import Employee
from holiday_planner.schemas.employee import EmployeeListResponse, EmployeeResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from holiday_planner.schemas.employee import UpsertEmployeeRequest

logger = logging.getLogger(__name__)


def _build_employee_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(id=employee.id, name=employee.name)


async def upsert_employee(
    session: AsyncSession,
    employee_id: str,
    payload: UpsertEmployeeRequest,
) -> EmployeeResponse:
    """Create an employee or rename an existing one. Holidays are left untouched."""
    employee = await session.get(Employee, employee_id)
    if employee is None:
        employee = Employee(id=employee_id, name=payload.name)
        session.add(employee)
        logger.info("Created employee %s", employee_id)
    else:
        employee.name = payload.name

    await session.commit()
    await session.refresh(employee)
    return _build_employee_response(employee)


async def get_employee(session: AsyncSession, employee_id: str) -> EmployeeResponse:
    """Get a single employee or raise 404."""
    employee = await session.get(Employee, employee_id)
    if employee is None:
        raise EmployeeNotFoundError
    return _build_employee_response(employee)


async def list_employees(session: AsyncSession) -> EmployeeListResponse:
    """List all employees ordered by id."""
    count_result = await session.execute(select(func.count()).select_from(Employee))
    total = count_result.scalar_one()

    result = await session.execute(select(Employee).order_by(col(Employee.id)))
    employees = list(result.scalars().all())

    return EmployeeListResponse(
        items=[_build_employee_response(e) for e in employees],
        total=total,
    )
