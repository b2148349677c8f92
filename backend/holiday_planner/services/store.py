from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlmodel import col

from holiday_planner.exceptions import EmployeeNotFoundError
from holiday_planner.models.holiday import Holiday

if TYPE_CHECKING:
    import uuid

    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


@runtime_checkable
class HolidayStore(Protocol):
    """Persistence interface consumed by the booking service."""

    async def find_by_id(self, holiday_id: uuid.UUID) -> Holiday | None:
        """Return the holiday or None if it does not exist."""
        ...

    async def find_by_employee(self, employee_id: str) -> list[Holiday]:
        """Return every holiday owned by the employee."""
        ...

    async def find_all(self) -> list[Holiday]:
        """Return every holiday in the system."""
        ...

    async def save(self, holiday: Holiday) -> Holiday:
        """Insert a new holiday or fully overwrite the one with the same id."""
        ...

    async def delete_by_id(self, holiday_id: uuid.UUID) -> bool:
        """Delete the holiday. Returns False if nothing was deleted."""
        ...


class SqlHolidayStore:
    """HolidayStore backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, holiday_id: uuid.UUID) -> Holiday | None:
        result = await self._session.execute(select(Holiday).where(col(Holiday.id) == holiday_id))
        return result.scalar_one_or_none()

    async def find_by_employee(self, employee_id: str) -> list[Holiday]:
        result = await self._session.execute(
            select(Holiday)
            .where(col(Holiday.employee_id) == employee_id)
            .order_by(col(Holiday.start_of_holiday), col(Holiday.id))
        )
        return list(result.scalars().all())

    async def find_all(self) -> list[Holiday]:
        result = await self._session.execute(select(Holiday))
        return list(result.scalars().all())

    async def save(self, holiday: Holiday) -> Holiday:
        merged = await self._session.merge(holiday)
        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            logger.info("Holiday %s references unknown employee %s", holiday.id, holiday.employee_id)
            raise EmployeeNotFoundError from None
        await self._session.commit()
        await self._session.refresh(merged)
        return merged

    async def delete_by_id(self, holiday_id: uuid.UUID) -> bool:
        holiday = await self.find_by_id(holiday_id)
        if holiday is None:
            return False
        await self._session.delete(holiday)
        await self._session.commit()
        return True


class InMemoryHolidayStore:
    """Dict-backed HolidayStore for tests and local experiments.

    Keeps insertion order. Employee existence is not checked.
    """

    def __init__(self) -> None:
        self._holidays: dict[uuid.UUID, Holiday] = {}
        self.save_calls = 0
        self.delete_calls = 0

    async def find_by_id(self, holiday_id: uuid.UUID) -> Holiday | None:
        return self._holidays.get(holiday_id)

    async def find_by_employee(self, employee_id: str) -> list[Holiday]:
        return [h for h in self._holidays.values() if h.employee_id == employee_id]

    async def find_all(self) -> list[Holiday]:
        return list(self._holidays.values())

    async def save(self, holiday: Holiday) -> Holiday:
        self.save_calls += 1
        stored = Holiday(**holiday.model_dump())
        self._holidays[stored.id] = stored
        return stored

    async def delete_by_id(self, holiday_id: uuid.UUID) -> bool:
        self.delete_calls += 1
        return self._holidays.pop(holiday_id, None) is not None
