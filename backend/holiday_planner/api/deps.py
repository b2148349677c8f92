from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from holiday_planner.db import SessionDep
from holiday_planner.services.clock import Clock, get_clock
from holiday_planner.services.store import HolidayStore, SqlHolidayStore


async def get_holiday_store(session: SessionDep) -> HolidayStore:
    """Build the request-scoped holiday store on top of the database session."""
    return SqlHolidayStore(session)


HolidayStoreDep = Annotated[HolidayStore, Depends(get_holiday_store)]
ClockDep = Annotated[Clock, Depends(get_clock)]
