from sqlmodel import SQLModel

from holiday_planner.models.base import UTCDateTime, UUIDBase
from holiday_planner.models.employee import Employee
from holiday_planner.models.enums import HolidayStatus
from holiday_planner.models.holiday import Holiday

__all__ = [
    "Employee",
    "Holiday",
    "HolidayStatus",
    "SQLModel",
    "UTCDateTime",
    "UUIDBase",
]
