# ruff: noqa: TC003
from __future__ import annotations

from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field

from holiday_planner.models.base import UTCDateTime, UUIDBase
from holiday_planner.models.enums import HolidayStatus


class Holiday(UUIDBase, table=True):
    """A vacation booking owned by one employee."""

    __tablename__ = "holiday"
    __table_args__ = (sa.Index("ix_holiday_period", "start_of_holiday", "end_of_holiday"),)

    label: str = Field(max_length=255)
    # RESTRICT: employee changes never cascade into holidays.
    employee_id: str = Field(
        sa_column=sa.Column(
            sa.String(9), sa.ForeignKey("employee.id", ondelete="RESTRICT"), nullable=False, index=True
        ),
    )
    start_of_holiday: datetime = Field(sa_type=UTCDateTime)  # ty: ignore[invalid-argument-type]
    end_of_holiday: datetime = Field(sa_type=UTCDateTime)  # ty: ignore[invalid-argument-type]
    status: str = Field(default=HolidayStatus.DRAFT, max_length=50, sa_column_kwargs={"server_default": "DRAFT"})
