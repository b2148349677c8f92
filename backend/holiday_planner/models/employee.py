from __future__ import annotations

from sqlmodel import Field, SQLModel

EMPLOYEE_ID_PATTERN = r"^klm[0-9]{6}$"


class Employee(SQLModel, table=True):
    """An airline employee who can book holidays."""

    __tablename__ = "employee"

    id: str = Field(primary_key=True, max_length=9)
    name: str = Field(max_length=255)
