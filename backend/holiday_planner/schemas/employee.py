from __future__ import annotations

from pydantic import BaseModel, Field


class UpsertEmployeeRequest(BaseModel):
    """Request body for creating or renaming an employee."""

    name: str = Field(min_length=1, max_length=255)


class EmployeeResponse(BaseModel):
    """Response schema for an employee."""

    id: str
    name: str


class EmployeeListResponse(BaseModel):
    """List of employees."""

    items: list[EmployeeResponse]
    total: int
