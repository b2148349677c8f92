import logging
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text

from holiday_planner.config import get_settings
from holiday_planner.db import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class BookingRules(BaseModel):
    """Scheduling rule parameters the service is running with."""

    lead_time_days: int
    min_gap_days: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded"]
    version: str
    environment: str
    rules: BookingRules


@router.get("/health", response_model=HealthResponse)
async def health(session: SessionDep) -> HealthResponse:
    """Report service status and whether the database answers."""
    settings = get_settings()
    db_status: Literal["ok", "degraded"] = "ok"

    try:
        await session.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Health check: database connectivity failed")
        db_status = "degraded"

    return HealthResponse(
        status=db_status,
        version=settings.app_version,
        environment=settings.environment,
        rules=BookingRules(lead_time_days=settings.lead_time_days, min_gap_days=settings.min_gap_days),
    )
