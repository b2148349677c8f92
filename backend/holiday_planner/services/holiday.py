from __future__ import annotations

import asyncio
import logging
import re
import uuid
from datetime import UTC
from typing import TYPE_CHECKING

from pydantic import AwareDatetime, TypeAdapter, ValidationError

from holiday_planner.config import get_settings
from holiday_planner.exceptions import (
    FieldValidationError,
    HolidayNotFoundError,
    InvalidHolidayError,
    MalformedInstantError,
)
from holiday_planner.models.enums import HolidayStatus
from holiday_planner.models.holiday import Holiday
from holiday_planner.schemas.holiday import HolidayResponse
from holiday_planner.services import validation

if TYPE_CHECKING:
    from datetime import datetime

    from holiday_planner.schemas.holiday import HolidayPayload
    from holiday_planner.services.clock import Clock
    from holiday_planner.services.store import HolidayStore

logger = logging.getLogger(__name__)

_instant_adapter: TypeAdapter[AwareDatetime] = TypeAdapter(AwareDatetime)

# Strict ISO-8601 instant; the adapter alone would also take Unix timestamps,
# a space separator and lowercase t/z.
_INSTANT_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:\d{2})")

# Serializes check-then-write within this process. Separate worker processes
# can still interleave and both pass the overlap check on a stale snapshot.
_booking_lock: asyncio.Lock | None = None
_booking_lock_loop: asyncio.AbstractEventLoop | None = None


def _get_booking_lock() -> asyncio.Lock:
    """Return the booking lock for the running event loop, creating it on first use."""
    global _booking_lock, _booking_lock_loop
    loop = asyncio.get_running_loop()
    if _booking_lock is None or _booking_lock_loop is not loop:
        _booking_lock = asyncio.Lock()
        _booking_lock_loop = loop
    return _booking_lock


# ---------------------------------------------------------------------------
# Wire mapping
# ---------------------------------------------------------------------------


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 instant with an explicit offset into an aware UTC datetime."""
    if _INSTANT_PATTERN.fullmatch(value) is None:
        raise MalformedInstantError
    try:
        return _instant_adapter.validate_python(value).astimezone(UTC)
    except (ValidationError, OverflowError):
        # OverflowError: the UTC equivalent falls outside year 1..9999
        raise MalformedInstantError from None


def format_instant(value: datetime) -> str:
    """Render an instant as ``YYYY-MM-DDTHH:MM:SSZ``, with ``.ffffff`` only for non-zero microseconds."""
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _build_holiday_response(holiday: Holiday) -> HolidayResponse:
    return HolidayResponse(
        holiday_id=holiday.id,
        holiday_label=holiday.label,
        employee_id=holiday.employee_id,
        start_of_holiday=format_instant(holiday.start_of_holiday),
        end_of_holiday=format_instant(holiday.end_of_holiday),
        status=HolidayStatus(holiday.status),
    )


def _parse_range(payload: HolidayPayload) -> tuple[datetime, datetime]:
    start = parse_instant(payload.start_of_holiday)
    end = parse_instant(payload.end_of_holiday)
    if end <= start:
        raise FieldValidationError(["endOfHoliday must be after startOfHoliday"])
    return start, end


# ---------------------------------------------------------------------------
# Rule evaluation
# ---------------------------------------------------------------------------


async def _validate_booking(
    store: HolidayStore,
    clock: Clock,
    employee_id: str,
    start: datetime,
    end: datetime,
    exclude_holiday_id: uuid.UUID | None = None,
) -> None:
    """Run lead-time, overlap and gap rules in that order. Raises on the first violation.

    ``exclude_holiday_id`` keeps an updated holiday from colliding with its own
    previous version.
    """
    settings = get_settings()

    validation.check_start_date(start, clock.now(), settings.lead_time_days)

    # Overlap is global on purpose: no two bookings may share an instant,
    # whoever owns them. Gap is per employee.
    others = [h for h in await store.find_all() if h.id != exclude_holiday_id]
    validation.check_overlap(start, end, others)

    own = [h for h in await store.find_by_employee(employee_id) if h.id != exclude_holiday_id]
    validation.check_gap(start, end, own, settings.min_gap_days)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def list_holidays(store: HolidayStore, employee_id: str) -> list[HolidayResponse]:
    """List an employee's holidays in store order."""
    holidays = await store.find_by_employee(employee_id)
    return [_build_holiday_response(h) for h in holidays]


async def get_holiday(store: HolidayStore, holiday_id: uuid.UUID) -> HolidayResponse:
    """Get a single holiday or raise 404."""
    holiday = await store.find_by_id(holiday_id)
    if holiday is None:
        raise HolidayNotFoundError
    return _build_holiday_response(holiday)


async def create_holiday(store: HolidayStore, clock: Clock, payload: HolidayPayload) -> HolidayResponse:
    """Validate and book a new holiday. Any ``holidayId`` in the payload is ignored."""
    start, end = _parse_range(payload)

    async with _get_booking_lock():
        try:
            await _validate_booking(store, clock, payload.employee_id, start, end)
        except InvalidHolidayError as exc:
            logger.info("Rejected holiday for %s: %s", payload.employee_id, type(exc).__name__)
            raise

        holiday = await store.save(
            Holiday(
                id=uuid.uuid4(),
                label=payload.holiday_label,
                employee_id=payload.employee_id,
                start_of_holiday=start,
                end_of_holiday=end,
                status=payload.status.value,
            )
        )

    logger.info("Created holiday %s for %s", holiday.id, holiday.employee_id)
    return _build_holiday_response(holiday)


async def update_holiday(store: HolidayStore, clock: Clock, payload: HolidayPayload) -> HolidayResponse:
    """Re-validate and fully overwrite an existing holiday."""
    if payload.holiday_id is None:
        raise FieldValidationError(["holidayId must not be null"])
    start, end = _parse_range(payload)

    async with _get_booking_lock():
        if await store.find_by_id(payload.holiday_id) is None:
            raise HolidayNotFoundError

        try:
            await _validate_booking(
                store, clock, payload.employee_id, start, end, exclude_holiday_id=payload.holiday_id
            )
        except InvalidHolidayError as exc:
            logger.info("Rejected update of holiday %s: %s", payload.holiday_id, type(exc).__name__)
            raise

        holiday = await store.save(
            Holiday(
                id=payload.holiday_id,
                label=payload.holiday_label,
                employee_id=payload.employee_id,
                start_of_holiday=start,
                end_of_holiday=end,
                status=payload.status.value,
            )
        )

    logger.info("Updated holiday %s", holiday.id)
    return _build_holiday_response(holiday)


async def cancel_holiday(store: HolidayStore, clock: Clock, holiday_id: uuid.UUID) -> None:
    """Delete a holiday that is still outside the cancellation lead time."""
    async with _get_booking_lock():
        holiday = await store.find_by_id(holiday_id)
        if holiday is None:
            raise HolidayNotFoundError

        try:
            validation.check_cancellation(holiday, clock.now(), get_settings().lead_time_days)
        except InvalidHolidayError:
            logger.info("Rejected cancellation of holiday %s: too close to start", holiday_id)
            raise

        if not await store.delete_by_id(holiday_id):
            raise HolidayNotFoundError

    logger.info("Cancelled holiday %s", holiday_id)
