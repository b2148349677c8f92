import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    detail: str | None = None
    status_code: int
    errors: list[str] = []


class AppError(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class FieldValidationError(AppError):
    """Structural problem with a request body, reported as ``<field> <reason>`` strings."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Request validation failed", status_code=status.HTTP_400_BAD_REQUEST)


class MalformedInstantError(AppError):
    def __init__(self) -> None:
        super().__init__("DateTime format is wrong", status_code=status.HTTP_400_BAD_REQUEST)


class HolidayNotFoundError(AppError):
    def __init__(self) -> None:
        super().__init__("Holiday not found", status_code=status.HTTP_404_NOT_FOUND)


class EmployeeNotFoundError(AppError):
    def __init__(self) -> None:
        super().__init__("Employee not found", status_code=status.HTTP_404_NOT_FOUND)


class InvalidHolidayError(AppError):
    """A scheduling rule rejected the holiday. Always a client error."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST)


class InvalidStartDateError(InvalidHolidayError):
    def __init__(self, lead_time_days: int = 5) -> None:
        super().__init__(f"Start of holiday must be at least {lead_time_days} days from today.")


class InvalidOverlapError(InvalidHolidayError):
    def __init__(self) -> None:
        super().__init__("Holidays must not overlap.")


class InvalidGapError(InvalidHolidayError):
    def __init__(self, min_gap_days: int = 3) -> None:
        super().__init__(f"There should be a gap of at least {min_gap_days} working days between holidays")


class InvalidCancellationError(InvalidHolidayError):
    def __init__(self, lead_time_days: int = 5) -> None:
        super().__init__(f"A holiday must be cancelled at least {lead_time_days} working days before the start date.")


def _format_validation_error(error: dict) -> str:
    # loc is ("body", "startOfHoliday") or ("query", "employeeId"); drop the location prefix
    field = ".".join(str(part) for part in error.get("loc", ())[1:]) or "request"
    return f"{field} {error.get('msg', 'is invalid')}"


async def _app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=type(exc).__name__,
            detail=exc.message,
            status_code=exc.status_code,
            errors=getattr(exc, "errors", None) or [exc.message],
        ).model_dump(),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [_format_validation_error(error) for error in exc.errors()]
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            error="ValidationError",
            detail="Request validation failed",
            status_code=status.HTTP_400_BAD_REQUEST,
            errors=errors,
        ).model_dump(),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(AppError, _app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)  # type: ignore[arg-type]
