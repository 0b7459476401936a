from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse


class ScheduleError(ValueError):
    """Base class for errors raised by the scheduling core."""


class InvalidWindow(ScheduleError):
    """Slot window is malformed (end before start, or a width that does not divide an hour)."""


class InvalidDuration(ScheduleError):
    """Appointment ends before it starts."""


class UnresolvedReference(ScheduleError):
    """An appointment points at a doctor or patient that cannot be found."""

    def __init__(self, kind: str, reference_id: str):
        self.kind = kind
        self.reference_id = reference_id
        super().__init__(f"{kind} '{reference_id}' not found")


def create_error_response(error_message: str, status_code: int = 400) -> dict:
    """Create a standardized error response"""
    return {
        "success": False,
        "data": None,
        "error": error_message
    }


def create_success_response(data) -> dict:
    """Create a standardized success response"""
    return {
        "success": True,
        "data": data,
        "error": None
    }


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.detail, exc.status_code)
    )


async def schedule_error_handler(request: Request, exc: ScheduleError) -> JSONResponse:
    status_code = 404 if isinstance(exc, UnresolvedReference) else 400
    return JSONResponse(
        status_code=status_code,
        content=create_error_response(str(exc), status_code)
    )
