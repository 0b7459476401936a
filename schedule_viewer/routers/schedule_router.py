from datetime import date as date_type
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from ..application.services.schedule_service import ScheduleService
from ..schemas.schedule.schedule import DayScheduleResponse, WeekScheduleResponse
from .dependencies import get_schedule_service, parse_date
from .presenters import to_day_response, to_week_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedule", tags=["Schedule"])


@router.get("/day", response_model=DayScheduleResponse)
def get_day_schedule(
    doctor_id: str = Query(...),
    date: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to today"),
    service: ScheduleService = Depends(get_schedule_service),
):
    day = parse_date(date) or date_type.today()
    view = service.day_view(doctor_id, day)
    if view is None:
        raise HTTPException(status_code=404, detail="Doctor not found")
    return to_day_response(view)


@router.get("/week", response_model=WeekScheduleResponse)
def get_week_schedule(
    doctor_id: str = Query(...),
    date: Optional[str] = Query(None, description="Any day of the week, YYYY-MM-DD, defaults to today"),
    service: ScheduleService = Depends(get_schedule_service),
):
    day = parse_date(date) or date_type.today()
    view = service.week_view(doctor_id, day)
    if view is None:
        raise HTTPException(status_code=404, detail="Doctor not found")
    return to_week_response(view)
