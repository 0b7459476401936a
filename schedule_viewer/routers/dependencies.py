from datetime import date, datetime
from typing import Optional
from fastapi import Depends, HTTPException
from sqlmodel import Session

from ..application.services.schedule_service import ScheduleService
from ..core.config import settings
from ..db.session import get_session
from ..infrastructure.persistence.sqlalchemy.repositories.appointments_repository_sql import SqlAppointmentsRepository


def get_schedule_service(session: Session = Depends(get_session)) -> ScheduleService:
    return ScheduleService(
        repo=SqlAppointmentsRepository(session),
        config=settings.calendar_config(),
        week_starts_on=settings.WEEK_STARTS_ON,
    )


def parse_date(value: Optional[str]) -> Optional[date]:
    if value is None or value == "":
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date format. Use YYYY-MM-DD")
