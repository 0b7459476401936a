# schedule_viewer/schemas/schedule/schedule.py
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

from ..appointments.appointment import AppointmentCardResponse
from ..doctors.doctor import DoctorResponse


class TimeSlotResponse(BaseModel):
    start: datetime
    end: datetime
    label: str
    appointments: List[AppointmentCardResponse] = []


class DayScheduleResponse(BaseModel):
    doctor: DoctorResponse
    date: str  # YYYY-MM-DD
    title: str
    slots: List[TimeSlotResponse]
    overlap_groups: List[List[str]]  # appointment ids
    is_empty: bool
    message: Optional[str] = None


class WeekRowResponse(BaseModel):
    label: str
    cells: List[List[AppointmentCardResponse]]


class WeekScheduleResponse(BaseModel):
    doctor: DoctorResponse
    week_start: str  # YYYY-MM-DD
    title: str
    days: List[str]
    rows: List[WeekRowResponse]
    is_empty: bool
    message: Optional[str] = None
