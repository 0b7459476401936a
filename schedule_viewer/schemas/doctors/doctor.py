# schedule_viewer/schemas/doctors/doctor.py
from pydantic import BaseModel
from typing import Dict


class WorkingHoursResponse(BaseModel):
    start: str  # HH:MM
    end: str  # HH:MM


class DoctorResponse(BaseModel):
    id: str
    name: str
    specialty: str
    email: str
    phone: str
    working_hours: Dict[str, WorkingHoursResponse] = {}
    display_name: str
