# schedule_viewer/schemas/appointments/appointment.py
from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class AppointmentResponse(BaseModel):
    id: str
    patient_id: str
    doctor_id: str
    type: str
    start_time: datetime
    end_time: datetime
    status: str
    notes: Optional[str] = None


class AppointmentCardResponse(BaseModel):
    appointment: AppointmentResponse
    patient_name: str
    doctor_name: str
    type_label: str
    color: str
    css_class: str
    default_duration: int
    duration_minutes: float
    size: float
