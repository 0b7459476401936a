# schedule_viewer/db/models/health/appointment.py
from typing import Optional
from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime
from datetime import datetime


class Appointment(SQLModel, table=True):
    __tablename__ = "appointments"
    id: str = Field(primary_key=True)
    patient_id: str = Field(foreign_key="patients.id", index=True)
    doctor_id: str = Field(foreign_key="doctors.id", index=True)
    type: str
    start_time: datetime = Field(index=True, sa_type=DateTime)  # naive, local wall clock
    end_time: datetime = Field(sa_type=DateTime)
    notes: Optional[str] = None
    status: str = Field(default="scheduled")
