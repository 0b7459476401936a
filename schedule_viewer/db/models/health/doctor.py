# schedule_viewer/db/models/health/doctor.py
from sqlmodel import SQLModel, Field


class Doctor(SQLModel, table=True):
    __tablename__ = "doctors"
    id: str = Field(primary_key=True)
    name: str
    specialty: str
    email: str
    phone: str
    # JSON object: {"monday": {"start": "09:00", "end": "17:00"}, ...}
    working_hours: str = Field(default="{}")
