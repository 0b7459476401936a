# schedule_viewer/db/models/health/patient.py
from sqlmodel import SQLModel, Field
from datetime import date


class Patient(SQLModel, table=True):
    __tablename__ = "patients"
    id: str = Field(primary_key=True)
    name: str
    email: str
    phone: str
    date_of_birth: date
