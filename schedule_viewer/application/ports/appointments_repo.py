from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Protocol
from datetime import datetime, date


class AppointmentType(str, Enum):
    CHECKUP = "checkup"
    CONSULTATION = "consultation"
    FOLLOW_UP = "follow-up"
    PROCEDURE = "procedure"


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"


class Specialty(str, Enum):
    CARDIOLOGY = "cardiology"
    PEDIATRICS = "pediatrics"
    GENERAL_PRACTICE = "general-practice"
    ORTHOPEDICS = "orthopedics"
    DERMATOLOGY = "dermatology"


@dataclass(frozen=True)
class WorkingHours:
    start: str  # HH:MM
    end: str  # HH:MM


@dataclass(frozen=True)
class DoctorDto:
    id: str
    name: str
    specialty: Specialty
    email: str
    phone: str
    # keyed by lowercase weekday name, e.g. "monday"
    working_hours: Dict[str, WorkingHours] = field(default_factory=dict)


@dataclass(frozen=True)
class PatientDto:
    id: str
    name: str
    email: str
    phone: str
    date_of_birth: date


@dataclass(frozen=True)
class AppointmentDto:
    id: str
    patient_id: str
    doctor_id: str
    type: AppointmentType
    start_time: datetime
    end_time: datetime
    status: AppointmentStatus
    notes: Optional[str] = None


@dataclass(frozen=True)
class PopulatedAppointmentDto:
    """An appointment joined with its doctor and patient, for display."""

    appointment: AppointmentDto
    doctor: DoctorDto
    patient: PatientDto

    @property
    def id(self) -> str:
        return self.appointment.id

    @property
    def type(self) -> AppointmentType:
        return self.appointment.type

    @property
    def start_time(self) -> datetime:
        return self.appointment.start_time

    @property
    def end_time(self) -> datetime:
        return self.appointment.end_time


class AppointmentsRepository(Protocol):
    def list_doctors(self) -> List[DoctorDto]:
        ...

    def get_doctor(self, doctor_id: str) -> Optional[DoctorDto]:
        ...

    def get_patient(self, patient_id: str) -> Optional[PatientDto]:
        ...

    def list_by_doctor(self, doctor_id: str) -> List[AppointmentDto]:
        ...

    def list_all(self) -> List[AppointmentDto]:
        ...
