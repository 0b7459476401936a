import json
import logging
from typing import List, Optional
from sqlmodel import Session, select

from .....db.models import Appointment, Doctor, Patient
from .....application.ports.appointments_repo import (
    AppointmentsRepository,
    AppointmentDto,
    AppointmentStatus,
    AppointmentType,
    DoctorDto,
    PatientDto,
    Specialty,
    WorkingHours,
)

logger = logging.getLogger(__name__)


class SqlAppointmentsRepository(AppointmentsRepository):
    """Read-only access to doctors, patients and appointments."""

    def __init__(self, session: Session):
        self.session = session

    def _doctor_to_dto(self, d: Doctor) -> Optional[DoctorDto]:
        try:
            specialty = Specialty(d.specialty)
        except ValueError:
            logger.warning(f"Skipping doctor {d.id}: unknown specialty '{d.specialty}'")
            return None
        try:
            raw_hours = json.loads(d.working_hours or "{}")
        except json.JSONDecodeError:
            logger.warning(f"Doctor {d.id} has malformed working hours, ignoring them")
            raw_hours = {}
        return DoctorDto(
            id=d.id,
            name=d.name,
            specialty=specialty,
            email=d.email,
            phone=d.phone,
            working_hours={day: WorkingHours(start=h["start"], end=h["end"]) for day, h in raw_hours.items()},
        )

    def _patient_to_dto(self, p: Patient) -> PatientDto:
        return PatientDto(
            id=p.id,
            name=p.name,
            email=p.email,
            phone=p.phone,
            date_of_birth=p.date_of_birth,
        )

    def _appt_to_dto(self, a: Appointment) -> Optional[AppointmentDto]:
        try:
            kind = AppointmentType(a.type)
            status = AppointmentStatus(a.status)
        except ValueError:
            logger.warning(f"Skipping appointment {a.id}: unknown type '{a.type}' or status '{a.status}'")
            return None
        return AppointmentDto(
            id=a.id,
            patient_id=a.patient_id,
            doctor_id=a.doctor_id,
            type=kind,
            start_time=a.start_time,
            end_time=a.end_time,
            status=status,
            notes=a.notes,
        )

    def list_doctors(self) -> List[DoctorDto]:
        rows = self.session.exec(select(Doctor).order_by(Doctor.name)).all()
        return [dto for dto in map(self._doctor_to_dto, rows) if dto is not None]

    def get_doctor(self, doctor_id: str) -> Optional[DoctorDto]:
        d = self.session.exec(select(Doctor).where(Doctor.id == doctor_id)).first()
        return self._doctor_to_dto(d) if d else None

    def get_patient(self, patient_id: str) -> Optional[PatientDto]:
        p = self.session.exec(select(Patient).where(Patient.id == patient_id)).first()
        return self._patient_to_dto(p) if p else None

    def list_by_doctor(self, doctor_id: str) -> List[AppointmentDto]:
        rows = self.session.exec(
            select(Appointment)
            .where(Appointment.doctor_id == doctor_id)
            .order_by(Appointment.start_time)
        ).all()
        return [dto for dto in map(self._appt_to_dto, rows) if dto is not None]

    def list_all(self) -> List[AppointmentDto]:
        rows = self.session.exec(select(Appointment).order_by(Appointment.start_time)).all()
        return [dto for dto in map(self._appt_to_dto, rows) if dto is not None]
