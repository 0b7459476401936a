"""
Demo data for the schedule viewer.

Appointments are laid out relative to the week of an anchor day so the
demo always has something to show for "this week".
"""

import json
import logging
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple

from sqlmodel import Session, select

from .models import Appointment, Doctor, Patient

logger = logging.getLogger(__name__)

_WEEKDAY_HOURS = {
    day: {"start": "08:00", "end": "18:00"}
    for day in ("monday", "tuesday", "wednesday", "thursday", "friday")
}

DEMO_DOCTORS = [
    Doctor(id="doctor-1", name="Sarah Chen", specialty="cardiology", email="sarah.chen@hospital.example",
           phone="(555) 101-2001", working_hours=json.dumps(_WEEKDAY_HOURS)),
    Doctor(id="doctor-2", name="Michael Rodriguez", specialty="pediatrics", email="m.rodriguez@hospital.example",
           phone="(555) 101-2002", working_hours=json.dumps(_WEEKDAY_HOURS)),
    Doctor(id="doctor-3", name="Emily Johnson", specialty="general-practice", email="e.johnson@hospital.example",
           phone="(555) 101-2003",
           working_hours=json.dumps({**_WEEKDAY_HOURS, "saturday": {"start": "09:00", "end": "13:00"}})),
]

DEMO_PATIENTS = [
    Patient(id="patient-1", name="John Smith", email="john.smith@mail.example", phone="(555) 201-3001",
            date_of_birth=date(1985, 3, 15)),
    Patient(id="patient-2", name="Maria Garcia", email="maria.garcia@mail.example", phone="(555) 201-3002",
            date_of_birth=date(1992, 7, 22)),
    Patient(id="patient-3", name="David Lee", email="david.lee@mail.example", phone="(555) 201-3003",
            date_of_birth=date(1978, 11, 5)),
    Patient(id="patient-4", name="Aisha Patel", email="aisha.patel@mail.example", phone="(555) 201-3004",
            date_of_birth=date(2001, 1, 30)),
    Patient(id="patient-5", name="Tom Becker", email="tom.becker@mail.example", phone="(555) 201-3005",
            date_of_birth=date(2015, 9, 9)),
]

# (doctor, patient, type, weekday offset, start "HH:MM", minutes, notes)
_DEMO_PLAN = [
    ("doctor-1", "patient-1", "checkup", 0, "09:00", 30, None),
    ("doctor-1", "patient-2", "consultation", 0, "10:00", 60, "Chest pain follow-up review"),
    ("doctor-1", "patient-3", "procedure", 0, "13:30", 90, "Stress test"),
    ("doctor-1", "patient-4", "follow-up", 1, "08:30", 30, None),
    ("doctor-1", "patient-1", "consultation", 1, "11:00", 60, None),
    ("doctor-1", "patient-3", "checkup", 1, "11:30", 30, "Double-booked on purpose"),
    ("doctor-1", "patient-2", "follow-up", 3, "15:00", 30, None),
    ("doctor-1", "patient-4", "procedure", 4, "09:00", 90, None),
    ("doctor-2", "patient-5", "checkup", 0, "08:00", 30, "Annual school checkup"),
    ("doctor-2", "patient-5", "follow-up", 2, "16:30", 30, None),
    ("doctor-2", "patient-4", "consultation", 3, "10:00", 60, None),
    ("doctor-3", "patient-1", "checkup", 2, "09:30", 30, None),
    ("doctor-3", "patient-2", "procedure", 2, "14:00", 90, None),
    ("doctor-3", "patient-3", "consultation", 5, "10:00", 60, "Saturday clinic"),
]


def build_demo_appointments(anchor: date) -> List[Appointment]:
    monday = anchor - timedelta(days=anchor.weekday())
    appointments = []
    for index, (doctor_id, patient_id, kind, offset, start, minutes, notes) in enumerate(_DEMO_PLAN, start=1):
        hour, minute = (int(part) for part in start.split(":"))
        start_time = datetime.combine(monday + timedelta(days=offset), time(hour, minute))
        appointments.append(Appointment(
            id=f"appt-{index}",
            patient_id=patient_id,
            doctor_id=doctor_id,
            type=kind,
            start_time=start_time,
            end_time=start_time + timedelta(minutes=minutes),
            notes=notes,
            status="scheduled",
        ))
    return appointments


def build_demo_records(anchor: Optional[date] = None) -> Tuple[List[Doctor], List[Patient], List[Appointment]]:
    anchor = anchor or date.today()
    doctors = [Doctor.model_validate(d.model_dump()) for d in DEMO_DOCTORS]
    patients = [Patient.model_validate(p.model_dump()) for p in DEMO_PATIENTS]
    return doctors, patients, build_demo_appointments(anchor)


def seed_demo_data(session: Session, anchor: Optional[date] = None) -> bool:
    """Load demo records unless the store already has doctors. Returns whether anything was written."""
    if session.exec(select(Doctor)).first():
        logger.info("Demo data already present, skipping seed")
        return False

    doctors, patients, appointments = build_demo_records(anchor)
    session.add_all(doctors)
    session.add_all(patients)
    session.flush()
    session.add_all(appointments)
    session.commit()
    logger.info(f"Seeded {len(doctors)} doctors, {len(patients)} patients, {len(appointments)} appointments")
    return True
