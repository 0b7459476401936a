from datetime import date, datetime

from schedule_viewer.application.ports.appointments_repo import (
    AppointmentDto,
    AppointmentStatus,
    AppointmentType,
    DoctorDto,
    PatientDto,
    Specialty,
    WorkingHours,
)


def at(day: date, hhmm: str) -> datetime:
    hour, minute = (int(p) for p in hhmm.split(":"))
    return datetime(day.year, day.month, day.day, hour, minute)


def appt(id, start, end, doctor_id="doctor-1", patient_id="patient-1", type=AppointmentType.CHECKUP):
    return AppointmentDto(
        id=id,
        patient_id=patient_id,
        doctor_id=doctor_id,
        type=type,
        start_time=start,
        end_time=end,
        status=AppointmentStatus.SCHEDULED,
    )


def doctor(id="doctor-1", name="Sarah Chen"):
    return DoctorDto(
        id=id,
        name=name,
        specialty=Specialty.CARDIOLOGY,
        email=f"{id}@hospital.example",
        phone="(555) 000-0000",
        working_hours={"monday": WorkingHours(start="08:00", end="18:00")},
    )


def patient(id="patient-1", name="John Smith"):
    return PatientDto(id=id, name=name, email=f"{id}@mail.example", phone="(555) 111-1111",
                      date_of_birth=date(1985, 3, 15))


class FakeScheduleRepo:
    def __init__(self, doctors=(), patients=(), appointments=()):
        self.doctors = {d.id: d for d in doctors}
        self.patients = {p.id: p for p in patients}
        self.appts = list(appointments)

    def list_doctors(self):
        return list(self.doctors.values())

    def get_doctor(self, doctor_id):
        return self.doctors.get(doctor_id)

    def get_patient(self, patient_id):
        return self.patients.get(patient_id)

    def list_by_doctor(self, doctor_id):
        return [a for a in self.appts if a.doctor_id == doctor_id]

    def list_all(self):
        return list(self.appts)
