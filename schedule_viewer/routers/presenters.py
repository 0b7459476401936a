"""Converters from service results to response schemas."""

from datetime import date

from ..application.ports.appointments_repo import AppointmentDto, DoctorDto
from ..application.services.schedule_service import AppointmentCard, DaySchedule, WeekSchedule
from ..schemas.appointments.appointment import AppointmentCardResponse, AppointmentResponse
from ..schemas.doctors.doctor import DoctorResponse, WorkingHoursResponse
from ..schemas.schedule.schedule import (
    DayScheduleResponse,
    TimeSlotResponse,
    WeekRowResponse,
    WeekScheduleResponse,
)


def _ordinal(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    return f"{n}{({1: 'st', 2: 'nd', 3: 'rd'}).get(n % 10, 'th')}"


def day_title(day: date) -> str:
    """e.g. "Monday, October 14th, 2024"."""
    return f"{day.strftime('%A, %B')} {_ordinal(day.day)}, {day.year}"


def week_title(first: date, last: date) -> str:
    """e.g. "Oct 14 - Oct 20, 2024"."""
    return f"{first.strftime('%b')} {first.day} - {last.strftime('%b')} {last.day}, {last.year}"


def to_doctor_response(d: DoctorDto) -> DoctorResponse:
    return DoctorResponse(
        id=d.id,
        name=d.name,
        specialty=d.specialty.value,
        email=d.email,
        phone=d.phone,
        working_hours={day: WorkingHoursResponse(start=h.start, end=h.end) for day, h in d.working_hours.items()},
        display_name=f"Dr. {d.name} - {d.specialty.value}",
    )


def to_appointment_response(a: AppointmentDto) -> AppointmentResponse:
    return AppointmentResponse(
        id=a.id,
        patient_id=a.patient_id,
        doctor_id=a.doctor_id,
        type=a.type.value,
        start_time=a.start_time,
        end_time=a.end_time,
        status=a.status.value,
        notes=a.notes,
    )


def to_card_response(card: AppointmentCard) -> AppointmentCardResponse:
    return AppointmentCardResponse(
        appointment=to_appointment_response(card.appointment.appointment),
        patient_name=card.appointment.patient.name,
        doctor_name=card.appointment.doctor.name,
        type_label=card.style.label,
        color=card.style.color,
        css_class=card.style.css_class,
        default_duration=card.style.default_duration,
        duration_minutes=card.duration_minutes,
        size=card.size,
    )


def to_day_response(view: DaySchedule) -> DayScheduleResponse:
    return DayScheduleResponse(
        doctor=to_doctor_response(view.doctor),
        date=view.day.isoformat(),
        title=day_title(view.day),
        slots=[
            TimeSlotResponse(
                start=row.slot.start,
                end=row.slot.end,
                label=row.slot.label,
                appointments=[to_card_response(c) for c in row.cards],
            )
            for row in view.rows
        ],
        overlap_groups=[[a.id for a in group] for group in view.overlap_groups],
        is_empty=view.is_empty,
        message="No appointments scheduled for this day" if view.is_empty else None,
    )


def to_week_response(view: WeekSchedule) -> WeekScheduleResponse:
    return WeekScheduleResponse(
        doctor=to_doctor_response(view.doctor),
        week_start=view.week_start.isoformat(),
        title=week_title(view.days[0], view.days[-1]),
        days=[d.isoformat() for d in view.days],
        rows=[
            WeekRowResponse(label=row.label, cells=[[to_card_response(c) for c in cell] for cell in row.cells])
            for row in view.rows
        ],
        is_empty=view.is_empty,
        message="No appointments scheduled for this week" if view.is_empty else None,
    )
