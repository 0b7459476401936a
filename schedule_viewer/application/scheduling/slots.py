"""
Slot generation and slot membership.

A display window of a day (e.g. 8 AM to 6 PM) is cut into contiguous,
fixed-width slots. An appointment belongs to every slot it touches; both
boundaries are inclusive, so an appointment ending exactly at 9:30 also
shows up in the 9:30 slot.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import List, Sequence, TypeVar, Union

from ...exceptions import InvalidWindow
from .filters import same_calendar_day

DayLike = Union[date, datetime]
A = TypeVar("A")


@dataclass(frozen=True)
class CalendarConfig:
    start_hour: int = 8
    end_hour: int = 18
    slot_minutes: int = 30
    units_per_slot: float = 40
    compact_units_per_slot: float = 20


DEFAULT_CALENDAR_CONFIG = CalendarConfig()


@dataclass(frozen=True)
class TimeSlot:
    start: datetime
    end: datetime  # exclusive
    label: str


def format_slot_label(moment: datetime) -> str:
    """Render a time the way the grid shows it, e.g. "8:00 AM"."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def validate_window(window_start_hour: int, window_end_hour: int, slot_minutes: int) -> None:
    if not (0 <= window_start_hour <= 24 and 0 <= window_end_hour <= 24):
        raise InvalidWindow(
            f"Window hours must be within [0, 24], got {window_start_hour}-{window_end_hour}"
        )
    if window_end_hour <= window_start_hour:
        raise InvalidWindow(
            f"Window end hour {window_end_hour} must be after start hour {window_start_hour}"
        )
    if slot_minutes <= 0 or 60 % slot_minutes != 0:
        raise InvalidWindow(f"Slot width {slot_minutes} must evenly divide 60 minutes")


def _midnight(reference_day: DayLike) -> datetime:
    if isinstance(reference_day, datetime):
        return datetime.combine(reference_day.date(), time(), tzinfo=reference_day.tzinfo)
    return datetime.combine(reference_day, time())


def generate_slots(
    reference_day: DayLike,
    window_start_hour: int = 8,
    window_end_hour: int = 18,
    slot_minutes: int = 30,
) -> List[TimeSlot]:
    """
    Partition ``[window_start_hour, window_end_hour)`` of ``reference_day``
    into ``slot_minutes``-wide slots.

    The time-of-day part of ``reference_day`` is ignored. Every slot gets
    freshly computed datetimes, so the result never aliases the caller's
    objects.

    Raises:
        InvalidWindow: end hour not after start hour, hours outside [0, 24],
            or a slot width that does not divide 60.
    """
    validate_window(window_start_hour, window_end_hour, slot_minutes)

    window_start = _midnight(reference_day) + timedelta(hours=window_start_hour)
    count = (window_end_hour - window_start_hour) * 60 // slot_minutes
    width = timedelta(minutes=slot_minutes)

    slots = []
    for index in range(count):
        slot_start = window_start + index * width
        slots.append(TimeSlot(start=slot_start, end=slot_start + width, label=format_slot_label(slot_start)))
    return slots


def slots_for(day: DayLike, config: CalendarConfig = DEFAULT_CALENDAR_CONFIG) -> List[TimeSlot]:
    return generate_slots(day, config.start_hour, config.end_hour, config.slot_minutes)


def overlaps_slot(appointment, slot: TimeSlot) -> bool:
    return appointment.start_time <= slot.end and appointment.end_time >= slot.start


def appointments_in_slot(slot: TimeSlot, appointments: Sequence[A]) -> List[A]:
    """Appointments touching ``slot``, boundaries inclusive, in input order."""
    return [appointment for appointment in appointments if overlaps_slot(appointment, slot)]


def appointments_in_day_slot(day: DayLike, slot: TimeSlot, appointments: Sequence[A]) -> List[A]:
    """Like :func:`appointments_in_slot`, restricted to appointments starting on ``day``."""
    return [
        appointment
        for appointment in appointments
        if same_calendar_day(appointment.start_time, day) and overlaps_slot(appointment, slot)
    ]
