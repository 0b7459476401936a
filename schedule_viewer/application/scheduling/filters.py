"""
Calendar-day filtering.

Day keys are taken from the timestamp's own (year, month, day) fields, with
no UTC conversion, so an appointment at 23:30 local time never drifts into
the next day.
"""

from datetime import date, datetime, timedelta
from typing import List, Sequence, Tuple, TypeVar, Union

DayLike = Union[date, datetime]
A = TypeVar("A")


def calendar_day_key(moment: DayLike) -> Tuple[int, int, int]:
    return (moment.year, moment.month, moment.day)


def same_calendar_day(first: DayLike, second: DayLike) -> bool:
    return calendar_day_key(first) == calendar_day_key(second)


def start_of_day(moment: DayLike) -> date:
    return date(moment.year, moment.month, moment.day)


def add_days(day: DayLike, days: int) -> date:
    return start_of_day(day) + timedelta(days=days)


def week_start(day: DayLike, week_starts_on: int = 0) -> date:
    """First day of the week containing ``day``; ``week_starts_on`` uses Monday=0."""
    current = start_of_day(day)
    return current - timedelta(days=(current.weekday() - week_starts_on) % 7)


def week_days(start: DayLike) -> List[date]:
    return [add_days(start, offset) for offset in range(7)]


def by_doctor_and_day(doctor_id: str, day: DayLike, appointments: Sequence[A]) -> List[A]:
    target = calendar_day_key(day)
    return [
        appointment
        for appointment in appointments
        if appointment.doctor_id == doctor_id and calendar_day_key(appointment.start_time) == target
    ]


def by_doctor_and_range(doctor_id: str, start_day: DayLike, end_day: DayLike, appointments: Sequence[A]) -> List[A]:
    """Appointments whose start day falls in ``[start_day, end_day)``."""
    lower = start_of_day(start_day)
    upper = start_of_day(end_day)
    return [
        appointment
        for appointment in appointments
        if appointment.doctor_id == doctor_id and lower <= start_of_day(appointment.start_time) < upper
    ]


def by_type(category: str, appointments: Sequence[A]) -> List[A]:
    return [appointment for appointment in appointments if appointment.type == category]


def sort_by_start(appointments: Sequence[A]) -> List[A]:
    return sorted(appointments, key=lambda appointment: appointment.start_time)
