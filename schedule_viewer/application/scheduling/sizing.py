from dataclasses import dataclass
from typing import Union

from ...exceptions import InvalidDuration, InvalidWindow
from ..ports.appointments_repo import AppointmentType
from .slots import CalendarConfig, DEFAULT_CALENDAR_CONFIG


@dataclass(frozen=True)
class CategoryStyle:
    label: str
    color: str  # hex
    css_class: str
    default_duration: int  # minutes


DEFAULT_STYLE = CategoryStyle(label="Other", color="#9ca3af", css_class="bg-gray-400", default_duration=30)

_CATEGORY_STYLES = {
    AppointmentType.CHECKUP: CategoryStyle("General Checkup", "#3b82f6", "bg-blue-500", 30),
    AppointmentType.CONSULTATION: CategoryStyle("Consultation", "#10b981", "bg-green-500", 60),
    AppointmentType.FOLLOW_UP: CategoryStyle("Follow-up", "#f59e0b", "bg-orange-400", 30),
    AppointmentType.PROCEDURE: CategoryStyle("Procedure", "#8b5cf6", "bg-purple-500", 90),
}

if set(_CATEGORY_STYLES) != set(AppointmentType):
    raise RuntimeError("every appointment type needs a style")


def category_style(category: Union[AppointmentType, str]) -> CategoryStyle:
    """Style for a category; raw strings outside the enum get :data:`DEFAULT_STYLE`."""
    try:
        return _CATEGORY_STYLES[AppointmentType(category)]
    except ValueError:
        return DEFAULT_STYLE


def duration_minutes(appointment) -> float:
    minutes = (appointment.end_time - appointment.start_time).total_seconds() / 60
    if minutes < 0:
        raise InvalidDuration(
            f"Appointment {getattr(appointment, 'id', '?')} ends before it starts"
        )
    return minutes


def visual_size(appointment, units_per_slot: float = 40, slot_minutes: int = 30) -> float:
    """Card size proportional to duration: ``duration / slot_minutes * units_per_slot``."""
    if slot_minutes <= 0:
        raise InvalidWindow(f"Slot width {slot_minutes} must be positive")
    return duration_minutes(appointment) / slot_minutes * units_per_slot


def visual_size_for(appointment, config: CalendarConfig = DEFAULT_CALENDAR_CONFIG, compact: bool = False) -> float:
    units = config.compact_units_per_slot if compact else config.units_per_slot
    return visual_size(appointment, units, config.slot_minutes)
