"""
Scheduling core

Pure functions behind the day and week grids:
- Slot generation and slot membership (slots.py)
- Calendar-day filtering (filters.py)
- Overlap clustering (overlap.py)
- Duration-based sizing and category styles (sizing.py)
"""

from .filters import (
    add_days,
    by_doctor_and_day,
    by_doctor_and_range,
    by_type,
    same_calendar_day,
    sort_by_start,
    start_of_day,
    week_days,
    week_start,
)
from .overlap import group_overlapping
from .sizing import CategoryStyle, DEFAULT_STYLE, category_style, duration_minutes, visual_size, visual_size_for
from .slots import (
    CalendarConfig,
    DEFAULT_CALENDAR_CONFIG,
    TimeSlot,
    appointments_in_day_slot,
    appointments_in_slot,
    generate_slots,
    slots_for,
)
