from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional
import logging

from ...exceptions import UnresolvedReference
from ..ports.appointments_repo import (
    AppointmentDto,
    AppointmentsRepository,
    DoctorDto,
    PatientDto,
    PopulatedAppointmentDto,
)
from ..scheduling.filters import (
    DayLike,
    add_days,
    by_doctor_and_day,
    by_doctor_and_range,
    by_type,
    calendar_day_key,
    sort_by_start,
    start_of_day,
    week_days,
    week_start,
)
from ..scheduling.overlap import group_overlapping
from ..scheduling.sizing import CategoryStyle, category_style, duration_minutes, visual_size_for
from ..scheduling.slots import (
    CalendarConfig,
    DEFAULT_CALENDAR_CONFIG,
    TimeSlot,
    appointments_in_day_slot,
    appointments_in_slot,
    slots_for,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppointmentCard:
    appointment: PopulatedAppointmentDto
    duration_minutes: float
    size: float
    style: CategoryStyle


@dataclass(frozen=True)
class SlotRow:
    slot: TimeSlot
    cards: List[AppointmentCard]


@dataclass(frozen=True)
class DaySchedule:
    doctor: DoctorDto
    day: date
    rows: List[SlotRow]
    appointments: List[PopulatedAppointmentDto]
    overlap_groups: List[List[PopulatedAppointmentDto]]

    @property
    def is_empty(self) -> bool:
        return not self.appointments


@dataclass(frozen=True)
class WeekRow:
    label: str
    # one list of cards per day column
    cells: List[List[AppointmentCard]]


@dataclass(frozen=True)
class WeekSchedule:
    doctor: DoctorDto
    week_start: date
    days: List[date]
    rows: List[WeekRow]
    appointments: List[PopulatedAppointmentDto] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.appointments


@dataclass
class ScheduleService:
    repo: AppointmentsRepository
    config: CalendarConfig = DEFAULT_CALENDAR_CONFIG
    week_starts_on: int = 0

    def list_doctors(self) -> List[DoctorDto]:
        return self.repo.list_doctors()

    def resolve_doctor(self, doctor_id: str) -> Optional[DoctorDto]:
        return self.repo.get_doctor(doctor_id)

    def resolve_patient(self, patient_id: str) -> Optional[PatientDto]:
        return self.repo.get_patient(patient_id)

    def list_by_doctor(self, doctor_id: str) -> List[AppointmentDto]:
        return list(self.repo.list_by_doctor(doctor_id))

    def list_by_doctor_and_day(self, doctor_id: str, day: DayLike) -> List[AppointmentDto]:
        return by_doctor_and_day(doctor_id, day, self.repo.list_by_doctor(doctor_id))

    def list_by_doctor_and_range(self, doctor_id: str, start_day: DayLike, end_day: DayLike) -> List[AppointmentDto]:
        return by_doctor_and_range(doctor_id, start_day, end_day, self.repo.list_by_doctor(doctor_id))

    def list_for_week(self, doctor_id: str, day: DayLike) -> List[AppointmentDto]:
        first = week_start(day, self.week_starts_on)
        return self.list_by_doctor_and_range(doctor_id, first, add_days(first, 7))

    def list_by_type(self, category: str) -> List[AppointmentDto]:
        return by_type(category, self.repo.list_all())

    def query(self, doctor_id: Optional[str] = None, day: Optional[DayLike] = None) -> List[AppointmentDto]:
        """Flat lookup by optional doctor and optional single day."""
        appointments = self.repo.list_by_doctor(doctor_id) if doctor_id else self.repo.list_all()
        if day is not None:
            target = calendar_day_key(day)
            appointments = [a for a in appointments if calendar_day_key(a.start_time) == target]
        return sort_by_start(appointments)

    def enrich(self, appointment: AppointmentDto) -> Optional[PopulatedAppointmentDto]:
        doctor = self.resolve_doctor(appointment.doctor_id)
        patient = self.resolve_patient(appointment.patient_id)
        if not doctor or not patient:
            return None
        return PopulatedAppointmentDto(appointment=appointment, doctor=doctor, patient=patient)

    def require_enriched(self, appointment: AppointmentDto) -> PopulatedAppointmentDto:
        doctor = self.resolve_doctor(appointment.doctor_id)
        if not doctor:
            raise UnresolvedReference("doctor", appointment.doctor_id)
        patient = self.resolve_patient(appointment.patient_id)
        if not patient:
            raise UnresolvedReference("patient", appointment.patient_id)
        return PopulatedAppointmentDto(appointment=appointment, doctor=doctor, patient=patient)

    def enrich_all(self, appointments: List[AppointmentDto]) -> List[PopulatedAppointmentDto]:
        populated = []
        for appointment in appointments:
            if appointment.end_time < appointment.start_time:
                logger.warning(f"Skipping appointment {appointment.id}: ends before it starts")
                continue
            item = self.enrich(appointment)
            if item is None:
                logger.warning(f"Skipping appointment {appointment.id}: unresolved doctor or patient")
                continue
            populated.append(item)
        return populated

    def slots_for(self, day: DayLike, config: Optional[CalendarConfig] = None) -> List[TimeSlot]:
        return slots_for(day, config or self.config)

    def _card(self, appointment: PopulatedAppointmentDto, config: CalendarConfig, compact: bool) -> AppointmentCard:
        return AppointmentCard(
            appointment=appointment,
            duration_minutes=duration_minutes(appointment),
            size=visual_size_for(appointment, config, compact=compact),
            style=category_style(appointment.type),
        )

    def day_view(self, doctor_id: str, day: DayLike, config: Optional[CalendarConfig] = None) -> Optional[DaySchedule]:
        """Slot rows for one doctor and day, or ``None`` when the doctor is unknown."""
        config = config or self.config
        doctor = self.resolve_doctor(doctor_id)
        if not doctor:
            logger.info(f"Day view requested for unknown doctor {doctor_id}")
            return None

        appointments = sort_by_start(self.enrich_all(self.list_by_doctor_and_day(doctor_id, day)))
        rows = [
            SlotRow(slot=slot, cards=[self._card(a, config, compact=False) for a in appointments_in_slot(slot, appointments)])
            for slot in self.slots_for(day, config)
        ]
        logger.debug(f"Day view for doctor {doctor_id} on {start_of_day(day)}: {len(appointments)} appointments")
        return DaySchedule(
            doctor=doctor,
            day=start_of_day(day),
            rows=rows,
            appointments=appointments,
            overlap_groups=group_overlapping(appointments),
        )

    def week_view(self, doctor_id: str, day: DayLike, config: Optional[CalendarConfig] = None) -> Optional[WeekSchedule]:
        """Week grid containing ``day``: one row per slot, one column per day."""
        config = config or self.config
        doctor = self.resolve_doctor(doctor_id)
        if not doctor:
            logger.info(f"Week view requested for unknown doctor {doctor_id}")
            return None

        first = week_start(day, self.week_starts_on)
        days = week_days(first)
        appointments = sort_by_start(self.enrich_all(self.list_for_week(doctor_id, first)))
        slots_by_day = [self.slots_for(d, config) for d in days]

        rows = []
        for index, slot in enumerate(slots_by_day[0]):
            cells = [
                [
                    self._card(a, config, compact=True)
                    for a in appointments_in_day_slot(d, slots_by_day[column][index], appointments)
                ]
                for column, d in enumerate(days)
            ]
            rows.append(WeekRow(label=slot.label, cells=cells))

        logger.debug(f"Week view for doctor {doctor_id} from {first}: {len(appointments)} appointments")
        return WeekSchedule(doctor=doctor, week_start=first, days=days, rows=rows, appointments=appointments)
