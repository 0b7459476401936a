from typing import List, Optional
from fastapi import APIRouter, Depends, Query
import logging

from ..application.services.schedule_service import ScheduleService
from ..schemas.appointments.appointment import AppointmentResponse
from .dependencies import get_schedule_service, parse_date
from .presenters import to_appointment_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.get("/", response_model=List[AppointmentResponse])
def list_appointments(
    doctor_id: Optional[str] = Query(None),
    date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    service: ScheduleService = Depends(get_schedule_service),
):
    day = parse_date(date)
    appts = service.query(doctor_id=doctor_id, day=day)
    logger.info(f"Appointment query doctor={doctor_id} date={day}: {len(appts)} results")
    return [to_appointment_response(a) for a in appts]
