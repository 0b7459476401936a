from typing import List
from fastapi import APIRouter, Depends, HTTPException
import logging

from ..application.services.schedule_service import ScheduleService
from ..schemas.doctors.doctor import DoctorResponse
from .dependencies import get_schedule_service
from .presenters import to_doctor_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/doctors", tags=["Doctors"])


@router.get("/", response_model=List[DoctorResponse])
def get_doctors(service: ScheduleService = Depends(get_schedule_service)):
    return [to_doctor_response(d) for d in service.list_doctors()]


@router.get("/{doctor_id}", response_model=DoctorResponse)
def get_doctor(doctor_id: str, service: ScheduleService = Depends(get_schedule_service)):
    doctor = service.resolve_doctor(doctor_id)
    if not doctor:
        raise HTTPException(status_code=404, detail="Doctor not found")
    return to_doctor_response(doctor)
