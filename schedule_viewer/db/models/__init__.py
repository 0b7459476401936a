# Models package (re-export feature modules for stable imports)
from .health.appointment import Appointment
from .health.doctor import Doctor
from .health.patient import Patient

__all__ = [
    "Appointment",
    "Doctor",
    "Patient",
]
