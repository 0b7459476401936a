# Routers package
from . import appointments_router
from . import doctors_router
from . import schedule_router

__all__ = [
    "appointments_router",
    "doctors_router",
    "schedule_router",
]
