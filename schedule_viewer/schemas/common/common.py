# schedule_viewer/schemas/common/common.py
from pydantic import BaseModel
from typing import Optional


class ErrorResponse(BaseModel):
    success: bool = False
    data: Optional[dict] = None
    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    timestamp: str
    database_ok: bool
    database_error: Optional[str] = None
