# app/schemas/truck.py
from typing import Optional

from app.schemas.common import CamelModel


class TruckCreate(CamelModel):
    plate_number: str
    model: Optional[str] = None
    mileage: Optional[float] = None
    status: Optional[str] = None
    parked_at: Optional[str] = None


class DriverDrivesCreate(CamelModel):
    plate_number: str
    employee_id: str


class AssignedCreate(CamelModel):
    plate_number: str
    employee_id: str
    order_id: str
