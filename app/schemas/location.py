# app/schemas/location.py
from typing import Optional

from app.schemas.common import CamelModel


class LocationCreate(CamelModel):
    coordinate: str
    city: Optional[str] = None
    address: str
    capacity: Optional[int] = None
    trucks_parked: Optional[int] = None
    close_time: Optional[str] = None
    open_time: Optional[str] = None
