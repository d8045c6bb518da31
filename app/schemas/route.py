# app/schemas/route.py
from typing import Optional

from app.schemas.common import CamelModel


class RouteCreate(CamelModel):
    route_id: str
    origin: str
    destination: str
    distance: Optional[float] = None
