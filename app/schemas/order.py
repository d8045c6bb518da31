# app/schemas/order.py
from typing import Optional

from app.schemas.common import CamelModel


class OrderCreate(CamelModel):
    order_id: str
    customer_id: str
    weight: Optional[float] = None
    route_id: str
    order_date: Optional[str] = None        # YYYY-MM-DD
    departure_time: Optional[str] = None    # HH:MM
    arrival_time: Optional[str] = None      # HH:MM
    invoice_id: Optional[str] = None
    dispatcher_id: Optional[str] = None
