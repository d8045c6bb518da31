# app/schemas/customer.py
from typing import Optional

from app.schemas.common import CamelModel


class CustomerCreate(CamelModel):
    customer_id: str
    phone_number: Optional[str] = None
    email: Optional[str] = None
    name: str
