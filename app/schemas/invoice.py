# app/schemas/invoice.py
from typing import Optional

from app.schemas.common import CamelModel


class InvoiceCreate(CamelModel):
    invoice_id: str
    issue_date: Optional[str] = None   # YYYY-MM-DD
    status: Optional[str] = None
    order_id: Optional[str] = None
