# app/services/invoice_service.py
from app.models.invoice import Invoice
from app.services.table_service import TableService


class InvoiceService(TableService):
    """Invoices. status is free text; no transition rules are enforced."""

    model = Invoice
