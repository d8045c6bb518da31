# app/services/assigned_service.py
"""
assigned association: truck + employee put on an order.
Keyed by (plateNumber, employeeId, orderId).
"""

from app.models.truck import Assigned
from app.services.table_service import TableService


class AssignedService(TableService):
    model = Assigned
