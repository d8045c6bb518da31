# app/services/driver_drives_service.py
"""
driverDrives association: which driver may drive which truck.
Keyed by (plateNumber, employeeId); delete takes both.
"""

from app.models.truck import DriverDrives
from app.services.table_service import TableService


class DriverDrivesService(TableService):
    model = DriverDrives
