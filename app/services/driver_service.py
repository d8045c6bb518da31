# app/services/driver_service.py
from app.models.employee import Driver
from app.services.table_service import TableService


class DriverService(TableService):
    model = Driver

    def validate(self, values):
        super().validate(values)
        hours = values.get("hoursDriven")
        if hours is not None and hours < 0:
            raise ValueError(f"hoursDriven cannot be negative, got {hours}")
