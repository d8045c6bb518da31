# app/services/truck_service.py
from app.models.truck import Truck
from app.services.table_service import TableService


class TruckService(TableService):
    model = Truck

    def validate(self, values):
        super().validate(values)
        mileage = values.get("mileage")
        if mileage is not None and mileage < 0:
            raise ValueError(f"mileage cannot be negative, got {mileage}")
