# app/services/location_service.py
"""Location (depot) table access. Seeded with the depots at the seeded route origins."""

from app.models.location import Location
from app.services.table_service import TableService

LOCATION_SEEDS = [
    {"coordinate": "49.25761407, -123.23615578", "city": "Vancouver", "address": "2329 West Mall",
     "capacity": 20, "trucksParked": 4, "closeTime": "22:00", "openTime": "06:00"},
    {"coordinate": "49.22764848, -123.06627330", "city": "Vancouver", "address": "3200 East 54th Avenue",
     "capacity": 35, "trucksParked": 12, "closeTime": "20:00", "openTime": "05:30"},
    {"coordinate": "43.69039231, -79.28855125", "city": "Toronto", "address": "1 Warden Avenue",
     "capacity": 15, "trucksParked": 3, "closeTime": "23:00", "openTime": "07:00"},
]


class LocationService(TableService):
    model = Location
    seeds = LOCATION_SEEDS
    clock_columns = ("closeTime", "openTime")

    def validate(self, values):
        super().validate(values)
        capacity, parked = values.get("capacity"), values.get("trucksParked")
        if capacity is not None and parked is not None and parked > capacity:
            raise ValueError(f"trucksParked ({parked}) exceeds capacity ({capacity})")
