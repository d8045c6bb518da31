# app/services/route_service.py
"""
Route table access. Re-initialising routes drops every table that depends
on them (orders, and the invoices/assignments hanging off orders).
"""

from app.models.route import Route
from app.services.table_service import TableService

ROUTE_SEEDS = [
    {"routeId": "r00001", "origin": "49.25761407, -123.23615578",
     "destination": "49.27048682, -123.15760743", "distance": 10},
    {"routeId": "r00002", "origin": "49.22764848, -123.06627330",
     "destination": "49.13373432, -122.83702854", "distance": 35},
    {"routeId": "r00003", "origin": "43.69039231, -79.28855125",
     "destination": "43.65886249, -79.48819193", "distance": 22},
]


class RouteService(TableService):
    model = Route
    seeds = ROUTE_SEEDS

    def validate(self, values):
        super().validate(values)
        distance = values.get("distance")
        if distance is not None and distance < 0:
            raise ValueError(f"distance cannot be negative, got {distance}")
