# app/services/order_service.py
"""
Order table access plus the reporting queries behind the order screens:
  - join with route + origin depot, filtered by minimum route distance
  - projection of caller-chosen columns
  - order count per customer
  - earliest departure per busy date (HAVING)
  - orders at or above their date's average weight (correlated subquery)

Orders reference customers and routes, so both tables must exist (and hold the
referenced rows) before initialize() can insert the seed orders.
"""

from typing import List, Sequence

from sqlalchemy import desc, func, select

from app.models.location import Location
from app.models.order import Order
from app.models.route import Route
from app.services.query_filters import InvalidQueryError, resolve_columns
from app.services.table_service import TableService


ORDER_SEEDS = [
    {"orderId": "o00001", "customerId": "c00001", "weight": 150, "routeId": "r00002",
     "orderDate": "2025-04-22", "departureTime": "06:00", "arrivalTime": "12:22"},
    {"orderId": "o00002", "customerId": "c00002", "weight": 100, "routeId": "r00001",
     "orderDate": "2025-03-29", "departureTime": "16:00", "arrivalTime": None},
    {"orderId": "o00003", "customerId": "c00001", "weight": 300, "routeId": "r00001",
     "orderDate": "2025-04-01", "departureTime": "10:00", "arrivalTime": "22:00"},
]


class OrderService(TableService):
    model = Order
    seeds = ORDER_SEEDS
    clock_columns = ("departureTime", "arrivalTime")

    def validate(self, values):
        super().validate(values)
        weight = values.get("weight")
        if weight is not None and weight < 0:
            raise ValueError(f"weight cannot be negative, got {weight}")

    def join_route_location(self, min_distance: float = 0) -> List[list]:
        """Orders with their route and origin depot, for routes at least min_distance long."""
        try:
            min_distance = float(min_distance)
        except (TypeError, ValueError):
            raise InvalidQueryError(f"minDistance must be a number, got '{min_distance}'")

        o, r, loc = self.table, Route.__table__, Location.__table__
        stmt = (
            select(
                o.c.orderId, o.c.customerId, o.c.orderDate,
                r.c.routeId, r.c.origin, r.c.destination, r.c.distance,
                loc.c.city, loc.c.address,
            )
            .select_from(
                o.join(r, o.c.routeId == r.c.routeId)
                 .join(loc, r.c.origin == loc.c.coordinate)
            )
            .where(r.c.distance >= min_distance)
            .order_by(o.c.orderId)
        )
        return self._fetch(stmt, "join")

    def project(self, columns: Sequence[str]) -> List[list]:
        """Selected columns only, in the order given. Unknown names raise InvalidQueryError."""
        selected = resolve_columns(self.table, list(columns))
        stmt = select(*selected).order_by(*self.key_columns)
        return self._fetch(stmt, "project")

    def count_by_customer(self) -> List[list]:
        """[customerId, orderCount] rows, busiest customer first."""
        o = self.table
        order_count = func.count().label("orderCount")
        stmt = (
            select(o.c.customerId, order_count)
            .group_by(o.c.customerId)
            .order_by(desc(order_count), o.c.customerId)
        )
        return self._fetch(stmt, "count by customer")

    def earliest_departure_per_date(self) -> List[list]:
        """[orderDate, earliest departureTime] for dates with more than one order."""
        o = self.table
        stmt = (
            select(o.c.orderDate, func.min(o.c.departureTime).label("earliestDeparture"))
            .group_by(o.c.orderDate)
            .having(func.count() > 1)
            .order_by(o.c.orderDate)
        )
        return self._fetch(stmt, "earliest departure")

    def above_average_weight(self) -> List[list]:
        """Orders weighing at least the average of all orders placed on the same date."""
        o = self.table
        peer = self.table.alias("peer")
        date_average = (
            select(func.avg(peer.c.weight))
            .where(peer.c.orderDate == o.c.orderDate)
            .scalar_subquery()
        )
        stmt = (
            select(*o.columns)
            .where(o.c.weight >= date_average)
            .order_by(o.c.orderDate, o.c.orderId)
        )
        return self._fetch(stmt, "above average weight")
