# app/models/route.py
"""
Routes table — an origin/destination pair with a travel distance.
Parent of ordertable; deleting a route cascades to its orders.
"""

from sqlalchemy import Column, String, Float
from app.database import Base


class Route(Base):
    __tablename__ = "routetable"

    route_id = Column("routeId", String(6), primary_key=True)
    origin = Column("origin", String(30), nullable=False)
    destination = Column("destination", String(30), nullable=False)
    distance = Column("distance", Float)

    def __repr__(self):
        return f"<Route {self.route_id} {self.origin} -> {self.destination}>"
