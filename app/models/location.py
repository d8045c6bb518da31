# app/models/location.py
"""Locations table — depots keyed by "lat, lon" coordinate text."""

from sqlalchemy import Column, Integer, String
from app.database import Base


class Location(Base):
    __tablename__ = "locationtable"

    coordinate = Column("coordinate", String(30), primary_key=True)
    city = Column("city", String(30))
    address = Column("address", String(40), nullable=False)
    capacity = Column("capacity", Integer)
    trucks_parked = Column("trucksParked", Integer)
    close_time = Column("closeTime", String(5))
    open_time = Column("openTime", String(5))

    def __repr__(self):
        return f"<Location {self.coordinate} {self.city}>"
