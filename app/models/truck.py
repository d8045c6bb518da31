# app/models/truck.py
"""
Fleet tables: trucks plus the two association tables that tie them to
drivers (driverdrivestable) and to order assignments (assignedtable).
"""

from sqlalchemy import Column, String, Float, ForeignKey
from app.database import Base


class Truck(Base):
    __tablename__ = "trucktable"

    plate_number = Column("plateNumber", String(8), primary_key=True)
    model = Column("model", String(30))
    mileage = Column("mileage", Float)
    status = Column("status", String(20))      # opaque, e.g. available | in-service
    parked_at = Column("parkedAt", String(30), ForeignKey("locationtable.coordinate"))

    def __repr__(self):
        return f"<Truck {self.plate_number} {self.model}>"


class DriverDrives(Base):
    __tablename__ = "driverdrivestable"

    plate_number = Column(
        "plateNumber", String(8),
        ForeignKey("trucktable.plateNumber", ondelete="CASCADE"),
        primary_key=True,
    )
    employee_id = Column(
        "employeeId", String(6),
        ForeignKey("drivertable.employeeId", ondelete="CASCADE"),
        primary_key=True,
    )


class Assigned(Base):
    __tablename__ = "assignedtable"

    plate_number = Column(
        "plateNumber", String(8),
        ForeignKey("trucktable.plateNumber", ondelete="CASCADE"),
        primary_key=True,
    )
    employee_id = Column(
        "employeeId", String(6),
        ForeignKey("employeetable.employeeId", ondelete="CASCADE"),
        primary_key=True,
    )
    order_id = Column(
        "orderId", String(6),
        ForeignKey("ordertable.orderId", ondelete="CASCADE"),
        primary_key=True,
    )
