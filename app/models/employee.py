# app/models/employee.py
"""
Staff tables. Every dispatcher and driver is an employee first;
removing the employee removes the role row with it.
"""

from sqlalchemy import Column, String, Float, ForeignKey
from app.database import Base


class Employee(Base):
    __tablename__ = "employeetable"

    employee_id = Column("employeeId", String(6), primary_key=True)
    sin = Column("sin", String(9), unique=True, nullable=False)
    phone_number = Column("phoneNumber", String(15))
    email = Column("email", String(40))
    work_location = Column("workLocation", String(30), ForeignKey("locationtable.coordinate"))

    def __repr__(self):
        return f"<Employee {self.employee_id}>"


class Dispatcher(Base):
    __tablename__ = "dispatchertable"

    dispatcher_id = Column("dispatcherId", String(6), primary_key=True)
    employee_id = Column(
        "employeeId", String(6),
        ForeignKey("employeetable.employeeId", ondelete="CASCADE"),
        unique=True, nullable=False,
    )

    def __repr__(self):
        return f"<Dispatcher {self.dispatcher_id} employee={self.employee_id}>"


class Driver(Base):
    __tablename__ = "drivertable"

    employee_id = Column(
        "employeeId", String(6),
        ForeignKey("employeetable.employeeId", ondelete="CASCADE"),
        primary_key=True,
    )
    license_id = Column("licenseId", String(15), unique=True, nullable=False)
    hours_driven = Column("hoursDriven", Float)

    def __repr__(self):
        return f"<Driver {self.employee_id} license={self.license_id}>"
