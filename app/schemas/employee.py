# app/schemas/employee.py
from typing import Optional

from app.schemas.common import CamelModel


class EmployeeCreate(CamelModel):
    employee_id: str
    sin: str
    phone_number: Optional[str] = None
    email: Optional[str] = None
    work_location: Optional[str] = None


class DispatcherCreate(CamelModel):
    dispatcher_id: str
    employee_id: str


class DriverCreate(CamelModel):
    employee_id: str
    license_id: str
    hours_driven: Optional[float] = None
