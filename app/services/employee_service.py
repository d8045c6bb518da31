# app/services/employee_service.py
"""Employee table access. Dispatchers and drivers depend on this table."""

from app.models.employee import Employee
from app.services.table_service import TableService


class EmployeeService(TableService):
    model = Employee

    def validate(self, values):
        super().validate(values)
        sin = values.get("sin")
        if sin is not None and not sin.isdigit():
            raise ValueError("sin must contain digits only")
