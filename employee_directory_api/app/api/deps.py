"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from ..services.employee_service import EmployeeService


def get_employee_service(request: Request) -> EmployeeService:
    """Return the directory service built at application start-up."""
    return request.app.state.employee_service
