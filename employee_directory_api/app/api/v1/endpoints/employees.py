"""
Employee endpoints for API v1.

Each route is a direct pass‑through to ``EmployeeService``.  Empty
results are answered with ``204 No Content``; upstream failures are
turned into responses by the handlers in ``core.exception_handlers``.
Handlers are plain functions because the upstream client blocks;
FastAPI runs them in its worker thread pool.
"""

import logging
from typing import List, Union

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

from employee_directory_api.app.api.deps import get_employee_service
from employee_directory_api.app.schemas.employee import Employee, EmployeeCreate
from employee_directory_api.app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter()


def _no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=List[Employee])
def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> Union[List[Employee], Response]:
    """Return every employee, or 204 when the directory is empty."""
    logger.info("Fetching all employees")
    employees = service.fetch_all()
    return employees if employees else _no_content()


@router.get("/search/{search_string}", response_model=List[Employee])
def get_employees_by_name_search(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),
) -> Union[List[Employee], Response]:
    """Return employees whose name contains ``search_string`` (case insensitive)."""
    logger.info("Searching all employees whose name contains or matches: %s", search_string)
    matched = service.find_by_name_substring(search_string)
    return matched if matched else _no_content()


@router.get("/highestSalary", response_model=int)
def get_highest_salary_of_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> int:
    logger.info("Fetching highest salary among all employees")
    return service.highest_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=List[str])
def get_top_ten_highest_earning_employee_names(
    service: EmployeeService = Depends(get_employee_service),
) -> Union[List[str], Response]:
    logger.info("Fetching top 10 highest earning employee names")
    names = service.top_ten_earner_names()
    return names if names else _no_content()


# Declared after the fixed paths above so that ``/{employee_id}`` does
# not capture them.
@router.get("/{employee_id}", response_model=Employee)
def get_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> Union[Employee, Response]:
    """Return one employee.

    Answers 204 when upstream succeeded without data; an upstream 404
    is answered with 404 by the exception handlers.
    """
    logger.info("Fetching employee by employeeId: %s", employee_id)
    employee = service.fetch_by_id(employee_id)
    return employee if employee is not None else _no_content()


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> Union[Employee, Response]:
    """Create an employee upstream.

    Upstream returning no data is a failed creation and yields 502.
    """
    logger.info("Creating new employee: %s", employee.name)
    created = service.create(employee)
    if created is None:
        return PlainTextResponse(
            "Upstream service did not return the created employee",
            status_code=status.HTTP_502_BAD_GATEWAY,
        )
    return created


@router.delete("/{employee_id}", response_class=PlainTextResponse)
def delete_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> str:
    logger.info("Deleting employee having employeeId: %s", employee_id)
    return service.delete_by_id(employee_id)
