"""
Business logic for the employee directory.

``EmployeeService`` owns no data.  Every read re-lists the directory
from upstream, so searches and aggregates always reflect upstream's
current state and cost one full list call each; nothing is cached or
shared between requests.  Upstream failures propagate unchanged.
"""

import logging
from typing import List, Optional

from ..schemas.employee import Employee, EmployeeCreate
from .envelope_codec import decode_many, decode_one
from .top_k import top_k
from .upstream_client import EmployeeUpstreamClient


logger = logging.getLogger(__name__)

TOP_EARNERS_LIMIT = 10
DELETE_CONFIRMATION = "Employee deleted successfully"


class EmployeeService:
    """Employee directory operations backed by the upstream service."""

    def __init__(self, client: EmployeeUpstreamClient) -> None:
        self.client = client

    def fetch_all(self) -> List[Employee]:
        """Return every employee; an empty directory is an empty list."""
        employees = decode_many(self.client.list_all(), Employee)
        logger.info("Total employees: %d", len(employees))
        return employees

    def find_by_name_substring(self, query: str) -> List[Employee]:
        """Return employees whose name contains ``query``, ignoring case.

        Filtering happens after a full listing.  An empty ``query``
        matches everyone.
        """
        needle = query.casefold()
        matched = [employee for employee in self.fetch_all() if needle in employee.name.casefold()]
        logger.info("Found %d employees matching name: %s", len(matched), query)
        return matched

    def fetch_by_id(self, employee_id: str) -> Optional[Employee]:
        """Return a single employee.

        ``None`` means upstream answered successfully without data.  An
        upstream 404 raises ``UpstreamNotFound`` instead.
        """
        employee = decode_one(self.client.get_by_id(employee_id), Employee)
        logger.info("Fetched employee: %s", employee)
        return employee

    def highest_salary(self) -> int:
        """Return the maximum salary, or ``0`` for an empty directory."""
        highest = max((employee.salary for employee in self.fetch_all()), default=0)
        logger.info("Highest salary: %d", highest)
        return highest

    def top_ten_earner_names(self) -> List[str]:
        """Return up to ten names ordered by salary, highest first.

        Which of several employees sharing the tenth-place salary is
        kept is unspecified.
        """
        earners = top_k(self.fetch_all(), TOP_EARNERS_LIMIT, key=lambda employee: employee.salary)
        names = [employee.name for employee in earners]
        logger.info("Top %d earners: %s", TOP_EARNERS_LIMIT, names)
        return names

    def create(self, request: EmployeeCreate) -> Optional[Employee]:
        """Create an employee upstream and return the stored record.

        ``None`` means upstream returned no data; the caller must treat
        that as a failed creation.
        """
        employee = decode_one(self.client.create(request), Employee)
        if employee is None:
            logger.warning("Upstream returned no employee for create request '%s'", request.name)
        else:
            logger.info("Saved employee: %s", employee)
        return employee

    def delete_by_id(self, employee_id: str) -> str:
        """Delete an employee upstream and return a confirmation message."""
        self.client.delete_by_id(employee_id)
        logger.info("Employee with ID: %s deleted successfully", employee_id)
        return DELETE_CONFIRMATION
