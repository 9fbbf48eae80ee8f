"""Shared fixtures for the employee directory tests."""

import json
import uuid
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest
import requests
from requests.cookies import RequestsCookieJar

from employee_directory_api.app.core.config import UpstreamConfig
from employee_directory_api.app.schemas.employee import EmployeeCreate
from employee_directory_api.app.schemas.envelope import Envelope
from employee_directory_api.app.services.employee_service import EmployeeService
from employee_directory_api.app.services.upstream_client import EmployeeUpstreamClient

BASE_URL = "http://upstream.test/api/v1/employee"


def employee_payload(employee_id: str, name: str, salary: int, age: int = 30,
                     title: str = "Engineer", email: Optional[str] = None) -> Dict[str, Any]:
    """Employee object in the upstream wire format."""
    return {
        "id": employee_id,
        "employee_name": name,
        "employee_salary": salary,
        "employee_age": age,
        "employee_title": title,
        "employee_email": email or f"{name.lower()}@test.com",
    }


def make_response(status_code: int = 200, body: Any = None, *, raw: Optional[bytes] = None) -> requests.Response:
    """Build a ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.url = BASE_URL
    if raw is not None:
        response._content = raw
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


class FakeUpstreamClient:
    """In-memory stand-in for the upstream employee service."""

    def __init__(self, employees: Optional[List[Dict[str, Any]]] = None) -> None:
        self.employees: Dict[str, Dict[str, Any]] = {e["id"]: e for e in employees or []}
        self.list_calls = 0

    def list_all(self) -> Envelope:
        self.list_calls += 1
        return Envelope(data=list(self.employees.values()), status="Successfully processed request.")

    def get_by_id(self, employee_id: str) -> Envelope:
        return Envelope(data=self.employees.get(employee_id), status="Successfully processed request.")

    def create(self, request: EmployeeCreate) -> Envelope:
        employee_id = str(uuid.uuid4())
        record = employee_payload(employee_id, request.name, request.salary, request.age, request.title, request.email)
        self.employees[employee_id] = record
        return Envelope(data=record, status="Successfully processed request.")

    def delete_by_id(self, employee_id: str) -> None:
        self.employees.pop(employee_id, None)


@pytest.fixture
def two_employees() -> List[Dict[str, Any]]:
    return [
        employee_payload("1", "Devki", 100, 30, "Engineer", "dev123@test.com"),
        employee_payload("2", "Pooja", 200, 28, "Manager", "pooja123@test.com"),
    ]


@pytest.fixture
def mock_session() -> Mock:
    session = Mock(spec=requests.Session)
    # ``cookies`` is set in ``Session.__init__`` so the spec does not know it.
    session.cookies = RequestsCookieJar()
    return session


@pytest.fixture
def upstream_client(mock_session) -> EmployeeUpstreamClient:
    return EmployeeUpstreamClient(UpstreamConfig(base_url=BASE_URL), session=mock_session)


@pytest.fixture
def fake_upstream(two_employees) -> FakeUpstreamClient:
    return FakeUpstreamClient(two_employees)


@pytest.fixture
def service(fake_upstream) -> EmployeeService:
    return EmployeeService(fake_upstream)
