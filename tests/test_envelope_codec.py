"""Tests for decoding upstream envelopes."""

import pytest

from employee_directory_api.app.core.errors import DecodeError, FailureKind
from employee_directory_api.app.schemas.employee import Employee
from employee_directory_api.app.schemas.envelope import Envelope
from employee_directory_api.app.services.envelope_codec import decode_many, decode_one, parse_envelope

from tests.conftest import employee_payload


class TestAbsentData:
    """A missing envelope or null data is no content, never a failure."""

    @pytest.mark.parametrize("raw", [None, {"data": None}, {"status": "ok"}, Envelope()])
    def test_decode_one_returns_none(self, raw):
        assert decode_one(raw, Employee) is None

    @pytest.mark.parametrize("raw", [None, {"data": None}, {"status": "ok"}, Envelope()])
    def test_decode_many_returns_empty_list(self, raw):
        assert decode_many(raw, Employee) == []


class TestDecodeOne:
    def test_wire_keys(self):
        raw = {"data": employee_payload("1", "Devki", 100), "status": "Successfully processed request."}
        employee = decode_one(raw, Employee)
        assert employee == Employee(id="1", name="Devki", salary=100, age=30, title="Engineer", email="devki@test.com")

    def test_bare_keys_are_accepted(self):
        raw = {"data": {"id": "7", "name": "Asha", "salary": 50, "age": 40, "title": "CTO", "email": "a@x"}}
        employee = decode_one(raw, Employee)
        assert employee.name == "Asha"
        assert employee.salary == 50

    def test_unknown_fields_are_ignored(self):
        payload = employee_payload("1", "Devki", 100)
        payload["department"] = "R&D"
        payload["profile_image"] = ""
        employee = decode_one({"data": payload}, Employee)
        assert employee.id == "1"
        assert not hasattr(employee, "department")

    def test_optional_fields_may_be_missing(self):
        employee = decode_one({"data": {"id": "1", "employee_name": "Devki", "employee_salary": 100}}, Employee)
        assert employee.age is None
        assert employee.title is None
        assert employee.email is None

    def test_missing_required_field(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_one({"data": {"id": "1", "employee_name": "Devki"}}, Employee)
        assert exc_info.value.kind is FailureKind.DECODE_ERROR
        assert "employee_salary" in exc_info.value.message

    def test_wrong_primitive_kind_is_not_coerced(self):
        payload = employee_payload("1", "Devki", 100)
        payload["employee_salary"] = "100"
        with pytest.raises(DecodeError):
            decode_one({"data": payload}, Employee)

    def test_list_where_object_expected(self):
        with pytest.raises(DecodeError):
            decode_one({"data": [employee_payload("1", "Devki", 100)]}, Employee)


class TestDecodeMany:
    def test_preserves_order(self, two_employees):
        employees = decode_many({"data": two_employees}, Employee)
        assert [e.name for e in employees] == ["Devki", "Pooja"]
        assert employees[1].age == 28

    def test_empty_list(self):
        assert decode_many({"data": []}, Employee) == []

    def test_object_where_list_expected(self):
        with pytest.raises(DecodeError):
            decode_many({"data": employee_payload("1", "Devki", 100)}, Employee)

    def test_one_bad_element_fails_the_whole_list(self, two_employees):
        two_employees[1]["employee_name"] = 42
        with pytest.raises(DecodeError) as exc_info:
            decode_many({"data": two_employees}, Employee)
        assert "1.employee_name" in exc_info.value.message


class TestParseEnvelope:
    def test_non_object_body(self):
        with pytest.raises(DecodeError):
            parse_envelope(["not", "an", "envelope"])

    def test_keeps_status_and_error(self):
        envelope = parse_envelope({"data": None, "status": "Failed to process request.", "error": "boom"})
        assert envelope.status == "Failed to process request."
        assert envelope.error == "boom"
