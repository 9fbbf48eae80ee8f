"""
Pydantic models for employee data.

``Employee`` mirrors the record owned by the upstream service.  It is
strict about primitive kinds (a string salary is rejected, not
coerced) and ignores keys it does not know, so that upstream can add
fields without breaking decoding.  Upstream names its keys with an
``employee_`` prefix; the bare names are accepted too.

``EmployeeCreate`` is the inbound request body for creating an
employee.  Its constraints are the inbound validation rules; the
service layer assumes they already hold.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Employee(BaseModel):
    """Schema for an employee record returned by upstream."""

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)

    id: str = Field(..., examples=["4a3a170b-22cd-4ac2-aad1-9bb5b34a1507"])
    name: str = Field(..., alias="employee_name", examples=["Devki"])
    salary: int = Field(..., alias="employee_salary", examples=[100000])
    age: Optional[int] = Field(None, alias="employee_age", examples=[30])
    title: Optional[str] = Field(None, alias="employee_title", examples=["Engineer"])
    email: Optional[str] = Field(None, alias="employee_email", examples=["devki@company.com"])


class EmployeeCreate(BaseModel):
    """Schema for creating an employee.

    Serialised unchanged as the upstream ``POST`` body.
    """

    name: str = Field(..., min_length=1, examples=["Devki"])
    salary: int = Field(..., ge=0, examples=[100000])
    age: int = Field(..., ge=16, le=75, examples=[30])
    title: str = Field(..., min_length=1, examples=["Engineer"])
    email: str = Field(..., min_length=3, examples=["devki@company.com"])

    @field_validator("name", "title")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def _looks_like_email(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("must be a valid email address")
        return value
