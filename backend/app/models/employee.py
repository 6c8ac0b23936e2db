"""Employee models: records served by the dashboard and the create/feedback payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class Address(BaseModel):
    address: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""


class Company(BaseModel):
    department: str
    name: str = "TechCorp Inc."
    title: str = "Software Engineer"


class Project(BaseModel):
    id: int
    name: str
    status: Literal["completed", "in-progress", "pending"]
    completion: int = Field(..., ge=0, le=100)


class Feedback(BaseModel):
    id: int
    reviewer: str
    rating: int = Field(..., ge=1, le=5)
    comment: str
    date: str


class Employee(BaseModel):
    """A source user record decorated with locally derived HR fields."""

    id: int
    first_name: str
    last_name: str
    email: str
    age: int | None = None
    phone: str = ""
    address: Address = Field(default_factory=Address)
    company: Company
    image: str = ""
    rating: int = Field(..., ge=1, le=5)
    bio: str | None = None
    projects: list[Project] = []
    feedback: list[Feedback] = []


class EmployeeCreate(BaseModel):
    """Raw create-employee form. Validated by ``validate_employee_form``."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    age: str = ""
    department: str = ""
    title: str = ""
    bio: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""


class FeedbackCreate(BaseModel):
    comment: str = Field(..., min_length=1, max_length=2000)
    rating: int = Field(default=5, ge=1, le=5)
    reviewer: str = "HR Dashboard"

    @field_validator("comment")
    @classmethod
    def _comment_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Feedback comment must not be blank")
        return stripped
