"""Schemas for the people directory endpoints."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class PersonCreate(BaseModel):
    """Exactly one of ``employment_status`` and ``associate_status`` is required."""

    person_code: str = Field(..., min_length=1, max_length=50)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    employment_status: str | None = None
    associate_status: str | None = None
    department: str | None = None
    position: str | None = None
    seniority_level: str | None = None
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    created_by: str | None = None


class PersonRead(BaseModel):
    id: int
    person_code: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    person_type: str
    status: str
    employment_status: str | None
    associate_status: str | None
    department: str | None
    position: str | None
    seniority_level: str | None
    location: str | None
    start_date: date | None
    end_date: date | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["PersonCreate", "PersonRead"]
