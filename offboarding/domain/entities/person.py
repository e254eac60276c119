"""Domain entity representing a person in the employee/associate directory."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

EMPLOYMENT_STATUSES = ("active", "former", "future")
ASSOCIATE_STATUSES = (
    "board_member",
    "consultant",
    "advisor",
    "contractor",
    "volunteer",
    "partner",
    "other",
)

PERSON_TYPE_EMPLOYEE = "employee"
PERSON_TYPE_ASSOCIATE = "associate"
PERSON_TYPES = (PERSON_TYPE_EMPLOYEE, PERSON_TYPE_ASSOCIATE)


@dataclass(frozen=True)
class Employment:
    """Affiliation of a direct employee."""

    status: str

    kind = PERSON_TYPE_EMPLOYEE


@dataclass(frozen=True)
class Association:
    """Affiliation of a board member, consultant, contractor and similar."""

    status: str

    kind = PERSON_TYPE_ASSOCIATE


Affiliation = Union[Employment, Association]


@dataclass
class Person:
    """A person tracked by the directory.

    A person is exactly one of employee or associate; the ``affiliation``
    field carries which one together with its status.
    """

    id: int | None
    person_code: str
    first_name: str
    last_name: str
    email: str
    affiliation: Affiliation
    department: str | None = None
    position: str | None = None
    seniority_level: str | None = None
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def person_type(self) -> str:
        return self.affiliation.kind

    @property
    def status(self) -> str:
        return self.affiliation.status

    @property
    def employment_status(self) -> str | None:
        if isinstance(self.affiliation, Employment):
            return self.affiliation.status
        return None

    @property
    def associate_status(self) -> str | None:
        if isinstance(self.affiliation, Association):
            return self.affiliation.status
        return None


__all__ = [
    "ASSOCIATE_STATUSES",
    "Affiliation",
    "Association",
    "EMPLOYMENT_STATUSES",
    "Employment",
    "PERSON_TYPES",
    "PERSON_TYPE_ASSOCIATE",
    "PERSON_TYPE_EMPLOYEE",
    "Person",
]
