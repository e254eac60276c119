"""Use case for adding people to the directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from sqlalchemy.orm import Session

from offboarding.application.use_cases.audit_logs import record_audit_event
from offboarding.domain.entities import Person
from offboarding.domain.exceptions import ValidationError
from offboarding.infrastructure.repositories import PersonRepository
from offboarding.utils import now_in_app_timezone

from .validators import ensure_seniority_level, resolve_affiliation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewPersonData:
    """Data required to register a person."""

    person_code: str
    first_name: str
    last_name: str
    email: str
    employment_status: str | None = None
    associate_status: str | None = None
    department: str | None = None
    position: str | None = None
    seniority_level: str | None = None
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None


def create_person(
    session: Session, data: NewPersonData, *, created_by: str | None = None
) -> Person:
    """Create a person ensuring unique codes and email addresses."""

    person_code = data.person_code.strip()
    email = data.email.strip()
    if not person_code:
        raise ValidationError("Person code cannot be empty")
    if not data.first_name.strip() or not data.last_name.strip():
        raise ValidationError("First and last name are required")
    if not email:
        raise ValidationError("Email cannot be empty")
    if data.start_date and data.end_date and data.end_date < data.start_date:
        raise ValidationError("End date cannot be before start date")
    ensure_seniority_level(data.seniority_level)
    affiliation = resolve_affiliation(data.employment_status, data.associate_status)

    repository = PersonRepository(session)
    if repository.get_by_code(person_code):
        raise ValidationError("Person code is already registered")
    if repository.get_by_email(email):
        raise ValidationError("Email is already registered")

    person = Person(
        id=None,
        person_code=person_code,
        first_name=data.first_name.strip(),
        last_name=data.last_name.strip(),
        email=email,
        affiliation=affiliation,
        department=data.department,
        position=data.position,
        seniority_level=data.seniority_level,
        location=data.location,
        start_date=data.start_date,
        end_date=data.end_date,
        created_at=now_in_app_timezone(),
    )
    saved = repository.create(person)
    logger.info("Registered %s %s (%s)", saved.person_type, saved.person_code, saved.status)
    record_audit_event(
        session,
        entity_type="person",
        entity_id=saved.id,
        action="created",
        actor=created_by,
        new_values={"person_code": saved.person_code, "status": saved.status},
    )
    return saved


__all__ = ["NewPersonData", "create_person"]
