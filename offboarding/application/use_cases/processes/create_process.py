"""Use case for starting an offboarding process for a person."""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.orm import Session

from offboarding.application.use_cases.audit_logs import record_audit_event
from offboarding.application.use_cases.templates.validators import (
    ensure_template_integrity,
)
from offboarding.domain.entities import OffboardingProcess
from offboarding.domain.exceptions import (
    DuplicateProcessError,
    NotFoundError,
    ValidationError,
)
from offboarding.infrastructure.database import commit_or_raise
from offboarding.infrastructure.repositories import (
    PersonRepository,
    ProcessRepository,
    TemplateRepository,
)
from offboarding.utils import now_in_app_timezone

from .instantiation import ProcessOptions, build_process

logger = logging.getLogger(__name__)


def instantiate_process(
    session: Session,
    *,
    template_id: int,
    person_id: int,
    options: ProcessOptions | None = None,
    today: date,
    created_by: str | None = None,
) -> OffboardingProcess:
    """Create a draft process with its tasks and documents in one transaction.

    Raises:
        NotFoundError: If the template or the person does not exist.
        ValidationError: If the template is inactive or the person lacks a
            department or role.
        DuplicateProcessError: If the person already has an open process.
        TemplateIntegrityError: If the template dependencies are broken.
    """

    template = TemplateRepository(session).get(template_id)
    if template is None:
        raise NotFoundError("Template not found")
    if not template.is_active:
        raise ValidationError(f"Template '{template.name}' is not active")
    ensure_template_integrity(template)

    person = PersonRepository(session).get(person_id)
    if person is None:
        raise NotFoundError("Person not found")

    repository = ProcessRepository(session)
    existing = repository.find_open_for_person(person_id)
    if existing is not None:
        logger.warning(
            "Rejected second open process for person %s (existing %s)",
            person.person_code,
            existing.id,
        )
        raise DuplicateProcessError(person_id, existing.id)

    draft = build_process(template, person, options or ProcessOptions(), today)
    draft.process.created_by = created_by
    draft.process.created_at = now_in_app_timezone()

    try:
        process = repository.create(draft, commit=False)
    except DuplicateProcessError:
        logger.warning(
            "Rejected concurrent second open process for person %s",
            person.person_code,
        )
        raise
    record_audit_event(
        session,
        entity_type="process",
        entity_id=process.id,
        action="created",
        actor=created_by,
        new_values={
            "template_id": template.id,
            "person_id": person.id,
            "status": process.status,
            "priority": process.priority,
        },
        commit=False,
    )
    commit_or_raise(session, action="create offboarding process")
    logger.info(
        "Instantiated process %s from template '%s' for %s with %s tasks",
        process.id,
        template.name,
        person.person_code,
        len(draft.tasks),
    )
    return process


__all__ = ["instantiate_process"]
