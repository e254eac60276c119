"""Use case for retiring templates."""

import logging

from sqlalchemy.orm import Session

from offboarding.application.use_cases.audit_logs import record_audit_event
from offboarding.domain.exceptions import NotFoundError
from offboarding.infrastructure.repositories import TemplateRepository

logger = logging.getLogger(__name__)


def delete_template(
    session: Session, template_id: int, *, deleted_by: str | None = None
) -> None:
    """Soft-delete a template; processes created from it keep their data."""

    repository = TemplateRepository(session)
    template = repository.get(template_id)
    if template is None:
        raise NotFoundError("Template not found")

    repository.delete(template_id, deleted_by=deleted_by)
    logger.info("Retired offboarding template %s", template.name)
    record_audit_event(
        session,
        entity_type="template",
        entity_id=template_id,
        action="deleted",
        actor=deleted_by,
        old_values={"name": template.name, "is_active": template.is_active},
    )
