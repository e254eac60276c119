"""Use case for retrieving a template."""

from sqlalchemy.orm import Session

from offboarding.domain.entities import OffboardingTemplate
from offboarding.domain.exceptions import NotFoundError
from offboarding.infrastructure.repositories import TemplateRepository

from .validators import ensure_template_integrity


def get_template(session: Session, template_id: int) -> OffboardingTemplate:
    """Return the template identified by ``template_id`` or raise ``NotFoundError``."""

    repository = TemplateRepository(session)
    template = repository.get(template_id)
    if template is None:
        raise NotFoundError("Template not found")
    return ensure_template_integrity(template)
