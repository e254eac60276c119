"""Use cases for listing templates and picking the ones that apply to a person."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from offboarding.domain.entities import OffboardingTemplate
from offboarding.infrastructure.repositories import TemplateRepository

from .matching import find_applicable_templates as match_templates
from .validators import ensure_template_integrity


def list_templates(
    session: Session, *, include_inactive: bool = False
) -> Sequence[OffboardingTemplate]:
    """Return the catalog ordered by name."""

    repository = TemplateRepository(session)
    return repository.list(include_inactive=include_inactive)


def find_applicable_templates(
    session: Session,
    *,
    department: str | None,
    role_category: str | None = None,
    seniority_level: str | None = None,
) -> list[OffboardingTemplate]:
    """Load the catalog, check its integrity and return the matching templates."""

    catalog = [
        ensure_template_integrity(template)
        for template in TemplateRepository(session).list()
    ]
    return match_templates(
        catalog,
        department=department,
        role_category=role_category,
        seniority_level=seniority_level,
    )
