"""Routes for browsing and administering the offboarding template catalog."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from offboarding.application.use_cases.templates import (
    NewDocumentTemplateData,
    NewTaskTemplateData,
    NewTemplateData,
    create_template as create_template_uc,
    delete_template as delete_template_uc,
    find_applicable_templates as find_applicable_templates_uc,
    get_template as get_template_uc,
    list_templates as list_templates_uc,
)
from offboarding.domain.entities import OffboardingTemplate
from offboarding.domain.exceptions import OffboardingError
from offboarding.infrastructure.database import get_db
from offboarding.interfaces.api.routes_helpers import to_http_exception
from offboarding.interfaces.api.schemas import TemplateCreate, TemplateRead

router = APIRouter(prefix="/templates", tags=["templates"])


def _template_to_read_model(template: OffboardingTemplate) -> TemplateRead:
    return TemplateRead.model_validate(template)


def _map_template_payload(payload: TemplateCreate) -> NewTemplateData:
    return NewTemplateData(
        name=payload.name,
        scope=payload.scope,
        description=payload.description,
        department=payload.department,
        role_category=payload.role_category,
        seniority_level=payload.seniority_level,
        estimated_duration_days=payload.estimated_duration_days,
        complexity_score=payload.complexity_score,
        is_default=payload.is_default,
        requires_manager_approval=payload.requires_manager_approval,
        requires_hr_approval=payload.requires_hr_approval,
        requires_security_review=payload.requires_security_review,
        tasks=tuple(
            NewTaskTemplateData(
                name=task.name,
                category=task.category,
                sort_order=task.sort_order,
                estimated_hours=task.estimated_hours,
                description=task.description,
                instructions=task.instructions,
                is_mandatory=task.is_mandatory,
                default_assignee_role=task.default_assignee_role,
                custom_assignee_role=task.custom_assignee_role,
                requires_approval=task.requires_approval,
                approval_role=task.approval_role,
                requires_evidence=task.requires_evidence,
                evidence_types=tuple(task.evidence_types),
                depends_on=tuple(task.depends_on),
                documents=tuple(
                    NewDocumentTemplateData(
                        name=document.name,
                        document_type=document.document_type,
                        is_mandatory=document.is_mandatory,
                        description=document.description,
                    )
                    for document in task.documents
                ),
            )
            for task in payload.tasks
        ),
    )


@router.get("/", response_model=list[TemplateRead])
def list_templates(
    include_inactive: bool = False,
    db: Session = Depends(get_db),
) -> list[TemplateRead]:
    """Return the template catalog ordered by name."""

    templates = list_templates_uc(db, include_inactive=include_inactive)
    return [_template_to_read_model(template) for template in templates]


@router.get("/applicable", response_model=list[TemplateRead])
def list_applicable_templates(
    department: str | None = None,
    role_category: str | None = None,
    seniority_level: str | None = None,
    db: Session = Depends(get_db),
) -> list[TemplateRead]:
    """Return the templates that apply to a person, most specific first."""

    try:
        templates = find_applicable_templates_uc(
            db,
            department=department,
            role_category=role_category,
            seniority_level=seniority_level,
        )
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc
    return [_template_to_read_model(template) for template in templates]


@router.post("/", response_model=TemplateRead, status_code=status.HTTP_201_CREATED)
def register_template(
    template_in: TemplateCreate,
    db: Session = Depends(get_db),
) -> TemplateRead:
    """Create a template with its task and document blueprints."""

    try:
        template = create_template_uc(
            db,
            _map_template_payload(template_in),
            created_by=template_in.created_by,
        )
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc
    return _template_to_read_model(template)


@router.get("/{template_id}", response_model=TemplateRead)
def read_template(template_id: int, db: Session = Depends(get_db)) -> TemplateRead:
    try:
        template = get_template_uc(db, template_id)
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc
    return _template_to_read_model(template)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(
    template_id: int,
    deleted_by: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> Response:
    """Retire a template; existing processes are not affected."""

    try:
        delete_template_uc(db, template_id, deleted_by=deleted_by)
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
