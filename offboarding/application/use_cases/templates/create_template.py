"""Use case for creating offboarding templates with their task blueprints."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from offboarding.application.use_cases.audit_logs import record_audit_event
from offboarding.config import get_settings
from offboarding.domain.entities import DocumentTemplate, OffboardingTemplate, TaskTemplate
from offboarding.domain.exceptions import ValidationError
from offboarding.infrastructure.repositories import TemplateRepository
from offboarding.utils import now_in_app_timezone

from .validators import (
    ensure_acyclic_dependencies,
    ensure_scope_filters,
    ensure_task_fields,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewDocumentTemplateData:
    """Document a task must produce."""

    name: str
    document_type: str
    is_mandatory: bool = True
    description: str | None = None


@dataclass(frozen=True)
class NewTaskTemplateData:
    """Task blueprint supplied when creating a template.

    ``depends_on`` names sibling tasks of the same template.
    """

    name: str
    category: str
    sort_order: int
    estimated_hours: float = 1.0
    description: str | None = None
    instructions: str | None = None
    is_mandatory: bool = True
    default_assignee_role: str | None = None
    custom_assignee_role: str | None = None
    requires_approval: bool = False
    approval_role: str | None = None
    requires_evidence: bool = False
    evidence_types: Sequence[str] = ()
    depends_on: Sequence[str] = ()
    documents: Sequence[NewDocumentTemplateData] = ()


@dataclass(frozen=True)
class NewTemplateData:
    """Data required to create an offboarding template."""

    name: str
    scope: str
    description: str | None = None
    department: str | None = None
    role_category: str | None = None
    seniority_level: str | None = None
    estimated_duration_days: int | None = None
    complexity_score: int = 1
    is_default: bool = False
    requires_manager_approval: bool = True
    requires_hr_approval: bool = True
    requires_security_review: bool = False
    tasks: Sequence[NewTaskTemplateData] = field(default_factory=tuple)


def _build_task(payload: NewTaskTemplateData) -> TaskTemplate:
    name = payload.name.strip()
    if not name:
        raise ValidationError("Task names cannot be empty")
    ensure_task_fields(
        category=payload.category,
        default_assignee_role=payload.default_assignee_role,
        evidence_types=payload.evidence_types,
        document_types=[document.document_type for document in payload.documents],
        estimated_hours=payload.estimated_hours,
    )
    if payload.requires_approval and not payload.approval_role:
        raise ValidationError(f"Task '{name}' requires approval but names no approver role")

    return TaskTemplate(
        id=None,
        template_id=None,
        name=name,
        category=payload.category,
        sort_order=payload.sort_order,
        estimated_hours=payload.estimated_hours,
        description=payload.description,
        instructions=payload.instructions,
        is_mandatory=payload.is_mandatory,
        default_assignee_role=payload.default_assignee_role,
        custom_assignee_role=payload.custom_assignee_role,
        requires_approval=payload.requires_approval,
        approval_role=payload.approval_role,
        requires_evidence=payload.requires_evidence,
        evidence_types=tuple(payload.evidence_types),
        documents=[
            DocumentTemplate(
                id=None,
                task_template_id=None,
                name=document.name.strip(),
                document_type=document.document_type,
                is_mandatory=document.is_mandatory,
                description=document.description,
            )
            for document in payload.documents
        ],
    )


def create_template(
    session: Session,
    data: NewTemplateData,
    *,
    created_by: str | None = None,
) -> OffboardingTemplate:
    """Create a template, validating its scope and task dependency graph.

    Raises:
        ValidationError: If names are empty or duplicated, or fields are invalid.
        TemplateIntegrityError: If task dependencies are dangling or cyclic.
    """

    repository = TemplateRepository(session)

    name = data.name.strip()
    if not name:
        raise ValidationError("Template name cannot be empty")
    if repository.get_by_name(name) is not None:
        raise ValidationError("Template name is already in use")
    ensure_scope_filters(
        data.scope,
        department=data.department,
        role_category=data.role_category,
        seniority_level=data.seniority_level,
    )
    if not 1 <= data.complexity_score <= 5:
        raise ValidationError("Complexity score must be between 1 and 5")
    duration_days = data.estimated_duration_days
    if duration_days is None:
        duration_days = get_settings().default_template_duration_days
    if duration_days <= 0:
        raise ValidationError("Estimated duration must be at least one day")

    ordered = sorted(data.tasks, key=lambda task: task.sort_order)
    tasks = [_build_task(payload) for payload in ordered]

    positions: dict[str, int] = {}
    for position, task in enumerate(tasks):
        if task.name in positions:
            raise ValidationError(f"Task '{task.name}' appears twice in the template")
        positions[task.name] = position

    graph = {
        payload.name.strip(): tuple(dependency.strip() for dependency in payload.depends_on)
        for payload in ordered
    }
    ensure_acyclic_dependencies(name, graph, {key: key for key in graph})

    template = OffboardingTemplate(
        id=None,
        name=name,
        scope=data.scope,
        description=data.description,
        department=data.department,
        role_category=data.role_category,
        seniority_level=data.seniority_level,
        estimated_duration_days=duration_days,
        complexity_score=data.complexity_score,
        is_default=data.is_default,
        is_active=True,
        requires_manager_approval=data.requires_manager_approval,
        requires_hr_approval=data.requires_hr_approval,
        requires_security_review=data.requires_security_review,
        created_by=created_by,
        created_at=now_in_app_timezone(),
        tasks=tasks,
    )
    task_dependencies = {
        positions[task_name]: [positions[dependency] for dependency in depends_on]
        for task_name, depends_on in graph.items()
        if depends_on
    }

    saved = repository.create(template, task_dependencies=task_dependencies)
    logger.info("Created offboarding template %s (%s tasks)", saved.name, len(saved.tasks))
    record_audit_event(
        session,
        entity_type="template",
        entity_id=saved.id,
        action="created",
        actor=created_by,
        new_values={"name": saved.name, "scope": saved.scope},
    )
    return saved


__all__ = [
    "NewDocumentTemplateData",
    "NewTaskTemplateData",
    "NewTemplateData",
    "create_template",
]
