"""Expand a template into a process with its tasks and document placeholders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from offboarding.domain.entities import (
    DEFAULT_PROCESS_PRIORITY,
    DOCUMENT_STATUS_PENDING,
    PROCESS_PRIORITIES,
    PROCESS_STATUS_DRAFT,
    TASK_STATUS_PENDING,
    OffboardingDocument,
    OffboardingProcess,
    OffboardingTask,
    OffboardingTemplate,
    Person,
    ProcessDraft,
    TaskDraft,
)
from offboarding.domain.exceptions import ValidationError


@dataclass(frozen=True)
class ProcessOptions:
    """Caller choices applied when instantiating a template."""

    priority: str = DEFAULT_PROCESS_PRIORITY
    target_completion_date: date | None = None
    process_name: str | None = None
    notes: str | None = None


def _ensure_person_ready(person: Person) -> None:
    missing = [
        label
        for label, value in (("department", person.department), ("role", person.position))
        if not (value and value.strip())
    ]
    if missing:
        raise ValidationError(
            f"Person {person.person_code} is missing required fields: {', '.join(missing)}"
        )


def build_process(
    template: OffboardingTemplate,
    person: Person,
    options: ProcessOptions,
    today: date,
) -> ProcessDraft:
    """Return an unsaved process for ``person`` built from ``template``.

    The person's department, role and seniority are copied onto the process.
    Tasks follow the template sort order, start ``pending`` and are due on the
    target completion date.
    """

    _ensure_person_ready(person)
    if options.priority not in PROCESS_PRIORITIES:
        raise ValidationError(f"Unknown priority '{options.priority}'")

    target_date = options.target_completion_date or today + timedelta(
        days=template.estimated_duration_days
    )

    task_drafts: list[TaskDraft] = []
    for task_template in template.ordered_tasks:
        task = OffboardingTask(
            id=None,
            process_id=None,
            task_template_id=task_template.id,
            name=task_template.name,
            category=task_template.category,
            sort_order=task_template.sort_order,
            status=TASK_STATUS_PENDING,
            description=task_template.description,
            instructions=task_template.instructions,
            is_mandatory=task_template.is_mandatory,
            assigned_to_role=task_template.default_assignee_role,
            custom_assignee_role=task_template.custom_assignee_role,
            due_date=target_date,
            estimated_hours=task_template.estimated_hours,
            requires_approval=task_template.requires_approval,
            approval_role=task_template.approval_role,
            requires_evidence=task_template.requires_evidence,
            evidence_types=tuple(task_template.evidence_types),
        )
        documents = [
            OffboardingDocument(
                id=None,
                process_id=None,
                task_id=None,
                document_template_id=document.id,
                name=document.name,
                document_type=document.document_type,
                is_mandatory=document.is_mandatory,
                status=DOCUMENT_STATUS_PENDING,
            )
            for document in task_template.documents
        ]
        task_drafts.append(
            TaskDraft(
                task=task,
                documents=documents,
                depends_on_template_ids=tuple(task_template.depends_on),
            )
        )

    process = OffboardingProcess(
        id=None,
        template_id=template.id,
        person_id=person.id,
        process_name=(options.process_name or "").strip()
        or f"{person.full_name} Offboarding",
        employee_uid=person.person_code,
        employee_department=person.department,
        employee_role=person.position,
        employee_seniority=person.seniority_level,
        status=PROCESS_STATUS_DRAFT,
        priority=options.priority,
        target_completion_date=target_date,
        estimated_total_hours=sum(
            draft.task.estimated_hours or 0.0 for draft in task_drafts
        ),
        complexity_score=template.complexity_score,
        requires_manager_approval=template.requires_manager_approval,
        requires_hr_approval=template.requires_hr_approval,
        requires_security_review=template.requires_security_review,
        notes=options.notes,
        custom_fields={
            "completion_percentage": 0,
            "total_tasks": len(task_drafts),
            "completed_tasks": 0,
            "in_progress_tasks": 0,
            "overdue_tasks": 0,
        },
    )
    return ProcessDraft(process=process, tasks=task_drafts)


__all__ = ["ProcessOptions", "build_process"]
