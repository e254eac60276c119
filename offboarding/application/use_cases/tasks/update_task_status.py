"""Use case for moving a task of a running process through its statuses."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from offboarding.application.use_cases.audit_logs import record_audit_event
from offboarding.application.use_cases.processes.progress import (
    progress_custom_fields,
)
from offboarding.domain.entities import (
    PROCESS_STATUS_ACTIVE,
    PROCESS_STATUS_OVERDUE,
    TASK_STATUS_BLOCKED,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_PENDING,
    TASK_STATUSES,
    OffboardingProcess,
    OffboardingTask,
)
from offboarding.domain.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from offboarding.infrastructure.repositories import ProcessRepository
from offboarding.utils import ensure_app_timezone

logger = logging.getLogger(__name__)

WORKING_PROCESS_STATUSES = (PROCESS_STATUS_ACTIVE, PROCESS_STATUS_OVERDUE)


def _ensure_dependencies_completed(
    task: OffboardingTask, tasks: Sequence[OffboardingTask]
) -> None:
    by_id = {sibling.id: sibling for sibling in tasks}
    waiting_on = [
        by_id[dependency].name
        for dependency in task.depends_on_task_ids
        if dependency in by_id and not by_id[dependency].is_completed
    ]
    if waiting_on:
        raise ValidationError(
            f"Task '{task.name}' is waiting on: {', '.join(waiting_on)}"
        )


def apply_task_status(
    task: OffboardingTask,
    status: str,
    *,
    siblings: Sequence[OffboardingTask],
    now: datetime,
    blocked_reason: str | None = None,
    actual_hours: float | None = None,
    evidence_files: Sequence[str] = (),
    approved_by: str | None = None,
    completion_notes: str | None = None,
) -> OffboardingTask:
    """Return a copy of ``task`` moved to ``status``."""

    if status not in TASK_STATUSES:
        raise ValidationError(f"Unknown task status '{status}'")
    if task.is_completed:
        raise InvalidTransitionError("task", task.status, status)
    if actual_hours is not None and actual_hours < 0:
        raise ValidationError("Actual hours cannot be negative")

    moment = ensure_app_timezone(now)
    updated = replace(
        task,
        status=status,
        evidence_files=tuple(task.evidence_files) + tuple(evidence_files),
    )
    if actual_hours is not None:
        updated.actual_hours = actual_hours

    if status == TASK_STATUS_BLOCKED:
        if not blocked_reason or not blocked_reason.strip():
            raise ValidationError("Blocked tasks need a reason")
        updated.blocked_reason = blocked_reason.strip()
        return updated

    updated.blocked_reason = None
    if status == TASK_STATUS_IN_PROGRESS and updated.started_at is None:
        updated.started_at = moment

    if status == TASK_STATUS_COMPLETED:
        _ensure_dependencies_completed(task, siblings)
        if task.requires_evidence and not updated.evidence_files:
            raise ValidationError(f"Task '{task.name}' requires evidence")
        if task.requires_approval:
            if not approved_by or not approved_by.strip():
                raise ValidationError(
                    f"Task '{task.name}' requires approval by {task.approval_role or 'an approver'}"
                )
            updated.approved_by = approved_by.strip()
            updated.approved_at = moment
        if updated.started_at is None:
            updated.started_at = moment
        updated.completed_at = moment
        updated.completion_notes = completion_notes

    if status == TASK_STATUS_PENDING:
        updated.started_at = None

    return updated


def update_task_status(
    session: Session,
    process_id: int,
    task_id: int,
    *,
    status: str,
    now: datetime,
    actor: str | None = None,
    blocked_reason: str | None = None,
    actual_hours: float | None = None,
    evidence_files: Sequence[str] = (),
    approved_by: str | None = None,
    completion_notes: str | None = None,
) -> tuple[OffboardingProcess, OffboardingTask]:
    """Change a task status and refresh the cached progress of its process."""

    repository = ProcessRepository(session)
    process = repository.get(process_id)
    if process is None:
        raise NotFoundError("Process not found")
    tasks = repository.list_tasks(process_id)
    task = next((candidate for candidate in tasks if candidate.id == task_id), None)
    if task is None:
        raise NotFoundError("Task not found")
    if process.status not in WORKING_PROCESS_STATUSES:
        raise ValidationError(
            f"Tasks cannot change while the process is '{process.status}'"
        )

    try:
        updated = apply_task_status(
            task,
            status,
            siblings=tasks,
            now=now,
            blocked_reason=blocked_reason,
            actual_hours=actual_hours,
            evidence_files=evidence_files,
            approved_by=approved_by,
            completion_notes=completion_notes,
        )
    except ValidationError as exc:
        logger.warning("Rejected update of task %s: %s", task_id, exc)
        raise

    refreshed = [updated if candidate.id == task_id else candidate for candidate in tasks]
    process.custom_fields = progress_custom_fields(process, refreshed)
    saved = repository.save(process, tasks=[updated])
    logger.info("Task %s of process %s moved to %s", task_id, process_id, status)
    record_audit_event(
        session,
        entity_type="task",
        entity_id=task_id,
        action="status_changed",
        actor=actor,
        old_values={"status": task.status},
        new_values={"status": status},
        notes=blocked_reason if status == TASK_STATUS_BLOCKED else completion_notes,
    )
    return saved, updated


__all__ = ["apply_task_status", "update_task_status"]
