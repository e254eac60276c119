"""Process status lifecycle."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date

from sqlalchemy.orm import Session

from offboarding.application.use_cases.audit_logs import record_audit_event
from offboarding.domain.entities import (
    PROCESS_STATUS_ACTIVE,
    PROCESS_STATUS_CANCELLED,
    PROCESS_STATUS_COMPLETED,
    PROCESS_STATUS_DRAFT,
    PROCESS_STATUS_OVERDUE,
    PROCESS_STATUS_PENDING_APPROVAL,
    PROCESS_STATUSES,
    OffboardingProcess,
    OffboardingTask,
)
from offboarding.domain.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from offboarding.infrastructure.repositories import ProcessRepository

from .progress import compute_progress, progress_custom_fields

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: Mapping[str, frozenset[str]] = {
    PROCESS_STATUS_DRAFT: frozenset(
        {PROCESS_STATUS_PENDING_APPROVAL, PROCESS_STATUS_CANCELLED}
    ),
    PROCESS_STATUS_PENDING_APPROVAL: frozenset(
        {PROCESS_STATUS_ACTIVE, PROCESS_STATUS_DRAFT, PROCESS_STATUS_CANCELLED}
    ),
    PROCESS_STATUS_ACTIVE: frozenset(
        {PROCESS_STATUS_OVERDUE, PROCESS_STATUS_COMPLETED, PROCESS_STATUS_CANCELLED}
    ),
    PROCESS_STATUS_OVERDUE: frozenset(
        {PROCESS_STATUS_ACTIVE, PROCESS_STATUS_COMPLETED, PROCESS_STATUS_CANCELLED}
    ),
    PROCESS_STATUS_COMPLETED: frozenset(),
    PROCESS_STATUS_CANCELLED: frozenset(),
}

COMPLETION_THRESHOLD = 95


def can_transition(current: str, requested: str) -> bool:
    return requested in ALLOWED_TRANSITIONS.get(current, frozenset())


def apply_status(
    process: OffboardingProcess,
    status: str,
    *,
    tasks: list[OffboardingTask],
    today: date,
) -> None:
    """Move ``process`` to ``status`` in place, enforcing the entry rules.

    Entering ``active`` needs every approval the template asked for.
    Entering ``completed`` needs at least 95% of the tasks done.
    """

    if status not in PROCESS_STATUSES:
        raise ValidationError(f"Unknown process status '{status}'")
    if not can_transition(process.status, status):
        raise InvalidTransitionError("process", process.status, status)

    if status == PROCESS_STATUS_ACTIVE:
        missing = process.missing_approvals()
        if missing:
            raise ValidationError(
                f"Process is missing approvals: {', '.join(missing)}"
            )
        if process.actual_start_date is None:
            process.actual_start_date = today

    if status == PROCESS_STATUS_COMPLETED:
        progress = compute_progress(process, tasks)
        if progress.percentage < COMPLETION_THRESHOLD:
            raise ValidationError(
                f"Process is only {progress.percentage}% complete; "
                f"{COMPLETION_THRESHOLD}% is required"
            )
        process.actual_completion_date = today
        process.custom_fields = progress_custom_fields(process, tasks)
        process.custom_fields["completion_percentage"] = 100

    process.status = status


def update_process_status(
    session: Session,
    process_id: int,
    *,
    status: str,
    today: date,
    actor: str | None = None,
    notes: str | None = None,
) -> OffboardingProcess:
    """Change the status of a process and record the change."""

    repository = ProcessRepository(session)
    process = repository.get(process_id)
    if process is None:
        raise NotFoundError("Process not found")

    previous = process.status
    tasks = repository.list_tasks(process_id)
    try:
        apply_status(process, status, tasks=tasks, today=today)
    except ValidationError as exc:
        logger.warning("Rejected status change of process %s: %s", process_id, exc)
        raise

    saved = repository.save(process)
    logger.info("Process %s moved from %s to %s", process_id, previous, status)
    record_audit_event(
        session,
        entity_type="process",
        entity_id=process_id,
        action="status_changed",
        actor=actor,
        old_values={"status": previous},
        new_values={"status": status},
        notes=notes,
    )
    return saved


__all__ = [
    "ALLOWED_TRANSITIONS",
    "COMPLETION_THRESHOLD",
    "apply_status",
    "can_transition",
    "update_process_status",
]
