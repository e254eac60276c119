"""Sweep that flags processes and tasks past their dates as overdue."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from sqlalchemy.orm import Session

from offboarding.application.use_cases.audit_logs import record_audit_event
from offboarding.domain.entities import (
    PROCESS_STATUS_ACTIVE,
    PROCESS_STATUS_OVERDUE,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_OVERDUE,
    TASK_STATUS_PENDING,
)
from offboarding.infrastructure.repositories import ProcessRepository

from .progress import progress_custom_fields

logger = logging.getLogger(__name__)

OPEN_TASK_STATUSES = (TASK_STATUS_PENDING, TASK_STATUS_IN_PROGRESS)


@dataclass(frozen=True)
class OverdueSweepResult:
    processes_marked: int
    tasks_marked: int


def refresh_overdue(session: Session, *, today: date) -> OverdueSweepResult:
    """Mark active processes and open tasks whose date has passed as overdue."""

    repository = ProcessRepository(session)
    processes = repository.list(statuses=(PROCESS_STATUS_ACTIVE, PROCESS_STATUS_OVERDUE))
    tasks_by_process = repository.list_tasks_by_process(process.id for process in processes)

    processes_marked = 0
    tasks_marked = 0
    for process in processes:
        tasks = tasks_by_process.get(process.id, [])
        late_tasks = [
            task
            for task in tasks
            if task.status in OPEN_TASK_STATUSES
            and task.due_date is not None
            and task.due_date < today
        ]
        process_late = (
            process.status == PROCESS_STATUS_ACTIVE
            and process.target_completion_date is not None
            and process.target_completion_date < today
        )
        if not late_tasks and not process_late:
            continue

        for task in late_tasks:
            task.status = TASK_STATUS_OVERDUE
        previous = process.status
        if process_late:
            process.status = PROCESS_STATUS_OVERDUE
        process.custom_fields = progress_custom_fields(process, tasks)
        repository.save(process, tasks=late_tasks)

        tasks_marked += len(late_tasks)
        if process_late:
            processes_marked += 1
            record_audit_event(
                session,
                entity_type="process",
                entity_id=process.id,
                action="status_changed",
                old_values={"status": previous},
                new_values={"status": PROCESS_STATUS_OVERDUE},
                notes="Target completion date passed",
            )

    logger.info(
        "Overdue sweep for %s marked %s processes and %s tasks",
        today.isoformat(),
        processes_marked,
        tasks_marked,
    )
    return OverdueSweepResult(processes_marked=processes_marked, tasks_marked=tasks_marked)


__all__ = ["OverdueSweepResult", "refresh_overdue"]
