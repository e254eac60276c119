"""Completion progress for offboarding processes.

Task rows are the authoritative source. When they are not loaded, the
counters cached in ``custom_fields`` are used, and without those the
process status gives a rough estimate.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from offboarding.domain.entities import (
    PROCESS_STATUS_ACTIVE,
    PROCESS_STATUS_CANCELLED,
    PROCESS_STATUS_COMPLETED,
    PROCESS_STATUS_DRAFT,
    PROCESS_STATUS_OVERDUE,
    PROCESS_STATUS_PENDING_APPROVAL,
    PROGRESS_SOURCE_CACHED,
    PROGRESS_SOURCE_STATUS_ESTIMATE,
    PROGRESS_SOURCE_TASKS,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_OVERDUE,
    OffboardingProcess,
    OffboardingTask,
    ProcessProgress,
)

STATUS_PROGRESS_ESTIMATES: Mapping[str, int] = {
    PROCESS_STATUS_DRAFT: 0,
    PROCESS_STATUS_PENDING_APPROVAL: 10,
    PROCESS_STATUS_ACTIVE: 50,
    PROCESS_STATUS_OVERDUE: 30,
    PROCESS_STATUS_COMPLETED: 100,
    PROCESS_STATUS_CANCELLED: 0,
}

CACHED_PROGRESS_KEYS = (
    "completion_percentage",
    "total_tasks",
    "completed_tasks",
    "in_progress_tasks",
    "overdue_tasks",
)


def _clamp(value: int) -> int:
    return max(0, min(100, value))


def completion_percentage(completed: int, total: int) -> int:
    """Return ``100 * completed / total`` rounded half up, or 0 without tasks."""

    if total <= 0:
        return 0
    return _clamp((200 * completed + total) // (2 * total))


def _as_count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return max(0, int(value))
    if isinstance(value, str):
        try:
            return max(0, int(float(value)))
        except ValueError:
            return 0
    return 0


def _has_cached_counters(custom_fields: Mapping[str, Any] | None) -> bool:
    return bool(custom_fields) and any(key in custom_fields for key in CACHED_PROGRESS_KEYS)


def compute_progress(
    process: OffboardingProcess,
    tasks: Sequence[OffboardingTask] | None = None,
) -> ProcessProgress:
    """Return the completion metrics of ``process``."""

    if tasks is not None:
        total = len(tasks)
        completed = sum(1 for task in tasks if task.is_completed)
        in_progress = sum(1 for task in tasks if task.status == TASK_STATUS_IN_PROGRESS)
        overdue = sum(1 for task in tasks if task.status == TASK_STATUS_OVERDUE)
        return ProcessProgress(
            percentage=completion_percentage(completed, total),
            total_tasks=total,
            completed_tasks=completed,
            in_progress_tasks=in_progress,
            overdue_tasks=overdue,
            source=PROGRESS_SOURCE_TASKS,
        )

    custom_fields = process.custom_fields or {}
    if _has_cached_counters(custom_fields):
        total = _as_count(custom_fields.get("total_tasks"))
        completed = min(_as_count(custom_fields.get("completed_tasks")), total) if total else 0
        if total > 0:
            percentage = completion_percentage(completed, total)
        else:
            percentage = _clamp(_as_count(custom_fields.get("completion_percentage")))
        return ProcessProgress(
            percentage=percentage,
            total_tasks=total,
            completed_tasks=completed,
            in_progress_tasks=_as_count(custom_fields.get("in_progress_tasks")),
            overdue_tasks=_as_count(custom_fields.get("overdue_tasks")),
            source=PROGRESS_SOURCE_CACHED,
        )

    return ProcessProgress(
        percentage=STATUS_PROGRESS_ESTIMATES.get(process.status, 0),
        total_tasks=0,
        completed_tasks=0,
        in_progress_tasks=0,
        overdue_tasks=0,
        source=PROGRESS_SOURCE_STATUS_ESTIMATE,
    )


def progress_custom_fields(
    process: OffboardingProcess, tasks: Sequence[OffboardingTask]
) -> dict[str, Any]:
    """Return ``process.custom_fields`` with counters refreshed from ``tasks``."""

    progress = compute_progress(process, tasks)
    custom_fields = dict(process.custom_fields or {})
    custom_fields.update(
        completion_percentage=progress.percentage,
        total_tasks=progress.total_tasks,
        completed_tasks=progress.completed_tasks,
        in_progress_tasks=progress.in_progress_tasks,
        overdue_tasks=progress.overdue_tasks,
    )
    return custom_fields


__all__ = [
    "CACHED_PROGRESS_KEYS",
    "STATUS_PROGRESS_ESTIMATES",
    "completion_percentage",
    "compute_progress",
    "progress_custom_fields",
]
