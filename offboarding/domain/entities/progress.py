"""Value object holding display-ready completion metrics for a process."""

from dataclasses import dataclass

PROGRESS_SOURCE_TASKS = "tasks"
PROGRESS_SOURCE_CACHED = "cached"
PROGRESS_SOURCE_STATUS_ESTIMATE = "status_estimate"


@dataclass(frozen=True)
class ProcessProgress:
    """Completion percentage and task counters for one process."""

    percentage: int
    total_tasks: int
    completed_tasks: int
    in_progress_tasks: int
    overdue_tasks: int
    source: str


__all__ = [
    "PROGRESS_SOURCE_CACHED",
    "PROGRESS_SOURCE_STATUS_ESTIMATE",
    "PROGRESS_SOURCE_TASKS",
    "ProcessProgress",
]
