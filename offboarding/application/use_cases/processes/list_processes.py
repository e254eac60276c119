"""Use cases for reading processes together with their progress."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from sqlalchemy.orm import Session

from offboarding.domain.entities import (
    OffboardingDocument,
    OffboardingProcess,
    OffboardingTask,
    ProcessProgress,
)
from offboarding.domain.exceptions import NotFoundError
from offboarding.infrastructure.repositories import ProcessRepository
from offboarding.utils.sorting import SORT_DESCENDING

from .filters import SORT_BY_CREATED, ProcessFilters, filter_processes, sort_processes
from .progress import compute_progress


@dataclass(frozen=True)
class ProcessSummary:
    process: OffboardingProcess
    progress: ProcessProgress


@dataclass(frozen=True)
class ProcessDetail:
    process: OffboardingProcess
    progress: ProcessProgress
    tasks: list[OffboardingTask] = field(default_factory=list)
    documents: list[OffboardingDocument] = field(default_factory=list)


def list_processes(
    session: Session,
    *,
    filters: ProcessFilters | None = None,
    sort_by: str = SORT_BY_CREATED,
    direction: str = SORT_DESCENDING,
    today: date,
    skip: int = 0,
    limit: int | None = None,
) -> list[ProcessSummary]:
    """Return filtered and ordered processes with task-derived progress."""

    repository = ProcessRepository(session)
    selected = filter_processes(repository.list(), filters or ProcessFilters(), today)
    ordered = sort_processes(selected, sort_by=sort_by, direction=direction)
    page = ordered[skip : skip + limit] if limit is not None else ordered[skip:]

    tasks_by_process = repository.list_tasks_by_process(process.id for process in page)
    return [
        ProcessSummary(
            process=process,
            progress=compute_progress(process, tasks_by_process.get(process.id, [])),
        )
        for process in page
    ]


def get_process(session: Session, process_id: int) -> ProcessDetail:
    """Return a process with its tasks, documents and progress."""

    repository = ProcessRepository(session)
    process = repository.get(process_id)
    if process is None:
        raise NotFoundError("Process not found")
    tasks = repository.list_tasks(process_id)
    return ProcessDetail(
        process=process,
        progress=compute_progress(process, tasks),
        tasks=tasks,
        documents=repository.list_documents(process_id),
    )


__all__ = ["ProcessDetail", "ProcessSummary", "get_process", "list_processes"]
