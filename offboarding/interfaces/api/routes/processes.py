"""Routes for offboarding processes, their tasks and documents."""

from datetime import date, datetime

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from offboarding.application.use_cases.processes import (
    ProcessFilters,
    ProcessOptions,
    approve_process as approve_process_uc,
    delete_process as delete_process_uc,
    get_process as get_process_uc,
    instantiate_process as instantiate_process_uc,
    list_processes as list_processes_uc,
    refresh_overdue as refresh_overdue_uc,
    update_process_status as update_process_status_uc,
)
from offboarding.application.use_cases.tasks import (
    update_document_status as update_document_status_uc,
    update_task_status as update_task_status_uc,
)
from offboarding.domain.exceptions import OffboardingError
from offboarding.infrastructure.database import get_db
from offboarding.interfaces.api.dependencies import get_now, get_today
from offboarding.interfaces.api.routes_helpers import (
    process_detail_to_read_model,
    process_summary_to_read_model,
    to_http_exception,
)
from offboarding.interfaces.api.schemas import (
    DocumentRead,
    DocumentStatusUpdate,
    OverdueSweepRead,
    ProcessApprovalCreate,
    ProcessCreate,
    ProcessDetailRead,
    ProcessRead,
    ProcessStatusUpdate,
    TaskRead,
    TaskStatusUpdate,
)

router = APIRouter(prefix="/processes", tags=["processes"])


def _read_process(db: Session, process_id: int) -> ProcessDetailRead:
    return process_detail_to_read_model(get_process_uc(db, process_id))


@router.get("/", response_model=list[ProcessRead])
def list_processes(
    status_filter: str | None = Query(default=None, alias="status"),
    timeframe: str | None = None,
    search: str | None = None,
    department: str | None = None,
    priority: str | None = None,
    template_id: str | None = None,
    sort_by: str = "created",
    direction: str = "desc",
    skip: int = Query(default=0, ge=0),
    limit: int | None = Query(default=None, ge=1),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> list[ProcessRead]:
    """Return processes matching the filters with their progress."""

    filters = ProcessFilters(
        status=status_filter,
        timeframe=timeframe,
        search=search,
        department=department,
        priority=priority,
        template_id=template_id,
    )
    try:
        summaries = list_processes_uc(
            db,
            filters=filters,
            sort_by=sort_by,
            direction=direction,
            today=today,
            skip=skip,
            limit=limit,
        )
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc
    return [process_summary_to_read_model(summary) for summary in summaries]


@router.post("/", response_model=ProcessDetailRead, status_code=status.HTTP_201_CREATED)
def create_process(
    process_in: ProcessCreate,
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> ProcessDetailRead:
    """Apply a template to a person and return the new draft process."""

    options = ProcessOptions(
        priority=process_in.priority,
        target_completion_date=process_in.target_completion_date,
        process_name=process_in.process_name,
        notes=process_in.notes,
    )
    try:
        process = instantiate_process_uc(
            db,
            template_id=process_in.template_id,
            person_id=process_in.person_id,
            options=options,
            today=today,
            created_by=process_in.created_by,
        )
        return _read_process(db, process.id)
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc


@router.post("/overdue-check", response_model=OverdueSweepRead)
def check_overdue(
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> OverdueSweepRead:
    """Flag processes and tasks whose dates have passed."""

    try:
        result = refresh_overdue_uc(db, today=today)
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc
    return OverdueSweepRead.model_validate(result)


@router.get("/{process_id}", response_model=ProcessDetailRead)
def read_process(process_id: int, db: Session = Depends(get_db)) -> ProcessDetailRead:
    try:
        return _read_process(db, process_id)
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc


@router.patch("/{process_id}/status", response_model=ProcessDetailRead)
def change_process_status(
    process_id: int,
    payload: ProcessStatusUpdate,
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> ProcessDetailRead:
    try:
        update_process_status_uc(
            db,
            process_id,
            status=payload.status,
            today=today,
            actor=payload.actor,
            notes=payload.notes,
        )
        return _read_process(db, process_id)
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc


@router.post("/{process_id}/approvals", response_model=ProcessDetailRead)
def approve_process(
    process_id: int,
    payload: ProcessApprovalCreate,
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
) -> ProcessDetailRead:
    """Record a manager, HR or security approval."""

    try:
        approve_process_uc(
            db,
            process_id,
            approval=payload.approval,
            approved_by=payload.approved_by,
            now=now,
        )
        return _read_process(db, process_id)
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc


@router.patch("/{process_id}/tasks/{task_id}", response_model=TaskRead)
def change_task_status(
    process_id: int,
    task_id: int,
    payload: TaskStatusUpdate,
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
) -> TaskRead:
    try:
        _, task = update_task_status_uc(
            db,
            process_id,
            task_id,
            status=payload.status,
            now=now,
            actor=payload.actor,
            blocked_reason=payload.blocked_reason,
            actual_hours=payload.actual_hours,
            evidence_files=tuple(payload.evidence_files),
            approved_by=payload.approved_by,
            completion_notes=payload.completion_notes,
        )
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc
    return TaskRead.model_validate(task)


@router.patch("/{process_id}/documents/{document_id}", response_model=DocumentRead)
def change_document_status(
    process_id: int,
    document_id: int,
    payload: DocumentStatusUpdate,
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
) -> DocumentRead:
    try:
        document = update_document_status_uc(
            db,
            process_id,
            document_id,
            status=payload.status,
            now=now,
            file_reference=payload.file_reference,
            reviewed_by=payload.reviewed_by,
        )
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc
    return DocumentRead.model_validate(document)


@router.delete("/{process_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_process(
    process_id: int,
    actor: str | None = None,
    db: Session = Depends(get_db),
) -> Response:
    try:
        delete_process_uc(db, process_id, actor=actor)
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
