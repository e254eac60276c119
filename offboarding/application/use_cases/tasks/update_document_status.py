"""Use case for submitting and reviewing task documents."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from offboarding.application.use_cases.audit_logs import record_audit_event
from offboarding.domain.entities import (
    DOCUMENT_STATUS_APPROVED,
    DOCUMENT_STATUS_PENDING,
    DOCUMENT_STATUS_REJECTED,
    DOCUMENT_STATUS_SUBMITTED,
    DOCUMENT_STATUSES,
    OffboardingDocument,
)
from offboarding.domain.exceptions import NotFoundError, ValidationError
from offboarding.infrastructure.repositories import ProcessRepository
from offboarding.utils import ensure_app_timezone

logger = logging.getLogger(__name__)

REVIEW_STATUSES = (DOCUMENT_STATUS_APPROVED, DOCUMENT_STATUS_REJECTED)


def update_document_status(
    session: Session,
    process_id: int,
    document_id: int,
    *,
    status: str,
    now: datetime,
    file_reference: str | None = None,
    reviewed_by: str | None = None,
) -> OffboardingDocument:
    """Record a submission or a review decision for a document."""

    if status not in DOCUMENT_STATUSES:
        raise ValidationError(f"Unknown document status '{status}'")

    repository = ProcessRepository(session)
    process = repository.get(process_id)
    if process is None:
        raise NotFoundError("Process not found")
    document = next(
        (item for item in repository.list_documents(process_id) if item.id == document_id),
        None,
    )
    if document is None:
        raise NotFoundError("Document not found")
    if process.is_terminal:
        raise ValidationError(
            f"Documents cannot change while the process is '{process.status}'"
        )

    previous = document.status
    if file_reference is not None and file_reference.strip():
        document.file_reference = file_reference.strip()

    if status == DOCUMENT_STATUS_SUBMITTED and not document.file_reference:
        raise ValidationError("Submitting a document needs a file reference")
    if status in REVIEW_STATUSES:
        if previous != DOCUMENT_STATUS_SUBMITTED:
            raise ValidationError("Only submitted documents can be reviewed")
        if not reviewed_by or not reviewed_by.strip():
            raise ValidationError("Reviews must name the reviewer")
        document.reviewed_by = reviewed_by.strip()
        document.reviewed_at = ensure_app_timezone(now)
    if status == DOCUMENT_STATUS_PENDING:
        document.reviewed_by = None
        document.reviewed_at = None

    document.status = status
    repository.save(process, documents=[document])
    logger.info("Document %s of process %s moved to %s", document_id, process_id, status)
    record_audit_event(
        session,
        entity_type="document",
        entity_id=document_id,
        action="status_changed",
        actor=reviewed_by,
        old_values={"status": previous},
        new_values={"status": status},
    )
    return document


__all__ = ["update_document_status"]
