"""Use case for recording manager, HR and security approvals."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from offboarding.application.use_cases.audit_logs import record_audit_event
from offboarding.domain.entities import (
    APPROVAL_KINDS,
    PROCESS_STATUS_ACTIVE,
    PROCESS_STATUS_DRAFT,
    PROCESS_STATUS_PENDING_APPROVAL,
    OffboardingProcess,
)
from offboarding.domain.exceptions import NotFoundError, ValidationError
from offboarding.infrastructure.repositories import ProcessRepository
from offboarding.utils import ensure_app_timezone

logger = logging.getLogger(__name__)


def approve_process(
    session: Session,
    process_id: int,
    *,
    approval: str,
    approved_by: str,
    now: datetime,
) -> OffboardingProcess:
    """Record one approval; the process becomes active once none is missing."""

    if approval not in APPROVAL_KINDS:
        raise ValidationError(f"Unknown approval kind '{approval}'")
    if not approved_by or not approved_by.strip():
        raise ValidationError("Approvals must name the approver")

    repository = ProcessRepository(session)
    process = repository.get(process_id)
    if process is None:
        raise NotFoundError("Process not found")
    if process.status not in (PROCESS_STATUS_DRAFT, PROCESS_STATUS_PENDING_APPROVAL):
        raise ValidationError(
            f"Process in status '{process.status}' cannot receive approvals"
        )

    approved_at = ensure_app_timezone(now)
    setattr(process, f"{approval}_approved_at", approved_at)
    setattr(process, f"{approval}_approved_by", approved_by.strip())

    previous = process.status
    if process.missing_approvals():
        process.status = PROCESS_STATUS_PENDING_APPROVAL
    else:
        process.status = PROCESS_STATUS_ACTIVE
        if process.actual_start_date is None:
            process.actual_start_date = approved_at.date()

    saved = repository.save(process)
    logger.info(
        "Process %s received %s approval from %s (%s -> %s)",
        process_id,
        approval,
        approved_by,
        previous,
        process.status,
    )
    record_audit_event(
        session,
        entity_type="process",
        entity_id=process_id,
        action="approved",
        actor=approved_by,
        old_values={"status": previous},
        new_values={"status": process.status, "approval": approval},
    )
    return saved


__all__ = ["approve_process"]
