"""Routes for inspecting audit log entries."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from offboarding.application.use_cases.audit_logs import (
    list_audit_logs as list_audit_logs_uc,
)
from offboarding.infrastructure.database import get_db
from offboarding.interfaces.api.schemas import AuditLogRead

router = APIRouter(prefix="/audit-logs", tags=["audit_logs"])


@router.get("/", response_model=list[AuditLogRead])
def list_audit_logs(
    entity_type: str | None = None,
    entity_id: int | None = None,
    db: Session = Depends(get_db),
) -> list[AuditLogRead]:
    """Return audit log entries optionally filtered by entity."""

    entries = list_audit_logs_uc(db, entity_type=entity_type, entity_id=entity_id)
    return [AuditLogRead.model_validate(entry) for entry in entries]


__all__ = ["router"]
