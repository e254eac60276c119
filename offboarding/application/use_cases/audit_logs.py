"""Use cases for writing and reading audit log entries."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from offboarding.domain.entities import AUDIT_ENTITY_TYPES, AuditLog
from offboarding.domain.exceptions import ValidationError
from offboarding.infrastructure.repositories import AuditLogRepository
from offboarding.utils import now_in_app_timezone


def record_audit_event(
    session: Session,
    *,
    entity_type: str,
    entity_id: int,
    action: str,
    actor: str | None = None,
    old_values: dict[str, Any] | None = None,
    new_values: dict[str, Any] | None = None,
    notes: str | None = None,
    commit: bool = True,
) -> AuditLog:
    """Persist an audit entry describing a change to an offboarding record.

    With ``commit=False`` the entry joins the caller's open transaction.
    """

    if entity_type not in AUDIT_ENTITY_TYPES:
        raise ValidationError(f"Unknown audit entity type '{entity_type}'")

    entry = AuditLog(
        id=None,
        entity_type=entity_type,
        entity_id=entity_id,
        action=action,
        old_values=old_values,
        new_values=new_values,
        actor=actor,
        notes=notes,
        created_at=now_in_app_timezone(),
    )
    return AuditLogRepository(session).create(entry, commit=commit)


def list_audit_logs(
    session: Session,
    *,
    entity_type: str | None = None,
    entity_id: int | None = None,
) -> list[AuditLog]:
    """Return audit log entries optionally filtered by entity."""

    repository = AuditLogRepository(session)
    return repository.list(entity_type=entity_type, entity_id=entity_id)


__all__ = ["list_audit_logs", "record_audit_event"]
