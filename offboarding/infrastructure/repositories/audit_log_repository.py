"""Persistence layer for audit log records."""

from typing import Iterable

from sqlalchemy.orm import Session

from offboarding.domain.entities import AuditLog
from offboarding.infrastructure.database import commit_or_raise, persistence_guard
from offboarding.infrastructure.models import AuditLogModel
from offboarding.utils import ensure_app_timezone, now_in_app_timezone


class AuditLogRepository:
    """Provide CRUD helpers for :class:`AuditLog` entries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: AuditLog, *, commit: bool = True) -> AuditLog:
        model = AuditLogModel()
        self._apply_entity_to_model(model, entry)
        self.session.add(model)
        if not commit:
            with persistence_guard(self.session, action="write audit log entry"):
                self.session.flush()
            return self._to_entity(model)
        commit_or_raise(self.session, action="write audit log entry")
        self.session.refresh(model)
        return self._to_entity(model)

    def list(
        self,
        *,
        entity_type: str | None = None,
        entity_id: int | None = None,
    ) -> list[AuditLog]:
        """Return audit entries, optionally filtered by the entity they describe."""

        query = self.session.query(AuditLogModel)
        if entity_type is not None:
            query = query.filter(AuditLogModel.entity_type == entity_type)
        if entity_id is not None:
            query = query.filter(AuditLogModel.entity_id == entity_id)

        models: Iterable[AuditLogModel] = query.order_by(AuditLogModel.id).all()
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model: AuditLogModel) -> AuditLog:
        return AuditLog(
            id=model.id,
            entity_type=model.entity_type,
            entity_id=model.entity_id,
            action=model.action,
            old_values=model.old_values,
            new_values=model.new_values,
            actor=model.actor,
            notes=model.notes,
            created_at=ensure_app_timezone(model.created_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: AuditLogModel, entry: AuditLog) -> None:
        model.entity_type = entry.entity_type
        model.entity_id = entry.entity_id
        model.action = entry.action
        model.old_values = entry.old_values
        model.new_values = entry.new_values
        model.actor = entry.actor
        model.notes = entry.notes
        model.created_at = ensure_app_timezone(entry.created_at) or now_in_app_timezone()


__all__ = ["AuditLogRepository"]
