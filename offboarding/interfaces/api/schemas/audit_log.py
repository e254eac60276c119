"""Schemas for audit log endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class AuditLogRead(BaseModel):
    """Representation of an audit log entry returned by the API."""

    id: int
    entity_type: str
    entity_id: int
    action: str
    old_values: dict[str, Any] | None
    new_values: dict[str, Any] | None
    actor: str | None
    notes: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["AuditLogRead"]
