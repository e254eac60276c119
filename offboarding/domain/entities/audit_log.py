"""Domain entity representing an audit entry for offboarding records."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

AUDIT_ENTITY_TYPES = ("process", "task", "document", "template", "person")


@dataclass
class AuditLog:
    """Captured information about a change to an offboarding record."""

    id: int | None
    entity_type: str
    entity_id: int
    action: str
    old_values: dict[str, Any] | None
    new_values: dict[str, Any] | None
    actor: str | None
    notes: str | None
    created_at: datetime | None


__all__ = ["AUDIT_ENTITY_TYPES", "AuditLog"]
