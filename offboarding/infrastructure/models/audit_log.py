"""SQLAlchemy model for audit records of offboarding changes."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from offboarding.infrastructure.database import Base
from offboarding.infrastructure.models._types import json_type
from offboarding.utils import now_in_app_timezone


class AuditLogModel(Base):
    """Database representation of audit events."""

    __tablename__ = "offboarding_audit_log"

    id = Column(Integer, primary_key=True, index=True)
    entity_type = Column(String(20), nullable=False, index=True)
    entity_id = Column(Integer, nullable=False, index=True)
    action = Column(String(50), nullable=False)
    old_values = Column(json_type, nullable=True)
    new_values = Column(json_type, nullable=True)
    actor = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )


__all__ = ["AuditLogModel"]
