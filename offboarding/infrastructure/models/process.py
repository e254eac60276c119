"""SQLAlchemy models for offboarding processes, their tasks and documents."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from offboarding.domain.entities import TERMINAL_PROCESS_STATUSES
from offboarding.infrastructure.database import Base
from offboarding.infrastructure.models._types import json_type
from offboarding.utils import now_in_app_timezone


class OffboardingProcessModel(Base):
    """Database representation of an offboarding process instance."""

    __tablename__ = "offboarding_process"

    id = Column(Integer, primary_key=True, index=True)
    template_id = Column(
        Integer, ForeignKey("offboarding_template.id"), nullable=False, index=True
    )
    person_id = Column(Integer, ForeignKey("person.id"), nullable=False, index=True)
    process_name = Column(String(255), nullable=False)
    employee_uid = Column(String(50), nullable=False)
    employee_department = Column(String(100), nullable=True)
    employee_role = Column(String(150), nullable=True)
    employee_seniority = Column(String(30), nullable=True)
    status = Column(String(30), nullable=False, default="draft", index=True)
    priority = Column(String(20), nullable=False, default="medium")
    target_completion_date = Column(Date, nullable=True)
    actual_start_date = Column(Date, nullable=True)
    actual_completion_date = Column(Date, nullable=True)
    estimated_total_hours = Column(Float, nullable=True)
    complexity_score = Column(Integer, nullable=True)
    requires_manager_approval = Column(Boolean, nullable=False, default=True)
    requires_hr_approval = Column(Boolean, nullable=False, default=True)
    requires_security_review = Column(Boolean, nullable=False, default=False)
    manager_approved_at = Column(DateTime(timezone=True), nullable=True)
    manager_approved_by = Column(String(100), nullable=True)
    hr_approved_at = Column(DateTime(timezone=True), nullable=True)
    hr_approved_by = Column(String(100), nullable=True)
    security_approved_at = Column(DateTime(timezone=True), nullable=True)
    security_approved_by = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)
    custom_fields = Column(json_type, nullable=True)
    created_by = Column(String(100), nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )

    tasks = relationship(
        "OffboardingTaskModel",
        back_populates="process",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OffboardingTaskModel.sort_order",
    )
    documents = relationship(
        "OffboardingDocumentModel",
        back_populates="process",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OffboardingDocumentModel.id",
    )

    __table_args__ = (
        Index(
            "uq_offboarding_process_open_per_person",
            "person_id",
            unique=True,
            sqlite_where=status.notin_(sorted(TERMINAL_PROCESS_STATUSES)),
            postgresql_where=status.notin_(sorted(TERMINAL_PROCESS_STATUSES)),
        ),
    )


class OffboardingTaskModel(Base):
    """Database representation of a task inside a process."""

    __tablename__ = "offboarding_task"

    id = Column(Integer, primary_key=True, index=True)
    process_id = Column(
        Integer,
        ForeignKey("offboarding_process.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    task_template_id = Column(
        Integer, ForeignKey("offboarding_task_template.id"), nullable=True
    )
    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    instructions = Column(Text, nullable=True)
    category = Column(String(30), nullable=False)
    status = Column(String(30), nullable=False, default="pending")
    is_mandatory = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
    assigned_to_role = Column(String(30), nullable=True)
    custom_assignee_role = Column(String(100), nullable=True)
    assignee = Column(String(100), nullable=True)
    due_date = Column(Date, nullable=True)
    started_at = Column(DateTime(timezone=True), nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    estimated_hours = Column(Float, nullable=True)
    actual_hours = Column(Float, nullable=True)
    depends_on_task_ids = Column(json_type, nullable=True)
    requires_approval = Column(Boolean, nullable=False, default=False)
    approval_role = Column(String(30), nullable=True)
    approved_by = Column(String(100), nullable=True)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    requires_evidence = Column(Boolean, nullable=False, default=False)
    evidence_types = Column(json_type, nullable=True)
    evidence_files = Column(json_type, nullable=True)
    blocked_reason = Column(Text, nullable=True)
    completion_notes = Column(Text, nullable=True)

    process = relationship("OffboardingProcessModel", back_populates="tasks")


class OffboardingDocumentModel(Base):
    """Database representation of a document placeholder inside a process."""

    __tablename__ = "offboarding_document"

    id = Column(Integer, primary_key=True, index=True)
    process_id = Column(
        Integer,
        ForeignKey("offboarding_process.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    task_id = Column(
        Integer,
        ForeignKey("offboarding_task.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    document_template_id = Column(
        Integer, ForeignKey("offboarding_document_template.id"), nullable=True
    )
    name = Column(String(150), nullable=False)
    document_type = Column(String(30), nullable=False)
    is_mandatory = Column(Boolean, nullable=False, default=True)
    status = Column(String(30), nullable=False, default="pending")
    file_reference = Column(String(500), nullable=True)
    reviewed_by = Column(String(100), nullable=True)
    reviewed_at = Column(DateTime(timezone=True), nullable=True)

    process = relationship("OffboardingProcessModel", back_populates="documents")


__all__ = [
    "OffboardingDocumentModel",
    "OffboardingProcessModel",
    "OffboardingTaskModel",
]
