"""SQLAlchemy models for offboarding templates and their task/document blueprints."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from offboarding.infrastructure.database import Base
from offboarding.infrastructure.models._types import json_type
from offboarding.utils import now_in_app_timezone


class OffboardingTemplateModel(Base):
    """Database representation of an offboarding template."""

    __tablename__ = "offboarding_template"
    __table_args__ = (
        CheckConstraint(
            "complexity_score BETWEEN 1 AND 5", name="ck_template_complexity"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    scope = Column(String(30), nullable=False, index=True)
    department = Column(String(100), nullable=True)
    role_category = Column(String(100), nullable=True)
    seniority_level = Column(String(30), nullable=True)
    estimated_duration_days = Column(Integer, nullable=False, default=14)
    complexity_score = Column(Integer, nullable=False, default=1)
    is_default = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    requires_manager_approval = Column(Boolean, nullable=False, default=True)
    requires_hr_approval = Column(Boolean, nullable=False, default=True)
    requires_security_review = Column(Boolean, nullable=False, default=False)
    created_by = Column(String(100), nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )
    deleted = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    deleted_by = Column(String(100), nullable=True)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    tasks = relationship(
        "TaskTemplateModel",
        back_populates="template",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TaskTemplateModel.sort_order",
    )


class TaskTemplateModel(Base):
    """Database representation of a task blueprint inside a template."""

    __tablename__ = "offboarding_task_template"

    id = Column(Integer, primary_key=True, index=True)
    template_id = Column(
        Integer,
        ForeignKey("offboarding_template.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    instructions = Column(Text, nullable=True)
    category = Column(String(30), nullable=False)
    is_mandatory = Column(Boolean, nullable=False, default=True)
    estimated_hours = Column(Float, nullable=False, default=1.0)
    sort_order = Column(Integer, nullable=False, default=0)
    default_assignee_role = Column(String(30), nullable=True)
    custom_assignee_role = Column(String(100), nullable=True)
    requires_approval = Column(Boolean, nullable=False, default=False)
    approval_role = Column(String(30), nullable=True)
    requires_evidence = Column(Boolean, nullable=False, default=False)
    evidence_types = Column(json_type, nullable=True)
    depends_on = Column(json_type, nullable=True)

    template = relationship("OffboardingTemplateModel", back_populates="tasks")
    documents = relationship(
        "DocumentTemplateModel",
        back_populates="task_template",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="DocumentTemplateModel.id",
    )


class DocumentTemplateModel(Base):
    """Database representation of a document required by a task blueprint."""

    __tablename__ = "offboarding_document_template"

    id = Column(Integer, primary_key=True, index=True)
    task_template_id = Column(
        Integer,
        ForeignKey("offboarding_task_template.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    document_type = Column(String(30), nullable=False)
    is_mandatory = Column(Boolean, nullable=False, default=True)

    task_template = relationship("TaskTemplateModel", back_populates="documents")


__all__ = ["DocumentTemplateModel", "OffboardingTemplateModel", "TaskTemplateModel"]
