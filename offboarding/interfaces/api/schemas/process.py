"""Schemas for offboarding process, task and document endpoints."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProcessCreate(BaseModel):
    template_id: int
    person_id: int
    priority: str = "medium"
    target_completion_date: date | None = None
    process_name: str | None = Field(default=None, max_length=200)
    notes: str | None = None
    created_by: str | None = None


class ProcessStatusUpdate(BaseModel):
    status: str
    actor: str | None = None
    notes: str | None = None


class ProcessApprovalCreate(BaseModel):
    approval: str
    approved_by: str = Field(..., min_length=1, max_length=100)


class TaskStatusUpdate(BaseModel):
    status: str
    actor: str | None = None
    blocked_reason: str | None = None
    actual_hours: float | None = Field(default=None, ge=0)
    evidence_files: list[str] = Field(default_factory=list)
    approved_by: str | None = None
    completion_notes: str | None = None


class DocumentStatusUpdate(BaseModel):
    status: str
    file_reference: str | None = None
    reviewed_by: str | None = None


class ProgressRead(BaseModel):
    percentage: int
    total_tasks: int
    completed_tasks: int
    in_progress_tasks: int
    overdue_tasks: int
    source: str

    model_config = ConfigDict(from_attributes=True)


class ProcessRead(BaseModel):
    """Representation of a process returned by the API."""

    id: int
    template_id: int
    person_id: int
    process_name: str
    employee_uid: str
    employee_department: str | None
    employee_role: str | None
    employee_seniority: str | None
    status: str
    priority: str
    target_completion_date: date | None
    actual_start_date: date | None
    actual_completion_date: date | None
    estimated_total_hours: float | None
    complexity_score: int | None
    requires_manager_approval: bool
    requires_hr_approval: bool
    requires_security_review: bool
    manager_approved_at: datetime | None
    manager_approved_by: str | None
    hr_approved_at: datetime | None
    hr_approved_by: str | None
    security_approved_at: datetime | None
    security_approved_by: str | None
    notes: str | None
    custom_fields: dict[str, Any]
    created_by: str | None
    created_at: datetime | None
    updated_at: datetime | None
    progress: ProgressRead | None = None

    model_config = ConfigDict(from_attributes=True)


class TaskRead(BaseModel):
    id: int
    process_id: int
    task_template_id: int | None
    name: str
    category: str
    sort_order: int
    status: str
    description: str | None
    instructions: str | None
    is_mandatory: bool
    assigned_to_role: str | None
    custom_assignee_role: str | None
    assignee: str | None
    due_date: date | None
    started_at: datetime | None
    completed_at: datetime | None
    estimated_hours: float | None
    actual_hours: float | None
    depends_on_task_ids: list[int]
    requires_approval: bool
    approval_role: str | None
    approved_by: str | None
    approved_at: datetime | None
    requires_evidence: bool
    evidence_types: list[str]
    evidence_files: list[str]
    blocked_reason: str | None
    completion_notes: str | None

    model_config = ConfigDict(from_attributes=True)


class DocumentRead(BaseModel):
    id: int
    process_id: int
    task_id: int | None
    document_template_id: int | None
    name: str
    document_type: str
    is_mandatory: bool
    status: str
    file_reference: str | None
    reviewed_by: str | None
    reviewed_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ProcessDetailRead(ProcessRead):
    tasks: list[TaskRead] = Field(default_factory=list)
    documents: list[DocumentRead] = Field(default_factory=list)


class OverdueSweepRead(BaseModel):
    processes_marked: int
    tasks_marked: int

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "DocumentRead",
    "DocumentStatusUpdate",
    "OverdueSweepRead",
    "ProcessApprovalCreate",
    "ProcessCreate",
    "ProcessDetailRead",
    "ProcessRead",
    "ProcessStatusUpdate",
    "ProgressRead",
    "TaskRead",
    "TaskStatusUpdate",
]
