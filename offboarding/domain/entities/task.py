"""Domain entities for tasks and documents inside an offboarding process."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

TASK_STATUS_PENDING = "pending"
TASK_STATUS_IN_PROGRESS = "in_progress"
TASK_STATUS_COMPLETED = "completed"
TASK_STATUS_BLOCKED = "blocked"
TASK_STATUS_OVERDUE = "overdue"

TASK_STATUSES = (
    TASK_STATUS_PENDING,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_BLOCKED,
    TASK_STATUS_OVERDUE,
)

DOCUMENT_STATUS_PENDING = "pending"
DOCUMENT_STATUS_SUBMITTED = "submitted"
DOCUMENT_STATUS_APPROVED = "approved"
DOCUMENT_STATUS_REJECTED = "rejected"

DOCUMENT_STATUSES = (
    DOCUMENT_STATUS_PENDING,
    DOCUMENT_STATUS_SUBMITTED,
    DOCUMENT_STATUS_APPROVED,
    DOCUMENT_STATUS_REJECTED,
)


@dataclass
class OffboardingTask:
    """A unit of work instantiated from a task template."""

    id: int | None
    process_id: int | None
    task_template_id: int | None
    name: str
    category: str
    sort_order: int
    status: str = TASK_STATUS_PENDING
    description: str | None = None
    instructions: str | None = None
    is_mandatory: bool = True
    assigned_to_role: str | None = None
    custom_assignee_role: str | None = None
    assignee: str | None = None
    due_date: date | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    estimated_hours: float | None = None
    actual_hours: float | None = None
    depends_on_task_ids: tuple[int, ...] = ()
    requires_approval: bool = False
    approval_role: str | None = None
    approved_by: str | None = None
    approved_at: datetime | None = None
    requires_evidence: bool = False
    evidence_types: tuple[str, ...] = ()
    evidence_files: tuple[str, ...] = ()
    blocked_reason: str | None = None
    completion_notes: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == TASK_STATUS_COMPLETED


@dataclass
class OffboardingDocument:
    """Placeholder for a document required by a task."""

    id: int | None
    process_id: int | None
    task_id: int | None
    document_template_id: int | None
    name: str
    document_type: str
    is_mandatory: bool = True
    status: str = DOCUMENT_STATUS_PENDING
    file_reference: str | None = None
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None


__all__ = [
    "DOCUMENT_STATUSES",
    "DOCUMENT_STATUS_APPROVED",
    "DOCUMENT_STATUS_PENDING",
    "DOCUMENT_STATUS_REJECTED",
    "DOCUMENT_STATUS_SUBMITTED",
    "OffboardingDocument",
    "OffboardingTask",
    "TASK_STATUSES",
    "TASK_STATUS_BLOCKED",
    "TASK_STATUS_COMPLETED",
    "TASK_STATUS_IN_PROGRESS",
    "TASK_STATUS_OVERDUE",
    "TASK_STATUS_PENDING",
]
