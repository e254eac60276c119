"""Domain entity representing an instantiated offboarding process."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from .task import OffboardingDocument, OffboardingTask

PROCESS_STATUS_DRAFT = "draft"
PROCESS_STATUS_PENDING_APPROVAL = "pending_approval"
PROCESS_STATUS_ACTIVE = "active"
PROCESS_STATUS_OVERDUE = "overdue"
PROCESS_STATUS_COMPLETED = "completed"
PROCESS_STATUS_CANCELLED = "cancelled"

PROCESS_STATUSES = (
    PROCESS_STATUS_DRAFT,
    PROCESS_STATUS_PENDING_APPROVAL,
    PROCESS_STATUS_ACTIVE,
    PROCESS_STATUS_OVERDUE,
    PROCESS_STATUS_COMPLETED,
    PROCESS_STATUS_CANCELLED,
)
TERMINAL_PROCESS_STATUSES = frozenset(
    {PROCESS_STATUS_COMPLETED, PROCESS_STATUS_CANCELLED}
)

PROCESS_PRIORITIES = ("low", "medium", "high", "urgent")
DEFAULT_PROCESS_PRIORITY = "medium"

APPROVAL_KINDS = ("manager", "hr", "security")


@dataclass
class OffboardingProcess:
    """One offboarding workflow for a single departing person.

    Employee department, role and seniority are copied from the person record
    when the process is created and are not refreshed afterwards.
    """

    id: int | None
    template_id: int
    person_id: int
    process_name: str
    employee_uid: str
    employee_department: str | None
    employee_role: str | None
    employee_seniority: str | None
    status: str = PROCESS_STATUS_DRAFT
    priority: str = DEFAULT_PROCESS_PRIORITY
    target_completion_date: date | None = None
    actual_start_date: date | None = None
    actual_completion_date: date | None = None
    estimated_total_hours: float | None = None
    complexity_score: int | None = None
    requires_manager_approval: bool = True
    requires_hr_approval: bool = True
    requires_security_review: bool = False
    manager_approved_at: datetime | None = None
    manager_approved_by: str | None = None
    hr_approved_at: datetime | None = None
    hr_approved_by: str | None = None
    security_approved_at: datetime | None = None
    security_approved_by: str | None = None
    notes: str | None = None
    custom_fields: dict[str, Any] = field(default_factory=dict)
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_PROCESS_STATUSES

    def missing_approvals(self) -> tuple[str, ...]:
        """Return the approval kinds still required before activation."""

        missing: list[str] = []
        if self.requires_manager_approval and self.manager_approved_at is None:
            missing.append("manager")
        if self.requires_hr_approval and self.hr_approved_at is None:
            missing.append("hr")
        if self.requires_security_review and self.security_approved_at is None:
            missing.append("security")
        return tuple(missing)


@dataclass
class TaskDraft:
    """A task waiting to be persisted together with its documents.

    ``depends_on_template_ids`` still points at task template ids; the
    repository rewrites them to the ids of the persisted sibling tasks.
    """

    task: OffboardingTask
    documents: list[OffboardingDocument] = field(default_factory=list)
    depends_on_template_ids: tuple[int, ...] = ()


@dataclass
class ProcessDraft:
    """A process and its tasks built from a template, not yet persisted."""

    process: OffboardingProcess
    tasks: list[TaskDraft] = field(default_factory=list)


__all__ = [
    "APPROVAL_KINDS",
    "DEFAULT_PROCESS_PRIORITY",
    "OffboardingProcess",
    "ProcessDraft",
    "TaskDraft",
    "PROCESS_PRIORITIES",
    "PROCESS_STATUSES",
    "PROCESS_STATUS_ACTIVE",
    "PROCESS_STATUS_CANCELLED",
    "PROCESS_STATUS_COMPLETED",
    "PROCESS_STATUS_DRAFT",
    "PROCESS_STATUS_OVERDUE",
    "PROCESS_STATUS_PENDING_APPROVAL",
    "TERMINAL_PROCESS_STATUSES",
]
