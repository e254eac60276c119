"""Domain entities describing reusable offboarding templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

TEMPLATE_SCOPE_COMPANY_WIDE = "company_wide"
TEMPLATE_SCOPE_DEPARTMENT = "department_specific"
TEMPLATE_SCOPE_ROLE = "role_specific"
TEMPLATE_SCOPES = (
    TEMPLATE_SCOPE_COMPANY_WIDE,
    TEMPLATE_SCOPE_DEPARTMENT,
    TEMPLATE_SCOPE_ROLE,
)

SENIORITY_LEVELS = (
    "junior",
    "mid_level",
    "senior",
    "principal",
    "leadership",
    "executive",
)

TASK_CATEGORIES = (
    "exit_interview",
    "equipment_return",
    "documentation",
    "access_revocation",
    "knowledge_transfer",
    "final_procedures",
    "compliance",
    "communication",
    "transition_planning",
)

ASSIGNEE_ROLES = (
    "departing_employee",
    "direct_manager",
    "hr_representative",
    "it_administrator",
    "security_officer",
    "department_head",
    "custom",
)

EVIDENCE_TYPES = ("document", "screenshot", "signature", "confirmation")

DOCUMENT_TYPES = (
    "checklist",
    "form",
    "agreement",
    "handover_document",
    "knowledge_base",
    "contact_list",
    "procedure_guide",
    "other",
)


@dataclass(frozen=True)
class DocumentTemplate:
    """A document a task of the template must produce or collect."""

    id: int | None
    task_template_id: int | None
    name: str
    document_type: str
    is_mandatory: bool = True
    description: str | None = None


@dataclass
class TaskTemplate:
    """Blueprint for one unit of work inside an offboarding template."""

    id: int | None
    template_id: int | None
    name: str
    category: str
    sort_order: int
    estimated_hours: float = 1.0
    description: str | None = None
    instructions: str | None = None
    is_mandatory: bool = True
    default_assignee_role: str | None = None
    custom_assignee_role: str | None = None
    requires_approval: bool = False
    approval_role: str | None = None
    requires_evidence: bool = False
    evidence_types: tuple[str, ...] = ()
    depends_on: tuple[int, ...] = ()
    documents: list[DocumentTemplate] = field(default_factory=list)


@dataclass
class OffboardingTemplate:
    """Reusable process definition scoped company-wide, by department or by role."""

    id: int | None
    name: str
    scope: str
    description: str | None = None
    department: str | None = None
    role_category: str | None = None
    seniority_level: str | None = None
    estimated_duration_days: int = 14
    complexity_score: int = 1
    is_default: bool = False
    is_active: bool = True
    requires_manager_approval: bool = True
    requires_hr_approval: bool = True
    requires_security_review: bool = False
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted: bool = False
    deleted_by: str | None = None
    deleted_at: datetime | None = None
    tasks: list[TaskTemplate] = field(default_factory=list)

    @property
    def ordered_tasks(self) -> list[TaskTemplate]:
        """Return the task templates by ``sort_order`` (stable for ties)."""

        return sorted(self.tasks, key=lambda task: task.sort_order)

    @property
    def filter_fields(self) -> dict[str, str | None]:
        """Return the scope filter values keyed by the person attribute they match."""

        return {
            "department": self.department,
            "role_category": self.role_category,
            "seniority_level": self.seniority_level,
        }


__all__ = [
    "ASSIGNEE_ROLES",
    "DOCUMENT_TYPES",
    "DocumentTemplate",
    "EVIDENCE_TYPES",
    "OffboardingTemplate",
    "SENIORITY_LEVELS",
    "TASK_CATEGORIES",
    "TEMPLATE_SCOPES",
    "TEMPLATE_SCOPE_COMPANY_WIDE",
    "TEMPLATE_SCOPE_DEPARTMENT",
    "TEMPLATE_SCOPE_ROLE",
    "TaskTemplate",
]
