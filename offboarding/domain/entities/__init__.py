"""Domain entities exposed by the application."""

from .audit_log import AUDIT_ENTITY_TYPES, AuditLog
from .person import (
    ASSOCIATE_STATUSES,
    EMPLOYMENT_STATUSES,
    PERSON_TYPE_ASSOCIATE,
    PERSON_TYPE_EMPLOYEE,
    PERSON_TYPES,
    Affiliation,
    Association,
    Employment,
    Person,
)
from .process import (
    APPROVAL_KINDS,
    DEFAULT_PROCESS_PRIORITY,
    PROCESS_PRIORITIES,
    PROCESS_STATUS_ACTIVE,
    PROCESS_STATUS_CANCELLED,
    PROCESS_STATUS_COMPLETED,
    PROCESS_STATUS_DRAFT,
    PROCESS_STATUS_OVERDUE,
    PROCESS_STATUS_PENDING_APPROVAL,
    PROCESS_STATUSES,
    TERMINAL_PROCESS_STATUSES,
    OffboardingProcess,
    ProcessDraft,
    TaskDraft,
)
from .progress import (
    PROGRESS_SOURCE_CACHED,
    PROGRESS_SOURCE_STATUS_ESTIMATE,
    PROGRESS_SOURCE_TASKS,
    ProcessProgress,
)
from .task import (
    DOCUMENT_STATUS_APPROVED,
    DOCUMENT_STATUS_PENDING,
    DOCUMENT_STATUS_REJECTED,
    DOCUMENT_STATUS_SUBMITTED,
    DOCUMENT_STATUSES,
    TASK_STATUS_BLOCKED,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_OVERDUE,
    TASK_STATUS_PENDING,
    TASK_STATUSES,
    OffboardingDocument,
    OffboardingTask,
)
from .template import (
    ASSIGNEE_ROLES,
    DOCUMENT_TYPES,
    EVIDENCE_TYPES,
    SENIORITY_LEVELS,
    TASK_CATEGORIES,
    TEMPLATE_SCOPE_COMPANY_WIDE,
    TEMPLATE_SCOPE_DEPARTMENT,
    TEMPLATE_SCOPE_ROLE,
    TEMPLATE_SCOPES,
    DocumentTemplate,
    OffboardingTemplate,
    TaskTemplate,
)

__all__ = [
    "APPROVAL_KINDS",
    "ASSIGNEE_ROLES",
    "ASSOCIATE_STATUSES",
    "AUDIT_ENTITY_TYPES",
    "Affiliation",
    "Association",
    "AuditLog",
    "DEFAULT_PROCESS_PRIORITY",
    "DOCUMENT_STATUSES",
    "DOCUMENT_STATUS_APPROVED",
    "DOCUMENT_STATUS_PENDING",
    "DOCUMENT_STATUS_REJECTED",
    "DOCUMENT_STATUS_SUBMITTED",
    "DOCUMENT_TYPES",
    "DocumentTemplate",
    "EMPLOYMENT_STATUSES",
    "EVIDENCE_TYPES",
    "Employment",
    "OffboardingDocument",
    "OffboardingProcess",
    "OffboardingTask",
    "OffboardingTemplate",
    "PERSON_TYPES",
    "PERSON_TYPE_ASSOCIATE",
    "PERSON_TYPE_EMPLOYEE",
    "PROCESS_PRIORITIES",
    "PROCESS_STATUSES",
    "PROCESS_STATUS_ACTIVE",
    "PROCESS_STATUS_CANCELLED",
    "PROCESS_STATUS_COMPLETED",
    "PROCESS_STATUS_DRAFT",
    "PROCESS_STATUS_OVERDUE",
    "PROCESS_STATUS_PENDING_APPROVAL",
    "PROGRESS_SOURCE_CACHED",
    "PROGRESS_SOURCE_STATUS_ESTIMATE",
    "PROGRESS_SOURCE_TASKS",
    "Person",
    "ProcessDraft",
    "ProcessProgress",
    "SENIORITY_LEVELS",
    "TASK_CATEGORIES",
    "TASK_STATUSES",
    "TASK_STATUS_BLOCKED",
    "TASK_STATUS_COMPLETED",
    "TASK_STATUS_IN_PROGRESS",
    "TASK_STATUS_OVERDUE",
    "TASK_STATUS_PENDING",
    "TEMPLATE_SCOPES",
    "TEMPLATE_SCOPE_COMPANY_WIDE",
    "TEMPLATE_SCOPE_DEPARTMENT",
    "TEMPLATE_SCOPE_ROLE",
    "TERMINAL_PROCESS_STATUSES",
    "TaskDraft",
    "TaskTemplate",
]
