from .audit_log import AuditLogRead
from .person import PersonCreate, PersonRead
from .process import (
    DocumentRead,
    DocumentStatusUpdate,
    OverdueSweepRead,
    ProcessApprovalCreate,
    ProcessCreate,
    ProcessDetailRead,
    ProcessRead,
    ProcessStatusUpdate,
    ProgressRead,
    TaskRead,
    TaskStatusUpdate,
)
from .template import (
    DocumentTemplateCreate,
    DocumentTemplateRead,
    TaskTemplateCreate,
    TaskTemplateRead,
    TemplateCreate,
    TemplateRead,
)

__all__ = [
    "AuditLogRead",
    "DocumentRead",
    "DocumentStatusUpdate",
    "DocumentTemplateCreate",
    "DocumentTemplateRead",
    "OverdueSweepRead",
    "PersonCreate",
    "PersonRead",
    "ProcessApprovalCreate",
    "ProcessCreate",
    "ProcessDetailRead",
    "ProcessRead",
    "ProcessStatusUpdate",
    "ProgressRead",
    "TaskRead",
    "TaskStatusUpdate",
    "TaskTemplateCreate",
    "TaskTemplateRead",
    "TemplateCreate",
    "TemplateRead",
]
