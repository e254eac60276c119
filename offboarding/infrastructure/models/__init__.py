"""ORM models used by the application infrastructure."""

from .audit_log import AuditLogModel
from .person import PersonModel
from .process import (
    OffboardingDocumentModel,
    OffboardingProcessModel,
    OffboardingTaskModel,
)
from .template import (
    DocumentTemplateModel,
    OffboardingTemplateModel,
    TaskTemplateModel,
)

__all__ = [
    "AuditLogModel",
    "DocumentTemplateModel",
    "OffboardingDocumentModel",
    "OffboardingProcessModel",
    "OffboardingTaskModel",
    "OffboardingTemplateModel",
    "PersonModel",
    "TaskTemplateModel",
]
