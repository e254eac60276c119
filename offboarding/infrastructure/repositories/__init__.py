"""Repository implementations for infrastructure layer."""

from .audit_log_repository import AuditLogRepository
from .person_repository import PersonRepository
from .process_repository import ProcessRepository
from .template_repository import TemplateRepository

__all__ = [
    "AuditLogRepository",
    "PersonRepository",
    "ProcessRepository",
    "TemplateRepository",
]
