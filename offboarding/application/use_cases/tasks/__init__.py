"""Use cases for the tasks and documents of a process."""

from .update_document_status import update_document_status
from .update_task_status import apply_task_status, update_task_status

__all__ = ["apply_task_status", "update_document_status", "update_task_status"]
