"""Template catalog use cases."""

from .create_template import (
    NewDocumentTemplateData,
    NewTaskTemplateData,
    NewTemplateData,
    create_template,
)
from .delete_template import delete_template
from .get_template import get_template
from .list_templates import find_applicable_templates, list_templates

__all__ = [
    "NewDocumentTemplateData",
    "NewTaskTemplateData",
    "NewTemplateData",
    "create_template",
    "delete_template",
    "find_applicable_templates",
    "get_template",
    "list_templates",
]
