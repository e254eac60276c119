"""Schemas for the template catalog endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DocumentTemplateCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    document_type: str
    is_mandatory: bool = True
    description: str | None = None


class TaskTemplateCreate(BaseModel):
    """Task blueprint; ``depends_on`` lists sibling task names."""

    name: str = Field(..., min_length=1, max_length=200)
    category: str
    sort_order: int = Field(..., ge=0)
    estimated_hours: float = Field(1.0, ge=0)
    description: str | None = None
    instructions: str | None = None
    is_mandatory: bool = True
    default_assignee_role: str | None = None
    custom_assignee_role: str | None = None
    requires_approval: bool = False
    approval_role: str | None = None
    requires_evidence: bool = False
    evidence_types: list[str] = Field(default_factory=list)
    depends_on: list[str] = Field(default_factory=list)
    documents: list[DocumentTemplateCreate] = Field(default_factory=list)


class TemplateCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    scope: str
    description: str | None = None
    department: str | None = None
    role_category: str | None = None
    seniority_level: str | None = None
    estimated_duration_days: int | None = Field(None, gt=0)
    complexity_score: int = Field(1, ge=1, le=5)
    is_default: bool = False
    requires_manager_approval: bool = True
    requires_hr_approval: bool = True
    requires_security_review: bool = False
    created_by: str | None = None
    tasks: list[TaskTemplateCreate] = Field(default_factory=list)


class DocumentTemplateRead(BaseModel):
    id: int
    name: str
    document_type: str
    is_mandatory: bool
    description: str | None

    model_config = ConfigDict(from_attributes=True)


class TaskTemplateRead(BaseModel):
    id: int
    name: str
    category: str
    sort_order: int
    estimated_hours: float
    description: str | None
    instructions: str | None
    is_mandatory: bool
    default_assignee_role: str | None
    custom_assignee_role: str | None
    requires_approval: bool
    approval_role: str | None
    requires_evidence: bool
    evidence_types: list[str]
    depends_on: list[int]
    documents: list[DocumentTemplateRead]

    model_config = ConfigDict(from_attributes=True)


class TemplateRead(BaseModel):
    """Representation of a template returned by the API."""

    id: int
    name: str
    scope: str
    description: str | None
    department: str | None
    role_category: str | None
    seniority_level: str | None
    estimated_duration_days: int
    complexity_score: int
    is_default: bool
    is_active: bool
    requires_manager_approval: bool
    requires_hr_approval: bool
    requires_security_review: bool
    created_by: str | None
    created_at: datetime | None
    updated_at: datetime | None
    tasks: list[TaskTemplateRead]

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "DocumentTemplateCreate",
    "DocumentTemplateRead",
    "TaskTemplateCreate",
    "TaskTemplateRead",
    "TemplateCreate",
    "TemplateRead",
]
