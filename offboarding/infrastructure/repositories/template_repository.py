"""Persistence layer for offboarding templates."""

from collections.abc import Mapping, Sequence

from sqlalchemy import false, func
from sqlalchemy.orm import Session, selectinload

from offboarding.domain.entities import (
    DocumentTemplate,
    OffboardingTemplate,
    TaskTemplate,
)
from offboarding.infrastructure.database import commit_or_raise, persistence_guard
from offboarding.infrastructure.models import (
    DocumentTemplateModel,
    OffboardingTemplateModel,
    TaskTemplateModel,
)
from offboarding.utils import ensure_app_timezone, now_in_app_timezone


class TemplateRepository:
    """Provide CRUD operations for offboarding templates."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, include_inactive: bool = False) -> Sequence[OffboardingTemplate]:
        query = self._base_query()
        if not include_inactive:
            query = query.filter(OffboardingTemplateModel.is_active.is_(True))
        query = query.order_by(OffboardingTemplateModel.name, OffboardingTemplateModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, template_id: int) -> OffboardingTemplate | None:
        model = self._base_query().filter(OffboardingTemplateModel.id == template_id).first()
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> OffboardingTemplate | None:
        normalized_name = name.strip().lower()
        model = (
            self._base_query()
            .filter(func.lower(OffboardingTemplateModel.name) == normalized_name)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(
        self,
        template: OffboardingTemplate,
        *,
        task_dependencies: Mapping[int, Sequence[int]] | None = None,
    ) -> OffboardingTemplate:
        """Insert ``template`` with its tasks and documents in one transaction.

        ``task_dependencies`` maps a position in ``template.tasks`` to the
        positions of the tasks it depends on; positions are turned into the
        generated task template ids once those exist.
        """

        model = OffboardingTemplateModel()
        self._apply_entity_to_model(model, template)
        model.created_by = template.created_by
        model.created_at = ensure_app_timezone(template.created_at) or now_in_app_timezone()

        task_models: list[TaskTemplateModel] = []
        for task in template.tasks:
            task_model = TaskTemplateModel()
            self._apply_task_to_model(task_model, task)
            task_model.documents = [
                self._document_to_model(document) for document in task.documents
            ]
            task_models.append(task_model)
        model.tasks = task_models

        with persistence_guard(self.session, action="create offboarding template"):
            self.session.add(model)
            self.session.flush()
            for position, depends_on in (task_dependencies or {}).items():
                task_models[position].depends_on = [
                    task_models[dependency].id for dependency in depends_on
                ]
            self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, template_id: int, *, deleted_by: str | None = None) -> None:
        model = (
            self.session.query(OffboardingTemplateModel)
            .filter(OffboardingTemplateModel.id == template_id)
            .first()
        )
        if model is None:
            msg = f"Template with id {template_id} not found"
            raise ValueError(msg)
        if model.deleted:
            return
        now = now_in_app_timezone()
        model.deleted = True
        model.deleted_by = deleted_by
        model.deleted_at = now
        model.is_active = False
        self.session.add(model)
        commit_or_raise(self.session, action="delete offboarding template")

    def _base_query(self):
        return (
            self.session.query(OffboardingTemplateModel)
            .options(
                selectinload(OffboardingTemplateModel.tasks).selectinload(
                    TaskTemplateModel.documents
                )
            )
            .filter(OffboardingTemplateModel.deleted == false())
        )

    @staticmethod
    def _to_entity(model: OffboardingTemplateModel) -> OffboardingTemplate:
        tasks = [TemplateRepository._task_to_entity(task) for task in model.tasks]
        return OffboardingTemplate(
            id=model.id,
            name=model.name,
            scope=model.scope,
            description=model.description,
            department=model.department,
            role_category=model.role_category,
            seniority_level=model.seniority_level,
            estimated_duration_days=model.estimated_duration_days,
            complexity_score=model.complexity_score,
            is_default=model.is_default,
            is_active=model.is_active,
            requires_manager_approval=model.requires_manager_approval,
            requires_hr_approval=model.requires_hr_approval,
            requires_security_review=model.requires_security_review,
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            deleted=model.deleted,
            deleted_by=model.deleted_by,
            deleted_at=ensure_app_timezone(model.deleted_at),
            tasks=tasks,
        )

    @staticmethod
    def _task_to_entity(model: TaskTemplateModel) -> TaskTemplate:
        return TaskTemplate(
            id=model.id,
            template_id=model.template_id,
            name=model.name,
            category=model.category,
            sort_order=model.sort_order,
            estimated_hours=model.estimated_hours,
            description=model.description,
            instructions=model.instructions,
            is_mandatory=model.is_mandatory,
            default_assignee_role=model.default_assignee_role,
            custom_assignee_role=model.custom_assignee_role,
            requires_approval=model.requires_approval,
            approval_role=model.approval_role,
            requires_evidence=model.requires_evidence,
            evidence_types=tuple(model.evidence_types or ()),
            depends_on=tuple(model.depends_on or ()),
            documents=[
                DocumentTemplate(
                    id=document.id,
                    task_template_id=document.task_template_id,
                    name=document.name,
                    document_type=document.document_type,
                    is_mandatory=document.is_mandatory,
                    description=document.description,
                )
                for document in model.documents
            ],
        )

    @staticmethod
    def _apply_entity_to_model(
        model: OffboardingTemplateModel, template: OffboardingTemplate
    ) -> None:
        model.name = template.name
        model.description = template.description
        model.scope = template.scope
        model.department = template.department
        model.role_category = template.role_category
        model.seniority_level = template.seniority_level
        model.estimated_duration_days = template.estimated_duration_days
        model.complexity_score = template.complexity_score
        model.is_default = template.is_default
        model.is_active = template.is_active
        model.requires_manager_approval = template.requires_manager_approval
        model.requires_hr_approval = template.requires_hr_approval
        model.requires_security_review = template.requires_security_review

    @staticmethod
    def _apply_task_to_model(model: TaskTemplateModel, task: TaskTemplate) -> None:
        model.name = task.name
        model.description = task.description
        model.instructions = task.instructions
        model.category = task.category
        model.is_mandatory = task.is_mandatory
        model.estimated_hours = task.estimated_hours
        model.sort_order = task.sort_order
        model.default_assignee_role = task.default_assignee_role
        model.custom_assignee_role = task.custom_assignee_role
        model.requires_approval = task.requires_approval
        model.approval_role = task.approval_role
        model.requires_evidence = task.requires_evidence
        model.evidence_types = list(task.evidence_types)
        model.depends_on = list(task.depends_on)

    @staticmethod
    def _document_to_model(document: DocumentTemplate) -> DocumentTemplateModel:
        return DocumentTemplateModel(
            name=document.name,
            description=document.description,
            document_type=document.document_type,
            is_mandatory=document.is_mandatory,
        )


__all__ = ["TemplateRepository"]
