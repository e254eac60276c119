"""Persistence layer for offboarding processes, tasks and documents."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from offboarding.domain.entities import (
    TERMINAL_PROCESS_STATUSES,
    OffboardingDocument,
    OffboardingProcess,
    OffboardingTask,
    ProcessDraft,
)
from offboarding.domain.exceptions import DuplicateProcessError
from offboarding.infrastructure.database import commit_or_raise, persistence_guard
from offboarding.infrastructure.models import (
    OffboardingDocumentModel,
    OffboardingProcessModel,
    OffboardingTaskModel,
)
from offboarding.utils import ensure_app_timezone, now_in_app_timezone


class ProcessRepository:
    """Provide CRUD operations for processes and their tasks and documents."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, statuses: Sequence[str] | None = None) -> list[OffboardingProcess]:
        query = self.session.query(OffboardingProcessModel)
        if statuses:
            query = query.filter(OffboardingProcessModel.status.in_(tuple(statuses)))
        query = query.order_by(OffboardingProcessModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, process_id: int) -> OffboardingProcess | None:
        model = self.session.get(OffboardingProcessModel, process_id)
        return self._to_entity(model) if model else None

    def find_open_for_person(self, person_id: int) -> OffboardingProcess | None:
        model = (
            self.session.query(OffboardingProcessModel)
            .filter(OffboardingProcessModel.person_id == person_id)
            .filter(
                OffboardingProcessModel.status.notin_(tuple(TERMINAL_PROCESS_STATUSES))
            )
            .order_by(OffboardingProcessModel.id)
            .first()
        )
        return self._to_entity(model) if model else None

    def list_tasks(self, process_id: int) -> list[OffboardingTask]:
        return self.list_tasks_by_process([process_id]).get(process_id, [])

    def list_tasks_by_process(
        self, process_ids: Iterable[int]
    ) -> dict[int, list[OffboardingTask]]:
        ids = list(process_ids)
        if not ids:
            return {}
        models = (
            self.session.query(OffboardingTaskModel)
            .filter(OffboardingTaskModel.process_id.in_(ids))
            .order_by(OffboardingTaskModel.sort_order, OffboardingTaskModel.id)
            .all()
        )
        grouped: dict[int, list[OffboardingTask]] = defaultdict(list)
        for model in models:
            grouped[model.process_id].append(self._task_to_entity(model))
        return dict(grouped)

    def list_documents(self, process_id: int) -> list[OffboardingDocument]:
        models = (
            self.session.query(OffboardingDocumentModel)
            .filter(OffboardingDocumentModel.process_id == process_id)
            .order_by(OffboardingDocumentModel.id)
            .all()
        )
        return [self._document_to_entity(model) for model in models]

    def create(self, draft: ProcessDraft, *, commit: bool = True) -> OffboardingProcess:
        """Persist the process, its tasks and documents in a single transaction.

        Task dependencies are rewritten from task template ids to the ids of
        the tasks created here. Nothing is kept if any insert fails. With
        ``commit=False`` the rows are only flushed so the caller can add to
        the same transaction.

        Raises:
            DuplicateProcessError: If the person already has an open process.
        """

        person_id = draft.process.person_id
        model = OffboardingProcessModel()
        self._apply_entity_to_model(model, draft.process)
        model.created_by = draft.process.created_by
        model.created_at = (
            ensure_app_timezone(draft.process.created_at) or now_in_app_timezone()
        )
        with persistence_guard(self.session, action="create offboarding process"):
            try:
                self._insert_draft(model, draft)
                if commit:
                    self.session.commit()
            except IntegrityError as exc:
                self.session.rollback()
                existing = self.find_open_for_person(person_id)
                if existing is None:
                    raise
                raise DuplicateProcessError(person_id, existing.id) from exc
        self.session.refresh(model)
        return self._to_entity(model)

    def _insert_draft(self, model: OffboardingProcessModel, draft: ProcessDraft) -> None:
        self.session.add(model)
        self.session.flush()

        task_models: list[tuple[OffboardingTaskModel, tuple[int, ...]]] = []
        instance_ids: dict[int, int] = {}
        for task_draft in draft.tasks:
            task_model = OffboardingTaskModel(process_id=model.id)
            self._apply_task_to_model(task_model, task_draft.task)
            self.session.add(task_model)
            self.session.flush()
            if task_draft.task.task_template_id is not None:
                instance_ids[task_draft.task.task_template_id] = task_model.id
            task_models.append((task_model, task_draft.depends_on_template_ids))

            for document in task_draft.documents:
                document_model = OffboardingDocumentModel(
                    process_id=model.id, task_id=task_model.id
                )
                self._apply_document_to_model(document_model, document)
                self.session.add(document_model)

        for task_model, depends_on in task_models:
            task_model.depends_on_task_ids = [
                instance_ids[template_id] for template_id in depends_on
            ]

    def save(
        self,
        process: OffboardingProcess,
        *,
        tasks: Iterable[OffboardingTask] = (),
        documents: Iterable[OffboardingDocument] = (),
    ) -> OffboardingProcess:
        """Write the changed process, tasks and documents in one commit."""

        model = self.session.get(OffboardingProcessModel, process.id)
        if model is None:
            msg = f"Process with id {process.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, process)
        for task in tasks:
            task_model = self.session.get(OffboardingTaskModel, task.id)
            if task_model is None or task_model.process_id != process.id:
                msg = f"Task with id {task.id} not found in process {process.id}"
                raise ValueError(msg)
            self._apply_task_to_model(task_model, task)
            task_model.depends_on_task_ids = list(task.depends_on_task_ids)
        for document in documents:
            document_model = self.session.get(OffboardingDocumentModel, document.id)
            if document_model is None or document_model.process_id != process.id:
                msg = f"Document with id {document.id} not found in process {process.id}"
                raise ValueError(msg)
            self._apply_document_to_model(document_model, document)
        commit_or_raise(self.session, action="update offboarding process")
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, process_id: int) -> bool:
        model = self.session.get(OffboardingProcessModel, process_id)
        if model is None:
            return False
        self.session.delete(model)
        commit_or_raise(self.session, action="delete offboarding process")
        return True

    @staticmethod
    def _to_entity(model: OffboardingProcessModel) -> OffboardingProcess:
        return OffboardingProcess(
            id=model.id,
            template_id=model.template_id,
            person_id=model.person_id,
            process_name=model.process_name,
            employee_uid=model.employee_uid,
            employee_department=model.employee_department,
            employee_role=model.employee_role,
            employee_seniority=model.employee_seniority,
            status=model.status,
            priority=model.priority,
            target_completion_date=model.target_completion_date,
            actual_start_date=model.actual_start_date,
            actual_completion_date=model.actual_completion_date,
            estimated_total_hours=model.estimated_total_hours,
            complexity_score=model.complexity_score,
            requires_manager_approval=model.requires_manager_approval,
            requires_hr_approval=model.requires_hr_approval,
            requires_security_review=model.requires_security_review,
            manager_approved_at=ensure_app_timezone(model.manager_approved_at),
            manager_approved_by=model.manager_approved_by,
            hr_approved_at=ensure_app_timezone(model.hr_approved_at),
            hr_approved_by=model.hr_approved_by,
            security_approved_at=ensure_app_timezone(model.security_approved_at),
            security_approved_by=model.security_approved_by,
            notes=model.notes,
            custom_fields=dict(model.custom_fields or {}),
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _task_to_entity(model: OffboardingTaskModel) -> OffboardingTask:
        return OffboardingTask(
            id=model.id,
            process_id=model.process_id,
            task_template_id=model.task_template_id,
            name=model.name,
            category=model.category,
            sort_order=model.sort_order,
            status=model.status,
            description=model.description,
            instructions=model.instructions,
            is_mandatory=model.is_mandatory,
            assigned_to_role=model.assigned_to_role,
            custom_assignee_role=model.custom_assignee_role,
            assignee=model.assignee,
            due_date=model.due_date,
            started_at=ensure_app_timezone(model.started_at),
            completed_at=ensure_app_timezone(model.completed_at),
            estimated_hours=model.estimated_hours,
            actual_hours=model.actual_hours,
            depends_on_task_ids=tuple(model.depends_on_task_ids or ()),
            requires_approval=model.requires_approval,
            approval_role=model.approval_role,
            approved_by=model.approved_by,
            approved_at=ensure_app_timezone(model.approved_at),
            requires_evidence=model.requires_evidence,
            evidence_types=tuple(model.evidence_types or ()),
            evidence_files=tuple(model.evidence_files or ()),
            blocked_reason=model.blocked_reason,
            completion_notes=model.completion_notes,
        )

    @staticmethod
    def _document_to_entity(model: OffboardingDocumentModel) -> OffboardingDocument:
        return OffboardingDocument(
            id=model.id,
            process_id=model.process_id,
            task_id=model.task_id,
            document_template_id=model.document_template_id,
            name=model.name,
            document_type=model.document_type,
            is_mandatory=model.is_mandatory,
            status=model.status,
            file_reference=model.file_reference,
            reviewed_by=model.reviewed_by,
            reviewed_at=ensure_app_timezone(model.reviewed_at),
        )

    @staticmethod
    def _apply_entity_to_model(
        model: OffboardingProcessModel, process: OffboardingProcess
    ) -> None:
        model.template_id = process.template_id
        model.person_id = process.person_id
        model.process_name = process.process_name
        model.employee_uid = process.employee_uid
        model.employee_department = process.employee_department
        model.employee_role = process.employee_role
        model.employee_seniority = process.employee_seniority
        model.status = process.status
        model.priority = process.priority
        model.target_completion_date = process.target_completion_date
        model.actual_start_date = process.actual_start_date
        model.actual_completion_date = process.actual_completion_date
        model.estimated_total_hours = process.estimated_total_hours
        model.complexity_score = process.complexity_score
        model.requires_manager_approval = process.requires_manager_approval
        model.requires_hr_approval = process.requires_hr_approval
        model.requires_security_review = process.requires_security_review
        model.manager_approved_at = process.manager_approved_at
        model.manager_approved_by = process.manager_approved_by
        model.hr_approved_at = process.hr_approved_at
        model.hr_approved_by = process.hr_approved_by
        model.security_approved_at = process.security_approved_at
        model.security_approved_by = process.security_approved_by
        model.notes = process.notes
        model.custom_fields = dict(process.custom_fields)

    @staticmethod
    def _apply_task_to_model(model: OffboardingTaskModel, task: OffboardingTask) -> None:
        model.task_template_id = task.task_template_id
        model.name = task.name
        model.description = task.description
        model.instructions = task.instructions
        model.category = task.category
        model.status = task.status
        model.is_mandatory = task.is_mandatory
        model.sort_order = task.sort_order
        model.assigned_to_role = task.assigned_to_role
        model.custom_assignee_role = task.custom_assignee_role
        model.assignee = task.assignee
        model.due_date = task.due_date
        model.started_at = task.started_at
        model.completed_at = task.completed_at
        model.estimated_hours = task.estimated_hours
        model.actual_hours = task.actual_hours
        model.requires_approval = task.requires_approval
        model.approval_role = task.approval_role
        model.approved_by = task.approved_by
        model.approved_at = task.approved_at
        model.requires_evidence = task.requires_evidence
        model.evidence_types = list(task.evidence_types)
        model.evidence_files = list(task.evidence_files)
        model.blocked_reason = task.blocked_reason
        model.completion_notes = task.completion_notes

    @staticmethod
    def _apply_document_to_model(
        model: OffboardingDocumentModel, document: OffboardingDocument
    ) -> None:
        model.document_template_id = document.document_template_id
        model.name = document.name
        model.document_type = document.document_type
        model.is_mandatory = document.is_mandatory
        model.status = document.status
        model.file_reference = document.file_reference
        model.reviewed_by = document.reviewed_by
        model.reviewed_at = document.reviewed_at


__all__ = ["ProcessRepository"]
