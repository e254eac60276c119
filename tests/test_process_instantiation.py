"""Tests for turning templates into offboarding processes."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from offboarding.application.use_cases.audit_logs import list_audit_logs
from offboarding.application.use_cases.processes import (
    ProcessOptions,
    build_process,
    get_process,
    instantiate_process,
)
from offboarding.application.use_cases.templates import delete_template
from offboarding.domain.entities import (
    DocumentTemplate,
    Employment,
    OffboardingTemplate,
    Person,
    TaskTemplate,
)
from offboarding.domain.exceptions import (
    DuplicateProcessError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from offboarding.infrastructure.repositories import AuditLogRepository, ProcessRepository

TODAY = date(2024, 3, 1)


def _standard_template() -> OffboardingTemplate:
    names = [
        "Schedule Exit Interview",
        "Complete Equipment Return",
        "Knowledge Transfer Documentation",
        "Access Revocation Review",
        "Final Payroll and Benefits",
    ]
    tasks = [
        TaskTemplate(
            id=10 + index,
            template_id=1,
            name=name,
            category="documentation",
            sort_order=5 - index,
            estimated_hours=1.5,
            default_assignee_role="hr_representative",
            requires_evidence=index == 1,
            evidence_types=("signature",) if index == 1 else (),
            depends_on=(11,) if index == 3 else (),
            documents=[
                DocumentTemplate(
                    id=100 + index,
                    task_template_id=10 + index,
                    name=f"{name} form",
                    document_type="form",
                )
            ],
        )
        for index, name in enumerate(names)
    ]
    return OffboardingTemplate(
        id=1,
        name="Standard Company-Wide Offboarding",
        scope="company_wide",
        estimated_duration_days=10,
        complexity_score=2,
        requires_security_review=True,
        tasks=tasks,
    )


def _person(**overrides) -> Person:
    fields = {
        "id": 7,
        "person_code": "EMP-007",
        "first_name": "Anna",
        "last_name": "Hansen",
        "email": "anna@example.com",
        "affiliation": Employment("active"),
        "department": "Engineering",
        "position": "Backend Engineer",
        "seniority_level": "senior",
    }
    fields.update(overrides)
    return Person(**fields)


def test_standard_template_yields_five_pending_tasks() -> None:
    draft = build_process(_standard_template(), _person(), ProcessOptions(), TODAY)

    assert len(draft.tasks) == 5
    assert {task_draft.task.status for task_draft in draft.tasks} == {"pending"}
    assert draft.process.status == "draft"
    assert draft.process.target_completion_date == TODAY + timedelta(days=10)


def test_tasks_follow_template_sort_order() -> None:
    draft = build_process(_standard_template(), _person(), ProcessOptions(), TODAY)

    assert [task_draft.task.sort_order for task_draft in draft.tasks] == [1, 2, 3, 4, 5]
    assert draft.tasks[0].task.name == "Final Payroll and Benefits"


def test_person_fields_are_copied_onto_the_process() -> None:
    person = _person()
    draft = build_process(_standard_template(), person, ProcessOptions(), TODAY)
    person.department = "Finance"

    process = draft.process
    assert process.employee_uid == "EMP-007"
    assert process.employee_department == "Engineering"
    assert process.employee_role == "Backend Engineer"
    assert process.employee_seniority == "senior"
    assert process.process_name == "Anna Hansen Offboarding"


def test_requirements_hours_and_documents_are_carried_over() -> None:
    draft = build_process(_standard_template(), _person(), ProcessOptions(), TODAY)
    by_name = {task_draft.task.name: task_draft for task_draft in draft.tasks}

    equipment = by_name["Complete Equipment Return"]
    access = by_name["Access Revocation Review"]
    assert equipment.task.requires_evidence is True
    assert equipment.task.evidence_types == ("signature",)
    assert equipment.task.due_date == TODAY + timedelta(days=10)
    assert [document.status for document in equipment.documents] == ["pending"]
    assert access.depends_on_template_ids == (11,)
    assert draft.process.estimated_total_hours == pytest.approx(7.5)
    assert draft.process.requires_security_review is True
    assert draft.process.custom_fields["total_tasks"] == 5


def test_options_override_defaults() -> None:
    options = ProcessOptions(
        priority="urgent",
        target_completion_date=date(2024, 3, 5),
        process_name="Custom name",
        notes="Leaving early",
    )

    process = build_process(_standard_template(), _person(), options, TODAY).process

    assert process.priority == "urgent"
    assert process.target_completion_date == date(2024, 3, 5)
    assert process.process_name == "Custom name"
    assert process.notes == "Leaving early"


@pytest.mark.parametrize("missing", [{"department": None}, {"position": " "}])
def test_missing_department_or_role_is_rejected(missing: dict) -> None:
    with pytest.raises(ValidationError):
        build_process(_standard_template(), _person(**missing), ProcessOptions(), TODAY)


def test_unknown_priority_is_rejected() -> None:
    with pytest.raises(ValidationError):
        build_process(_standard_template(), _person(), ProcessOptions(priority="asap"), TODAY)


def test_instantiate_persists_tasks_documents_and_dependencies(
    session, make_person, standard_template
) -> None:
    person = make_person()

    process = instantiate_process(
        session,
        template_id=standard_template.id,
        person_id=person.id,
        today=TODAY,
        created_by="hr-admin",
    )
    detail = get_process(session, process.id)

    assert process.status == "draft"
    assert process.target_completion_date == TODAY + timedelta(days=10)
    assert len(detail.tasks) == 5
    assert len(detail.documents) == 4
    by_name = {task.name: task for task in detail.tasks}
    assert by_name["Access Revocation Review"].depends_on_task_ids == (
        by_name["Complete Equipment Return"].id,
    )
    assert detail.progress.percentage == 0
    audit = list_audit_logs(session, entity_type="process", entity_id=process.id)
    assert [entry.action for entry in audit] == ["created"]


def test_second_open_process_for_person_is_rejected(
    session, make_person, standard_template
) -> None:
    person = make_person()
    first = instantiate_process(
        session, template_id=standard_template.id, person_id=person.id, today=TODAY
    )

    with pytest.raises(DuplicateProcessError) as exc_info:
        instantiate_process(
            session, template_id=standard_template.id, person_id=person.id, today=TODAY
        )

    assert exc_info.value.existing_process_id == first.id
    assert len(ProcessRepository(session).list()) == 1


def test_person_without_position_is_rejected_before_writing(
    session, make_person, standard_template
) -> None:
    person = make_person(position=None)

    with pytest.raises(ValidationError):
        instantiate_process(
            session, template_id=standard_template.id, person_id=person.id, today=TODAY
        )
    assert ProcessRepository(session).list() == []


def test_unknown_template_or_person(session, make_person, standard_template) -> None:
    person = make_person()

    with pytest.raises(NotFoundError):
        instantiate_process(session, template_id=999, person_id=person.id, today=TODAY)
    with pytest.raises(NotFoundError):
        instantiate_process(
            session, template_id=standard_template.id, person_id=999, today=TODAY
        )


def test_deleted_templates_cannot_be_instantiated(
    session, make_person, standard_template
) -> None:
    person = make_person()
    delete_template(session, standard_template.id, deleted_by="admin")

    with pytest.raises(NotFoundError):
        instantiate_process(
            session, template_id=standard_template.id, person_id=person.id, today=TODAY
        )


def test_repository_reports_racing_duplicate_as_duplicate(
    session, make_person, standard_template
) -> None:
    person = make_person()
    repository = ProcessRepository(session)
    first = repository.create(
        build_process(standard_template, person, ProcessOptions(), TODAY)
    )

    with pytest.raises(DuplicateProcessError) as exc_info:
        repository.create(
            build_process(standard_template, person, ProcessOptions(), TODAY)
        )

    assert exc_info.value.person_id == person.id
    assert exc_info.value.existing_process_id == first.id
    assert [process.id for process in repository.list()] == [first.id]


def test_failed_audit_write_keeps_nothing(
    session, make_person, standard_template, monkeypatch
) -> None:
    person = make_person()
    apply_entry = AuditLogRepository._apply_entity_to_model

    def broken_entry(model, entry):
        apply_entry(model, entry)
        model.action = None

    monkeypatch.setattr(
        AuditLogRepository, "_apply_entity_to_model", staticmethod(broken_entry)
    )

    with pytest.raises(PersistenceError):
        instantiate_process(
            session, template_id=standard_template.id, person_id=person.id, today=TODAY
        )

    repository = ProcessRepository(session)
    assert repository.list() == []
    assert repository.find_open_for_person(person.id) is None
