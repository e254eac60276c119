"""Tests for task and document updates on running processes."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from offboarding.application.use_cases.audit_logs import list_audit_logs
from offboarding.application.use_cases.processes import (
    approve_process,
    get_process,
    instantiate_process,
    update_process_status,
)
from offboarding.application.use_cases.tasks import (
    update_document_status,
    update_task_status,
)
from offboarding.domain.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)

TODAY = date(2024, 3, 1)
NOW = datetime(2024, 3, 4, 9, 30, tzinfo=timezone.utc)


@pytest.fixture()
def process(session, make_person, standard_template):
    person = make_person()
    return instantiate_process(
        session, template_id=standard_template.id, person_id=person.id, today=TODAY
    )


@pytest.fixture()
def active_process(session, process):
    approve_process(session, process.id, approval="manager", approved_by="boss", now=NOW)
    return approve_process(
        session, process.id, approval="hr", approved_by="hr-team", now=NOW
    )


def _task(session, process_id: int, name: str):
    return next(task for task in get_process(session, process_id).tasks if task.name == name)


def test_tasks_of_a_draft_process_cannot_change(session, process) -> None:
    task = _task(session, process.id, "Schedule Exit Interview")

    with pytest.raises(ValidationError, match="draft"):
        update_task_status(session, process.id, task.id, status="in_progress", now=NOW)


def test_unknown_task_is_not_found(session, active_process) -> None:
    with pytest.raises(NotFoundError):
        update_task_status(session, active_process.id, 999_999, status="completed", now=NOW)


def test_starting_a_task_records_the_start(session, active_process) -> None:
    task = _task(session, active_process.id, "Schedule Exit Interview")

    process, updated = update_task_status(
        session, active_process.id, task.id, status="in_progress", now=NOW, actor="hr"
    )

    assert updated.status == "in_progress"
    assert process.custom_fields["in_progress_tasks"] == 1
    assert get_process(session, active_process.id).progress.in_progress_tasks == 1
    assert updated.started_at is not None
    assert _task(session, active_process.id, task.name).status == "in_progress"


def test_blocking_a_task_needs_a_reason(session, active_process) -> None:
    task = _task(session, active_process.id, "Schedule Exit Interview")

    with pytest.raises(ValidationError, match="reason"):
        update_task_status(session, active_process.id, task.id, status="blocked", now=NOW)

    _, blocked = update_task_status(
        session,
        active_process.id,
        task.id,
        status="blocked",
        now=NOW,
        blocked_reason="Employee on leave",
    )
    assert blocked.blocked_reason == "Employee on leave"


def test_dependencies_must_be_completed_first(session, active_process) -> None:
    revocation = _task(session, active_process.id, "Access Revocation Review")
    equipment = _task(session, active_process.id, "Complete Equipment Return")

    with pytest.raises(ValidationError, match="Complete Equipment Return"):
        update_task_status(
            session,
            active_process.id,
            revocation.id,
            status="completed",
            now=NOW,
            evidence_files=("revocation.pdf",),
        )

    update_task_status(
        session,
        active_process.id,
        equipment.id,
        status="completed",
        now=NOW,
        evidence_files=("receipt.pdf",),
    )
    _, completed = update_task_status(
        session,
        active_process.id,
        revocation.id,
        status="completed",
        now=NOW,
        evidence_files=("revocation.pdf",),
    )
    assert completed.status == "completed"


def test_evidence_is_required_when_configured(session, active_process) -> None:
    equipment = _task(session, active_process.id, "Complete Equipment Return")

    with pytest.raises(ValidationError, match="requires evidence"):
        update_task_status(
            session, active_process.id, equipment.id, status="completed", now=NOW
        )

    _, completed = update_task_status(
        session,
        active_process.id,
        equipment.id,
        status="completed",
        now=NOW,
        evidence_files=("receipt.pdf",),
    )
    assert completed.evidence_files == ("receipt.pdf",)
    assert completed.completed_at is not None


def test_approval_is_required_when_configured(session, active_process) -> None:
    handover = _task(session, active_process.id, "Knowledge Transfer Documentation")

    with pytest.raises(ValidationError, match="requires approval"):
        update_task_status(
            session, active_process.id, handover.id, status="completed", now=NOW
        )

    _, completed = update_task_status(
        session,
        active_process.id,
        handover.id,
        status="completed",
        now=NOW,
        approved_by="boss",
    )
    assert completed.approved_by == "boss"
    assert completed.approved_at is not None


def test_completed_tasks_are_final(session, active_process) -> None:
    task = _task(session, active_process.id, "Schedule Exit Interview")
    update_task_status(session, active_process.id, task.id, status="completed", now=NOW)

    with pytest.raises(InvalidTransitionError):
        update_task_status(session, active_process.id, task.id, status="pending", now=NOW)


def test_task_updates_refresh_cached_progress(session, active_process) -> None:
    task = _task(session, active_process.id, "Schedule Exit Interview")

    process, _ = update_task_status(
        session, active_process.id, task.id, status="completed", now=NOW, actor="hr"
    )

    assert process.custom_fields["completed_tasks"] == 1
    assert process.custom_fields["total_tasks"] == 5
    assert process.custom_fields["completion_percentage"] == 20
    assert get_process(session, active_process.id).progress.percentage == 20
    entries = list_audit_logs(session, entity_type="task", entity_id=task.id)
    assert [entry.action for entry in entries] == ["status_changed"]
    assert entries[0].new_values == {"status": "completed"}


def test_submitting_a_document_needs_a_file(session, process) -> None:
    document = get_process(session, process.id).documents[0]

    with pytest.raises(ValidationError, match="file reference"):
        update_document_status(
            session, process.id, document.id, status="submitted", now=NOW
        )

    submitted = update_document_status(
        session,
        process.id,
        document.id,
        status="submitted",
        now=NOW,
        file_reference="files/exit-interview.pdf",
    )
    assert submitted.status == "submitted"
    assert submitted.file_reference == "files/exit-interview.pdf"


def test_only_submitted_documents_are_reviewed(session, process) -> None:
    document = get_process(session, process.id).documents[0]

    with pytest.raises(ValidationError, match="submitted"):
        update_document_status(
            session, process.id, document.id, status="approved", now=NOW, reviewed_by="hr"
        )

    update_document_status(
        session,
        process.id,
        document.id,
        status="submitted",
        now=NOW,
        file_reference="files/exit-interview.pdf",
    )
    approved = update_document_status(
        session, process.id, document.id, status="approved", now=NOW, reviewed_by="hr"
    )
    assert approved.reviewed_by == "hr"
    assert approved.reviewed_at is not None


def test_documents_of_cancelled_processes_are_frozen(session, process) -> None:
    document = get_process(session, process.id).documents[0]
    update_process_status(session, process.id, status="cancelled", today=TODAY)

    with pytest.raises(ValidationError):
        update_document_status(
            session,
            process.id,
            document.id,
            status="submitted",
            now=NOW,
            file_reference="files/late.pdf",
        )
