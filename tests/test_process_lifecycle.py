"""Tests for process status transitions, approvals and the overdue sweep."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from offboarding.application.use_cases.audit_logs import list_audit_logs
from offboarding.application.use_cases.processes import (
    approve_process,
    delete_process,
    get_process,
    instantiate_process,
    refresh_overdue,
    update_process_status,
)
from offboarding.application.use_cases.processes.transitions import (
    ALLOWED_TRANSITIONS,
    can_transition,
)
from offboarding.application.use_cases.tasks import update_task_status
from offboarding.domain.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)

TODAY = date(2024, 3, 1)
NOW = datetime(2024, 3, 2, 10, 0, tzinfo=timezone.utc)


@pytest.fixture()
def process(session, make_person, standard_template):
    person = make_person()
    return instantiate_process(
        session, template_id=standard_template.id, person_id=person.id, today=TODAY
    )


def _activate(session, process_id: int) -> None:
    update_process_status(session, process_id, status="pending_approval", today=TODAY)
    approve_process(session, process_id, approval="manager", approved_by="boss", now=NOW)
    approve_process(session, process_id, approval="hr", approved_by="hr-team", now=NOW)


def _complete_all_tasks(session, process_id: int) -> None:
    for task in get_process(session, process_id).tasks:
        update_task_status(
            session,
            process_id,
            task.id,
            status="completed",
            now=NOW,
            evidence_files=("receipt.pdf",),
            approved_by="boss",
        )


def test_terminal_statuses_have_no_exits() -> None:
    assert ALLOWED_TRANSITIONS["completed"] == frozenset()
    assert ALLOWED_TRANSITIONS["cancelled"] == frozenset()
    assert can_transition("draft", "pending_approval")
    assert not can_transition("draft", "active")
    assert can_transition("overdue", "active")


def test_draft_cannot_skip_to_active(session, process) -> None:
    with pytest.raises(InvalidTransitionError) as exc_info:
        update_process_status(session, process.id, status="active", today=TODAY)

    assert exc_info.value.current == "draft"
    assert exc_info.value.requested == "active"


def test_activation_requires_every_approval(session, process) -> None:
    update_process_status(session, process.id, status="pending_approval", today=TODAY)

    with pytest.raises(ValidationError, match="manager, hr"):
        update_process_status(session, process.id, status="active", today=TODAY)


def test_approvals_activate_process_once_complete(session, process) -> None:
    first = approve_process(
        session, process.id, approval="manager", approved_by="boss", now=NOW
    )
    second = approve_process(
        session, process.id, approval="hr", approved_by="hr-team", now=NOW
    )

    assert first.status == "pending_approval"
    assert first.manager_approved_by == "boss"
    assert second.status == "active"
    assert second.actual_start_date == NOW.date()
    assert second.hr_approved_at is not None


def test_approvals_are_rejected_once_active(session, process) -> None:
    _activate(session, process.id)

    with pytest.raises(ValidationError):
        approve_process(
            session, process.id, approval="security", approved_by="sec", now=NOW
        )


def test_unknown_approval_kind_is_rejected(session, process) -> None:
    with pytest.raises(ValidationError):
        approve_process(session, process.id, approval="ceo", approved_by="x", now=NOW)


def test_completion_requires_task_progress(session, process) -> None:
    _activate(session, process.id)

    with pytest.raises(ValidationError, match="0% complete"):
        update_process_status(session, process.id, status="completed", today=TODAY)


def test_completing_a_finished_process(session, process) -> None:
    _activate(session, process.id)
    _complete_all_tasks(session, process.id)

    completed = update_process_status(
        session, process.id, status="completed", today=date(2024, 3, 8), actor="hr"
    )

    assert completed.status == "completed"
    assert completed.actual_completion_date == date(2024, 3, 8)
    assert completed.custom_fields["completion_percentage"] == 100
    with pytest.raises(InvalidTransitionError):
        update_process_status(session, process.id, status="active", today=TODAY)
    actions = [entry.action for entry in list_audit_logs(session, entity_type="process")]
    assert actions.count("status_changed") == 2
    assert actions.count("approved") == 2


def test_cancelled_process_frees_the_person(session, process, standard_template) -> None:
    update_process_status(session, process.id, status="cancelled", today=TODAY)

    again = instantiate_process(
        session,
        template_id=standard_template.id,
        person_id=process.person_id,
        today=TODAY,
    )

    assert again.id != process.id
    assert again.status == "draft"


def test_unknown_status_is_rejected(session, process) -> None:
    with pytest.raises(ValidationError):
        update_process_status(session, process.id, status="archived", today=TODAY)


def test_overdue_sweep_marks_late_processes_and_tasks(session, process) -> None:
    _activate(session, process.id)
    late = process.target_completion_date + timedelta(days=1)

    result = refresh_overdue(session, today=late)
    detail = get_process(session, process.id)

    assert result.processes_marked == 1
    assert result.tasks_marked == 5
    assert detail.process.status == "overdue"
    assert {task.status for task in detail.tasks} == {"overdue"}
    assert detail.progress.overdue_tasks == 5
    assert refresh_overdue(session, today=late).processes_marked == 0


def test_overdue_sweep_ignores_drafts_and_future_targets(session, process) -> None:
    assert refresh_overdue(session, today=TODAY + timedelta(days=30)).processes_marked == 0

    _activate(session, process.id)
    result = refresh_overdue(session, today=TODAY)

    assert result.processes_marked == 0
    assert result.tasks_marked == 0


def test_overdue_process_can_return_to_active(session, process) -> None:
    _activate(session, process.id)
    update_process_status(session, process.id, status="overdue", today=TODAY)

    reopened = update_process_status(session, process.id, status="active", today=TODAY)

    assert reopened.status == "active"


def test_delete_process_removes_tasks(session, process) -> None:
    delete_process(session, process.id, actor="admin")

    with pytest.raises(NotFoundError):
        get_process(session, process.id)
    entries = list_audit_logs(session, entity_type="process", entity_id=process.id)
    assert entries[-1].action == "deleted"
