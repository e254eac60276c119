"""Tests for process completion progress."""

from __future__ import annotations

import pytest

from offboarding.application.use_cases.processes.progress import (
    STATUS_PROGRESS_ESTIMATES,
    completion_percentage,
    compute_progress,
    progress_custom_fields,
)
from offboarding.domain.entities import OffboardingProcess, OffboardingTask


def _process(status: str = "active", custom_fields: dict | None = None) -> OffboardingProcess:
    return OffboardingProcess(
        id=1,
        template_id=1,
        person_id=1,
        process_name="Demo",
        employee_uid="P-001",
        employee_department="Engineering",
        employee_role="Engineer",
        employee_seniority=None,
        status=status,
        custom_fields=custom_fields or {},
    )


def _tasks(
    total: int, completed: int, overdue: int = 0, in_progress: int = 0
) -> list[OffboardingTask]:
    statuses = ["completed"] * completed + ["overdue"] * overdue
    statuses += ["in_progress"] * in_progress
    statuses += ["pending"] * (total - len(statuses))
    return [
        OffboardingTask(
            id=index,
            process_id=1,
            task_template_id=None,
            name=f"Task {index}",
            category="documentation",
            sort_order=index,
            status=status,
        )
        for index, status in enumerate(statuses, start=1)
    ]


def test_task_counts_drive_percentage() -> None:
    progress = compute_progress(_process(), _tasks(12, 5))

    assert progress.percentage == 42
    assert progress.total_tasks == 12
    assert progress.completed_tasks == 5
    assert progress.source == "tasks"


@pytest.mark.parametrize(
    ("completed", "total", "expected"),
    [(0, 0, 0), (1, 8, 13), (1, 3, 33), (2, 3, 67), (1, 200, 1), (3, 3, 100)],
)
def test_percentage_rounds_half_up(completed: int, total: int, expected: int) -> None:
    assert completion_percentage(completed, total) == expected


def test_no_tasks_means_zero_percent() -> None:
    progress = compute_progress(_process(status="completed"), [])

    assert progress.percentage == 0
    assert progress.total_tasks == 0


def test_tasks_take_precedence_over_status_estimate() -> None:
    progress = compute_progress(_process(status="active"), _tasks(10, 9, overdue=1))

    assert progress.percentage == 90
    assert progress.overdue_tasks == 1


def test_cached_counters_are_used_without_tasks() -> None:
    process = _process(
        custom_fields={"total_tasks": 8, "completed_tasks": 6, "overdue_tasks": 1}
    )

    progress = compute_progress(process)

    assert progress.percentage == 75
    assert progress.overdue_tasks == 1
    assert progress.source == "cached"


def test_in_progress_tasks_are_counted() -> None:
    progress = compute_progress(_process(), _tasks(6, 2, overdue=1, in_progress=2))

    assert progress.in_progress_tasks == 2
    assert progress.completed_tasks == 2
    assert progress.overdue_tasks == 1


def test_cached_in_progress_counter_is_read() -> None:
    process = _process(
        custom_fields={"total_tasks": 4, "completed_tasks": 1, "in_progress_tasks": 2}
    )

    assert compute_progress(process).in_progress_tasks == 2


def test_cached_percentage_is_clamped_when_no_totals() -> None:
    progress = compute_progress(_process(custom_fields={"completion_percentage": 140}))

    assert progress.percentage == 100
    assert progress.total_tasks == 0


def test_malformed_cached_values_count_as_zero() -> None:
    process = _process(
        custom_fields={"total_tasks": "many", "completed_tasks": None, "overdue_tasks": [1]}
    )

    progress = compute_progress(process)

    assert progress.percentage == 0
    assert progress.completed_tasks == 0
    assert progress.overdue_tasks == 0


@pytest.mark.parametrize("status", sorted(STATUS_PROGRESS_ESTIMATES))
def test_status_estimate_without_any_detail(status: str) -> None:
    progress = compute_progress(_process(status=status))

    assert progress.percentage == STATUS_PROGRESS_ESTIMATES[status]
    assert progress.source == "status_estimate"


def test_status_estimates_match_documented_values() -> None:
    assert STATUS_PROGRESS_ESTIMATES == {
        "draft": 0,
        "pending_approval": 10,
        "active": 50,
        "overdue": 30,
        "completed": 100,
        "cancelled": 0,
    }


def test_unknown_status_estimates_zero() -> None:
    assert compute_progress(_process(status="archived")).percentage == 0


def test_progress_custom_fields_keeps_other_keys() -> None:
    process = _process(custom_fields={"reason": "Retirement", "total_tasks": 1})

    refreshed = progress_custom_fields(process, _tasks(4, 1))

    assert refreshed == {
        "reason": "Retirement",
        "completion_percentage": 25,
        "total_tasks": 4,
        "completed_tasks": 1,
        "in_progress_tasks": 0,
        "overdue_tasks": 0,
    }
    assert process.custom_fields == {"reason": "Retirement", "total_tasks": 1}
