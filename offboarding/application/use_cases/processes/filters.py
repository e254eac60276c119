"""Filtering and ordering of offboarding processes for list views."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from offboarding.domain.entities import (
    PROCESS_PRIORITIES,
    PROCESS_STATUSES,
    OffboardingProcess,
)
from offboarding.domain.exceptions import ValidationError
from offboarding.utils.sorting import SORT_DESCENDING, SORT_DIRECTIONS, sort_records

FILTER_ALL = "all"

TIMEFRAME_NO_DATE = "no_date"
TIMEFRAME_OVERDUE = "overdue"
TIMEFRAME_THIS_WEEK = "this_week"
TIMEFRAME_THIS_MONTH = "this_month"
TIMEFRAME_LATER = "later"

TIMEFRAMES = (
    TIMEFRAME_NO_DATE,
    TIMEFRAME_OVERDUE,
    TIMEFRAME_THIS_WEEK,
    TIMEFRAME_THIS_MONTH,
    TIMEFRAME_LATER,
)

SORT_BY_CREATED = "created"
SORT_BY_TARGET = "target"
SORT_BY_NAME = "name"
SORT_KEYS = (SORT_BY_CREATED, SORT_BY_TARGET, SORT_BY_NAME)


@dataclass(frozen=True)
class ProcessFilters:
    """Selections applied conjunctively; ``None`` or ``"all"`` disables one."""

    status: str | None = None
    timeframe: str | None = None
    search: str | None = None
    department: str | None = None
    priority: str | None = None
    template_id: int | str | None = None


def _is_active(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip()) and value.strip().lower() != FILTER_ALL
    return True


def resolve_timeframe(target_date: date | None, today: date) -> str:
    """Place ``target_date`` in exactly one timeframe bucket relative to ``today``."""

    if target_date is None:
        return TIMEFRAME_NO_DATE
    days_left = (target_date - today).days
    if days_left < 0:
        return TIMEFRAME_OVERDUE
    if days_left < 7:
        return TIMEFRAME_THIS_WEEK
    if days_left < 30:
        return TIMEFRAME_THIS_MONTH
    return TIMEFRAME_LATER


def validate_process_filters(filters: ProcessFilters) -> None:
    if _is_active(filters.status) and filters.status not in PROCESS_STATUSES:
        raise ValidationError(f"Unknown process status '{filters.status}'")
    if _is_active(filters.priority) and filters.priority not in PROCESS_PRIORITIES:
        raise ValidationError(f"Unknown priority '{filters.priority}'")
    if _is_active(filters.timeframe) and filters.timeframe not in TIMEFRAMES:
        raise ValidationError(f"Unknown timeframe '{filters.timeframe}'")


def _matches_search(process: OffboardingProcess, needle: str) -> bool:
    haystack = (
        process.process_name,
        process.employee_uid,
        process.employee_department,
        process.employee_role,
    )
    return any(value and needle in value.casefold() for value in haystack)


def filter_processes(
    processes: Iterable[OffboardingProcess],
    filters: ProcessFilters,
    today: date,
) -> list[OffboardingProcess]:
    """Return the processes matching every active filter, in input order."""

    validate_process_filters(filters)
    needle = filters.search.strip().casefold() if _is_active(filters.search) else None
    department = (
        filters.department.strip().casefold() if _is_active(filters.department) else None
    )
    template_id = (
        str(filters.template_id).strip() if _is_active(filters.template_id) else None
    )

    selected: list[OffboardingProcess] = []
    for process in processes:
        if _is_active(filters.status) and process.status != filters.status:
            continue
        if _is_active(filters.priority) and process.priority != filters.priority:
            continue
        if (
            _is_active(filters.timeframe)
            and resolve_timeframe(process.target_completion_date, today) != filters.timeframe
        ):
            continue
        if department is not None and (
            (process.employee_department or "").casefold() != department
        ):
            continue
        if template_id is not None and str(process.template_id) != template_id:
            continue
        if needle is not None and not _matches_search(process, needle):
            continue
        selected.append(process)
    return selected


def _process_sort_key(sort_by: str):
    if sort_by == SORT_BY_CREATED:
        return lambda process: process.created_at
    if sort_by == SORT_BY_TARGET:
        return lambda process: process.target_completion_date
    if sort_by == SORT_BY_NAME:
        return lambda process: process.process_name.casefold() if process.process_name else None
    raise ValidationError(f"Unknown sort key '{sort_by}'")


def sort_processes(
    processes: Sequence[OffboardingProcess],
    *,
    sort_by: str = SORT_BY_CREATED,
    direction: str = SORT_DESCENDING,
) -> list[OffboardingProcess]:
    """Order processes by creation, target date or name; ties keep input order."""

    if direction not in SORT_DIRECTIONS:
        raise ValidationError(f"Unknown sort direction '{direction}'")
    return sort_records(
        processes,
        _process_sort_key(sort_by),
        descending=direction == SORT_DESCENDING,
    )


__all__ = [
    "FILTER_ALL",
    "ProcessFilters",
    "SORT_BY_CREATED",
    "SORT_BY_NAME",
    "SORT_BY_TARGET",
    "SORT_KEYS",
    "TIMEFRAMES",
    "TIMEFRAME_LATER",
    "TIMEFRAME_NO_DATE",
    "TIMEFRAME_OVERDUE",
    "TIMEFRAME_THIS_MONTH",
    "TIMEFRAME_THIS_WEEK",
    "filter_processes",
    "resolve_timeframe",
    "sort_processes",
    "validate_process_filters",
]
