"""Reproducible demo people and processes spread across every status."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import TypeVar

from sqlalchemy.orm import Session

from offboarding.application.use_cases.people import NewPersonData, create_person
from offboarding.application.use_cases.processes import (
    ProcessOptions,
    build_process,
    progress_custom_fields,
)
from offboarding.application.use_cases.templates.matching import (
    find_applicable_templates,
)
from offboarding.domain.entities import (
    PROCESS_STATUS_ACTIVE,
    PROCESS_STATUS_COMPLETED,
    PROCESS_STATUS_DRAFT,
    PROCESS_STATUS_OVERDUE,
    PROCESS_STATUS_PENDING_APPROVAL,
    SENIORITY_LEVELS,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_OVERDUE,
    OffboardingProcess,
    OffboardingTemplate,
    Person,
    ProcessDraft,
)
from offboarding.infrastructure.repositories import PersonRepository, ProcessRepository
from offboarding.utils import get_app_timezone

from .templates import seed_templates

logger = logging.getLogger(__name__)

DEMO_AUTHOR = "demo-system"
STARTED_STATUSES = (
    PROCESS_STATUS_ACTIVE,
    PROCESS_STATUS_OVERDUE,
    PROCESS_STATUS_COMPLETED,
)


@dataclass(frozen=True)
class DemoOption:
    """A weighted choice and the numeric range that goes with it."""

    value: str
    weight: int
    low: int
    high: int


STATUS_OPTIONS: tuple[DemoOption, ...] = (
    DemoOption(PROCESS_STATUS_DRAFT, 20, 0, 10),
    DemoOption(PROCESS_STATUS_PENDING_APPROVAL, 15, 10, 25),
    DemoOption(PROCESS_STATUS_ACTIVE, 45, 25, 85),
    DemoOption(PROCESS_STATUS_OVERDUE, 10, 15, 60),
    DemoOption(PROCESS_STATUS_COMPLETED, 10, 95, 100),
)

# Ranges are days until the target completion date.
PRIORITY_OPTIONS: tuple[DemoOption, ...] = (
    DemoOption("urgent", 5, 3, 7),
    DemoOption("high", 20, 7, 14),
    DemoOption("medium", 50, 14, 30),
    DemoOption("low", 25, 30, 60),
)

OFFBOARDING_REASONS = (
    "Resignation - New Opportunity",
    "Resignation - Career Change",
    "Resignation - Personal Reasons",
    "Termination - Performance",
    "Termination - Redundancy",
    "Contract Completion",
    "Retirement",
    "Internal Transfer",
)


@dataclass(frozen=True)
class DepartmentProfile:
    role_category: str
    positions: tuple[str, ...]
    notes: tuple[str, ...]


DEPARTMENT_PROFILES: dict[str, DepartmentProfile] = {
    "Engineering": DepartmentProfile(
        "engineering",
        ("Software Engineer", "Platform Engineer", "QA Engineer"),
        ("Code review handover needed", "Access keys to revoke"),
    ),
    "Sales": DepartmentProfile(
        "sales",
        ("Account Executive", "Sales Manager"),
        ("Client relationship transfer", "Pipeline handover needed"),
    ),
    "IT": DepartmentProfile(
        "technical",
        ("System Administrator", "Network Administrator"),
        ("Administrative credentials to rotate",),
    ),
    "Product": DepartmentProfile(
        "product",
        ("Product Manager", "Product Analyst"),
        ("Project roadmap handover", "Stakeholder communication needed"),
    ),
    "Marketing": DepartmentProfile(
        "marketing",
        ("Marketing Specialist", "Content Strategist"),
        ("Campaign handover required", "Content calendar transfer"),
    ),
    "Finance": DepartmentProfile(
        "finance",
        ("Financial Analyst", "Controller"),
        ("Budget responsibility transfer", "Expense approvals setup"),
    ),
}

FIRST_NAMES = (
    "Anna",
    "Lars",
    "Sofie",
    "Mikkel",
    "Ida",
    "Jonas",
    "Freja",
    "Emil",
    "Clara",
    "Oskar",
)
LAST_NAMES = (
    "Hansen",
    "Nielsen",
    "Jensen",
    "Larsen",
    "Andersen",
    "Pedersen",
    "Berg",
    "Holm",
)
ASSOCIATE_STATUS_CHOICES = ("consultant", "contractor", "advisor")
DEFAULT_NOTES = ("Standard offboarding procedure",)

T = TypeVar("T", bound=DemoOption)


def weighted_choice(options: Sequence[T], rng: random.Random) -> T:
    """Pick one option with probability proportional to its weight."""

    if not options:
        raise ValueError("weighted_choice needs at least one option")
    remaining = rng.random() * sum(option.weight for option in options)
    for option in options:
        remaining -= option.weight
        if remaining <= 0:
            return option
    return options[0]


def _demo_person_data(index: int, rng: random.Random) -> NewPersonData:
    department = rng.choice(sorted(DEPARTMENT_PROFILES))
    profile = DEPARTMENT_PROFILES[department]
    first_name = rng.choice(FIRST_NAMES)
    last_name = rng.choice(LAST_NAMES)
    is_associate = rng.random() < 0.1
    return NewPersonData(
        person_code=f"DEMO-{index:04d}",
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name}.{last_name}.{index:04d}@demo.example.com".lower(),
        employment_status=None if is_associate else "active",
        associate_status=rng.choice(ASSOCIATE_STATUS_CHOICES) if is_associate else None,
        department=department,
        position=rng.choice(profile.positions),
        seniority_level=rng.choice(SENIORITY_LEVELS[:4]),
    )


def _pick_template(
    person: Person, templates: Sequence[OffboardingTemplate]
) -> OffboardingTemplate | None:
    profile = DEPARTMENT_PROFILES.get(person.department or "")
    role_category = profile.role_category if profile else None
    applicable = find_applicable_templates(
        templates,
        department=person.department,
        role_category=role_category,
        seniority_level=person.seniority_level,
    )
    return applicable[0] if applicable else None


def _demo_process(
    person: Person,
    template: OffboardingTemplate,
    rng: random.Random,
    today: date,
) -> ProcessDraft:
    status = weighted_choice(STATUS_OPTIONS, rng)
    priority = weighted_choice(PRIORITY_OPTIONS, rng)
    start_date = today - timedelta(days=rng.randint(0, 14))
    if status.value == PROCESS_STATUS_OVERDUE:
        target_date = today - timedelta(days=rng.randint(1, 10))
    else:
        target_date = start_date + timedelta(days=rng.randint(priority.low, priority.high))

    reason = rng.choice(OFFBOARDING_REASONS)
    profile = DEPARTMENT_PROFILES.get(person.department or "")
    note = rng.choice(profile.notes if profile else DEFAULT_NOTES)
    draft = build_process(
        template,
        person,
        ProcessOptions(
            priority=priority.value,
            target_completion_date=target_date,
            process_name=f"{person.full_name} - {reason}",
            notes=note,
        ),
        start_date,
    )
    process = draft.process
    process.status = status.value
    process.created_by = DEMO_AUTHOR
    started_at = datetime.combine(start_date, time(9, 0), tzinfo=get_app_timezone())
    process.created_at = started_at

    tasks = [task_draft.task for task_draft in draft.tasks]
    completion = rng.randint(status.low, status.high)
    if status.value == PROCESS_STATUS_COMPLETED:
        completed_count = len(tasks)
    else:
        completed_count = completion * len(tasks) // 100
    for task in tasks[:completed_count]:
        task.status = TASK_STATUS_COMPLETED
        task.started_at = started_at
        task.completed_at = started_at + timedelta(days=rng.randint(0, 3))
        task.actual_hours = task.estimated_hours
        if task.requires_approval:
            task.approved_by = task.approval_role
            task.approved_at = task.completed_at
    if status.value == PROCESS_STATUS_OVERDUE and completed_count < len(tasks):
        tasks[completed_count].status = TASK_STATUS_OVERDUE

    if status.value in STARTED_STATUSES:
        process.actual_start_date = start_date
        for approval in process.missing_approvals():
            setattr(process, f"{approval}_approved_at", started_at)
            setattr(process, f"{approval}_approved_by", f"{approval}-team")
    if status.value == PROCESS_STATUS_COMPLETED:
        process.actual_completion_date = min(today, target_date)

    process.custom_fields = progress_custom_fields(process, tasks)
    process.custom_fields["reason"] = reason
    return draft


def populate_demo_processes(
    session: Session,
    *,
    count: int,
    today: date,
    seed: int = 42,
) -> list[OffboardingProcess]:
    """Create ``count`` demo people, each with one process in a weighted status.

    The same ``seed`` and ``today`` always produce the same data.
    """

    rng = random.Random(seed)
    templates = seed_templates(session)
    people_repository = PersonRepository(session)
    process_repository = ProcessRepository(session)

    created: list[OffboardingProcess] = []
    for index in range(1, count + 1):
        data = _demo_person_data(index, rng)
        person = people_repository.get_by_code(data.person_code)
        if person is None:
            person = create_person(session, data, created_by=DEMO_AUTHOR)
        if process_repository.find_open_for_person(person.id) is not None:
            logger.info("Person %s already has an open process, skipping", person.person_code)
            continue
        template = _pick_template(person, templates)
        if template is None:
            continue
        created.append(process_repository.create(_demo_process(person, template, rng, today)))

    logger.info("Created %s demo processes", len(created))
    return created


__all__ = [
    "DemoOption",
    "OFFBOARDING_REASONS",
    "PRIORITY_OPTIONS",
    "STATUS_OPTIONS",
    "populate_demo_processes",
    "weighted_choice",
]
