"""Validation helpers for offboarding templates."""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import TypeVar

from offboarding.domain.entities import (
    ASSIGNEE_ROLES,
    DOCUMENT_TYPES,
    EVIDENCE_TYPES,
    SENIORITY_LEVELS,
    TASK_CATEGORIES,
    TEMPLATE_SCOPE_COMPANY_WIDE,
    TEMPLATE_SCOPE_DEPARTMENT,
    TEMPLATE_SCOPE_ROLE,
    TEMPLATE_SCOPES,
    OffboardingTemplate,
)
from offboarding.domain.exceptions import TemplateIntegrityError, ValidationError

K = TypeVar("K", bound=Hashable)

_UNVISITED, _VISITING, _DONE = 0, 1, 2


def find_dependency_cycle(graph: Mapping[K, Sequence[K]]) -> list[K] | None:
    """Return one dependency cycle in ``graph`` or ``None`` when it is a DAG.

    The cycle is returned as a closed path, e.g. ``[a, b, a]``. Edges to
    nodes outside ``graph`` are ignored here; callers report them separately.
    """

    state: dict[K, int] = {node: _UNVISITED for node in graph}

    for root in graph:
        if state[root] != _UNVISITED:
            continue
        path: list[K] = [root]
        stack = [iter(graph[root])]
        state[root] = _VISITING
        while stack:
            node = next(stack[-1], None)
            if node is None:
                stack.pop()
                state[path.pop()] = _DONE
                continue
            if node not in state:
                continue
            if state[node] == _VISITING:
                return path[path.index(node):] + [node]
            if state[node] == _UNVISITED:
                state[node] = _VISITING
                path.append(node)
                stack.append(iter(graph[node]))
    return None


def ensure_acyclic_dependencies(
    template_name: str, graph: Mapping[K, Sequence[K]], labels: Mapping[K, str]
) -> None:
    """Raise :class:`TemplateIntegrityError` for dangling or cyclic dependencies."""

    for node, depends_on in graph.items():
        for dependency in depends_on:
            if dependency not in graph:
                raise TemplateIntegrityError(
                    f"Task '{labels[node]}' of template '{template_name}' depends on "
                    f"unknown task '{dependency}'"
                )

    cycle = find_dependency_cycle(graph)
    if cycle:
        names = [labels[node] for node in cycle]
        raise TemplateIntegrityError(
            f"Template '{template_name}' has a dependency cycle: {' -> '.join(names)}",
            cycle=names,
        )


def ensure_template_integrity(template: OffboardingTemplate) -> OffboardingTemplate:
    """Check the task dependency graph of a loaded template and return it."""

    graph = {task.id: task.depends_on for task in template.tasks}
    labels = {task.id: task.name for task in template.tasks}
    ensure_acyclic_dependencies(template.name, graph, labels)
    return template


def ensure_scope_filters(
    scope: str,
    *,
    department: str | None,
    role_category: str | None,
    seniority_level: str | None,
) -> None:
    """Check that the scope discriminator agrees with the filter fields."""

    if scope not in TEMPLATE_SCOPES:
        raise ValidationError(f"Unknown template scope '{scope}'")
    if seniority_level is not None and seniority_level not in SENIORITY_LEVELS:
        raise ValidationError(f"Unknown seniority level '{seniority_level}'")
    if scope == TEMPLATE_SCOPE_COMPANY_WIDE and any(
        (department, role_category, seniority_level)
    ):
        raise ValidationError("Company-wide templates cannot filter by department or role")
    if scope == TEMPLATE_SCOPE_DEPARTMENT and not department:
        raise ValidationError("Department-specific templates need a department")
    if scope == TEMPLATE_SCOPE_ROLE and not (role_category or seniority_level):
        raise ValidationError(
            "Role-specific templates need a role category or a seniority level"
        )


def ensure_choice(value: str | None, choices: Sequence[str], *, label: str) -> None:
    if value is not None and value not in choices:
        raise ValidationError(f"Unknown {label} '{value}'")


def ensure_task_fields(
    *,
    category: str,
    default_assignee_role: str | None,
    evidence_types: Sequence[str],
    document_types: Sequence[str],
    estimated_hours: float,
) -> None:
    ensure_choice(category, TASK_CATEGORIES, label="task category")
    ensure_choice(default_assignee_role, ASSIGNEE_ROLES, label="assignee role")
    for evidence_type in evidence_types:
        ensure_choice(evidence_type, EVIDENCE_TYPES, label="evidence type")
    for document_type in document_types:
        ensure_choice(document_type, DOCUMENT_TYPES, label="document type")
    if estimated_hours < 0:
        raise ValidationError("Estimated hours cannot be negative")


__all__ = [
    "ensure_acyclic_dependencies",
    "ensure_choice",
    "ensure_scope_filters",
    "ensure_task_fields",
    "ensure_template_integrity",
    "find_dependency_cycle",
]
