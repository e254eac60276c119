"""Tests for task dependency validation in the template catalog."""

from __future__ import annotations

import pytest

from offboarding.application.use_cases.templates import (
    NewTaskTemplateData,
    NewTemplateData,
    create_template,
    get_template,
)
from offboarding.application.use_cases.templates.validators import (
    ensure_scope_filters,
    ensure_template_integrity,
    find_dependency_cycle,
)
from offboarding.domain.entities import OffboardingTemplate, TaskTemplate
from offboarding.domain.exceptions import TemplateIntegrityError, ValidationError


def _template(*tasks: TaskTemplate) -> OffboardingTemplate:
    return OffboardingTemplate(id=1, name="Checklist", scope="company_wide", tasks=list(tasks))


def _task(task_id: int, name: str, *depends_on: int) -> TaskTemplate:
    return TaskTemplate(
        id=task_id,
        template_id=1,
        name=name,
        category="documentation",
        sort_order=task_id,
        depends_on=depends_on,
    )


def test_find_dependency_cycle_returns_none_for_dag() -> None:
    graph = {1: (), 2: (1,), 3: (1, 2)}

    assert find_dependency_cycle(graph) is None


def test_find_dependency_cycle_returns_closed_path() -> None:
    graph = {1: (2,), 2: (1,), 3: ()}

    cycle = find_dependency_cycle(graph)

    assert cycle is not None
    assert cycle[0] == cycle[-1]
    assert set(cycle) == {1, 2}


def test_cycle_is_reported_with_task_names() -> None:
    template = _template(_task(1, "A", 2), _task(2, "B", 1))

    with pytest.raises(TemplateIntegrityError) as exc_info:
        ensure_template_integrity(template)

    assert exc_info.value.cycle in (("A", "B", "A"), ("B", "A", "B"))
    assert "A -> B" in str(exc_info.value) or "B -> A" in str(exc_info.value)


def test_self_dependency_is_a_cycle() -> None:
    template = _template(_task(1, "Lonely", 1))

    with pytest.raises(TemplateIntegrityError) as exc_info:
        ensure_template_integrity(template)

    assert exc_info.value.cycle == ("Lonely", "Lonely")


def test_dangling_reference_is_rejected() -> None:
    template = _template(_task(1, "A"), _task(2, "B", 99))

    with pytest.raises(TemplateIntegrityError, match="unknown task '99'"):
        ensure_template_integrity(template)


def test_valid_template_is_returned_unchanged() -> None:
    template = _template(_task(1, "A"), _task(2, "B", 1), _task(3, "C", 1, 2))

    assert ensure_template_integrity(template) is template


@pytest.mark.parametrize(
    ("scope", "filters"),
    [
        ("company_wide", {"department": "Sales"}),
        ("department_specific", {}),
        ("role_specific", {"department": "IT"}),
        ("everyone", {}),
    ],
)
def test_scope_filters_must_agree_with_scope(scope: str, filters: dict) -> None:
    values = {"department": None, "role_category": None, "seniority_level": None}
    values.update(filters)

    with pytest.raises(ValidationError):
        ensure_scope_filters(scope, **values)


def test_create_template_resolves_dependencies_by_name(session) -> None:
    data = NewTemplateData(
        name="Handover",
        scope="company_wide",
        tasks=(
            NewTaskTemplateData(name="Write notes", category="documentation", sort_order=1),
            NewTaskTemplateData(
                name="Review notes",
                category="knowledge_transfer",
                sort_order=2,
                depends_on=("Write notes",),
            ),
        ),
    )

    template = create_template(session, data, created_by="admin")
    loaded = get_template(session, template.id)

    write, review = loaded.ordered_tasks
    assert write.depends_on == ()
    assert review.depends_on == (write.id,)


def test_dependency_names_ignore_surrounding_whitespace(session) -> None:
    data = NewTemplateData(
        name="Padded",
        scope="company_wide",
        tasks=(
            NewTaskTemplateData(name="A", category="documentation", sort_order=1),
            NewTaskTemplateData(
                name="B", category="documentation", sort_order=2, depends_on=("A ",)
            ),
        ),
    )

    template = create_template(session, data)

    first, second = get_template(session, template.id).ordered_tasks
    assert second.depends_on == (first.id,)


def test_create_template_rejects_cycles_without_writing(session) -> None:
    data = NewTemplateData(
        name="Broken",
        scope="company_wide",
        tasks=(
            NewTaskTemplateData(
                name="A", category="documentation", sort_order=1, depends_on=("B",)
            ),
            NewTaskTemplateData(
                name="B", category="documentation", sort_order=2, depends_on=("A",)
            ),
        ),
    )

    with pytest.raises(TemplateIntegrityError) as exc_info:
        create_template(session, data)

    assert set(exc_info.value.cycle) == {"A", "B"}
    from offboarding.application.use_cases.templates import list_templates

    assert list_templates(session) == []


def test_create_template_rejects_unknown_dependency_names(session) -> None:
    data = NewTemplateData(
        name="Dangling",
        scope="company_wide",
        tasks=(
            NewTaskTemplateData(
                name="A", category="documentation", sort_order=1, depends_on=("Ghost",)
            ),
        ),
    )

    with pytest.raises(TemplateIntegrityError, match="Ghost"):
        create_template(session, data)


def test_create_template_rejects_duplicate_names(session) -> None:
    data = NewTemplateData(name="Once", scope="company_wide")
    create_template(session, data)

    with pytest.raises(ValidationError):
        create_template(session, NewTemplateData(name="once", scope="company_wide"))
