"""Tests for the people directory."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from offboarding.application.use_cases.people import (
    NewPersonData,
    create_person,
    filter_people,
    get_person,
    list_people,
    resolve_affiliation,
    sort_people,
)
from offboarding.domain.entities import Association, Employment, Person
from offboarding.domain.exceptions import NotFoundError, ValidationError


def _person(
    person_id: int,
    first_name: str,
    last_name: str,
    affiliation,
    *,
    department: str | None = "Engineering",
    position: str | None = "Engineer",
    end_date: date | None = None,
) -> Person:
    return Person(
        id=person_id,
        person_code=f"P-{person_id}",
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name.lower()}@example.com",
        affiliation=affiliation,
        department=department,
        position=position,
        end_date=end_date,
        created_at=datetime(2024, 1, person_id, tzinfo=timezone.utc),
    )


PEOPLE = [
    _person(1, "Anna", "Hansen", Employment("active")),
    _person(2, "Lars", "Berg", Association("consultant"), department="Finance"),
    _person(3, "Sofie", "Holm", Employment("former"), position="Sales Manager"),
    _person(4, "Emil", "Jensen", Association("board_member"), department=None),
]


def test_both_statuses_are_rejected() -> None:
    with pytest.raises(ValidationError, match="not both"):
        resolve_affiliation("active", "consultant")


def test_missing_statuses_are_rejected() -> None:
    with pytest.raises(ValidationError):
        resolve_affiliation(None, "  ")


def test_affiliation_is_resolved_from_one_status() -> None:
    assert resolve_affiliation("former", None) == Employment("former")
    assert resolve_affiliation(None, "advisor") == Association("advisor")


def test_unknown_status_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        resolve_affiliation("retired", None)
    with pytest.raises(ValidationError):
        resolve_affiliation(None, "friend")


def test_person_exposes_both_status_columns() -> None:
    anna, lars = PEOPLE[0], PEOPLE[1]

    assert (anna.employment_status, anna.associate_status) == ("active", None)
    assert (lars.employment_status, lars.associate_status) == (None, "consultant")
    assert lars.person_type == "associate"


def test_filter_people_by_search_status_and_type() -> None:
    by_search = filter_people(PEOPLE, search_term="SALES")
    by_status = filter_people(PEOPLE, status="consultant")
    by_type = filter_people(PEOPLE, person_type="employee")
    combined = filter_people(PEOPLE, search_term="en", person_type="associate")

    assert [person.id for person in by_search] == [3]
    assert [person.id for person in by_status] == [2]
    assert [person.id for person in by_type] == [1, 3]
    assert [person.id for person in combined] == [2, 4]


@pytest.mark.parametrize(
    ("upper", "lower", "expected_ids"),
    [
        ("ENGINEERING", "engineering", [1, 3]),
        ("HANSEN", "hansen", [1]),
        ("SALES MANAGER", "sales manager", [3]),
    ],
)
def test_filter_people_search_ignores_case(
    upper: str, lower: str, expected_ids: list[int]
) -> None:
    upper_result = filter_people(PEOPLE, search_term=upper)
    lower_result = filter_people(PEOPLE, search_term=lower)

    assert upper_result == lower_result
    assert [person.id for person in upper_result] == expected_ids


def test_filter_people_treats_all_as_no_filter() -> None:
    assert filter_people(PEOPLE, search_term="", status="all", person_type=None) == PEOPLE


def test_filter_people_rejects_unknown_type() -> None:
    with pytest.raises(ValidationError):
        filter_people(PEOPLE, person_type="alien")


def test_sort_people_by_name_and_reverse() -> None:
    ascending = sort_people(PEOPLE, sort_by="name", direction="asc")
    descending = sort_people(PEOPLE, sort_by="name", direction="desc")

    assert [person.first_name for person in ascending] == ["Anna", "Emil", "Lars", "Sofie"]
    assert [person.first_name for person in descending] == ["Sofie", "Lars", "Emil", "Anna"]


def test_sort_people_by_end_date_keeps_missing_last() -> None:
    people = [
        _person(1, "Anna", "Hansen", Employment("active")),
        _person(2, "Lars", "Berg", Employment("former"), end_date=date(2024, 5, 1)),
        _person(3, "Sofie", "Holm", Employment("former"), end_date=date(2024, 2, 1)),
    ]

    result = sort_people(people, sort_by="target", direction="asc")

    assert [person.id for person in result] == [3, 2, 1]


def test_create_person_persists_affiliation(session, make_person) -> None:
    person = make_person(employment_status=None, associate_status="contractor")

    loaded = get_person(session, person.id)

    assert loaded.affiliation == Association("contractor")
    assert loaded.person_type == "associate"


def test_create_person_rejects_both_statuses(session) -> None:
    data = NewPersonData(
        person_code="P-900",
        first_name="Both",
        last_name="Ways",
        email="both@example.com",
        employment_status="active",
        associate_status="consultant",
    )

    with pytest.raises(ValidationError):
        create_person(session, data)
    assert list_people(session) == []


def test_create_person_rejects_duplicate_code_and_email(session, make_person) -> None:
    make_person(person_code="P-1", email="taken@example.com")

    with pytest.raises(ValidationError, match="code"):
        make_person(person_code="P-1")
    with pytest.raises(ValidationError, match="Email"):
        make_person(email="TAKEN@example.com")


def test_list_people_filters_and_paginates(session, make_person) -> None:
    make_person(first_name="Anna", last_name="A")
    make_person(first_name="Bo", last_name="B", employment_status="former")
    make_person(first_name="Cy", last_name="C")

    active = list_people(session, status="active")
    page = list_people(session, skip=1, limit=1)

    assert [person.first_name for person in active] == ["Anna", "Cy"]
    assert [person.first_name for person in page] == ["Bo"]


def test_get_person_raises_for_unknown_id(session) -> None:
    with pytest.raises(NotFoundError):
        get_person(session, 404)
