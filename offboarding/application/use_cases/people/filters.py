"""Filtering and ordering of people for directory views."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from offboarding.domain.entities import PERSON_TYPES, Person
from offboarding.domain.exceptions import ValidationError
from offboarding.utils.sorting import (
    SORT_ASCENDING,
    SORT_DESCENDING,
    SORT_DIRECTIONS,
    sort_records,
)

FILTER_ALL = "all"

SORT_BY_CREATED = "created"
SORT_BY_TARGET = "target"
SORT_BY_NAME = "name"


def _selected(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == FILTER_ALL:
        return None
    return value


def _matches_search(person: Person, needle: str) -> bool:
    haystack = (
        person.first_name,
        person.last_name,
        person.email,
        person.department,
        person.position,
    )
    return any(value and needle in value.casefold() for value in haystack)


def filter_people(
    people: Iterable[Person],
    *,
    search_term: str | None = None,
    status: str | None = None,
    person_type: str | None = None,
) -> list[Person]:
    """Return the people matching every given criterion, in input order."""

    needle = _selected(search_term)
    needle = needle.casefold() if needle else None
    status = _selected(status)
    person_type = _selected(person_type)
    if person_type is not None and person_type not in PERSON_TYPES:
        raise ValidationError(f"Unknown person type '{person_type}'")

    return [
        person
        for person in people
        if (needle is None or _matches_search(person, needle))
        and (status is None or person.status == status)
        and (person_type is None or person.person_type == person_type)
    ]


def _person_sort_key(sort_by: str):
    if sort_by == SORT_BY_CREATED:
        return lambda person: person.created_at
    if sort_by == SORT_BY_TARGET:
        return lambda person: person.end_date
    if sort_by == SORT_BY_NAME:
        return lambda person: person.full_name.casefold() or None
    raise ValidationError(f"Unknown sort key '{sort_by}'")


def sort_people(
    people: Sequence[Person],
    *,
    sort_by: str = SORT_BY_NAME,
    direction: str = SORT_ASCENDING,
) -> list[Person]:
    """Order people by creation, end date or name; ties keep input order."""

    if direction not in SORT_DIRECTIONS:
        raise ValidationError(f"Unknown sort direction '{direction}'")
    return sort_records(
        people, _person_sort_key(sort_by), descending=direction == SORT_DESCENDING
    )


__all__ = ["filter_people", "sort_people"]
