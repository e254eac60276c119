"""Use case for listing the people directory."""

from sqlalchemy.orm import Session

from offboarding.domain.entities import Person
from offboarding.infrastructure.repositories import PersonRepository
from offboarding.utils.sorting import SORT_ASCENDING

from .filters import SORT_BY_NAME, filter_people, sort_people


def list_people(
    session: Session,
    *,
    search_term: str | None = None,
    status: str | None = None,
    person_type: str | None = None,
    sort_by: str = SORT_BY_NAME,
    direction: str = SORT_ASCENDING,
    skip: int = 0,
    limit: int | None = None,
) -> list[Person]:
    """Return the directory filtered, ordered and paginated."""

    people = filter_people(
        PersonRepository(session).list(),
        search_term=search_term,
        status=status,
        person_type=person_type,
    )
    ordered = sort_people(people, sort_by=sort_by, direction=direction)
    return ordered[skip : skip + limit] if limit is not None else ordered[skip:]
