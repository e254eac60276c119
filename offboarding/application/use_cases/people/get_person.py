"""Use case for retrieving a person."""

from sqlalchemy.orm import Session

from offboarding.domain.entities import Person
from offboarding.domain.exceptions import NotFoundError
from offboarding.infrastructure.repositories import PersonRepository


def get_person(session: Session, person_id: int) -> Person:
    person = PersonRepository(session).get(person_id)
    if person is None:
        raise NotFoundError("Person not found")
    return person
