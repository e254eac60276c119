"""Persistence layer for the people directory."""

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from offboarding.domain.entities import Association, Employment, Person
from offboarding.infrastructure.database import commit_or_raise
from offboarding.infrastructure.models import PersonModel
from offboarding.utils import ensure_app_timezone, now_in_app_timezone


class PersonRepository:
    """Provide CRUD helpers for :class:`Person` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Person]:
        models = self.session.query(PersonModel).order_by(PersonModel.id).all()
        return [self._to_entity(model) for model in models]

    def get(self, person_id: int) -> Person | None:
        model = self.session.get(PersonModel, person_id)
        return self._to_entity(model) if model else None

    def get_by_code(self, person_code: str) -> Person | None:
        model = (
            self.session.query(PersonModel)
            .filter(PersonModel.person_code == person_code)
            .first()
        )
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> Person | None:
        model = (
            self.session.query(PersonModel)
            .filter(func.lower(PersonModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, person: Person) -> Person:
        model = PersonModel()
        self._apply_entity_to_model(model, person)
        model.created_at = ensure_app_timezone(person.created_at) or now_in_app_timezone()
        self.session.add(model)
        commit_or_raise(self.session, action="create person")
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: PersonModel) -> Person:
        if model.employment_status is not None:
            affiliation = Employment(status=model.employment_status)
        else:
            affiliation = Association(status=model.associate_status)
        return Person(
            id=model.id,
            person_code=model.person_code,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            affiliation=affiliation,
            department=model.department,
            position=model.position,
            seniority_level=model.seniority_level,
            location=model.location,
            start_date=model.start_date,
            end_date=model.end_date,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: PersonModel, person: Person) -> None:
        model.person_code = person.person_code
        model.first_name = person.first_name
        model.last_name = person.last_name
        model.email = person.email
        model.department = person.department
        model.position = person.position
        model.seniority_level = person.seniority_level
        model.location = person.location
        model.employment_status = person.employment_status
        model.associate_status = person.associate_status
        model.start_date = person.start_date
        model.end_date = person.end_date


__all__ = ["PersonRepository"]
