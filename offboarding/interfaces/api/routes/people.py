"""Routes for the people directory."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from offboarding.application.use_cases.people import (
    NewPersonData,
    create_person as create_person_uc,
    get_person as get_person_uc,
    list_people as list_people_uc,
)
from offboarding.domain.exceptions import OffboardingError
from offboarding.infrastructure.database import get_db
from offboarding.interfaces.api.routes_helpers import to_http_exception
from offboarding.interfaces.api.schemas import PersonCreate, PersonRead

router = APIRouter(prefix="/people", tags=["people"])


@router.get("/", response_model=list[PersonRead])
def list_people(
    search: str | None = None,
    status_filter: str | None = Query(default=None, alias="status"),
    person_type: str | None = None,
    sort_by: str = "name",
    direction: str = "asc",
    skip: int = Query(default=0, ge=0),
    limit: int | None = Query(default=None, ge=1),
    db: Session = Depends(get_db),
) -> list[PersonRead]:
    """Return people filtered by search term, status and type."""

    try:
        people = list_people_uc(
            db,
            search_term=search,
            status=status_filter,
            person_type=person_type,
            sort_by=sort_by,
            direction=direction,
            skip=skip,
            limit=limit,
        )
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc
    return [PersonRead.model_validate(person) for person in people]


@router.post("/", response_model=PersonRead, status_code=status.HTTP_201_CREATED)
def register_person(person_in: PersonCreate, db: Session = Depends(get_db)) -> PersonRead:
    """Register an employee or an associate."""

    data = NewPersonData(
        person_code=person_in.person_code,
        first_name=person_in.first_name,
        last_name=person_in.last_name,
        email=str(person_in.email),
        employment_status=person_in.employment_status,
        associate_status=person_in.associate_status,
        department=person_in.department,
        position=person_in.position,
        seniority_level=person_in.seniority_level,
        location=person_in.location,
        start_date=person_in.start_date,
        end_date=person_in.end_date,
    )
    try:
        person = create_person_uc(db, data, created_by=person_in.created_by)
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc
    return PersonRead.model_validate(person)


@router.get("/{person_id}", response_model=PersonRead)
def read_person(person_id: int, db: Session = Depends(get_db)) -> PersonRead:
    try:
        person = get_person_uc(db, person_id)
    except OffboardingError as exc:
        raise to_http_exception(exc) from exc
    return PersonRead.model_validate(person)


__all__ = ["router"]
