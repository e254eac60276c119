"""SQLAlchemy model for people in the directory."""

from sqlalchemy import CheckConstraint, Column, Date, DateTime, Integer, String

from offboarding.infrastructure.database import Base
from offboarding.utils import now_in_app_timezone


class PersonModel(Base):
    """Database representation of an employee or associate."""

    __tablename__ = "person"
    __table_args__ = (
        CheckConstraint(
            "(employment_status IS NULL) <> (associate_status IS NULL)",
            name="ck_person_single_affiliation",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    person_code = Column(String(50), nullable=False, unique=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    department = Column(String(100), nullable=True, index=True)
    position = Column(String(150), nullable=True)
    seniority_level = Column(String(30), nullable=True)
    location = Column(String(150), nullable=True)
    employment_status = Column(String(30), nullable=True)
    associate_status = Column(String(30), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )


__all__ = ["PersonModel"]
