"""Shared fixtures; the database URL is set before the package is imported."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["APP_TIMEZONE"] = "UTC"


@pytest.fixture(autouse=True)
def database():
    """Recreate every table so each test starts from an empty database."""

    from offboarding.infrastructure import database as db_module
    from offboarding.infrastructure import models  # noqa: F401

    db_module.Base.metadata.drop_all(bind=db_module.engine)
    db_module.Base.metadata.create_all(bind=db_module.engine)
    yield db_module
    db_module.Base.metadata.drop_all(bind=db_module.engine)


@pytest.fixture()
def session(database):
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(database):
    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_person(session):
    """Return a factory registering people with sensible defaults."""

    from offboarding.application.use_cases.people import NewPersonData, create_person

    counter = {"value": 0}

    def factory(**overrides):
        counter["value"] += 1
        number = counter["value"]
        fields = {
            "person_code": f"P-{number:03d}",
            "first_name": "Test",
            "last_name": f"Person{number}",
            "email": f"person{number}@example.com",
            "employment_status": "active",
            "department": "Engineering",
            "position": "Software Engineer",
            "seniority_level": "senior",
        }
        fields.update(overrides)
        return create_person(session, NewPersonData(**fields))

    return factory


@pytest.fixture()
def standard_template(session):
    """Persist the default catalog and return the company-wide template."""

    from offboarding.seeds import seed_templates

    templates = seed_templates(session)
    return next(
        template
        for template in templates
        if template.name == "Standard Company-Wide Offboarding"
    )


def pytest_sessionfinish(session, exitstatus):
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()
