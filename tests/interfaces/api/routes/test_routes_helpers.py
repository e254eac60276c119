"""Tests for the domain error to HTTP status mapping."""

import pytest

from offboarding.domain.exceptions import (
    DuplicateProcessError,
    InvalidTransitionError,
    NotFoundError,
    OffboardingError,
    PersistenceError,
    TemplateIntegrityError,
    ValidationError,
)
from offboarding.interfaces.api.routes_helpers import to_http_exception


@pytest.mark.parametrize(
    ("error", "expected_status"),
    [
        (NotFoundError("Process not found"), 404),
        (DuplicateProcessError(1, 7), 409),
        (TemplateIntegrityError("cycle", cycle=["a", "b", "a"]), 422),
        (PersistenceError("Could not save"), 503),
        (ValidationError("bad input"), 400),
        (InvalidTransitionError("process", "draft", "active"), 400),
        (OffboardingError("unexpected"), 400),
    ],
)
def test_to_http_exception(error, expected_status):
    http_error = to_http_exception(error)

    assert http_error.status_code == expected_status
    assert http_error.detail == str(error)


def test_duplicate_error_names_existing_process():
    error = DuplicateProcessError(3, 12)

    assert "(12)" in to_http_exception(error).detail
