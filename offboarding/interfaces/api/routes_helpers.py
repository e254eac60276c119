"""Helper utilities shared across API route handlers."""

from dataclasses import asdict

from fastapi import HTTPException, status

from offboarding.application.use_cases.processes import ProcessDetail, ProcessSummary
from offboarding.domain.exceptions import (
    DuplicateProcessError,
    NotFoundError,
    OffboardingError,
    PersistenceError,
    TemplateIntegrityError,
    ValidationError,
)
from offboarding.interfaces.api.schemas import ProcessDetailRead, ProcessRead

_STATUS_BY_ERROR: tuple[tuple[type[OffboardingError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateProcessError, status.HTTP_409_CONFLICT),
    (TemplateIntegrityError, 422),
    (PersistenceError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
)


def to_http_exception(exc: OffboardingError) -> HTTPException:
    """Return the HTTP error matching a domain error."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def process_summary_to_read_model(summary: ProcessSummary) -> ProcessRead:
    payload = asdict(summary.process)
    payload["progress"] = asdict(summary.progress)
    return ProcessRead.model_validate(payload)


def process_detail_to_read_model(detail: ProcessDetail) -> ProcessDetailRead:
    payload = asdict(detail.process)
    payload["progress"] = asdict(detail.progress)
    payload["tasks"] = [asdict(task) for task in detail.tasks]
    payload["documents"] = [asdict(document) for document in detail.documents]
    return ProcessDetailRead.model_validate(payload)


__all__ = [
    "process_detail_to_read_model",
    "process_summary_to_read_model",
    "to_http_exception",
]
