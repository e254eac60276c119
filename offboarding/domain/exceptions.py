"""Typed errors raised by the offboarding domain and its use cases.

Every error kind is a distinct class so callers (the API layer, scripts)
can pick an appropriate response without parsing messages.
"""

from __future__ import annotations

from collections.abc import Sequence


class OffboardingError(Exception):
    """Base class for all domain errors."""


class ValidationError(OffboardingError, ValueError):
    """Required input is missing or malformed; nothing was written."""


class InvalidTransitionError(ValidationError):
    """A status change is not allowed from the entity's current status."""

    def __init__(self, entity: str, current: str, requested: str) -> None:
        super().__init__(
            f"Cannot move {entity} from '{current}' to '{requested}'"
        )
        self.entity = entity
        self.current = current
        self.requested = requested


class NotFoundError(OffboardingError, LookupError):
    """The requested record does not exist."""


class TemplateIntegrityError(OffboardingError):
    """A template's task dependency graph has a cycle or a dangling reference."""

    def __init__(self, message: str, *, cycle: Sequence[str] | None = None) -> None:
        super().__init__(message)
        self.cycle = tuple(cycle) if cycle else ()


class DuplicateProcessError(OffboardingError):
    """The person already has an offboarding process that is not finished."""

    def __init__(self, person_id: int, existing_process_id: int | None) -> None:
        super().__init__(
            f"Person {person_id} already has an open offboarding process"
            + (f" ({existing_process_id})" if existing_process_id is not None else "")
        )
        self.person_id = person_id
        self.existing_process_id = existing_process_id


class PersistenceError(OffboardingError):
    """The database rejected or failed an operation."""


__all__ = [
    "DuplicateProcessError",
    "InvalidTransitionError",
    "NotFoundError",
    "OffboardingError",
    "PersistenceError",
    "TemplateIntegrityError",
    "ValidationError",
]
