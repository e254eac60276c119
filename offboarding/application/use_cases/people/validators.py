"""Validation helpers for people directory records."""

from __future__ import annotations

from offboarding.domain.entities import (
    ASSOCIATE_STATUSES,
    EMPLOYMENT_STATUSES,
    SENIORITY_LEVELS,
    Affiliation,
    Association,
    Employment,
)
from offboarding.domain.exceptions import ValidationError


def resolve_affiliation(
    employment_status: str | None, associate_status: str | None
) -> Affiliation:
    """Return the affiliation for exactly one of the two status fields.

    Raises:
        ValidationError: If both or neither status is given, or the status
            is not a known value.
    """

    employment_status = (employment_status or "").strip() or None
    associate_status = (associate_status or "").strip() or None

    if employment_status and associate_status:
        raise ValidationError(
            "A person is either an employee or an associate, not both"
        )
    if employment_status:
        if employment_status not in EMPLOYMENT_STATUSES:
            raise ValidationError(f"Unknown employment status '{employment_status}'")
        return Employment(status=employment_status)
    if associate_status:
        if associate_status not in ASSOCIATE_STATUSES:
            raise ValidationError(f"Unknown associate status '{associate_status}'")
        return Association(status=associate_status)
    raise ValidationError("Either an employment status or an associate status is required")


def ensure_seniority_level(seniority_level: str | None) -> None:
    if seniority_level is not None and seniority_level not in SENIORITY_LEVELS:
        raise ValidationError(f"Unknown seniority level '{seniority_level}'")


__all__ = ["ensure_seniority_level", "resolve_affiliation"]
