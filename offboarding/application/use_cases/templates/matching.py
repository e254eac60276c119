"""Scope matching for choosing which templates apply to a departing person."""

from __future__ import annotations

from collections.abc import Iterable

from offboarding.domain.entities import TEMPLATE_SCOPE_COMPANY_WIDE, OffboardingTemplate


def _normalize(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().casefold()
    return normalized or None


def template_specificity(
    template: OffboardingTemplate,
    *,
    department: str | None,
    role_category: str | None,
    seniority_level: str | None,
) -> int | None:
    """Return how many filter fields of ``template`` match, or ``None`` if it does not apply.

    Company-wide templates always apply with a specificity of zero. Other
    templates apply when every filter field they set equals the supplied
    value; unset filter fields act as wildcards.
    """

    if template.scope == TEMPLATE_SCOPE_COMPANY_WIDE:
        return 0

    supplied = {
        "department": _normalize(department),
        "role_category": _normalize(role_category),
        "seniority_level": _normalize(seniority_level),
    }
    matched = 0
    for field_name, expected in template.filter_fields.items():
        expected = _normalize(expected)
        if expected is None:
            continue
        if expected != supplied[field_name]:
            return None
        matched += 1
    return matched


def find_applicable_templates(
    templates: Iterable[OffboardingTemplate],
    *,
    department: str | None,
    role_category: str | None = None,
    seniority_level: str | None = None,
) -> list[OffboardingTemplate]:
    """Return the active templates that apply, most specific first.

    Ties are broken by the default flag (defaults first) and then by name.
    """

    ranked: list[tuple[int, OffboardingTemplate]] = []
    for template in templates:
        if not template.is_active or template.deleted:
            continue
        specificity = template_specificity(
            template,
            department=department,
            role_category=role_category,
            seniority_level=seniority_level,
        )
        if specificity is None:
            continue
        ranked.append((specificity, template))

    ranked.sort(
        key=lambda item: (-item[0], not item[1].is_default, item[1].name.casefold())
    )
    return [template for _, template in ranked]


__all__ = ["find_applicable_templates", "template_specificity"]
