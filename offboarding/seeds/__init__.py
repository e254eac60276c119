"""Seed data for the template catalog and demo processes."""

from .demo import (
    PRIORITY_OPTIONS,
    STATUS_OPTIONS,
    DemoOption,
    populate_demo_processes,
    weighted_choice,
)
from .templates import DEFAULT_TEMPLATES, seed_templates

__all__ = [
    "DEFAULT_TEMPLATES",
    "DemoOption",
    "PRIORITY_OPTIONS",
    "STATUS_OPTIONS",
    "populate_demo_processes",
    "seed_templates",
    "weighted_choice",
]
