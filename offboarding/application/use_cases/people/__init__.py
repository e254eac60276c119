"""People directory use cases."""

from .create_person import NewPersonData, create_person
from .filters import filter_people, sort_people
from .get_person import get_person
from .list_people import list_people
from .validators import resolve_affiliation

__all__ = [
    "NewPersonData",
    "create_person",
    "filter_people",
    "get_person",
    "list_people",
    "resolve_affiliation",
    "sort_people",
]
