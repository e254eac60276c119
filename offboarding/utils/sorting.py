"""Stable record sorting shared by the list views."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")

SORT_ASCENDING = "asc"
SORT_DESCENDING = "desc"
SORT_DIRECTIONS = (SORT_ASCENDING, SORT_DESCENDING)


def sort_records(
    records: Iterable[T],
    key: Callable[[T], Any],
    *,
    descending: bool = False,
) -> list[T]:
    """Sort ``records`` by ``key`` keeping ties in input order.

    Records whose key is ``None`` are placed last in either direction.
    """

    present: list[T] = []
    missing: list[T] = []
    for record in records:
        (missing if key(record) is None else present).append(record)
    return sorted(present, key=key, reverse=descending) + missing


__all__ = ["SORT_ASCENDING", "SORT_DESCENDING", "SORT_DIRECTIONS", "sort_records"]
