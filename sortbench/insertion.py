"""Insertion sort."""

from __future__ import annotations

from bisect import insort_right
from collections.abc import Iterable


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by insertion.

    Each value is placed after any equal values already placed, so the
    sort is stable.
    """
    ordered: list[int] = []
    for value in values:
        insort_right(ordered, value)
    return ordered