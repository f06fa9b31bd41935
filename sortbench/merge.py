"""Bottom-up merge sort."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from heapq import merge


def merge_runs(
    source: Sequence[int],
    target: MutableSequence[int],
    left: int,
    right: int,
    end: int,
    descending: bool = False,
) -> None:
    """Merge the sorted runs ``source[left:right]`` and ``source[right:end]``.

    The merged run is written into ``target[left:end]``. On equal values
    the element from the left run goes first.
    """
    target[left:end] = list(
        merge(source[left:right], source[right:end], reverse=descending)
    )


def merge_sort(values: Iterable[int], descending: bool = False) -> list[int]:
    """Return the values sorted by bottom-up merging of doubling runs."""
    current = list(values)
    size = len(current)
    width = 1
    while width < size:
        merged = [0] * size
        for left in range(0, size, 2 * width):
            merge_runs(
                current,
                merged,
                left,
                min(left + width, size),
                min(left + 2 * width, size),
                descending,
            )
        current = merged
        width *= 2
    return current