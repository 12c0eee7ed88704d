"""Subsets, unions and intersections of ordered collections."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def subset(values: Sequence[T], start: int, end: int) -> list[T]:
    """The items between two indices; the indices may be given in either order."""
    low, high = sorted((start, end))
    if low < 0 or high > len(values):
        raise ValueError("Subset indices lie outside the set.")
    return list(values[low:high])


def union(
    set1: Sequence[T],
    set2: Sequence[T],
    start1: int,
    end1: int,
    start2: int,
    end2: int,
) -> list[T]:
    """A slice of the first set followed by a slice of the second."""
    return subset(set1, start1, end1) + subset(set2, start2, end2)


def intersection(values: Sequence[T], values_to_intersect: Sequence[T]) -> list[T]:
    """Items of ``values_to_intersect`` that occur in ``values``, in their order."""
    return [item for item in values_to_intersect if item in values]