"""Vector and subspace arithmetic over sequences of numbers."""

from __future__ import annotations

import math
from collections.abc import Sequence

Number = int | float


def _rows(subspaces: Sequence[Sequence[Number]]) -> list[list[Number]]:
    rows = [list(row) for row in subspaces]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("All subspaces must have the same number of columns.")
    return rows


def sum_of_subspaces(subspaces: Sequence[Sequence[Number]]) -> list[Number]:
    """Column-wise sums of a rectangular collection of rows."""
    return [sum(column) for column in zip(*_rows(subspaces))]


def direct_sum(subspaces: Sequence[Sequence[Number]]) -> Number:
    """Sum of every element of every row."""
    return sum(sum(row) for row in _rows(subspaces))


def is_linear_combination(
    vector: Sequence[Number],
    vector1: Sequence[Number],
    vector2: Sequence[Number],
    lambda1: Number,
    lambda2: Number,
) -> bool:
    """Whether ``vector == lambda1 * vector1 + lambda2 * vector2`` element by element."""
    if not len(vector) == len(vector1) == len(vector2):
        raise ValueError("Vectors must have the same length.")
    return all(v == lambda1 * a + lambda2 * b for v, a, b in zip(vector, vector1, vector2))


def dot_product(vec1: Sequence[Number], vec2: Sequence[Number]) -> Number:
    if len(vec1) != len(vec2):
        raise ValueError("Vectors must have the same length.")
    return sum(a * b for a, b in zip(vec1, vec2))


def vector_norm(vec: Sequence[Number]) -> float:
    """Euclidean length."""
    return math.sqrt(float(sum(v * v for v in vec)))


def cross_product(vec1: Sequence[Number], vec2: Sequence[Number]) -> list[Number]:
    """Cross product of two three-dimensional vectors."""
    if len(vec1) != 3 or len(vec2) != 3:
        raise ValueError("Cross product is defined for three-dimensional vectors.")
    a1, a2, a3 = vec1
    b1, b2, b3 = vec2
    return [a2 * b3 - a3 * b2, a3 * b1 - a1 * b3, a1 * b2 - a2 * b1]