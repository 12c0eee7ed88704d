import math

import pytest

from polymath import vectors


def test_sum_of_subspaces_totals_match_direct_sum():
    rows = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    sums = vectors.sum_of_subspaces(rows)
    assert len(sums) == 3
    assert sum(sums) == vectors.direct_sum(rows)


def test_sum_of_single_row_is_the_row():
    assert vectors.sum_of_subspaces([[4, -2, 9]]) == [4, -2, 9]


def test_empty_subspaces():
    assert vectors.sum_of_subspaces([]) == []
    assert vectors.direct_sum([]) == 0


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        vectors.sum_of_subspaces([[1, 2], [3]])
    with pytest.raises(ValueError):
        vectors.direct_sum([[1], [2, 3]])


def test_linear_combination_detected():
    v1, v2 = [1, 0, 2], [3, -1, 4]
    combined = [2 * a + 5 * b for a, b in zip(v1, v2)]
    assert vectors.is_linear_combination(combined, v1, v2, 2, 5) is True
    assert vectors.is_linear_combination(combined, v1, v2, 5, 2) is False


def test_linear_combination_length_mismatch():
    with pytest.raises(ValueError):
        vectors.is_linear_combination([1, 2], [1], [1, 2], 1, 1)


def test_dot_product_is_symmetric_and_matches_norm():
    a, b = [1, 2, 3], [4, -5, 6]
    assert vectors.dot_product(a, b) == vectors.dot_product(b, a)
    assert math.isclose(vectors.dot_product(a, a), vectors.vector_norm(a) ** 2)


def test_dot_product_length_mismatch():
    with pytest.raises(ValueError):
        vectors.dot_product([1, 2], [1, 2, 3])


def test_norm_of_pythagorean_triple():
    assert vectors.vector_norm([3, 4]) == 5.0


def test_cross_product_is_orthogonal_to_inputs():
    a, b = [2, -3, 1], [4, 1, 5]
    c = vectors.cross_product(a, b)
    assert vectors.dot_product(a, c) == 0
    assert vectors.dot_product(b, c) == 0


def test_cross_product_is_anticommutative():
    a, b = [1, 2, 3], [-2, 0, 7]
    assert vectors.cross_product(b, a) == [-x for x in vectors.cross_product(a, b)]


def test_cross_product_of_basis_vectors():
    assert vectors.cross_product([1, 0, 0], [0, 1, 0]) == [0, 0, 1]


def test_cross_product_needs_three_dimensions():
    with pytest.raises(ValueError):
        vectors.cross_product([1, 2], [3, 4])