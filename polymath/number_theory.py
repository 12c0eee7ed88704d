"""Elementary number-theoretic helpers."""

from __future__ import annotations

import math


def gauss_sum(n: int) -> float:
    """Sum of the integers 1 .. n, n(n + 1) / 2."""
    return float(n * (n + 1) // 2)


def _check_choice(n: int, r: int) -> None:
    if n < 0 or r < 0:
        raise ValueError("n and r must not be negative.")
    if r > n:
        raise ValueError("r must not exceed n.")


def combination(n: int, r: int) -> int:
    """Number of ways to choose r items out of n, n! / ((n - r)! r!)."""
    _check_choice(n, r)
    return math.comb(n, r)


def permutation(n: int, r: int) -> int:
    """Number of ordered arrangements of r items out of n, n! / (n - r)!."""
    _check_choice(n, r)
    return math.perm(n, r)


def divisibility_theorem(a: float, b: float, iterations: int) -> tuple[float, float]:
    """Iterate ``q = a / b; r = a - q; b = q`` and return the final ``(q, r)``."""
    q = r = 0.0
    for _ in range(iterations):
        q = a / b
        r = a - q
        b = q
    return q, r