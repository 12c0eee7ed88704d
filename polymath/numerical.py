"""Numerical methods: series, factorials, powers, roots, logarithms and calculus."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable

RealFunction = Callable[[float], float]


def e_calculation(precision: int) -> float:
    """Euler's number from the first ``precision`` terms of the series sum 1/i!."""
    if precision < 0:
        raise ValueError("precision must not be negative.")
    return sum(1.0 / math.factorial(i) for i in range(precision))


def factorial(n: float) -> float:
    """n! for whole numbers, and the gamma-function extension Γ(n + 1) otherwise."""
    value = float(n)
    if value.is_integer():
        if value < 0:
            raise ValueError("factorial is undefined for negative integers.")
        return float(math.factorial(int(value)))
    return math.gamma(value + 1.0)


def exponentiation(base: float, exponent: float) -> float:
    """base raised to exponent."""
    return math.pow(base, exponent)


def fractional_exponentiation(base: float, exponent: float) -> float:
    """base raised to the negated exponent, base ** -exponent."""
    return math.pow(base, -exponent)


def calculate_logarithm(base: float, x: float) -> float:
    """Logarithm of x to the given base."""
    if base <= 0 or base == 1:
        raise ValueError("base must be positive and different from 1.")
    if x <= 0:
        raise ValueError("x must be positive.")
    return math.log(x, base)


def probability(values: Iterable[float], value: float) -> float:
    """P(X = value): share of the items that equal ``value``."""
    data = list(values)
    if not data:
        raise ValueError("Cannot compute a probability over an empty set.")
    return sum(1 for item in data if item == value) / len(data)


def limit_result(point: float) -> float:
    """The limit of the identity as the variable approaches ``point``."""
    return point


def inverse_exponentiation(number: float, root_of: float) -> float:
    """The ``root_of``-th root of ``number``; odd integer roots of negatives are real."""
    if root_of == 0:
        raise ValueError("root_of must not be zero.")
    if number >= 0:
        return math.pow(number, 1.0 / root_of)
    if float(root_of).is_integer() and int(root_of) % 2 == 1:
        return -math.pow(-number, 1.0 / root_of)
    raise ValueError("No real root of a negative number for this root.")


def single_variable_limit(function: RealFunction, point: float) -> float:
    """lim f(x) as x approaches ``point``, taken as f(point) for continuous f."""
    return function(point)


def single_variable_differentiation(
    function: RealFunction, point: float, margin_of_error: float
) -> float:
    """Forward-difference estimate of f'(point) with step ``margin_of_error``."""
    if margin_of_error == 0:
        raise ValueError("margin_of_error must not be zero.")
    return (function(point + margin_of_error) - function(point)) / margin_of_error


def single_variable_integration(
    function: RealFunction, point: float, margin_of_error: float, precision: float
) -> float:
    """Add up ``|precision|`` slices of width ``margin_of_error`` starting at ``point``.

    This is the left Riemann sum of f over [point, point + steps * margin_of_error].
    """
    steps = int(abs(precision))
    return sum(function(point + i * margin_of_error) for i in range(steps)) * margin_of_error


def multivariable_integration(
    function_x: RealFunction,
    function_y: RealFunction,
    x_point1: float,
    x_point2: float,
    y_point1: float,
    y_point2: float,
) -> float:
    """Double integral of a separable integrand from the antiderivatives of its factors.

    ``function_x`` and ``function_y`` are evaluated at the limits, giving
    (Fy(y2) - Fy(y1)) * (Fx(x2) - Fx(x1)).
    """
    dy = function_y(y_point2) - function_y(y_point1)
    dx = function_x(x_point2) - function_x(x_point1)
    return dy * dx