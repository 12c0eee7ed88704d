import math

import pytest

from polymath import numerical


def test_e_calculation_converges_to_e():
    assert numerical.e_calculation(20) == pytest.approx(math.e)


def test_e_calculation_grows_with_precision():
    values = [numerical.e_calculation(p) for p in range(1, 10)]
    assert values == sorted(values)
    assert all(v <= math.e for v in values)


def test_e_calculation_rejects_negative():
    with pytest.raises(ValueError):
        numerical.e_calculation(-1)


def test_factorial_whole_number():
    assert numerical.factorial(5) == 120


@pytest.mark.parametrize("n", [0, 1, 2.5, 3.5, 7])
def test_factorial_recurrence(n):
    assert numerical.factorial(n + 1) == pytest.approx((n + 1) * numerical.factorial(n))


def test_factorial_of_half():
    assert numerical.factorial(0.5) == pytest.approx(math.sqrt(math.pi) / 2)


def test_factorial_negative_integer_raises():
    with pytest.raises(ValueError):
        numerical.factorial(-3)


def test_exponentiation_adds_exponents():
    product = numerical.exponentiation(3, 2) * numerical.exponentiation(3, 5)
    assert numerical.exponentiation(3, 7) == pytest.approx(product)


def test_fractional_exponentiation_is_reciprocal():
    assert numerical.fractional_exponentiation(2.5, 3) * numerical.exponentiation(
        2.5, 3
    ) == pytest.approx(1.0)


@pytest.mark.parametrize("base,x", [(2, 5), (10, 3), (math.e, 1.5)])
def test_logarithm_inverts_exponentiation(base, x):
    assert numerical.calculate_logarithm(base, numerical.exponentiation(base, x)) == pytest.approx(x)


@pytest.mark.parametrize("base,x", [(1, 5), (0, 5), (-2, 5), (2, 0), (2, -1)])
def test_logarithm_invalid_inputs(base, x):
    with pytest.raises(ValueError):
        numerical.calculate_logarithm(base, x)


def test_probability_counts_share():
    assert numerical.probability([1, 2, 2, 3], 2) == 0.5


def test_probability_absent_and_empty():
    assert numerical.probability([1, 2], 9) == 0
    with pytest.raises(ValueError):
        numerical.probability([], 1)


def test_limit_result_is_point():
    assert numerical.limit_result(3.25) == 3.25


def test_inverse_exponentiation_round_trip():
    assert numerical.inverse_exponentiation(numerical.exponentiation(3, 4), 4) == pytest.approx(3)


def test_inverse_exponentiation_odd_root_of_negative():
    root = numerical.inverse_exponentiation(-27, 3)
    assert root < 0
    assert numerical.exponentiation(root, 3) == pytest.approx(-27)


def test_inverse_exponentiation_errors():
    with pytest.raises(ValueError):
        numerical.inverse_exponentiation(-16, 2)
    with pytest.raises(ValueError):
        numerical.inverse_exponentiation(8, 0)


def test_single_variable_limit_evaluates_function():
    def f(x):
        return x * x + 1

    assert numerical.single_variable_limit(f, 2.0) == f(2.0)


def test_differentiation_of_sine():
    result = numerical.single_variable_differentiation(math.sin, 0.5, 1e-7)
    assert result == pytest.approx(math.cos(0.5), abs=1e-5)


def test_differentiation_zero_step_raises():
    with pytest.raises(ValueError):
        numerical.single_variable_differentiation(math.sin, 0.5, 0)


def test_integration_of_cosine():
    result = numerical.single_variable_integration(math.cos, 0.0, 1e-4, 10_000)
    assert result == pytest.approx(math.sin(1.0), abs=1e-3)


def test_integration_negative_precision_uses_magnitude():
    a = numerical.single_variable_integration(math.exp, 0.0, 0.01, 50)
    b = numerical.single_variable_integration(math.exp, 0.0, 0.01, -50)
    assert a == b


def test_multivariable_integration_properties():
    def fx(x):
        return x**2

    def fy(y):
        return y

    forward = numerical.multivariable_integration(fx, fy, 0, 2, 1, 4)
    swapped = numerical.multivariable_integration(fx, fy, 2, 0, 1, 4)
    assert swapped == -forward
    assert numerical.multivariable_integration(fx, fy, 1, 1, 1, 4) == 0