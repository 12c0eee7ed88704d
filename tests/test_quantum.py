import pytest

from polymath.quantum import (
    feynman_radiation,
    heisenberg_uncertainty,
    quantum_reverberation,
    quantum_voltage,
)


def test_feynman_radiation_from_first_particle():
    first, second = feynman_radiation([1.0, 0.0], 0.25, 0)
    assert (first, second) == (0.0, 1.0)


def test_feynman_radiation_conserves_energy_from_second():
    start = [2.0, 3.3]
    first, second = feynman_radiation(start, 0.7, 1)
    assert first + second == pytest.approx(sum(start))
    assert -0.7 < second <= 0


def test_feynman_radiation_spent_donor_unchanged():
    assert feynman_radiation([-1.0, 4.0], 0.5, 0) == (-1.0, 4.0)


def test_feynman_radiation_does_not_mutate_input():
    energies = [1.0, 0.0]
    feynman_radiation(energies, 0.5, 0)
    assert energies == [1.0, 0.0]


def test_feynman_radiation_rejects_non_positive_rate():
    with pytest.raises(ValueError):
        feynman_radiation([1.0, 0.0], 0.0, 0)


def test_feynman_radiation_rejects_bad_particle():
    with pytest.raises(ValueError):
        feynman_radiation([1.0, 0.0], 0.5, 2)


def test_feynman_radiation_requires_pair():
    with pytest.raises(ValueError):
        feynman_radiation([1.0], 0.5, 0)


def test_quantum_voltage_inverse_in_charge():
    assert quantum_voltage(3.0, 4.0, 2.0) == pytest.approx(2 * quantum_voltage(3.0, 4.0, 4.0))


def test_quantum_voltage_zero_charge_raises():
    with pytest.raises(ValueError):
        quantum_voltage(1.0, 1.0, 0.0)


def test_quantum_reverberation_pinned():
    assert quantum_reverberation(2.0, 5.0) == 10.0


def test_heisenberg_uncertainty_shift():
    assert heisenberg_uncertainty(1.0, 2.0, 3.0, 0.5, 0.5, 0.5) == (1.5, 2.5, 3.5)
    assert heisenberg_uncertainty(1.0, 2.0, 3.0, 0.0, 0.0, 0.0) == (1.0, 2.0, 3.0)