"""Toy quantum relations: energy exchange, voltage, reverberation and position spread."""

from __future__ import annotations

from collections.abc import Sequence


def feynman_radiation(
    particle_energies: Sequence[float], rate_of_loss_of_energy: float, which_particle: int
) -> tuple[float, float]:
    """Move energy from one particle of a pair to the other until the donor is spent.

    The donor (index ``which_particle``, 0 or 1) loses ``rate_of_loss_of_energy`` per
    step and the other gains it, until the donor's energy is at or below zero.
    Returns the new pair of energies; the input is left unchanged.
    """
    if len(particle_energies) != 2:
        raise ValueError("Exactly two particle energies are required.")
    if which_particle not in (0, 1):
        raise ValueError("which_particle must be 0 or 1.")
    energies = [float(e) for e in particle_energies]
    donor, receiver = which_particle, 1 - which_particle
    if energies[donor] > 0 and rate_of_loss_of_energy <= 0:
        raise ValueError("rate_of_loss_of_energy must be positive.")
    while energies[donor] > 0:
        energies[donor] -= rate_of_loss_of_energy
        energies[receiver] += rate_of_loss_of_energy
    return energies[0], energies[1]


def quantum_voltage(
    particle_mass: float, radius_of_influence: float, charge_at_instant: float
) -> float:
    """Radius of influence times particle mass, divided by the instantaneous charge."""
    if charge_at_instant == 0:
        raise ValueError("charge_at_instant must not be zero.")
    return radius_of_influence * particle_mass / charge_at_instant


def quantum_reverberation(particle_mass: float, quantum_frequency: float) -> float:
    """Particle mass times frequency."""
    return particle_mass * quantum_frequency


def heisenberg_uncertainty(
    x: float, y: float, z: float, dx: float, dy: float, dz: float
) -> tuple[float, float, float]:
    """The coordinates displaced by their uncertainties."""
    return x + dx, y + dy, z + dz