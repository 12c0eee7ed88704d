"""Records describing physical objects, particles and the fields between them."""

from __future__ import annotations

from dataclasses import dataclass, field

UNIVERSAL_GRAVITATIONAL_CONSTANT = 9.8


def _check_non_negative(**values: float) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative.")


@dataclass
class ObjectProperties:
    """Position, fields and physical quantities of an object."""

    x_coordinate: float = 0
    y_coordinate: float = 0
    z_coordinate: float = 0
    electric_field: float = 0
    magnetic_field: float = 0
    radius_of_em_field: float = 0
    frequency_of_vibration: float = 0
    radiation_of_object: float = 0
    weight_of_object: float = 0
    graph_of_object: list[int] = field(default_factory=list)
    mass_of_object: float = 0
    energy_radiation_of_object: float = 0
    height_of_object: float = 0
    frequency_emitted_by_object: float = 0
    reverberation_of_object: float = 0

    def __post_init__(self) -> None:
        _check_non_negative(
            weight_of_object=self.weight_of_object,
            mass_of_object=self.mass_of_object,
            radius_of_em_field=self.radius_of_em_field,
        )

    @property
    def number_of_vertices(self) -> int:
        return len(self.graph_of_object)


@dataclass
class Quark:
    mass: float = 0
    voltage: float = 0
    current: float = 0
    magnetic_field: float = 0
    charge_in_ev: float = 0
    energy: float = 0

    def __post_init__(self) -> None:
        _check_non_negative(mass=self.mass)


@dataclass
class Lepton:
    mass: float = 0
    voltage: float = 0
    current: float = 0
    magnetic_field: float = 0
    charge_in_ev: float = 0
    energy: float = 0

    def __post_init__(self) -> None:
        _check_non_negative(mass=self.mass)


@dataclass
class Gluon:
    adhesiveness: float = 0
    mass: float = 0

    def __post_init__(self) -> None:
        _check_non_negative(mass=self.mass)


@dataclass
class Neutrino:
    mass: float = 0
    weight: float = 0

    def __post_init__(self) -> None:
        _check_non_negative(mass=self.mass, weight=self.weight)


@dataclass
class Boson:
    spin: float = 0.0


@dataclass
class FreeBodyMotion:
    gyration: float = 0
    gravitational_pull: float = 0
    acceleration: float = 0


@dataclass
class Accelerometer:
    macroscopic_change_in_x: float = 0
    macroscopic_change_in_y: float = 0
    macroscopic_change_in_z: float = 0
    microscopic_change_in_x: float = 0
    microscopic_change_in_y: float = 0
    microscopic_change_in_z: float = 0


@dataclass
class Gyroscope:
    change_in_x_degree: float = 0
    change_in_y_degree: float = 0
    change_in_z_degree: float = 0


@dataclass
class EnergyInAnObject:
    """Energy from height, exerted pressure, gravitation and the speed of light."""

    height_of_an_object: float
    pressure_exerted_by_an_object: float
    gravitation: float
    speed_of_light: float = 299_792_458.0

    def energy(self) -> float:
        """height * pressure * speed of light / gravitation."""
        if self.gravitation == 0:
            raise ValueError("gravitation must not be zero.")
        return (
            self.height_of_an_object
            * self.pressure_exerted_by_an_object
            * self.speed_of_light
            / self.gravitation
        )


@dataclass
class GravitationalField:
    """Attraction between two masses a given distance apart."""

    mass_of_object1: float
    mass_of_object2: float
    distance_between_objects: float
    universal_gravitational_constant: float = UNIVERSAL_GRAVITATIONAL_CONSTANT

    def __post_init__(self) -> None:
        _check_non_negative(
            mass_of_object1=self.mass_of_object1,
            mass_of_object2=self.mass_of_object2,
            distance_between_objects=self.distance_between_objects,
        )

    def field(self) -> float:
        """G * m1 * m2 / distance."""
        if self.distance_between_objects == 0:
            raise ValueError("distance_between_objects must not be zero.")
        return (
            self.universal_gravitational_constant
            * self.mass_of_object1
            * self.mass_of_object2
            / self.distance_between_objects
        )


@dataclass
class Planet:
    distances_between_layers: list[float] = field(default_factory=list)
    wind_speed_on_planet: float = 0
    mass_of_planet: float = 0
    mass_of_core: float = 0
    electric_field_of_core: float = 0
    magnetic_field_of_core: float = 0

    def __post_init__(self) -> None:
        _check_non_negative(mass_of_planet=self.mass_of_planet, mass_of_core=self.mass_of_core)
        if any(distance < 0 for distance in self.distances_between_layers):
            raise ValueError("Layer distances must not be negative.")
        if self.mass_of_core > self.mass_of_planet:
            raise ValueError("mass_of_core must not exceed mass_of_planet.")

    @property
    def number_of_layers(self) -> int:
        return len(self.distances_between_layers)


@dataclass
class Star:
    mass_of_star: float = 0
    radius_of_star_from_core: float = 0
    gravitational_field_of_star: float = 0
    fuel_in_star: float = 0

    def __post_init__(self) -> None:
        _check_non_negative(
            mass_of_star=self.mass_of_star,
            radius_of_star_from_core=self.radius_of_star_from_core,
            fuel_in_star=self.fuel_in_star,
        )


@dataclass
class Phasor:
    voltage: float = 0
    angle: float = 0.0


@dataclass
class FrictionalVector:
    angle_of_touch: float = 0.0
    direction: str = ""
    frictional_force_of_object: float = 0

    def __post_init__(self) -> None:
        if len(self.direction) > 1:
            raise ValueError("direction must be a single character.")


@dataclass
class QuantumParticle:
    quantum_voltage: float = 0
    quantum_current: float = 0
    radius_of_vibrations: float = 0
    frequency_of_wave: float = 0
    velocity_of_particle: float = 0
    radiation_of_particle: float = 0


@dataclass
class QED:
    electric_field_voltage: float = 0
    radius_of_electric_field: float = 0
    current_within_field: float = 0


@dataclass
class QCD:
    colour: int = 0
    emission_radius: float = 0.0
    gradient_of_colours_emitted: int = 0