"""Macroscopic electricity, friction and magnetism relations."""

from __future__ import annotations

import math

Number = int | float


def electric_field(radius_of_field: Number, charge: Number) -> Number:
    """Field strength as radius of the field times charge."""
    return radius_of_field * charge


def voltage(radius_of_influence: Number, electric_field: Number) -> Number:
    """Voltage as radius of influence times field strength."""
    return radius_of_influence * electric_field


def current(speed_of_flow: Number, voltage: Number) -> Number:
    """Current as speed of flow times voltage."""
    return speed_of_flow * voltage


def emf(current: Number, radius_of_influence: Number) -> Number:
    """Electromotive force as current times radius of influence."""
    return current * radius_of_influence


def friction_on_object(weight_on_object: Number, coefficient_of_friction: Number) -> Number:
    """Frictional force as weight times the coefficient of friction."""
    return weight_on_object * coefficient_of_friction


def frictional_force(angle_of_incidence: Number, length_of_the_base: Number) -> float:
    """Tangential ratio of the angle of incidence to the length of the base."""
    if length_of_the_base == 0:
        raise ValueError("length_of_the_base must not be zero.")
    return angle_of_incidence / length_of_the_base


def magnetic_field_of_cube(length_of_side: Number, electric_field: Number) -> Number:
    """Field of a cube: side squared times field strength."""
    return length_of_side * length_of_side * electric_field


def magnetic_field_of_cuboid(length_of_object: Number, electric_field: Number) -> float:
    """Field of a cuboid: half of field strength times length squared."""
    return electric_field * length_of_object * length_of_object / 2


def magnetic_field_of_sphere(
    radius_of_object: Number, volumetric_height: Number, electric_field: Number
) -> float:
    """Field of a sphere: pi r^2 h E / 2."""
    return (
        math.pi * radius_of_object * radius_of_object * volumetric_height * electric_field / 2
    )


def magnetic_field_of_pyramid(
    base_of_triangle: Number,
    height_of_triangle: Number,
    volumetric_height: Number,
    electric_field: Number,
) -> float:
    """Field of a pyramid: triangle area times volumetric height times field strength."""
    return (base_of_triangle * height_of_triangle / 2) * volumetric_height * electric_field


def mmf_of_cube(
    length_of_side: Number,
    current: Number,
    resistance_of_material: Number,
    volumetric_height: Number,
) -> float:
    """Magnetomotive force of a cube: (l^3 h^3 I^2 R^2) / 24."""
    return (
        length_of_side**3
        * volumetric_height**3
        * current**2
        * resistance_of_material**2
        / 24
    )


def mmf_of_cuboid(
    current: Number,
    resistance_of_material: Number,
    length_of_material: Number,
    breadth_of_material: Number,
    volumetric_height: Number,
    electric_field: Number,
) -> float:
    """Magnetomotive force of a cuboid: (I^2 R E l^2 b^2 h^2) / 8."""
    return (
        current**2
        * resistance_of_material
        * electric_field
        * length_of_material**2
        * breadth_of_material**2
        * volumetric_height**2
        / 8
    )


def mmf_of_pyramid(
    current: Number, base: Number, height: Number, volumetric_height: Number
) -> float:
    """Magnetomotive force of a pyramid: (I^2 b^2 h^2 v^2) / 16."""
    return current**2 * base**2 * height**2 * volumetric_height**2 / 16


def mmf_of_sphere(radius: Number, height: Number) -> float:
    """Magnetomotive force of a sphere: pi r^3 h^3 / 6."""
    return math.pi * radius**3 * height**3 / 6