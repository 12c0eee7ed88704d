"""Records for sets, matrices, tensors and vectors."""

from __future__ import annotations

from dataclasses import dataclass, field

from polymath.integer_types import integer_type


def _check_rectangular(rows: list[list[float]], name: str) -> None:
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError(f"{name} must be rectangular.")


@dataclass
class NumberSet:
    values: list[int] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.values)


@dataclass
class Matrix:
    """A rectangular table of numbers stored row by row."""

    values: list[list[float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_rectangular(self.values, "Matrix")

    def number_of_rows(self) -> int:
        return len(self.values)

    def number_of_columns(self) -> int:
        return len(self.values[0]) if self.values else 0


@dataclass
class Tensor:
    """Three dimensions of a material of equal length, with a flow of events in time."""

    first_dimension: list[int] = field(default_factory=list)
    second_dimension: list[int] = field(default_factory=list)
    third_dimension: list[int] = field(default_factory=list)
    time_flow: int = 0
    time_flow_array: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not len(self.first_dimension) == len(self.second_dimension) == len(
            self.third_dimension
        ):
            raise ValueError("All three dimensions must have the same length.")

    @property
    def length_of_material(self) -> int:
        return len(self.first_dimension)

    @property
    def number_of_events(self) -> int:
        return len(self.time_flow_array)


@dataclass
class PathData:
    direction: str = ""
    force_of_object: float = 0.0


@dataclass
class FixedWidthVector:
    """Unsigned integers of a fixed bit width such as 128, 512 or 1024."""

    width: int
    elements: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        try:
            kind = integer_type(f"uint{self.width}_t")
        except KeyError:
            raise ValueError(f"Unsupported vector width: {self.width}") from None
        if not all(kind.fits(element) for element in self.elements):
            raise ValueError(f"Elements must fit in {self.width} unsigned bits.")

    @property
    def number_of_elements(self) -> int:
        return len(self.elements)


@dataclass
class TensorVector:
    """A direction in degrees and a magnitude."""

    direction: float = 0.0
    magnitude: float = 0.0

    def __post_init__(self) -> None:
        if self.magnitude < 0:
            raise ValueError("magnitude must not be negative.")


@dataclass
class Subspace:
    values: list[int] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.values)


@dataclass
class Span:
    values: list[int] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.values)


@dataclass
class Map3D:
    """A cuboid of numbers indexed by length, breadth and height."""

    tensor: list[list[list[float]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_rectangular(self.tensor, "Map3D")
        for plane in self.tensor:
            _check_rectangular(plane, "Map3D")
            if plane and self.tensor[0] and len(plane[0]) != len(self.tensor[0][0]):
                raise ValueError("Map3D must be a cuboid.")

    @property
    def length(self) -> int:
        return len(self.tensor)

    @property
    def breadth(self) -> int:
        return len(self.tensor[0]) if self.tensor else 0

    @property
    def height(self) -> int:
        return len(self.tensor[0][0]) if self.tensor and self.tensor[0] else 0