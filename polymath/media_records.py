"""Records for film, frames, shapes, GPUs, images, audio and headset devices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _check_dims(*dims: int) -> None:
    if any(dim < 0 for dim in dims):
        raise ValueError("Dimensions must not be negative.")


def _zeros(*shape: int) -> list[Any]:
    if len(shape) == 1:
        return [0] * shape[0]
    return [_zeros(*shape[1:]) for _ in range(shape[0])]


def _has_shape(value: Any, shape: tuple[int, ...]) -> bool:
    if not shape:
        return not isinstance(value, list)
    return (
        isinstance(value, list)
        and len(value) == shape[0]
        and all(_has_shape(item, shape[1:]) for item in value)
    )


def _fill(record: Any, names: tuple[str, ...], shape: tuple[int, ...]) -> None:
    """Zero-fill empty arrays of ``record`` and check the others have ``shape``."""
    _check_dims(*shape)
    for name in names:
        value = getattr(record, name)
        if not value:
            setattr(record, name, _zeros(*shape))
        elif not _has_shape(value, shape):
            raise ValueError(f"{name} must have shape {shape}.")


def _grid_dims(grid: list[list[Any]]) -> tuple[int, int]:
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("Grid must be rectangular.")
    return len(grid), len(grid[0]) if grid else 0


@dataclass
class Film:
    grid: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _grid_dims(self.grid)

    @property
    def length(self) -> int:
        return _grid_dims(self.grid)[0]

    @property
    def breadth(self) -> int:
        return _grid_dims(self.grid)[1]


@dataclass
class FilmReel:
    """Films that all share the same length and breadth."""

    films: list[Film] = field(default_factory=list)

    def __post_init__(self) -> None:
        sizes = {(film.length, film.breadth) for film in self.films}
        if len(sizes) > 1:
            raise ValueError("All films on a reel must have the same size.")

    @property
    def number_of_films(self) -> int:
        return len(self.films)


_FRAME_LAYERS = ("frame", "colour", "luminosity", "colour_gradient")


@dataclass
class Frame:
    length: int
    width: int
    frame: list[list[int]] = field(default_factory=list)
    colour: list[list[int]] = field(default_factory=list)
    luminosity: list[list[int]] = field(default_factory=list)
    colour_gradient: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _fill(self, _FRAME_LAYERS, (self.length, self.width))


@dataclass
class Video:
    """Frames played at ``fps`` frames per second."""

    fps: int
    frames: list[Frame] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError("fps must be positive.")

    @property
    def duration(self) -> float:
        """Playing time in seconds."""
        return len(self.frames) / self.fps


@dataclass
class Cube:
    length: int
    object: list[list[list[int]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _fill(self, ("object",), (self.length, self.length, self.length))


@dataclass
class Cuboid:
    length: int
    breadth: int
    height: int
    object: list[list[list[int]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _fill(self, ("object",), (self.length, self.breadth, self.height))


@dataclass
class Sphere:
    radius: float = 0
    height: float = 0

    def __post_init__(self) -> None:
        _check_dims(self.radius, self.height)


@dataclass
class Trapezoid:
    height: float = 0
    base: float = 0
    slope: float = 0


@dataclass
class Pyramid:
    base: float = 0
    height: float = 0
    z_height: float = 0


@dataclass
class RenderedImage:
    height: int
    width: int
    pixels: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _fill(self, ("pixels",), (self.height, self.width))


@dataclass
class GraphicsObject:
    length: float = 0
    width: float = 0
    curvature: float = 0


@dataclass
class DisplayDepth:
    bit_depth: int
    image_to_send: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _fill(self, ("image_to_send",), (self.bit_depth, self.bit_depth))


@dataclass
class GpuInformation:
    """GPUs mapped into a memory range, with one name, PCIe id and address each."""

    start_address: int = 0
    end_address: int = 0
    gpu_names: list[str] = field(default_factory=list)
    pcie_ids: list[int] = field(default_factory=list)
    pcie_addresses: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.end_address < self.start_address:
            raise ValueError("end_address precedes start_address.")
        if not len(self.gpu_names) == len(self.pcie_ids) == len(self.pcie_addresses):
            raise ValueError("Every GPU needs a name, a PCIe id and a PCIe address.")

    @property
    def number_of_gpus(self) -> int:
        return len(self.gpu_names)


@dataclass
class GpuCluster:
    mount_points: list[int] = field(default_factory=list)

    @property
    def number_of_gpus(self) -> int:
        return len(self.mount_points)


_IMAGE_CHANNELS = ("red", "blue", "green", "yellow", "pixel_saturation")


@dataclass
class Image:
    number_of_rows: int
    number_of_columns: int
    red: list[list[int]] = field(default_factory=list)
    blue: list[list[int]] = field(default_factory=list)
    green: list[list[int]] = field(default_factory=list)
    yellow: list[list[int]] = field(default_factory=list)
    pixel_saturation: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _fill(self, _IMAGE_CHANNELS, (self.number_of_rows, self.number_of_columns))


@dataclass
class MidiData:
    """Samples read from the five MIDI pins; every pin holds the same number."""

    pin1_block: list[bytes] = field(default_factory=list)
    pin2_block: list[bytes] = field(default_factory=list)
    pin3_block: list[bytes] = field(default_factory=list)
    pin4_block: list[bytes] = field(default_factory=list)
    pin5_block: list[bytes] = field(default_factory=list)

    def __post_init__(self) -> None:
        blocks = (
            self.pin1_block,
            self.pin2_block,
            self.pin3_block,
            self.pin4_block,
            self.pin5_block,
        )
        if len({len(block) for block in blocks}) > 1:
            raise ValueError("Every pin must hold the same number of samples.")

    @property
    def number_of_samples(self) -> int:
        return len(self.pin1_block)


@dataclass
class AudioStream:
    stream: bytes = b""


@dataclass
class SpatialAudioBlock:
    """Last known position of a source and a cuboid of its spread."""

    last_known_x: int
    last_known_y: int
    last_known_z: int
    cuboid_of_audio_spread: list[list[list[int]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _fill(
            self,
            ("cuboid_of_audio_spread",),
            (self.last_known_x, self.last_known_y, self.last_known_z),
        )


@dataclass
class ArVrXrDevice:
    device_name: str = ""
    device_id: str = ""
    pcie_id: str = ""
    resolution: tuple[int, int] = (15360, 8640)

    def __post_init__(self) -> None:
        if len(self.resolution) != 2 or any(side <= 0 for side in self.resolution):
            raise ValueError("resolution must be two positive sides.")