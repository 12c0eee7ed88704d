"""Records for processors, processes, storage, peripherals, controllers and meters."""

from __future__ import annotations

from dataclasses import dataclass, field

Power = float

BUTTON_MATRIX_SIZE = 5192
TRIGGER_MATRIX_SIZE = 16


def _check_non_negative(**values: float) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative.")


def _fill_square(record: object, name: str, side: int) -> None:
    """Zero-fill an empty ``side`` by ``side`` grid, or check the given one's shape."""
    grid = getattr(record, name)
    if not grid:
        setattr(record, name, [[0.0] * side for _ in range(side)])
    elif len(grid) != side or any(len(row) != side for row in grid):
        raise ValueError(f"{name} must be {side} by {side}.")


@dataclass
class ProcessorInformation:
    """A processor, its sub-processors, its caches and its clock."""

    processor_name: str = ""
    processor_pcie_address: int = 0
    computation_processor_addresses: list[int] = field(default_factory=list)
    tensor_processor_addresses: list[int] = field(default_factory=list)
    clock_frequency: float = 0.0
    l1_cache_addresses: list[int] = field(default_factory=list)
    l2_cache_addresses: list[int] = field(default_factory=list)
    l3_cache_addresses: list[int] = field(default_factory=list)
    l4_cache_addresses: list[int] = field(default_factory=list)
    utc_clock: int = 0
    timezone_difference: int = 0
    timezone: str = ""

    def __post_init__(self) -> None:
        _check_non_negative(
            processor_pcie_address=self.processor_pcie_address,
            clock_frequency=self.clock_frequency,
            utc_clock=self.utc_clock,
        )

    @property
    def number_of_computation_processors(self) -> int:
        return len(self.computation_processor_addresses)

    @property
    def number_of_tensor_processors(self) -> int:
        return len(self.tensor_processor_addresses)

    @property
    def number_of_caches(self) -> tuple[int, int, int, int]:
        """Cache counts for levels 1 to 4."""
        return (
            len(self.l1_cache_addresses),
            len(self.l2_cache_addresses),
            len(self.l3_cache_addresses),
            len(self.l4_cache_addresses),
        )


@dataclass
class CacheBlock:
    """A block of memory used as a local cache, with its mount point."""

    address_of_entry_point: str = ""
    data: bytes = b""


@dataclass
class ProcessBlock:
    process_id: str = ""
    process_name: str = ""
    process_data: bytes = b""
    service_addresses: list[int] = field(default_factory=list)

    @property
    def number_of_services_offered(self) -> int:
        return len(self.service_addresses)


@dataclass(frozen=True)
class DeviceNode:
    """A device keyed by its PCIe id and mapped to an address in memory."""

    pcie_id: int
    address_in_ram: int
    device_type: int = 0

    def __post_init__(self) -> None:
        _check_non_negative(pcie_id=self.pcie_id, address_in_ram=self.address_in_ram)


@dataclass
class StorageUnit:
    device_name: str = ""
    device_id: str = ""
    pcie_id: str = ""
    sata_id: str = ""
    m2_id: str = ""
    nvme_id: str = ""
    mount_point_address: int = 0

    def __post_init__(self) -> None:
        _check_non_negative(mount_point_address=self.mount_point_address)


@dataclass
class FilesystemDatabase:
    """Named storage clusters with a cluster-by-entry matrix of filesystem contents."""

    database_name: str = ""
    cluster_names: list[str] = field(default_factory=list)
    number_of_entries: int = 0
    filesystem_matrix: list[list[int]] = field(default_factory=list)
    filesystem_forest: list[int] = field(default_factory=list)
    data_forest: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_non_negative(number_of_entries=self.number_of_entries)
        rows, columns = len(self.cluster_names), self.number_of_entries
        if not self.filesystem_matrix:
            self.filesystem_matrix = [[0] * columns for _ in range(rows)]
        elif len(self.filesystem_matrix) != rows or any(
            len(row) != columns for row in self.filesystem_matrix
        ):
            raise ValueError(f"filesystem_matrix must be {rows} by {columns}.")

    @property
    def number_of_clusters(self) -> int:
        return len(self.cluster_names)


@dataclass
class UsbBus:
    """Mount points of the attached USB devices."""

    device_addresses: list[int] = field(default_factory=list)

    @property
    def number_of_usb_devices(self) -> int:
        return len(self.device_addresses)


@dataclass
class Mouse:
    area: float = 0
    volumetric_area: float = 0
    z_matrix_three_dimensional: float = 0
    y_matrix_three_dimensional: float = 0
    x_matrix_three_dimensional: float = 0
    x_matrix: float = 0
    y_matrix: float = 0
    z_matrix: float = 0

    def __post_init__(self) -> None:
        _check_non_negative(
            area=self.area,
            volumetric_area=self.volumetric_area,
            x_matrix=self.x_matrix,
            y_matrix=self.y_matrix,
            z_matrix=self.z_matrix,
        )


@dataclass
class AnalogPad:
    """Sensitivity over a square of side radius plus padding."""

    radius: int
    padding: int = 0
    sensitivity: list[list[float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_non_negative(radius=self.radius, padding=self.padding)
        _fill_square(self, "sensitivity", self.side)

    @property
    def side(self) -> int:
        return self.radius + self.padding


@dataclass
class Buttons:
    """Sparse pressure readings on the button and trigger grids, keyed by (row, column)."""

    button_matrix: dict[tuple[int, int], float] = field(default_factory=dict)
    trigger_matrix: dict[tuple[int, int], float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name, grid, size in (
            ("button_matrix", self.button_matrix, BUTTON_MATRIX_SIZE),
            ("trigger_matrix", self.trigger_matrix, TRIGGER_MATRIX_SIZE),
        ):
            for row, column in grid:
                if not (0 <= row < size and 0 <= column < size):
                    raise ValueError(f"{name} cell ({row}, {column}) lies outside {size}x{size}.")


@dataclass
class Touchpad:
    """Sense readings over a square of side TFT voltage plus padding."""

    tft_voltage: int
    padding: int = 0
    sense_matrix: list[list[float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_non_negative(tft_voltage=self.tft_voltage, padding=self.padding)
        _fill_square(self, "sense_matrix", self.side)

    @property
    def side(self) -> int:
        return self.tft_voltage + self.padding


@dataclass
class CircularArray:
    """Voltages of an analog stick mapped over a square of side radius plus padding."""

    radius_of_circle: int
    padding: int = 0
    voltage_matrix: list[list[float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_non_negative(radius_of_circle=self.radius_of_circle, padding=self.padding)
        _fill_square(self, "voltage_matrix", self.side)

    @property
    def side(self) -> int:
        return self.radius_of_circle + self.padding


@dataclass
class HandheldDevice:
    device_name: str = ""
    device_id: str = ""
    port_number: int = 0
    message: bytes = b""

    def __post_init__(self) -> None:
        _check_non_negative(port_number=self.port_number)


@dataclass
class SmartMeter:
    input_voltage: float = 0
    conversion_factor: float = 0
    meter_id: str = ""
    output_voltage: float = 0
    meter_throughput: float = 0

    def __post_init__(self) -> None:
        _check_non_negative(
            input_voltage=self.input_voltage,
            output_voltage=self.output_voltage,
            meter_throughput=self.meter_throughput,
        )