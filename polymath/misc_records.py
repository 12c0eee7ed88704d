"""Records for payments, SIM cards, motion, maps, data flows and file blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

Real = float
Imaginary = int


@dataclass
class PayerInformation:
    upi_id: str = ""
    phone_number: str = ""
    bank_name: str = ""
    bank_account_number: str = ""
    bank_regional_code: str = ""
    bank_account_holder_name: str = ""
    address_of_holder: str = ""

    def __post_init__(self) -> None:
        if self.upi_id and self.upi_id.count("@") != 1:
            raise ValueError("upi_id must have the form handle@provider.")


@dataclass
class SimCard:
    """A SIM's number and its authentication, hash and ciphering values."""

    phone_number: str = ""
    authentication_a1: int = 0
    a2_hash: int = 0
    ciphering_a3: int = 0

    def __post_init__(self) -> None:
        if self.phone_number and not self.phone_number.isdigit():
            raise ValueError("phone_number must hold digits only.")
        if min(self.authentication_a1, self.a2_hash, self.ciphering_a3) < 0:
            raise ValueError("SIM values must not be negative.")


@dataclass(frozen=True)
class MotionVector:
    direction_in_degrees: float = 0.0

    def __post_init__(self) -> None:
        if not 0 <= self.direction_in_degrees < 360:
            raise ValueError("direction_in_degrees must lie in [0, 360).")


@dataclass
class GridMap:
    """A map stored as a rectangular matrix of cells."""

    cells: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.cells and any(len(row) != len(self.cells[0]) for row in self.cells):
            raise ValueError("GridMap must be rectangular.")

    @property
    def length(self) -> int:
        return len(self.cells)

    @property
    def breadth(self) -> int:
        return len(self.cells[0]) if self.cells else 0


@dataclass
class DataFlow:
    """A stream of data passed between heterogeneous compute units."""

    flow: bytes = b""

    def __post_init__(self) -> None:
        self.flow = bytes(self.flow)


@dataclass
class FileBlock:
    """A data block of a file."""

    block: list[bytes] = field(default_factory=list)

    @property
    def length_of_block(self) -> int:
        return len(self.block)