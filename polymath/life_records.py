"""Records for biology, genetics, chemistry and birth charts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

_DNA_BASES = frozenset("ACGT")
_RNA_BASES = frozenset("ACGU")
_BLOOD_TYPES = frozenset(
    f"{group}{rh}" for group in ("A", "B", "AB", "O") for rh in ("+", "-")
)


def _strand(value: str, bases: frozenset[str], name: str) -> str:
    normalised = value.upper()
    if not set(normalised) <= bases:
        raise ValueError(f"{name} may only hold the bases {''.join(sorted(bases))}.")
    return normalised


@dataclass
class Protein:
    mrna: str = ""
    rna: str = ""
    dna: str = ""

    def __post_init__(self) -> None:
        self.mrna = _strand(self.mrna, _RNA_BASES, "mrna")
        self.rna = _strand(self.rna, _RNA_BASES, "rna")
        self.dna = _strand(self.dna, _DNA_BASES, "dna")


@dataclass
class DnaStrand:
    strand: str = ""

    def __post_init__(self) -> None:
        self.strand = _strand(self.strand, _DNA_BASES, "strand")


@dataclass
class RnaStrand:
    strand: str = ""

    def __post_init__(self) -> None:
        self.strand = _strand(self.strand, _RNA_BASES, "strand")


@dataclass
class Virus:
    mrna: str = ""
    protein_strand: str = ""

    def __post_init__(self) -> None:
        self.mrna = _strand(self.mrna, _RNA_BASES, "mrna")


@dataclass
class Blood:
    blood_composition: str = ""
    blood_type: str = ""
    blood_flow_speed: float = 0
    instantaneous_blood_flow_speed: float = 0

    def __post_init__(self) -> None:
        if self.blood_type and self.blood_type not in _BLOOD_TYPES:
            raise ValueError(f"Unknown blood type: {self.blood_type}")
        if self.blood_flow_speed < 0:
            raise ValueError("blood_flow_speed must not be negative.")


@dataclass
class Genome:
    genome: str = ""


@dataclass
class Chromosome:
    x_dna: str = ""
    y_dna: str = ""

    def __post_init__(self) -> None:
        self.x_dna = _strand(self.x_dna, _DNA_BASES, "x_dna")
        self.y_dna = _strand(self.y_dna, _DNA_BASES, "y_dna")


_VIEWS = ("x_view", "y_view", "z_view")


@dataclass
class MoleculeSpace:
    """Images of a molecule on the three planes, each atoms by atoms."""

    number_of_atoms: int
    x_view: list[list[int]] = field(default_factory=list)
    y_view: list[list[int]] = field(default_factory=list)
    z_view: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        n = self.number_of_atoms
        if n < 0:
            raise ValueError("number_of_atoms must not be negative.")
        for name in _VIEWS:
            view = getattr(self, name)
            if not view:
                setattr(self, name, [[0] * n for _ in range(n)])
            elif len(view) != n or any(len(row) != n for row in view):
                raise ValueError(f"{name} must be {n} by {n}.")


@dataclass
class PersonalInformation:
    """A person's name and the moment and place of their birth."""

    name: str
    day: int
    month: int
    year: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    latitude: float = 0.0
    longitude: float = 0.0

    def __post_init__(self) -> None:
        self.birth_moment  # validates the date and time
        if not -90 <= self.latitude <= 90:
            raise ValueError("latitude must lie in -90..90.")
        if not -180 <= self.longitude <= 180:
            raise ValueError("longitude must lie in -180..180.")

    @property
    def birth_moment(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)


@dataclass(frozen=True)
class CelestialPosition:
    """An angle in degrees, arc minutes and arc seconds."""

    degrees: float = 0.0
    minutes: float = 0.0
    seconds: float = 0.0

    def __post_init__(self) -> None:
        if not 0 <= self.minutes < 60:
            raise ValueError("minutes must lie in [0, 60).")
        if not 0 <= self.seconds < 60:
            raise ValueError("seconds must lie in [0, 60).")

    def decimal_degrees(self) -> float:
        """The angle as a single number of degrees; the sign of ``degrees`` applies."""
        sign = -1.0 if self.degrees < 0 else 1.0
        return sign * (abs(self.degrees) + self.minutes / 60 + self.seconds / 3600)


@dataclass
class BirthChart:
    """A person and the positions of the bodies and ascendant at their birth."""

    person: PersonalInformation
    sun: CelestialPosition = field(default_factory=CelestialPosition)
    moon: CelestialPosition = field(default_factory=CelestialPosition)
    mercury: CelestialPosition = field(default_factory=CelestialPosition)
    venus: CelestialPosition = field(default_factory=CelestialPosition)
    mars: CelestialPosition = field(default_factory=CelestialPosition)
    jupiter: CelestialPosition = field(default_factory=CelestialPosition)
    saturn: CelestialPosition = field(default_factory=CelestialPosition)
    uranus: CelestialPosition = field(default_factory=CelestialPosition)
    neptune: CelestialPosition = field(default_factory=CelestialPosition)
    pluto: CelestialPosition = field(default_factory=CelestialPosition)
    ascendant: CelestialPosition = field(default_factory=CelestialPosition)