"""Fixed-width integer types with wrap-around arithmetic."""

from __future__ import annotations

import operator
from dataclasses import dataclass


@dataclass(frozen=True)
class IntegerType:
    """An integer type of ``bits`` width, signed (two's complement) or unsigned."""

    name: str
    bits: int
    signed: bool = False

    def __post_init__(self) -> None:
        if self.bits < 1:
            raise ValueError("bits must be positive.")

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def wrap(self, value: int) -> int:
        """Reduce ``value`` into this type's range the way fixed-width registers do."""
        modulus = 1 << self.bits
        wrapped = operator.index(value) % modulus
        if self.signed and wrapped > self.maximum:
            wrapped -= modulus
        return wrapped

    def fits(self, value: int) -> bool:
        """Whether ``value`` is representable without wrapping."""
        return self.minimum <= operator.index(value) <= self.maximum


_UNSIGNED_WIDTHS = (4, 8, 16, 32, 64, 128, 512, 1024, 2048, 3072, 4096, 8192)
_SIGNED_WIDTHS = (512, 1024, 2048, 4096, 8192)

_TYPES: dict[str, IntegerType] = {
    **{f"uint{bits}_t": IntegerType(f"uint{bits}_t", bits) for bits in _UNSIGNED_WIDTHS},
    **{f"int{bits}_t": IntegerType(f"int{bits}_t", bits, True) for bits in _SIGNED_WIDTHS},
}


def integer_type(name: str) -> IntegerType:
    """Look up a declared integer type such as ``uint2048_t`` or ``int512_t``."""
    try:
        return _TYPES[name]
    except KeyError:
        raise KeyError(f"Unknown integer type: {name}") from None