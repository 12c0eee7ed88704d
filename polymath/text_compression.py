"""Peak-normalising and delta compression of byte streams."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise


@dataclass(frozen=True)
class CompressedText:
    """Bytes scaled into [0, 1] by their largest value, with that value kept."""

    values: tuple[float, ...]
    maximum: int


def lossless_compression(data: bytes) -> CompressedText:
    """Divide every byte by the largest byte of ``data``."""
    raw = bytes(data)
    maximum = max(raw, default=0)
    if maximum == 0:
        return CompressedText(tuple(0.0 for _ in raw), maximum)
    return CompressedText(tuple(byte / maximum for byte in raw), maximum)


def lossless_decompression(compressed: CompressedText) -> bytes:
    """Multiply the scaled values back by the maximum and return the original bytes."""
    return bytes(round(value * compressed.maximum) for value in compressed.values)


def lossy_compression(data: bytes) -> list[int]:
    """Differences between consecutive bytes, ``data[i] - data[i + 1]``.

    The absolute level of the stream is dropped, so one value fewer is returned.
    """
    return [current - following for current, following in pairwise(bytes(data))]


def lossy_decompression(deltas: list[int]) -> list[int]:
    """Rebuild the stream's shape from its differences, taking the last value as 0."""
    values = [0]
    for delta in reversed(deltas):
        values.append(delta + values[-1])
    values.reverse()
    return values