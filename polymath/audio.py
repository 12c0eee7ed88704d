"""Audio sample windows, MIDI pin capture and simple amplitude compression."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import islice, pairwise

Number = int | float


def receive_audio_window(source: Iterable[Number], window_size: int) -> list[Number]:
    """Read exactly ``window_size`` samples from ``source``."""
    if window_size < 0:
        raise ValueError("window_size must not be negative.")
    window = list(islice(source, window_size))
    if len(window) < window_size:
        raise ValueError("Source ran out of samples before the window was full.")
    return window


def receive_pin_data(
    ports: Sequence[Iterable[Number]], number_of_samples: int
) -> list[list[Number]]:
    """Read ``number_of_samples`` samples from each port, one row per port."""
    return [receive_audio_window(iter(port), number_of_samples) for port in ports]


def lossless_compression(samples: Iterable[Number]) -> tuple[list[float], Number]:
    """Divide every sample by the peak level; return the scaled samples and the peak."""
    data = list(samples)
    if not data:
        raise ValueError("Cannot compress an empty signal.")
    peak = max(abs(sample) for sample in data)
    if peak == 0:
        return [0.0] * len(data), peak
    return [sample / peak for sample in data], peak


def lossless_decompression(
    samples: Iterable[float], maximum_audio_level: Number
) -> list[float]:
    """Multiply every sample back by the peak level."""
    return [sample * maximum_audio_level for sample in samples]


def lossy_compression(samples: Iterable[Number], threshold: Number = 10) -> list[Number]:
    """Replace a sample by its difference to the next one where that difference is small.

    A sample whose difference to its successor is below ``threshold`` is stored as
    that difference; otherwise it is kept. The final sample is always kept.
    """
    data = list(samples)
    compressed = [
        difference if (difference := current - following) < threshold else current
        for current, following in pairwise(data)
    ]
    if data:
        compressed.append(data[-1])
    return compressed