"""Amplitude shifts of sampled sound waves."""

from __future__ import annotations

from collections.abc import Iterable

Number = int | float


def amplify_sound(sound_wave: Iterable[Number], amplification_amount: Number) -> list[Number]:
    """Raise every sample by ``amplification_amount``."""
    return [sample + amplification_amount for sample in sound_wave]


def deamplify_sound(sound_wave: Iterable[Number], deamplify_amount: Number) -> list[Number]:
    """Lower every sample by ``deamplify_amount``."""
    return [sample - deamplify_amount for sample in sound_wave]