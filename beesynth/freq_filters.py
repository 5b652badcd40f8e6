"""First-order RC high-pass and low-pass filters."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from beesynth.filter import Data, Filter, FilterType, MismatchedDataError, WaveData


def _calc_rc(freq: float) -> float:
    if freq <= 0:
        raise ValueError(f"Cut-off frequency must be positive, got {freq}")
    return 1.0 / (2.0 * math.pi * freq)


def _calc_dt(sample_rate_hz: int) -> float:
    if sample_rate_hz <= 0:
        raise ValueError(f"Sample rate must be positive, got {sample_rate_hz}")
    return 1.0 / sample_rate_hz


def _filter_wave(data: Data, apply: Callable[[Sequence[float]], list[float]]) -> WaveData:
    if not isinstance(data, WaveData):
        raise MismatchedDataError("Frequency filters accept amplitude data only")
    return WaveData(apply(data.samples), data.sample_rate)


class HighPass(Filter):
    """Passes frequencies higher than the cut-off."""

    def __init__(self, sample_rate_hz: int, freq_hz: float) -> None:
        self.dt = _calc_dt(sample_rate_hz)
        self.rc = _calc_rc(freq_hz)

    def apply(self, samples: Sequence[float]) -> list[float]:
        """Return the filtered samples."""
        if len(samples) == 0:
            return []
        alpha = self.rc / (self.rc + self.dt)
        prev_sample = samples[0]
        prev_filtered = prev_sample
        result = []
        for sample in samples:
            prev_filtered = alpha * (prev_filtered + sample - prev_sample)
            prev_sample = sample
            result.append(prev_filtered)
        return result

    def filter_type(self) -> FilterType:
        return FilterType.AMPLITUDE

    def filter(self, data: Data) -> WaveData:
        return _filter_wave(data, self.apply)


class LowPass(Filter):
    """Passes frequencies lower than the cut-off."""

    def __init__(self, sample_rate_hz: int, freq_hz: float) -> None:
        self.dt = _calc_dt(sample_rate_hz)
        self.rc = _calc_rc(freq_hz)

    def apply(self, samples: Sequence[float]) -> list[float]:
        """Return the filtered samples."""
        if len(samples) == 0:
            return []
        alpha = self.dt / (self.rc + self.dt)
        prev_filtered = alpha * samples[0]
        result = []
        for sample in samples:
            prev_filtered = alpha * sample + (1.0 - alpha) * prev_filtered
            result.append(prev_filtered)
        return result

    def filter_type(self) -> FilterType:
        return FilterType.AMPLITUDE

    def filter(self, data: Data) -> WaveData:
        return _filter_wave(data, self.apply)