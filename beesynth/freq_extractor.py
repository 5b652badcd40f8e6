"""Extraction of the dominant frequencies of an amplitude signal using FFT."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from beesynth.filter import (
    Data,
    Filter,
    FilterType,
    FreqRecord,
    FrequencyData,
    MismatchedDataError,
    WaveData,
)

NANOS_IN_SEC = 1_000_000_000


@dataclass(frozen=True)
class Peak:
    """A local maximum spanning ``start..=end`` (a plateau when they differ)."""

    start: int
    end: int
    height: float
    prominence: float

    @property
    def middle_position(self) -> int:
        return (self.start + self.end) // 2


def _base(data: Sequence[float], indices: Iterable[int], height: float) -> float:
    lowest = height
    for index in indices:
        value = data[index]
        if value > height:
            break
        lowest = min(lowest, value)
    return lowest


def find_peaks(values: Iterable[float]) -> list[Peak]:
    """Find the interior local maxima, most prominent first."""
    data = [float(value) for value in values]
    count = len(data)
    peaks: list[Peak] = []
    index = 1
    while index < count - 1:
        if data[index] > data[index - 1]:
            end = index
            while end + 1 < count and data[end + 1] == data[index]:
                end += 1
            if end + 1 < count and data[end + 1] < data[index]:
                height = data[index]
                left = _base(data, range(index - 1, -1, -1), height)
                right = _base(data, range(end + 1, count), height)
                peaks.append(Peak(index, end, height, height - max(left, right)))
            index = end + 1
        else:
            index += 1
    peaks.sort(key=lambda peak: (-peak.prominence, -peak.height, peak.start))
    return peaks


class FreqExtractor(Filter):
    """Finds the strongest frequencies in a sliding window of samples."""

    def __init__(
        self,
        lower_bound_hz: int | None,
        upper_bound_hz: int | None,
        sampling_size: int = 4096,
        step_by: int = 32,
        sample_rate: int = 44100,
        number_of_peaks: int = 2,
    ) -> None:
        if sampling_size <= 0:
            raise ValueError("Sampling size must be positive")
        if step_by <= 0:
            raise ValueError("Step must be positive")
        if sample_rate <= 0:
            raise ValueError("Sample rate must be positive")
        if not 0 <= number_of_peaks <= 255:
            raise ValueError(f"Number of peaks must be within 0..255, got {number_of_peaks}")
        self.lower_bound_hz = lower_bound_hz
        self.upper_bound_hz = upper_bound_hz
        self.sampling_size = sampling_size
        self.step_by = step_by
        self.sample_rate = sample_rate
        self.number_of_peaks = number_of_peaks

    def filter_type(self) -> FilterType:
        return FilterType.AMPLITUDE

    def _bin_index(self, freq: int | None, default: int) -> int:
        if freq is None:
            return default
        return (freq * self.sampling_size) // self.sample_rate

    def filter(self, data: Data) -> FrequencyData:
        if not isinstance(data, WaveData):
            raise MismatchedDataError("The frequency extractor accepts amplitude data only")

        samples = np.asarray(data.samples, dtype=np.float32)
        size = self.sampling_size
        if len(samples) < size:
            raise ValueError(
                f"Not enough samples ({len(samples)}) for the sampling window of {size}"
            )

        lower_index = self._bin_index(self.lower_bound_hz, 0)
        upper_index = self._bin_index(self.upper_bound_hz, size // 2)
        if upper_index < lower_index:
            raise ValueError("The upper frequency bound is below the lower one")

        duration = NANOS_IN_SEC * self.step_by // self.sample_rate
        channels: list[list[FreqRecord]] = [[] for _ in range(self.number_of_peaks)]

        for start in range(0, len(samples) - size, self.step_by):
            spectrum = np.fft.fft(samples[start : start + size])
            band = spectrum[lower_index:upper_index]
            with np.errstate(divide="ignore"):
                magnitudes = 20.0 * np.log10(np.abs(band))

            for peak, channel in zip(find_peaks(magnitudes), channels):
                freq = float(self.sample_rate * (peak.middle_position + lower_index)) / size
                if channel and channel[-1].freq != 0.0 and freq * 100.0 / channel[-1].freq < 5.0:
                    channel[-1].duration += duration
                else:
                    channel.append(FreqRecord(freq, duration))

        return FrequencyData(channels)