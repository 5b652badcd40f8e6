"""Frequency modulation of an amplitude signal.

f(t) = Amp * cos(2*pi*Omega*t + 2*pi*omega * integral(A(tau), 0..t))
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from beesynth.filter import Data, Filter, FilterType, MismatchedDataError, WaveData


class FreqModulation(Filter):
    """Modulates a carrier wave with the incoming amplitude signal."""

    def __init__(
        self,
        carrier_freq: float = 0.0,
        carrier_amplitude: float = 1.0,
        deviation_freq: float = 0.0005,
    ) -> None:
        self.carrier_freq = carrier_freq
        self.carrier_amplitude = carrier_amplitude
        self.deviation_freq = deviation_freq

    def modulate(self, samples: Sequence[float]) -> list[float]:
        """Return the frequency-modulated signal."""
        tau_carrier = math.tau * self.carrier_freq
        tau_deviation = math.tau * self.deviation_freq
        result = []
        total = 0.0
        for time, sample in enumerate(samples):
            total += sample
            result.append(
                self.carrier_amplitude * math.cos((tau_carrier + tau_deviation * total) * time)
            )
        return result

    def filter_type(self) -> FilterType:
        return FilterType.AMPLITUDE

    def filter(self, data: Data) -> WaveData:
        if not isinstance(data, WaveData):
            raise MismatchedDataError("Frequency modulation accepts amplitude data only")
        return WaveData(self.modulate(data.samples), data.sample_rate)