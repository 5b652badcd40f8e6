"""Conversion of wav samples into normalized amplitude data."""

from __future__ import annotations

import numpy as np

from beesynth.filter import WaveData
from beesynth.wav_header import WaveFormatError, WaveView


def wave_view_to_data(wave_view: WaveView) -> WaveData:
    """Take the first channel of the wav file as amplitudes in [-1.0, 1.0]."""
    header = wave_view.header
    sample_rate = header.sample_rate & 0xFFFF
    wave = wave_view.lookup_samples()
    if wave.is_unknown:
        return WaveData([], sample_rate)

    step = header.num_channels
    if step == 0:
        raise WaveFormatError("The wav-file declares zero channels.")
    picked = wave.samples[::step]

    if wave.bits == 8:
        scaled = (picked.astype(np.float32) - np.float32(127)) / np.float32(127)
    elif wave.bits == 16:
        scaled = picked.astype(np.float32) / np.float32(32767)
    else:
        scaled = picked.astype(np.float64) / 2147483647.0

    clipped = np.clip(scaled, -1.0, 1.0).astype(np.float32)
    return WaveData(clipped.tolist(), sample_rate)