import random

import pytest

from beesynth.filter import FilterType, MismatchedDataError, PositionData, WaveData
from beesynth.freq_modulation import FreqModulation


def test_default_on_silence_is_flat():
    out = FreqModulation().modulate([0.0] * 10)
    assert out == pytest.approx([1.0] * 10)


def test_first_sample_equals_amplitude():
    out = FreqModulation(3.0, 2.5, 0.1).modulate([0.7, -0.2, 0.4])
    assert out[0] == pytest.approx(2.5)
    assert len(out) == 3


def test_output_bounded_by_amplitude():
    rng = random.Random(3)
    samples = [rng.uniform(-1.0, 1.0) for _ in range(300)]
    out = FreqModulation(0.01, 0.8, 0.002).modulate(samples)
    assert len(out) == len(samples)
    assert all(abs(v) <= 0.8 + 1e-12 for v in out)


def test_pure_carrier_quarter_cycle():
    out = FreqModulation(0.25, 1.0, 0.0).modulate([0.0] * 3)
    assert out[2] == pytest.approx(-1.0)


def test_empty_samples():
    assert FreqModulation().modulate([]) == []


def test_filter_keeps_sample_rate():
    modulation = FreqModulation(0.1, 1.0, 0.01)
    samples = [0.2, 0.4, -0.1]
    result = modulation.filter(WaveData(samples, 22050))
    assert result.sample_rate == 22050
    assert result.samples == modulation.modulate(samples)
    assert modulation.filter_type() is FilterType.AMPLITUDE


def test_filter_rejects_other_data():
    with pytest.raises(MismatchedDataError):
        FreqModulation().filter(PositionData())