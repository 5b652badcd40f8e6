import pytest

from beesynth.filter import FilterType, FrequencyData, MismatchedDataError, WaveData
from beesynth.freq_filters import HighPass, LowPass

RATE = 8000


def alternating(n):
    return [1.0 if i % 2 == 0 else -1.0 for i in range(n)]


def test_lowpass_constant_rises_to_level():
    out = LowPass(RATE, 1000).apply([1.0] * 200)
    assert len(out) == 200
    assert all(0.0 < v <= 1.0 + 1e-12 for v in out)
    assert all(b >= a for a, b in zip(out, out[1:]))
    assert out[-1] == pytest.approx(1.0, abs=1e-6)


def test_highpass_constant_decays():
    out = HighPass(RATE, 1000).apply([1.0] * 200)
    assert all(v > 0.0 for v in out)
    assert all(b < a for a, b in zip(out, out[1:]))
    assert out[0] < 1.0
    assert out[-1] == pytest.approx(0.0, abs=1e-6)


def test_lowpass_attenuates_high_frequency():
    out = LowPass(RATE, 50).apply(alternating(400))
    assert max(abs(v) for v in out[200:]) < 0.1


def test_highpass_keeps_high_frequency():
    out = HighPass(RATE, 50).apply(alternating(400))
    assert min(abs(v) for v in out[200:]) > 0.5


@pytest.mark.parametrize("cls", [HighPass, LowPass])
def test_empty_input(cls):
    assert cls(RATE, 100).apply([]) == []


@pytest.mark.parametrize("cls", [HighPass, LowPass])
def test_input_not_mutated(cls):
    samples = [0.1, 0.5, -0.3]
    cls(RATE, 100).apply(samples)
    assert samples == [0.1, 0.5, -0.3]


@pytest.mark.parametrize("cls", [HighPass, LowPass])
def test_filter_wraps_wave_data(cls):
    flt = cls(RATE, 300)
    samples = [0.1, 0.5, -0.3, 0.7]
    result = flt.filter(WaveData(samples, RATE))
    assert result.sample_rate == RATE
    assert result.samples == flt.apply(samples)
    assert flt.filter_type() is FilterType.AMPLITUDE


@pytest.mark.parametrize("cls", [HighPass, LowPass])
def test_filter_rejects_other_data(cls):
    with pytest.raises(MismatchedDataError):
        cls(RATE, 300).filter(FrequencyData())


@pytest.mark.parametrize("cls", [HighPass, LowPass])
@pytest.mark.parametrize("rate,freq", [(0, 100), (RATE, 0), (RATE, -5)])
def test_invalid_parameters(cls, rate, freq):
    with pytest.raises(ValueError):
        cls(rate, freq)